def load_domains(path):
    """Reads target domains from a file, one per line, skipping blank lines."""
    with open(path, 'r') as f:
        return [line.strip() for line in f if line.strip()]
