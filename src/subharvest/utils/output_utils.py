def write_results(subdomains, output_file):
    """Writes one subdomain per line, in the given order. OSError propagates to the caller."""
    with open(output_file, 'w') as f:
        for subdomain in subdomains:
            f.write(f"{subdomain}\n")
