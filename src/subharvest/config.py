import os
import sys
import logging

# User Agents for rotation
USER_AGENTS = [
    'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36',
    'Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/605.1.15 (KHTML, like Gecko) Version/14.1.1 Safari/605.1.15',
    'Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/92.0.4515.107 Safari/537.36',
    'Mozilla/5.0 (iPhone; CPU iPhone OS 14_6 like Mac OS X) AppleWebKit/605.1.15 (KHTML, like Gecko) Version/14.0 Mobile/15E148 Safari/604.1',
    'Mozilla/5.0 (Android 10; Mobile; rv:90.0) Gecko/90.0 Firefox/90.0',
    'Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:89.0) Gecko/20100101 Firefox/89.0'
]

# Concurrency ceiling for per-domain workers
DEFAULT_THREADS = 20
# Per-request timeout in seconds (connect and read)
DEFAULT_TIMEOUT = 10
DEFAULT_OUTPUT = "subdomains.txt"

# Logger setup (can be customized)
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger("subharvest")


def _env_number(name, default, cast):
    raw = os.getenv(name, '').strip()
    if not raw:
        return default
    try:
        return cast(raw)
    except ValueError:
        logger.warning(f" [!] Ignoring invalid value for {name}: {raw!r}. Using {default}.")
        return default


# Settings (loaded from env vars, CLI flags take precedence)
def load_settings():
    return {
        'threads': _env_number('SUBHARVEST_THREADS', DEFAULT_THREADS, int),
        'timeout': _env_number('SUBHARVEST_TIMEOUT', DEFAULT_TIMEOUT, float),
        'proxies': os.getenv('SUBHARVEST_PROXIES', '') or None,
    }
