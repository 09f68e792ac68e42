from .config import logger, DEFAULT_THREADS, DEFAULT_TIMEOUT
from .sources import SOURCES
from .phases.passive import query_sources
from .utils.output_utils import write_results

from concurrent.futures import ThreadPoolExecutor, as_completed
import logging
import os
import queue
import threading

# Marks the end of the result stream; only the coordinator puts it.
_STREAM_DONE = object()


class SubdomainEnumerator:
    def __init__(self, domains, threads=DEFAULT_THREADS, timeout=DEFAULT_TIMEOUT, verbose=False, output_file=None, proxy_list_path=None, sources=SOURCES):
        self.domains = list(domains)
        # An empty domain is a substring of everything and would match any host.
        if any(not domain for domain in self.domains):
            raise ValueError("Target domains must be non-empty strings")
        self.threads = threads
        self.timeout = timeout
        self.verbose = verbose
        self.output_file = output_file
        self.proxy_list_path = proxy_list_path
        self.sources = tuple(sources)

        self.found_subdomains = []  # Final sorted, unique list
        self.failures = []  # SourceFailure records from every worker

        self.proxies = self._load_proxies()

        if self.verbose:
            logger.setLevel(logging.DEBUG)

    def _load_proxies(self):
        """Loads proxies from a file (one per line) or returns [None] for direct connection."""
        if not self.proxy_list_path or not os.path.exists(self.proxy_list_path):
            if self.proxy_list_path:
                logger.warning(f"Proxy list {self.proxy_list_path} not found. Continuing without proxies.")
            return [None]

        with open(self.proxy_list_path, 'r') as f:
            proxies = [line.strip() for line in f if line.strip()]

        if not proxies:
            logger.warning("Proxy file is empty. Continuing without proxies.")
            proxies = [None]
        else:
            logger.info(f"Loaded {len(proxies)} proxies from {self.proxy_list_path}.")
        return proxies

    def _fan_out(self, results):
        """Runs one worker per domain and closes the stream once all of them have emitted."""
        try:
            if not self.domains:
                return

            max_workers = max(1, min(self.threads, len(self.domains)))
            with ThreadPoolExecutor(max_workers=max_workers) as executor:
                futures = {executor.submit(query_sources, self, domain, results): domain
                           for domain in self.domains}

                for future in as_completed(futures):
                    domain = futures[future]
                    try:
                        failures = future.result()
                    except Exception as e:
                        logger.error(f" [!] Worker for {domain} crashed: {e}", exc_info=self.verbose)
                        continue

                    for failure in failures:
                        self._report_failure(failure)
        finally:
            results.put(_STREAM_DONE)

    def _report_failure(self, failure):
        self.failures.append(failure)
        logger.warning(f" [!] {failure.source} ({failure.stage} error) for {failure.domain}: {failure.error}")

    def run(self):
        logger.info(f"\n--- Harvesting subdomains for {len(self.domains)} domain(s) from {len(self.sources)} sources ---")

        # Create the destination up front so an unwritable path fails before any request.
        if self.output_file:
            open(self.output_file, 'w').close()

        # Unbounded, so a worker never blocks while emitting its results.
        results = queue.Queue()
        coordinator = threading.Thread(target=self._fan_out, args=(results,), name="subharvest-coordinator", daemon=True)
        coordinator.start()

        collected = []
        while True:
            item = results.get()
            if item is _STREAM_DONE:
                break
            collected.append(item)
        coordinator.join()

        self.found_subdomains = sorted(set(collected))
        self.phase_final_reporting(len(collected))
        return self.found_subdomains

    def phase_final_reporting(self, total_emitted):
        logger.info("\n--- Subdomain Harvest Complete ---")
        logger.info(f"  Results emitted by workers: {total_emitted}")
        logger.info(f"  Unique subdomains: {len(self.found_subdomains)}")
        logger.info(f"  Source failures: {len(self.failures)}")

        if self.output_file:
            write_results(self.found_subdomains, self.output_file)
            logger.info(f"Subdomain list saved to: {self.output_file}")
