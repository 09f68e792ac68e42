from ..config import logger
from ..extractors import extract
from ..sources import build_query
from ..utils.http_utils import get_session_with_proxy
from collections import namedtuple
import requests

NETWORK_ERROR = 'network'
READ_ERROR = 'read'
PARSE_ERROR = 'parse'

# One record per source that could not contribute for a domain.
SourceFailure = namedtuple('SourceFailure', ['domain', 'source', 'url', 'stage', 'error'])


def query_sources(self, domain, results):
    """
    Visits every registered source for `domain`, one request at a time, and puts
    each unique match on the `results` queue once all sources have been tried.

    A source that fails at any stage is recorded and skipped; matches already
    collected from earlier sources are kept. Returns the list of SourceFailure
    records so the caller decides how to surface them.
    """
    subdomains = set()
    failures = []
    session = get_session_with_proxy(self)

    try:
        for source in self.sources:
            url = build_query(source, domain)
            logger.debug(f"[*] Querying {source.name} for {domain}...")

            try:
                response = session.get(url, timeout=self.timeout, stream=True)
            except requests.exceptions.RequestException as e:
                failures.append(SourceFailure(domain, source.name, url, NETWORK_ERROR, str(e)))
                continue

            try:
                body = response.content
            except requests.exceptions.RequestException as e:
                failures.append(SourceFailure(domain, source.name, url, READ_ERROR, str(e)))
                continue
            finally:
                response.close()

            before = len(subdomains)
            try:
                extract(source.kind, body, domain, subdomains)
            except ValueError as e:
                failures.append(SourceFailure(domain, source.name, url, PARSE_ERROR, str(e)))
                continue

            logger.debug(f"[+] {source.name}: {len(subdomains) - before} new for {domain} (HTTP {response.status_code}).")
    finally:
        session.close()

    for subdomain in subdomains:
        results.put(subdomain)

    logger.debug(f"[*] {domain}: {len(subdomains)} unique subdomains, {len(failures)}/{len(self.sources)} sources failed.")
    return failures
