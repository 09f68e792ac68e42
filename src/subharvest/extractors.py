"""
Subdomain extraction strategies.

Both strategies only add verbatim matches to the caller's set; nothing is
lowercased, stripped or otherwise normalized here.
"""

import json
import re

from .sources import STRUCTURED, UNSTRUCTURED


def _add_matching_strings(values, domain, subdomains):
    for value in values:
        if isinstance(value, str) and domain in value:
            subdomains.add(value)


def extract_structured(body, domain, subdomains):
    """
    Pulls strings containing `domain` out of a JSON body.

    Only the response shapes seen in practice are walked: a flat array, an array
    of arrays (one level deep) and a flat object. Deeper nesting and objects
    inside arrays are ignored.

    Raises ValueError if the body is not valid JSON or nests too deeply to parse.
    """
    try:
        data = json.loads(body)
    except RecursionError as e:
        raise ValueError(f"JSON nesting too deep: {e}") from e

    if isinstance(data, list):
        for item in data:
            if isinstance(item, list):
                _add_matching_strings(item, domain, subdomains)
            elif isinstance(item, str) and domain in item:
                subdomains.add(item)
    elif isinstance(data, dict):
        _add_matching_strings(data.values(), domain, subdomains)


def extract_unstructured(body, domain, subdomains):
    """Regex scan of a raw body for `<word chars, dots, hyphens>.<domain>` (case-sensitive)."""
    pattern = re.compile(rb'[\w.-]+\.' + re.escape(domain.encode('utf-8')))
    for match in pattern.findall(body):
        subdomains.add(match.decode('utf-8'))


_EXTRACTORS = {
    STRUCTURED: extract_structured,
    UNSTRUCTURED: extract_unstructured,
}


def extract(kind, body, domain, subdomains):
    try:
        extractor = _EXTRACTORS[kind]
    except KeyError:
        raise ValueError(f"Unknown source kind: {kind!r}") from None
    extractor(body, domain, subdomains)
