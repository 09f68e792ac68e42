"""
Catalog of the public data sources queried for every target domain.

Each source is a URL template plus the extraction strategy its response needs:
STRUCTURED sources answer with JSON, UNSTRUCTURED ones with free text, HTML or CSV.
"""

from collections import namedtuple

STRUCTURED = "structured"
UNSTRUCTURED = "unstructured"

SourceDescriptor = namedtuple('SourceDescriptor', ['name', 'url_template', 'kind'])

# Order matters: workers visit sources in exactly this order.
SOURCES = (
    SourceDescriptor('bufferover', 'https://dns.bufferover.run/dns?q=.{domain}', STRUCTURED),
    SourceDescriptor('riddler', 'https://riddler.io/search/exportcsv?q=pld:{domain}', UNSTRUCTURED),
    SourceDescriptor('certspotter', 'https://api.certspotter.com/v1/issuances?domain={domain}&include_subdomains=true&expand=dns_names', STRUCTURED),
    SourceDescriptor('wayback', 'http://web.archive.org/cdx/search/cdx?url=*.{domain}/*&output=text&fl=original&collapse=urlkey', UNSTRUCTURED),
    SourceDescriptor('crtsh', 'https://crt.sh/?q=%25.{domain}&output=json', STRUCTURED),
    SourceDescriptor('anubis', 'https://jldc.me/anubis/subdomains/{domain}', UNSTRUCTURED),
    SourceDescriptor('threatminer', 'https://api.threatminer.org/v2/domain.php?q={domain}&rt=5', UNSTRUCTURED),
    SourceDescriptor('alienvault', 'https://otx.alienvault.com/api/v1/indicators/domain/{domain}/url_list?limit=100&page=1', UNSTRUCTURED),
    SourceDescriptor('hackertarget', 'https://api.hackertarget.com/hostsearch/?q={domain}', UNSTRUCTURED),
)


def build_query(source, domain):
    """Substitutes the domain into a source's URL template."""
    return source.url_template.format(domain=domain)
