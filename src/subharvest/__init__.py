from .enumerator import SubdomainEnumerator
from .sources import SOURCES, STRUCTURED, UNSTRUCTURED, SourceDescriptor

__version__ = "0.1.0"
