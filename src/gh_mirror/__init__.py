"""Repository selection for mirroring GitHub repositories into a code-search index."""

__version__ = "0.1.0"
