"""Creative-resource catalog engine: loading, caching, querying and timeline binding."""

__version__ = "0.1.0"
