"""General tolerance calculator for linear dimensions (JIS B 0405 / ISO 2768-1)."""

__version__ = "1.0.0"
