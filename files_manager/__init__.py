"""Files Manager: token-authenticated hierarchical file store."""

__version__ = "1.0.0"
