"""folio — content pipeline for a personal blog and prompt library."""

__version__ = "0.1.0"
