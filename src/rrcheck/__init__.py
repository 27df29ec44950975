"""rrcheck: catch client-side application errors through the Rich Results Test."""

__version__ = "0.1.0"
