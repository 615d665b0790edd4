"""Fortune Tickets holdings indexer."""

__version__ = "0.1.0"
