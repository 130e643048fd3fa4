"""Command-line ledger for personal expenses."""

__version__ = "1.0.0"
