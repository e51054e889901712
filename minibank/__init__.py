"""A small bank ledger kept in comma-separated text files, with an interactive shell."""

__version__ = "0.1.0"