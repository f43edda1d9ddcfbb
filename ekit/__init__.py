"""Generic helpers for lists, sets, retries, typed values, SQL columns and concurrency."""

__version__ = "0.1.0"