"""Hetzner DNS API client, SQLite storage and HTML views for managing DNS records."""

__version__ = "0.1.0"