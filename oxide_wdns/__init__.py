"""Command-line options and their validation for a DNS-over-HTTPS gateway server."""

__version__ = "0.1.6"