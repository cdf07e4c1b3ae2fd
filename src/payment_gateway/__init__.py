"""Payment Gateway service."""

__version__ = "0.1.0"
