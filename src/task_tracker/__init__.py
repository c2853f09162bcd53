"""Console task tracker with an audited status lifecycle."""

__version__ = "0.1.0"
