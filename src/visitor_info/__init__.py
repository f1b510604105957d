"""Client identity and location metadata for analytics requests."""

__version__ = "0.1.0"
