"""Font metric sanity checks."""

__version__ = "0.1.0"
