"""A single-user journal for wellness activities."""

__version__ = "0.1.0"
