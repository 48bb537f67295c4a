"""2log - timestamped entries for daily markdown notes."""

__version__ = "0.1.0"
