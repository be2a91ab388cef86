"""Normalize and group tab-separated, colon-valued tabular text."""

__version__ = "0.1.0"
