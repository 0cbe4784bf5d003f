"""Themeable personal portfolio site."""

__version__ = "1.0.0"
