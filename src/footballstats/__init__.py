"""Programmatic football player profile site."""

__version__ = "0.1.0"
