"""Mosaic Match — a nine-tile rotate-and-swap puzzle."""

__version__ = "0.1.0"
