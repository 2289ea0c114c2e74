"""Furnili - bill-of-materials calculator for furniture units."""

__version__ = "1.0.0"
