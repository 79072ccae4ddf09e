"""Projection of catalog products into search documents."""

__version__ = "0.1.0"
