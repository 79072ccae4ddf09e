"""Utility functions for the indexer."""
from .logger import setup_logger

__all__ = [
    "setup_logger"
]
