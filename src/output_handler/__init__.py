"""
Output Handler Module for the Invoice Scanner.

JSON export of scan results.
"""

from .handler import OutputHandler

__all__ = ['OutputHandler']
