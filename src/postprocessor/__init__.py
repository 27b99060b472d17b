"""
Post-Processing Module for the Invoice Scanner.

Normalisation of extracted values for reports:
    - Date normalisation to a standard output format
"""

from .normalizers import DateNormalizer

__all__ = ['DateNormalizer']
