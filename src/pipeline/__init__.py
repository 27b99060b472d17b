"""
Scan Pipeline Module for the Invoice Scanner.

Ties input loading, line normalisation, field extraction and date
normalisation together for one document at a time.
"""

from .scan_result import ScanResult
from .scanner import InvoiceScanner

__all__ = ['ScanResult', 'InvoiceScanner']
