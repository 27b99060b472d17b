"""
Field Extraction Module for the Invoice Scanner.

Heuristic, layout-aware extraction of invoice header fields from OCR
text lines and their positions.

Components:
    - zones: document extents and named page regions
    - number_parser: locale-ambiguous amount parsing
    - amount_resolver: total amount and currency
    - invoice_number_resolver: invoice / reference number
    - date_resolver: invoice date
    - vendor_resolver: vendor name
    - extractor: runs all resolvers and builds the InvoiceRecord
    - text_extractor: fallback for plain text without positions
"""

from .invoice_record import InvoiceRecord, UNKNOWN
from .zones import ZoneMetrics, analyze_zones
from .number_parser import parse_amount
from .currency import detect_document_currency, DEFAULT_CURRENCY
from .amount_resolver import AmountResolver
from .invoice_number_resolver import InvoiceNumberResolver
from .date_resolver import DateResolver
from .vendor_resolver import VendorNameResolver
from .extractor import InvoiceFieldExtractor, extract_invoice_fields
from .text_extractor import TextInvoiceExtractor

__all__ = [
    'InvoiceRecord',
    'UNKNOWN',
    'ZoneMetrics',
    'analyze_zones',
    'parse_amount',
    'detect_document_currency',
    'DEFAULT_CURRENCY',
    'AmountResolver',
    'InvoiceNumberResolver',
    'DateResolver',
    'VendorNameResolver',
    'InvoiceFieldExtractor',
    'extract_invoice_fields',
    'TextInvoiceExtractor',
]
