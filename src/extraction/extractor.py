"""
Invoice Field Extractor.

Public entry point of the extraction engine. Runs every resolver over
the same line list and assembles an InvoiceRecord.

Approach:
    Pure layout heuristics over (text, x, y, width, height) lines: no
    model, no training data. Each resolver is a chain of independent
    strategies that stops at the first one producing a value; a field
    nothing can resolve gets its sentinel.

Example:
    >>> extractor = InvoiceFieldExtractor()
    >>> record = extractor.extract(lines)
    >>> record.vendor_name, record.total_amount, record.currency
    ('Acme Corp', 1234.5, 'EUR')
"""

from typing import Any, Dict, List, Sequence, Union

from src.utils.logger import get_logger
from src.ocr_reader.line_normalizer import normalize_lines
from src.ocr_reader.ocr_result import OCRResult
from src.ocr_reader.text_line import TextLine
from .amount_resolver import AmountResolver
from .date_resolver import DateResolver
from .invoice_number_resolver import InvoiceNumberResolver
from .invoice_record import InvoiceRecord
from .vendor_resolver import VendorNameResolver

logger = get_logger(__name__)


class InvoiceFieldExtractor:
    """
    Heuristic invoice field extractor.

    Holds no per-document state: the same instance can be reused for any
    number of documents, from any number of threads.

    Attributes:
        vendor_resolver: VendorNameResolver instance
        invoice_number_resolver: InvoiceNumberResolver instance
        date_resolver: DateResolver instance
        amount_resolver: AmountResolver instance
    """

    def __init__(self) -> None:
        self.vendor_resolver = VendorNameResolver()
        self.invoice_number_resolver = InvoiceNumberResolver()
        self.date_resolver = DateResolver()
        self.amount_resolver = AmountResolver()

    def extract(self, lines: Sequence[TextLine]) -> InvoiceRecord:
        """
        Extract invoice fields from positioned text lines.

        Lines are ordered top to bottom first (stable on equal ``y``); the
        caller's sequence is left untouched.

        Args:
            lines: Text lines of one document, in any order.

        Returns:
            InvoiceRecord, sentinel-filled where nothing was found.
        """
        ordered = self.sort_lines(lines)
        logger.debug(f"Extracting fields from {len(ordered)} lines")

        vendor_name = self.vendor_resolver.resolve(ordered)
        invoice_number = self.invoice_number_resolver.resolve(ordered)
        date = self.date_resolver.resolve(ordered)
        total_amount, currency = self.amount_resolver.resolve(ordered)

        record = InvoiceRecord(
            vendor_name=vendor_name,
            invoice_number=invoice_number,
            date=date,
            total_amount=total_amount,
            currency=currency
        )

        logger.debug(f"Extracted {record!r}")
        return record

    def extract_from_ocr(self, ocr_result: Union[OCRResult, Dict[str, Any]]) -> InvoiceRecord:
        """
        Normalize an OCR result and extract fields from it.

        Raises:
            MalformedOCRResultError: If a raw payload lacks the region list.
        """
        return self.extract(normalize_lines(ocr_result))

    @staticmethod
    def sort_lines(lines: Sequence[TextLine]) -> List[TextLine]:
        return sorted(lines, key=lambda line: line.y)


def extract_invoice_fields(lines: Sequence[TextLine]) -> InvoiceRecord:
    """Convenience wrapper around ``InvoiceFieldExtractor().extract``."""
    return InvoiceFieldExtractor().extract(lines)
