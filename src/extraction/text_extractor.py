"""
Position-free fallback extractor.

Used when only plain text is available (no bounding boxes). Shares the
invoice-number and date pattern tables and the amount parser with the
positional engine, but has no zones to work with.
"""

import re
from typing import List, Optional

from src.utils.logger import get_logger
from src.ocr_reader.text_line import TextLine
from .amount_resolver import AMOUNT
from .currency import detect_document_currency
from .date_resolver import DateResolver
from .invoice_number_resolver import InvoiceNumberResolver
from .invoice_record import InvoiceRecord, UNKNOWN
from .number_parser import parse_amount

logger = get_logger(__name__)

VENDOR_SEARCH_LINES = 5


class TextInvoiceExtractor:
    """
    Extracts invoice fields from unpositioned text.

    Example:
        >>> record = TextInvoiceExtractor().extract("Acme Corp\\nInvoice #4521\\nTotal: $99.00")
        >>> record.invoice_number, record.total_amount, record.currency
        ('4521', 99.0, 'USD')
    """

    AMOUNT_PATTERNS = (
        re.compile(rf'total:?\s*[\$€£]?\s*{AMOUNT}', re.IGNORECASE),
        re.compile(rf'amount\s*due:?\s*[\$€£]?\s*{AMOUNT}', re.IGNORECASE),
        re.compile(rf'[\$€£]\s*{AMOUNT}'),
    )

    def __init__(self) -> None:
        self.invoice_number_resolver = InvoiceNumberResolver()
        self.date_resolver = DateResolver()

    def extract(self, text: str) -> InvoiceRecord:
        """
        Extract invoice fields from plain text.

        Args:
            text: Document text, one OCR line per text line.

        Returns:
            InvoiceRecord, sentinel-filled where nothing was found.
        """
        lines = [line.strip() for line in (text or '').splitlines()]
        non_empty = [line for line in lines if line]

        record = InvoiceRecord(
            vendor_name=self._vendor_name(non_empty),
            invoice_number=self._invoice_number(non_empty),
            date=self._date(non_empty),
            total_amount=self._amount(text or ''),
            currency=detect_document_currency(TextLine(line) for line in non_empty)
        )

        logger.debug(f"Text extraction result: {record!r}")
        return record

    def _invoice_number(self, lines: List[str]) -> str:
        for line in lines:
            value = self.invoice_number_resolver.match_line(line)
            if value is not None:
                return value
        return UNKNOWN

    def _date(self, lines: List[str]) -> str:
        for line in lines:
            value = self.date_resolver.match_text(line)
            if value is not None:
                return value
        return UNKNOWN

    def _amount(self, text: str) -> float:
        for pattern in self.AMOUNT_PATTERNS:
            for match in pattern.finditer(text):
                amount: Optional[float] = parse_amount(match.group(1))
                if amount is not None:
                    return amount
        return 0.0

    @staticmethod
    def _vendor_name(lines: List[str]) -> str:
        for line in lines[:VENDOR_SEARCH_LINES]:
            if len(line) > 3 and "invoice" not in line.lower():
                return line
        return UNKNOWN
