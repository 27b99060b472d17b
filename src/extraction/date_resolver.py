"""
Date Resolver.

Returns the first date-shaped string found, preferring lines that carry
a date label, then the top half of the page, then the whole page. The
matched text is returned as written; it is not checked against a
calendar.
"""

import re
from typing import Optional, Sequence

from src.ocr_reader.text_line import TextLine
from .cascade import run_cascade
from .invoice_record import UNKNOWN
from .zones import ZoneMetrics

MONTH_ABBREVIATIONS = r'(?:jan|feb|mar|apr|may|jun|jul|aug|sep|oct|nov|dec)'
MONTH_NAMES = (
    r'(?:january|february|march|april|may|june|july|august|'
    r'september|october|november|december)'
)


class DateResolver:
    """
    Resolves the invoice date.

    Example:
        >>> DateResolver().resolve([TextLine("Invoice Date: 15/01/2024", x=600, y=80)])
        '15/01/2024'
    """

    # Ordered; the first pattern that matches a line wins
    DATE_PATTERNS = (
        # DD/MM/YYYY, MM-DD-YY, DD.MM.YYYY
        re.compile(r'\b\d{1,2}[-/.]\d{1,2}[-/.]\d{2,4}(?!\d)'),
        # YYYY-MM-DD
        re.compile(r'\b\d{4}[-/.]\d{1,2}[-/.]\d{1,2}(?!\d)'),
        # Jan 15, 2024 / Sept. 5 2024
        re.compile(rf'\b{MONTH_ABBREVIATIONS}[a-z]*\.?\s+\d{{1,2}}[,\s]+\d{{2,4}}', re.IGNORECASE),
        # January 15, 2024
        re.compile(rf'\b{MONTH_NAMES}\s+\d{{1,2}}[,\s]+\d{{2,4}}', re.IGNORECASE),
        # 15 Jan 2024
        re.compile(rf'\b\d{{1,2}}\s+{MONTH_ABBREVIATIONS}[a-z]*\.?\s+\d{{2,4}}', re.IGNORECASE),
        # 15 January 2024
        re.compile(rf'\b\d{{1,2}}\s+{MONTH_NAMES}\s+\d{{2,4}}', re.IGNORECASE),
    )

    DATE_KEYWORDS = ("date", "issued", "invoice date", "order date", "billing date")

    def resolve(self, lines: Sequence[TextLine]) -> str:
        """
        Resolve the invoice date.

        Returns:
            The matched date text, or "UNKNOWN".
        """
        zones = ZoneMetrics.from_lines(lines)

        strategies = (
            self._keyword_lines,
            self._top_half,
            self._whole_document,
        )
        value, _ = run_cascade("date", strategies, lines, zones)
        return value if value is not None else UNKNOWN

    def match_text(self, text: str) -> Optional[str]:
        """Return the first date-shaped substring of ``text``."""
        for pattern in self.DATE_PATTERNS:
            match = pattern.search(text)
            if match:
                return match.group(0)
        return None

    def _keyword_lines(self, lines: Sequence[TextLine], zones: ZoneMetrics) -> Optional[str]:
        for line in lines:
            lower_text = line.text.lower()
            if any(keyword in lower_text for keyword in self.DATE_KEYWORDS):
                value = self.match_text(line.text)
                if value is not None:
                    return value
        return None

    def _top_half(self, lines: Sequence[TextLine], zones: ZoneMetrics) -> Optional[str]:
        for line in lines:
            if zones.is_top_half(line.y):
                value = self.match_text(line.text)
                if value is not None:
                    return value
        return None

    def _whole_document(self, lines: Sequence[TextLine], zones: ZoneMetrics) -> Optional[str]:
        for line in lines:
            value = self.match_text(line.text)
            if value is not None:
                return value
        return None
