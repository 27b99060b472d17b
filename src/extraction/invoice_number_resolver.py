"""
Invoice Number Resolver.

Four zones are searched in turn with the same ordered list of labelled
patterns: the top-right header, any line naming an invoice/order/
reference, the top half of the page, then the whole page.
"""

import re
from typing import Optional, Sequence

from src.utils.logger import get_logger
from src.ocr_reader.text_line import TextLine
from .cascade import run_cascade
from .invoice_record import UNKNOWN
from .zones import ZoneMetrics

logger = get_logger(__name__)

TOKEN = r'([A-Z0-9][A-Z0-9\-/]*)'

MIN_FALLBACK_LENGTH = 3


def _labelled(label: str) -> re.Pattern:
    return re.compile(label + r'\s*' + TOKEN, re.IGNORECASE)


class InvoiceNumberResolver:
    """
    Resolves the invoice / reference number.

    Example:
        >>> resolver = InvoiceNumberResolver()
        >>> resolver.resolve([TextLine("INVOICE #4521", x=600, y=50),
        ...                   TextLine("Total: 10.00", x=50, y=900)])
        '4521'
    """

    # Tried in this order; group 1 is the number
    PATTERNS = (
        _labelled(r'invoice\s*(?:number\b|num\b\.?)\s*[:#.\-]?'),
        _labelled(r'invoice\s*#\s*:?'),
        _labelled(r'invoice\s*no\b\.?\s*[:#]?'),
        _labelled(r'\binv\b\.?\s*(?:#|no\b\.?)\s*:?'),
        _labelled(r'order\s*(?:number\b|no\b\.?|#)\s*[:#]?'),
        _labelled(r'(?:reference|\bref\b\.?)\s*(?:(?:number\b|no\b\.?|#)\s*:?|:)'),
        _labelled(r'\bnumber\s*[:#]'),
        _labelled(r'#'),
    )

    HEADER_KEYWORDS = ("invoice", "inv", "number", "#")
    LABEL_KEYWORDS = ("invoice", "inv", "number", "order", "reference")
    FALLBACK_EXCLUDED = ("invoice", "number", "inv")

    FALLBACK_RUN = re.compile(r'[A-Za-z0-9][A-Za-z0-9\-/]*')

    def resolve(self, lines: Sequence[TextLine]) -> str:
        """
        Resolve the invoice number.

        Args:
            lines: Text lines of one document.

        Returns:
            The invoice number, or "UNKNOWN".
        """
        zones = ZoneMetrics.from_lines(lines)

        strategies = (
            self._header_zone,
            self._labelled_lines,
            self._top_half,
            self._whole_document,
        )
        value, _ = run_cascade("invoice_number", strategies, lines, zones)
        return value if value is not None else UNKNOWN

    def match_line(self, text: str) -> Optional[str]:
        """
        Apply the ordered pattern list to one line of text.

        Captures of a single character are treated as noise and the next
        pattern is tried.
        """
        for pattern in self.PATTERNS:
            match = pattern.search(text)
            if not match:
                continue

            candidate = match.group(1).rstrip('-/')
            if len(candidate) <= 1:
                logger.debug(f"Rejected single-character invoice number in '{text}'")
                continue

            return candidate
        return None

    def _fallback_token(self, text: str) -> Optional[str]:
        """Any run of three or more alphanumerics that is not a label word."""
        runs = [run.strip('-/') for run in self.FALLBACK_RUN.findall(text)]
        runs = [
            run for run in runs
            if len(run) >= MIN_FALLBACK_LENGTH and run.lower() not in self.FALLBACK_EXCLUDED
        ]

        for run in runs:
            if any(ch.isdigit() for ch in run):
                return run
        return runs[0] if runs else None

    # ------------------------------------------------------------------
    # Strategies
    # ------------------------------------------------------------------

    def _header_zone(self, lines: Sequence[TextLine], zones: ZoneMetrics) -> Optional[str]:
        for line in lines:
            if not zones.in_top_right_zone(line):
                continue

            lower_text = line.text.lower()
            if not any(keyword in lower_text for keyword in self.HEADER_KEYWORDS):
                continue

            value = self.match_line(line.text)
            if value is None:
                value = self._fallback_token(line.text)
            if value is not None:
                return value
        return None

    def _labelled_lines(self, lines: Sequence[TextLine], zones: ZoneMetrics) -> Optional[str]:
        for line in lines:
            lower_text = line.text.lower()
            if not any(keyword in lower_text for keyword in self.LABEL_KEYWORDS):
                continue

            value = self.match_line(line.text)
            if value is not None:
                return value
        return None

    def _top_half(self, lines: Sequence[TextLine], zones: ZoneMetrics) -> Optional[str]:
        for line in lines:
            if zones.is_top_half(line.y):
                value = self.match_line(line.text)
                if value is not None:
                    return value
        return None

    def _whole_document(self, lines: Sequence[TextLine], zones: ZoneMetrics) -> Optional[str]:
        for line in lines:
            value = self.match_line(line.text)
            if value is not None:
                return value
        return None
