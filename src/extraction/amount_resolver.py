"""
Amount & Currency Resolver.

Finds the invoice total and its currency. Tiers, first success wins:
    1. keyword lines, amount adjacent to a currency symbol/code
    2. keyword lines, amount without a currency tag
    3. bottom 30% of the page, largest amount from either pattern family
    4. whole document, largest decimal amount
If nothing matches, the amount is 0.0 in the document currency.
"""

import re
from typing import Iterator, List, NamedTuple, Optional, Pattern, Sequence, Tuple

from src.utils.logger import get_logger
from src.ocr_reader.text_line import TextLine
from .cascade import run_cascade
from .currency import currency_in_line, detect_document_currency, map_currency
from .number_parser import parse_amount
from .zones import ZoneMetrics

logger = get_logger(__name__)

AmountWithCurrency = Tuple[float, str]

# Decimal amount with optional thousands groups and exactly two decimals
AMOUNT = r'(\d+(?:[.,]\d{3})*[.,]\d{2})(?!\d)'
CURRENCY_TOKEN = r'([\$€£]|EUR|USD|GBP)'

TOTAL_LABELS = (
    r'total',
    r'amount\s*due',
    r'balance\s*due',
    r'grand\s*total',
    r'total\s*amount',
    r'total\s*due',
    r'invoice\s*total',
    r'payment\s*due',
)


class AmountPattern(NamedTuple):
    """A compiled amount pattern and the groups holding amount and currency."""
    regex: Pattern
    amount_group: int
    currency_group: Optional[int] = None


def _build_tagged_patterns() -> Tuple[AmountPattern, ...]:
    before = [
        AmountPattern(re.compile(rf'{label}:?\s*{CURRENCY_TOKEN}\s*{AMOUNT}', re.IGNORECASE), 2, 1)
        for label in TOTAL_LABELS
    ]
    before.append(AmountPattern(re.compile(rf'{CURRENCY_TOKEN}\s*{AMOUNT}', re.IGNORECASE), 2, 1))

    after = [
        AmountPattern(re.compile(rf'{label}:?\s*{AMOUNT}\s*{CURRENCY_TOKEN}', re.IGNORECASE), 1, 2)
        for label in TOTAL_LABELS
    ]
    after.append(AmountPattern(re.compile(rf'{AMOUNT}\s*{CURRENCY_TOKEN}', re.IGNORECASE), 1, 2))

    return tuple(before + after)


def _build_untagged_patterns() -> Tuple[AmountPattern, ...]:
    return tuple(
        AmountPattern(re.compile(rf'{label}:?\s*{AMOUNT}', re.IGNORECASE), 1)
        for label in TOTAL_LABELS
    )


class AmountResolver:
    """
    Resolves ``(total_amount, currency)`` from positioned text lines.

    Example:
        >>> resolver = AmountResolver()
        >>> resolver.resolve([TextLine("Total: €1.234,50", x=50, y=900)])
        (1234.5, 'EUR')
    """

    KEYWORDS = ("total", "amount", "balance", "due", "payment")

    TAGGED_PATTERNS = _build_tagged_patterns()
    UNTAGGED_PATTERNS = _build_untagged_patterns()

    # optional currency, amount, optional currency
    GENERIC_PATTERN = re.compile(
        rf'{CURRENCY_TOKEN}?\s*{AMOUNT}(?:\s*{CURRENCY_TOKEN})?',
        re.IGNORECASE
    )

    def resolve(self, lines: Sequence[TextLine]) -> AmountWithCurrency:
        """
        Resolve the total amount and currency.

        Args:
            lines: Text lines of one document.

        Returns:
            Tuple of (amount, currency code). ``(0.0, document currency)``
            when no amount is found.
        """
        document_currency = detect_document_currency(lines)
        zones = ZoneMetrics.from_lines(lines)

        strategies = (
            self._keyword_tagged,
            self._keyword_untagged,
            self._bottom_zone_largest,
            self._document_largest,
        )
        result, _ = run_cascade("total_amount", strategies, lines, zones, document_currency)

        if result is None:
            return 0.0, document_currency
        return result

    # ------------------------------------------------------------------
    # Candidate generation
    # ------------------------------------------------------------------

    def _tagged_candidates(self, text: str, document_currency: str) -> Iterator[AmountWithCurrency]:
        for pattern in self.TAGGED_PATTERNS:
            match = pattern.regex.search(text)
            if not match:
                continue

            amount = parse_amount(match.group(pattern.amount_group))
            if amount is None:
                continue

            currency = map_currency(match.group(pattern.currency_group)) or document_currency
            yield amount, currency

    def _untagged_candidates(self, text: str, document_currency: str) -> Iterator[AmountWithCurrency]:
        for pattern in self.UNTAGGED_PATTERNS:
            match = pattern.regex.search(text)
            if not match:
                continue

            amount = parse_amount(match.group(pattern.amount_group))
            if amount is None:
                continue

            yield amount, currency_in_line(text) or document_currency

    def _keyword_lines(self, lines: Sequence[TextLine]) -> List[TextLine]:
        return [
            line for line in lines
            if any(keyword in line.text.lower() for keyword in self.KEYWORDS)
        ]

    # ------------------------------------------------------------------
    # Strategies
    # ------------------------------------------------------------------

    def _keyword_tagged(
        self,
        lines: Sequence[TextLine],
        zones: ZoneMetrics,
        document_currency: str
    ) -> Optional[AmountWithCurrency]:
        for line in self._keyword_lines(lines):
            for candidate in self._tagged_candidates(line.text, document_currency):
                return candidate
        return None

    def _keyword_untagged(
        self,
        lines: Sequence[TextLine],
        zones: ZoneMetrics,
        document_currency: str
    ) -> Optional[AmountWithCurrency]:
        for line in self._keyword_lines(lines):
            for candidate in self._untagged_candidates(line.text, document_currency):
                return candidate
        return None

    def _bottom_zone_largest(
        self,
        lines: Sequence[TextLine],
        zones: ZoneMetrics,
        document_currency: str
    ) -> Optional[AmountWithCurrency]:
        best: Optional[AmountWithCurrency] = None

        for line in lines:
            if not zones.is_bottom_30(line.y):
                continue

            candidates = list(self._tagged_candidates(line.text, document_currency))
            candidates.extend(self._untagged_candidates(line.text, document_currency))

            for amount, currency in candidates:
                if amount > (best[0] if best else 0.0):
                    best = (amount, currency)

        return best

    def _document_largest(
        self,
        lines: Sequence[TextLine],
        zones: ZoneMetrics,
        document_currency: str
    ) -> Optional[AmountWithCurrency]:
        best: Optional[AmountWithCurrency] = None

        for line in lines:
            for match in self.GENERIC_PATTERN.finditer(line.text):
                amount = parse_amount(match.group(2))
                if amount is None:
                    continue

                currency = (
                    map_currency(match.group(1))
                    or map_currency(match.group(3))
                    or currency_in_line(line.text)
                    or document_currency
                )

                if amount > (best[0] if best else 0.0):
                    best = (amount, currency)

        return best
