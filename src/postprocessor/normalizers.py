"""
Data Normalizers Module.

Normalisation applied to extracted values for reporting. The engine
returns the date exactly as printed; the report additionally carries
the date in a standard format when it can be parsed.

Author: Invoice Scanner Team
"""

import re
from datetime import datetime
from typing import Optional, List

from dateutil import parser as date_parser

from config import get_config
from src.utils.logger import get_logger
from src.extraction.invoice_record import UNKNOWN

logger = get_logger(__name__)


class DateNormalizer:
    """
    Normalizes date strings to a standard format.

    Tries a list of explicit formats first, then falls back to
    dateutil's parser. Day-first interpretation of ambiguous numeric
    dates (``03/04/2024``) follows ``postprocessing.date.dayfirst``.

    Attributes:
        output_format: Target date format string
        input_formats: Explicit input format strings tried first
        dayfirst: Whether ambiguous numeric dates are read day-first

    Example:
        >>> normalizer = DateNormalizer()
        >>> normalizer.normalize("15/01/2024")
        "2024-01-15"
        >>> normalizer.normalize("January 15, 2024")
        "2024-01-15"
    """

    def __init__(self) -> None:
        self.output_format = get_config(
            "postprocessing.date.output_format",
            "%Y-%m-%d"
        )
        self.dayfirst = bool(get_config("postprocessing.date.dayfirst", True))

        day_first_formats = ["%d/%m/%Y", "%d-%m-%Y", "%d.%m.%Y"]
        month_first_formats = ["%m/%d/%Y", "%m-%d-%Y"]
        numeric_formats = (
            day_first_formats + month_first_formats
            if self.dayfirst else month_first_formats + day_first_formats
        )

        self.input_formats: List[str] = get_config(
            "postprocessing.date.input_formats",
            ["%Y-%m-%d", "%Y/%m/%d"] + numeric_formats + [
                "%B %d, %Y",
                "%b %d, %Y",
                "%d %B %Y",
                "%d %b %Y",
            ]
        )

        logger.debug(f"DateNormalizer initialized (output: {self.output_format})")

    def normalize(self, date_str: Optional[str]) -> Optional[str]:
        """
        Normalize a date string to the configured output format.

        Args:
            date_str: Date text as extracted.

        Returns:
            Normalized date string, or None for the sentinel or
            unparseable input.
        """
        if not date_str or date_str == UNKNOWN:
            return None

        cleaned = self._clean_date_string(date_str)

        parsed_date = self._try_explicit_formats(cleaned)
        if parsed_date is None:
            parsed_date = self._try_dateutil_parser(cleaned)

        if parsed_date is None:
            logger.debug(f"Could not parse date: {date_str}")
            return None

        return parsed_date.strftime(self.output_format)

    def _clean_date_string(self, date_str: str) -> str:
        date_str = ' '.join(date_str.split())
        # 1st, 2nd, 3rd, 4th
        date_str = re.sub(r'(\d+)(st|nd|rd|th)\b', r'\1', date_str, flags=re.IGNORECASE)
        # "Jan." -> "Jan"
        date_str = re.sub(r'([A-Za-z]{3,})\.', r'\1', date_str)
        return date_str.strip()

    def _try_explicit_formats(self, date_str: str) -> Optional[datetime]:
        for fmt in self.input_formats:
            try:
                return datetime.strptime(date_str, fmt)
            except ValueError:
                continue
        return None

    def _try_dateutil_parser(self, date_str: str) -> Optional[datetime]:
        try:
            return date_parser.parse(date_str, dayfirst=self.dayfirst)
        except (ValueError, OverflowError):
            return None

    def is_valid_date(self, date_str: str) -> bool:
        """Check whether a string can be normalized."""
        return self.normalize(date_str) is not None
