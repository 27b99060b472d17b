"""
Numeric Locale Parser.

Converts an amount string written with either European (``1.234,56``)
or US (``1,234.56``) separators into a float, without locale metadata.
Every amount captured anywhere in the engine goes through ``parse_amount``.
"""

import re
from typing import Optional

from src.utils.logger import get_logger

logger = get_logger(__name__)

_NUMERIC = re.compile(r'-?(?:\d+(?:\.\d*)?|\.\d+)')


def normalize_separators(amount_str: str) -> str:
    """
    Rewrite an amount string so that '.' is the only (decimal) separator.

    Rules, by count of commas and periods:
        - exactly one comma after every period: it is the decimal
          separator and the periods are thousands separators
        - exactly one period: commas are thousands separators
        - no separators: unchanged
        - several periods: the last one is decimal, all other periods and
          all commas are dropped
        - several commas: the last one is decimal, the others are dropped

    Example:
        >>> normalize_separators("1.234,56")
        '1234.56'
        >>> normalize_separators("1,234.56")
        '1234.56'
        >>> normalize_separators("12.34.56")
        '1234.56'
    """
    comma_count = amount_str.count(',')
    period_count = amount_str.count('.')

    if comma_count == 1 and amount_str.rfind(',') > amount_str.rfind('.'):
        idx = amount_str.rfind(',')
        return amount_str[:idx].replace('.', '') + '.' + amount_str[idx + 1:]

    if period_count == 1:
        return amount_str.replace(',', '')

    if comma_count == 0 and period_count == 0:
        return amount_str

    if period_count > 1:
        idx = amount_str.rfind('.')
        head = amount_str[:idx].replace('.', '')
        return (head + amount_str[idx:]).replace(',', '')

    # several commas, no period
    idx = amount_str.rfind(',')
    return amount_str[:idx].replace(',', '') + '.' + amount_str[idx + 1:]


def parse_amount(amount_str: Optional[str]) -> Optional[float]:
    """
    Parse an amount string with locale-ambiguous separators.

    Args:
        amount_str: Digits with optional '.'/',' separators.

    Returns:
        The parsed value, or None when the string is not numeric.

    Example:
        >>> parse_amount("1.234,56")
        1234.56
        >>> parse_amount("1,234.56")
        1234.56
        >>> parse_amount("12abc") is None
        True
    """
    if not amount_str:
        return None

    normalized = normalize_separators(amount_str.strip())

    if not _NUMERIC.fullmatch(normalized):
        logger.debug(f"Could not parse amount: '{amount_str}'")
        return None

    return float(normalized)
