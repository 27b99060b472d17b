"""
Currency detection helpers shared by the amount resolvers.
"""

from typing import Iterable, Optional

from src.ocr_reader.text_line import TextLine

DEFAULT_CURRENCY = "EUR"
SUPPORTED_CURRENCIES = ("USD", "EUR", "GBP")

CURRENCY_MAP = {
    "$": "USD",
    "€": "EUR",
    "£": "GBP",
    "USD": "USD",
    "EUR": "EUR",
    "GBP": "GBP",
}


def map_currency(token: Optional[str]) -> Optional[str]:
    """Map a captured symbol or ISO code (any case) to a currency code."""
    if not token:
        return None
    return CURRENCY_MAP.get(token.strip().upper())


def currency_in_line(text: str) -> Optional[str]:
    """
    Currency signalled anywhere in a single line.

    Checked in order: '$', then '€'/'eur', then '£'/'gbp'.
    """
    lower_text = text.lower()
    if "$" in text:
        return "USD"
    if "€" in text or "eur" in lower_text:
        return "EUR"
    if "£" in text or "gbp" in lower_text:
        return "GBP"
    return None


def detect_document_currency(lines: Iterable[TextLine]) -> str:
    """
    Weighted vote over every line for the document's currency.

    Each line adds 1 for '$' and 1 for 'usd'/'dollar', 1 for '£' and 1 for
    'gbp'/'pound', and 2 each for '€' and 'eur'/'euro'. No signal, or a
    tie at the top, gives the default (EUR).

    Example:
        >>> detect_document_currency([TextLine("Total € 10,00 (usd 11.00)")])
        'EUR'
    """
    counts = {currency: 0 for currency in SUPPORTED_CURRENCIES}

    for line in lines:
        text = line.text
        lower_text = text.lower()

        if "$" in text:
            counts["USD"] += 1
        if "€" in text:
            counts["EUR"] += 2
        if "£" in text:
            counts["GBP"] += 1

        if "usd" in lower_text or "dollar" in lower_text:
            counts["USD"] += 1
        if "eur" in lower_text or "euro" in lower_text:
            counts["EUR"] += 2
        if "gbp" in lower_text or "pound" in lower_text:
            counts["GBP"] += 1

    best = max(counts.values())
    if best == 0:
        return DEFAULT_CURRENCY

    leaders = [currency for currency, count in counts.items() if count == best]
    if len(leaders) > 1:
        return DEFAULT_CURRENCY
    return leaders[0]
