"""
Tests for locale-ambiguous amount parsing.
"""

import pytest

from src.extraction.number_parser import normalize_separators, parse_amount


@pytest.mark.parametrize("text,expected", [
    ("1.234,56", 1234.56),
    ("1,234.56", 1234.56),
    ("1234.56", 1234.56),
    ("1234,56", 1234.56),
    ("12.34.56", 1234.56),
    ("1.234.567,89", 1234567.89),
    ("1,234,567.89", 1234567.89),
    ("1234", 1234.0),
])
def test_parse_amount_separator_rules(text, expected):
    """Comma and period are read as decimal or thousands separators by count"""
    assert parse_amount(text) == expected


def test_several_commas_last_is_decimal():
    """With several commas and no period, only the last comma is decimal"""
    assert normalize_separators("1,234,567") == "1234.567"
    assert parse_amount("1,234,567") == 1234.567


def test_one_comma_between_periods():
    """Several periods win over a single comma placed before the last period"""
    assert parse_amount("1,234.567.89") == 1234567.89


def test_european_amount_keeps_decimals():
    """Periods before a single comma are dropped, the comma becomes the decimal point"""
    assert normalize_separators("1.234,50") == "1234.50"
    assert parse_amount("1.234,50") == 1234.5


@pytest.mark.parametrize("text,expected", [
    ("1,234.56", 1234.56),
    ("2,000.00", 2000.0),
    ("1,250.00", 1250.0),
])
def test_us_thousands_comma_before_decimal_period(text, expected):
    """A single comma followed by a period is a thousands separator"""
    assert "," not in normalize_separators(text)
    assert parse_amount(text) == expected


def test_surrounding_whitespace_is_ignored():
    assert parse_amount("  99.99 ") == 99.99


@pytest.mark.parametrize("text", ["12abc", "abc", "1.2.x", ""])
def test_non_numeric_residue_returns_none(text):
    """Unparseable input is a 'no value' signal, not an error"""
    assert parse_amount(text) is None


def test_none_returns_none():
    assert parse_amount(None) is None
