"""
Tests for invoice date resolution.
"""

import pytest

from src.extraction.date_resolver import DateResolver
from src.extraction.invoice_record import UNKNOWN


@pytest.mark.parametrize("text,expected", [
    ("Invoice Date: 15/01/2024", "15/01/2024"),
    ("Issued 3-4-24", "3-4-24"),
    ("Datum 15.01.2024", "15.01.2024"),
    ("2024-01-15", "2024-01-15"),
    ("Jan 15, 2024", "Jan 15, 2024"),
    ("Sept. 5 2024", "Sept. 5 2024"),
    ("January 15, 2024", "January 15, 2024"),
    ("15 Mar 2024", "15 Mar 2024"),
    ("15 March 2024", "15 March 2024"),
])
def test_date_shapes(text, expected):
    """Numeric and month-name dates are returned exactly as written"""
    assert DateResolver().match_text(text) == expected


def test_amount_is_not_a_date():
    assert DateResolver().match_text("Total: €1.234,50") is None


def test_date_keyword_lines_come_first(make_line):
    """A labelled date wins over an unlabelled one higher up the page"""
    lines = [
        make_line("Shipped 03/03/2024", y=50),
        make_line("Invoice Date: 15/01/2024", y=200),
        make_line("Total 10.00", y=1000),
    ]
    assert DateResolver().resolve(lines) == "15/01/2024"


def test_top_half_before_rest_of_page(make_line):
    lines = [
        make_line("Ref 01/02/2024", y=900),
        make_line("Printed 10/10/2023", y=100),
    ]
    assert DateResolver().resolve(lines) == "10/10/2023"


def test_lower_half_as_last_resort(make_line):
    lines = [
        make_line("Acme Corp", y=0),
        make_line("Paid 01/02/2024", y=900),
    ]
    assert DateResolver().resolve(lines) == "01/02/2024"


def test_no_date(make_line):
    assert DateResolver().resolve([]) == UNKNOWN
    assert DateResolver().resolve([make_line("Acme Corp")]) == UNKNOWN
