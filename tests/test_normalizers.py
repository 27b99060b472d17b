"""
Tests for date normalisation used in scan reports.
"""

import pytest

from config import ConfigurationManager
from src.extraction.invoice_record import UNKNOWN
from src.postprocessor import DateNormalizer


@pytest.mark.parametrize("raw,expected", [
    ("15/01/2024", "2024-01-15"),
    ("15.01.2024", "2024-01-15"),
    ("2024-01-15", "2024-01-15"),
    ("01/15/2024", "2024-01-15"),
    ("January 15, 2024", "2024-01-15"),
    ("Jan. 15th, 2024", "2024-01-15"),
    ("15 Mar 2024", "2024-03-15"),
])
def test_normalize_to_iso(raw, expected):
    assert DateNormalizer().normalize(raw) == expected


def test_ambiguous_dates_are_day_first_by_default():
    assert DateNormalizer().normalize("03/04/2024") == "2024-04-03"


def test_month_first_when_configured(tmp_path):
    config_file = tmp_path / "settings.yaml"
    config_file.write_text(
        "postprocessing:\n"
        "  date:\n"
        "    output_format: '%d %b %Y'\n"
        "    dayfirst: false\n",
        encoding="utf-8"
    )
    ConfigurationManager(str(config_file))

    normalizer = DateNormalizer()
    assert normalizer.normalize("03/04/2024") == "04 Mar 2024"


@pytest.mark.parametrize("raw", [UNKNOWN, "", None, "99/99/9999", "not a date"])
def test_unparseable_dates_give_none(raw):
    normalizer = DateNormalizer()
    assert normalizer.normalize(raw) is None
    assert normalizer.is_valid_date(raw or "") is False
