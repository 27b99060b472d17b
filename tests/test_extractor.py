"""
End-to-end tests for the field extraction engine.
"""

from src.extraction import InvoiceFieldExtractor, InvoiceRecord, UNKNOWN, extract_invoice_fields
from src.extraction.cascade import run_cascade


def test_acme_invoice(acme_lines):
    """Vendor from the domain cross-reference, number from the header, European total"""
    record = InvoiceFieldExtractor().extract(acme_lines)

    assert record.vendor_name == "Acme Corp"
    assert record.invoice_number == "4521"
    assert record.date == UNKNOWN
    assert record.total_amount == 1234.5
    assert record.currency == "EUR"


def test_untagged_total_only(make_line):
    record = extract_invoice_fields([make_line("Total: 99.99")])

    assert record.total_amount == 99.99
    assert record.currency == "EUR"


def test_empty_document_is_all_sentinels():
    record = InvoiceFieldExtractor().extract([])

    assert record == InvoiceRecord(
        vendor_name=UNKNOWN,
        invoice_number=UNKNOWN,
        date=UNKNOWN,
        total_amount=0.0,
        currency="EUR"
    )
    assert record.extraction_rate == 0.0


def test_extraction_is_idempotent(acme_lines):
    """Same lines in, byte-identical record out"""
    extractor = InvoiceFieldExtractor()
    first = extractor.extract(acme_lines)
    second = extractor.extract(acme_lines)

    assert first == second
    assert first.to_json() == second.to_json()


def test_input_order_does_not_matter(acme_lines):
    """Lines are ordered top to bottom internally; the caller's list is untouched"""
    shuffled = list(reversed(acme_lines))
    before = list(shuffled)

    record = InvoiceFieldExtractor().extract(shuffled)

    assert record == InvoiceFieldExtractor().extract(acme_lines)
    assert shuffled == before


def test_extract_from_ocr_payload(acme_payload):
    record = InvoiceFieldExtractor().extract_from_ocr(acme_payload)

    assert record.vendor_name == "Acme Corp"
    assert record.invoice_number == "4521"
    assert record.date == "15/01/2024"
    assert record.total_amount == 1234.5
    assert record.currency == "EUR"
    assert record.missing_fields == []


def test_record_dict_round_trip(acme_lines):
    record = InvoiceFieldExtractor().extract(acme_lines)
    data = record.to_dict()

    assert data == {
        "vendor_name": "Acme Corp",
        "invoice_number": "4521",
        "date": UNKNOWN,
        "total_amount": 1234.5,
        "currency": "EUR",
    }
    assert InvoiceRecord.from_dict(data) == record


class TestCascade:
    """Ordered strategy chains"""

    def test_first_value_wins(self):
        def _never(value):
            return None

        def _double(value):
            return value * 2

        def _triple(value):
            return value * 3

        assert run_cascade("field", [_never, _double, _triple], 5) == (10, "double")

    def test_all_strategies_fail(self):
        assert run_cascade("field", [lambda: None]) == (None, None)
