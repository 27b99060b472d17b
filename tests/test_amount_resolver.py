"""
Tests for total amount and currency resolution.
"""

from src.extraction.amount_resolver import AmountResolver


class TestKeywordTiers:
    """Amounts on lines carrying a total-like keyword"""

    def test_european_total_with_euro_sign(self, make_line):
        resolver = AmountResolver()
        result = resolver.resolve([make_line("Total: €1.234,50", x=50, y=900)])
        assert result == (1234.5, "EUR")

    def test_untagged_total_uses_document_default(self, make_line):
        """No currency anywhere: the amount comes back in EUR"""
        result = AmountResolver().resolve([make_line("Total: 99.99")])
        assert result == (99.99, "EUR")

    def test_amount_due_with_dollar(self, make_line):
        result = AmountResolver().resolve([make_line("Amount Due: $1,250.00", y=800)])
        assert result == (1250.0, "USD")

    def test_us_total_beats_smaller_subtotal(self, make_line):
        """A comma-grouped total is parsed, not skipped in favour of a smaller amount"""
        lines = [
            make_line("Acme Inc", y=0),
            make_line("Total: $1,250.00", y=900),
            make_line("Subtotal 12.00", y=800),
        ]
        assert AmountResolver().resolve(lines) == (1250.0, "USD")

    def test_currency_code_after_amount(self, make_line):
        result = AmountResolver().resolve([make_line("Total 250,00 EUR", y=800)])
        assert result == (250.0, "EUR")

    def test_tagged_amount_beats_earlier_untagged_line(self, make_line):
        """Every keyword line is tried for a tagged amount before any untagged one"""
        lines = [
            make_line("Subtotal: 100.00", y=800),
            make_line("Total: $120.00", y=900),
        ]
        assert AmountResolver().resolve(lines) == (120.0, "USD")

    def test_untagged_amount_takes_currency_from_line(self, make_line):
        lines = [
            make_line("Invoice", y=0),
            make_line("Balance due: 80.00 (GBP)", y=900),
        ]
        assert AmountResolver().resolve(lines) == (80.0, "GBP")


class TestLayoutTiers:
    """Amounts found without a keyword"""

    def test_bottom_zone_preferred_over_larger_amount_above(self, make_line):
        lines = [
            make_line("Acme Ltd", y=0),
            make_line("Widget €500.00", y=300),
            make_line("€ 75,00", y=1000),
        ]
        assert AmountResolver().resolve(lines) == (75.0, "EUR")

    def test_bottom_zone_keeps_largest(self, make_line):
        lines = [
            make_line("Acme Ltd", y=0),
            make_line("$ 12.00", y=800),
            make_line("$ 40.00", y=900),
            make_line("$ 7.50", y=1000),
        ]
        assert AmountResolver().resolve(lines) == (40.0, "USD")

    def test_bottom_zone_largest_us_format(self, make_line):
        lines = [
            make_line("Acme Inc", y=0),
            make_line("$ 1,250.00", y=900),
            make_line("$ 12.00", y=1000),
        ]
        assert AmountResolver().resolve(lines) == (1250.0, "USD")

    def test_document_largest_as_last_resort(self, make_line):
        lines = [
            make_line("Acme", y=0),
            make_line("Item A 10.00", y=100),
            make_line("Item B 20.50", y=200),
            make_line("Thank you", y=1000),
        ]
        assert AmountResolver().resolve(lines) == (20.5, "EUR")


class TestSentinels:

    def test_empty_document(self):
        assert AmountResolver().resolve([]) == (0.0, "EUR")

    def test_no_amount_keeps_document_currency(self, make_line):
        """Zero amount is reported in whatever currency the page signals"""
        result = AmountResolver().resolve([make_line("Payable in $ only", y=0)])
        assert result == (0.0, "USD")
