"""
Tests for vendor name resolution and its domain helpers.
"""

import pytest

from src.extraction.invoice_record import UNKNOWN
from src.extraction.vendor_resolver import (
    DomainEvidence,
    VendorNameResolver,
    clean_for_comparison,
    domain_to_readable_name,
)


@pytest.fixture
def resolver():
    return VendorNameResolver()


class TestHelpers:

    @pytest.mark.parametrize("text,expected", [
        ("Acme Corp", "acme"),
        ("Globex, Inc", "globex"),
        ("acme-corp", "acmecorp"),
        ("Initech LLC", "initech"),
    ])
    def test_clean_for_comparison(self, text, expected):
        assert clean_for_comparison(text) == expected

    @pytest.mark.parametrize("domain,expected", [
        ("acme-corp", "Acme Corp"),
        ("infoGlobexTrading", "Globex Trading"),
        ("initech", "Initech"),
        ("WWWumbrella_corp", "Umbrella Corp"),
    ])
    def test_domain_to_readable_name(self, domain, expected):
        assert domain_to_readable_name(domain) == expected

    def test_domain_evidence(self, make_line):
        """Websites, e-mail addresses and URLs all contribute a main part"""
        evidence = DomainEvidence.collect([
            make_line("www.acmecorp.com"),
            make_line("billing@initech.co.uk"),
            make_line("https://globex.io/contact"),
        ])
        assert evidence.website_domains == ["acmecorp.com", "globex.io"]
        assert evidence.email_domains == ["initech.co.uk"]
        assert evidence.main_parts == ["acmecorp", "initech", "globex"]


class TestStrategies:
    """Each fallback in the chain, in order"""

    def test_domain_cross_reference(self, resolver, acme_lines):
        assert resolver.resolve(acme_lines) == "Acme Corp"

    def test_domain_match_beats_first_logo_line(self, resolver, make_line):
        lines = [
            make_line("Sales Office", x=50, y=10),
            make_line("Initech", x=50, y=40),
            make_line("billing@initech.com", x=50, y=900),
            make_line("Total 10.00", x=600, y=900),
        ]
        assert resolver.resolve(lines) == "Initech"

    def test_line_above_street_address(self, resolver, make_line):
        lines = [
            make_line("Northwind", x=50, y=10),
            make_line("Northwind Traders Ltd", x=50, y=40),
            make_line("12 Main Street", x=50, y=70),
            make_line("Total 10.00", x=600, y=1000),
        ]
        assert resolver.resolve(lines) == "Northwind Traders Ltd"

    def test_first_logo_line_without_title(self, resolver, make_line):
        lines = [
            make_line("INVOICE", x=50, y=10),
            make_line("Globex Trading", x=50, y=40),
            make_line("Total 10.00", x=600, y=1000),
        ]
        assert resolver.resolve(lines) == "Globex Trading"

    def test_name_from_domain(self, resolver, make_line):
        """No logo zone text: the name is built from the e-mail domain"""
        lines = [
            make_line("INVOICE", x=500, y=10),
            make_line("Contact: info@globex-trading.com", x=500, y=900),
        ]
        assert resolver.resolve(lines) == "Globex Trading"

    def test_longest_logo_line(self, resolver, make_line):
        """Used when the first logo lines are all document titles"""
        lines = [
            make_line("INVOICE", x=50, y=10),
            make_line("Bill To:", x=50, y=40),
            make_line("Receipt copy", x=50, y=70),
            make_line("Acme Widgets Ltd", x=50, y=100),
            make_line("Total 10.00", x=600, y=1000),
        ]
        assert resolver.resolve(lines) == "Acme Widgets Ltd"

    def test_first_header_line(self, resolver, make_line):
        lines = [
            make_line("INVOICE 2024", x=500, y=10),
            make_line("Total 5.00", x=500, y=1000),
        ]
        assert resolver.resolve(lines) == "INVOICE 2024"

    def test_empty_document(self, resolver):
        assert resolver.resolve([]) == UNKNOWN
