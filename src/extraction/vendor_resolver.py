"""
Vendor Name Resolver.

The vendor is usually printed in the top-left "logo zone" (top 30% of
the height, left half of the width), often next to its street address,
and its name usually echoes the website or e-mail domain printed
somewhere on the page. The strategies below exploit those conventions in
order of reliability:

    1. logo line cross-referenced with a domain found anywhere
    2. line directly above the first street address in the logo zone
    3. first logo line that is not a document title
    4. readable name synthesised from a domain
    5. longest qualifying logo-zone line
    6. first non-trivial header line
"""

import re
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from src.utils.logger import get_logger
from src.ocr_reader.text_line import TextLine
from .cascade import run_cascade
from .invoice_record import UNKNOWN
from .zones import ZoneMetrics

logger = get_logger(__name__)

_HOST = r'((?:[a-z0-9][-a-z0-9]*\.)+[a-z0-9][-a-z0-9]*)'

WEBSITE_PATTERN = re.compile(r'www\.' + _HOST, re.IGNORECASE)
EMAIL_PATTERN = re.compile(r'@' + _HOST, re.IGNORECASE)
URL_PATTERN = re.compile(r'https?://' + _HOST, re.IGNORECASE)

ADDRESS_PATTERN = re.compile(
    r'(\d+\s+[a-z0-9\s,]+(?:street|st|avenue|ave|road|rd|boulevard|blvd|'
    r'lane|ln|drive|dr|way|place|pl|court|ct))',
    re.IGNORECASE
)

BUSINESS_SUFFIXES = (" inc", " llc", " ltd", " limited", " corp", " corporation", " co", " company")
DOMAIN_PREFIXES = ("www", "mail", "info", "support", "contact", "sales")

MAX_LOGO_CANDIDATES = 3


def clean_for_comparison(text: str) -> str:
    """
    Lowercase, drop a trailing business suffix, keep only [a-z0-9].

    Example:
        >>> clean_for_comparison("Acme Corp")
        'acme'
        >>> clean_for_comparison("acme-corp")
        'acmecorp'
    """
    text = text.lower()
    for suffix in BUSINESS_SUFFIXES:
        if text.endswith(suffix):
            text = text[:-len(suffix)]
    return re.sub(r'[^a-z0-9]', '', text)


def domain_to_readable_name(domain_part: str) -> str:
    """
    Turn the main part of a domain into a display name.

    Example:
        >>> domain_to_readable_name("acme-corp")
        'Acme Corp'
        >>> domain_to_readable_name("infoGlobexTrading")
        'Globex Trading'
    """
    for prefix in DOMAIN_PREFIXES:
        if domain_part.lower().startswith(prefix):
            domain_part = domain_part[len(prefix):]
            break

    text = re.sub(r'[^a-zA-Z0-9]', ' ', domain_part)
    text = re.sub(r'([a-z])([A-Z])', r'\1 \2', text)

    return ' '.join(word[:1].upper() + word[1:].lower() for word in text.split())


def _main_part(domain: str) -> str:
    return domain.split('.')[0]


def _strip_www(domain: str) -> str:
    if domain.lower().startswith('www.'):
        return domain[4:]
    return domain


@dataclass
class DomainEvidence:
    """Domains found on the page and the first label of each."""
    website_domains: List[str] = field(default_factory=list)
    email_domains: List[str] = field(default_factory=list)
    main_parts: List[str] = field(default_factory=list)

    @property
    def all_domains(self) -> List[str]:
        return self.website_domains + self.email_domains

    @classmethod
    def collect(cls, lines: Sequence[TextLine]) -> 'DomainEvidence':
        evidence = cls()
        for line in lines:
            for domain in WEBSITE_PATTERN.findall(line.text):
                evidence.website_domains.append(domain)
                evidence.main_parts.append(_main_part(domain))

            for domain in EMAIL_PATTERN.findall(line.text):
                evidence.email_domains.append(domain)
                evidence.main_parts.append(_main_part(domain))

            for domain in URL_PATTERN.findall(line.text):
                domain = _strip_www(domain)
                evidence.website_domains.append(domain)
                evidence.main_parts.append(_main_part(domain))
        return evidence


@dataclass
class VendorContext:
    """Inputs shared by all vendor strategies for one document."""
    zones: ZoneMetrics
    logo_lines: List[TextLine]
    header_lines: List[TextLine]
    logo_candidates: List[str]
    domains: DomainEvidence


class VendorNameResolver:
    """
    Resolves the vendor (seller) name.

    Example:
        >>> lines = [TextLine("Acme Corp", x=50, y=40),
        ...          TextLine("www.acmecorp.com", x=50, y=600),
        ...          TextLine("Total: 10.00", x=600, y=900)]
        >>> VendorNameResolver().resolve(lines)
        'Acme Corp'
    """

    TITLE_WORDS = ("invoice", "bill", "receipt", "statement")
    LABEL_WORDS = TITLE_WORDS + ("account", "date", "number")
    ADDRESS_EXCLUDED = ("invoice", "bill")

    def resolve(self, lines: Sequence[TextLine]) -> str:
        """
        Resolve the vendor name.

        Returns:
            Vendor name, or "UNKNOWN".
        """
        if not lines:
            return UNKNOWN

        context = self.build_context(lines)

        strategies = (
            self._domain_cross_reference,
            self._address_adjacency,
            self._first_untitled_logo_line,
            self._domain_synthesis,
            self._longest_logo_line,
            self._first_header_line,
        )
        value, _ = run_cascade("vendor_name", strategies, context)
        return value if value is not None else UNKNOWN

    def build_context(self, lines: Sequence[TextLine]) -> VendorContext:
        zones = ZoneMetrics.from_lines(lines)

        header_lines = sorted((l for l in lines if zones.in_header_zone(l)), key=lambda l: l.y)
        logo_lines = [l for l in header_lines if zones.in_logo_zone(l)]

        logo_candidates = []
        for line in logo_lines:
            text = line.text.strip()
            if len(text) > 2:
                logo_candidates.append(text)
            if len(logo_candidates) >= MAX_LOGO_CANDIDATES:
                break

        return VendorContext(
            zones=zones,
            logo_lines=logo_lines,
            header_lines=header_lines,
            logo_candidates=logo_candidates,
            domains=DomainEvidence.collect(lines)
        )

    @staticmethod
    def _matches_domain(candidate: str, domain_part: str, min_reverse_length: int = 0) -> bool:
        clean_candidate = clean_for_comparison(candidate)
        clean_part = clean_for_comparison(domain_part)
        if not clean_candidate or not clean_part:
            return False

        if clean_part in clean_candidate:
            return True
        return clean_candidate in clean_part and len(candidate) >= min_reverse_length

    # ------------------------------------------------------------------
    # Strategies
    # ------------------------------------------------------------------

    def _domain_cross_reference(self, context: VendorContext) -> Optional[str]:
        for domain_part in context.domains.main_parts:
            for candidate in context.logo_candidates:
                if self._matches_domain(candidate, domain_part, min_reverse_length=4):
                    return candidate
        return None

    def _address_adjacency(self, context: VendorContext) -> Optional[str]:
        logo_lines = context.logo_lines

        for index, line in enumerate(logo_lines):
            if not ADDRESS_PATTERN.search(line.text):
                continue

            # only the first address line is considered
            if index == 0:
                return None

            company = logo_lines[index - 1].text.strip()

            for domain_part in context.domains.main_parts:
                if self._matches_domain(company, domain_part):
                    return company

            lower_company = company.lower()
            if len(company) > 3 and not any(word in lower_company for word in self.ADDRESS_EXCLUDED):
                return company
            return None

        return None

    def _first_untitled_logo_line(self, context: VendorContext) -> Optional[str]:
        for candidate in context.logo_candidates:
            lower_text = candidate.lower()
            if not any(word in lower_text for word in self.TITLE_WORDS):
                return candidate
        return None

    def _domain_synthesis(self, context: VendorContext) -> Optional[str]:
        unique_domains = list(dict.fromkeys(context.domains.all_domains))

        names = [domain_to_readable_name(_main_part(domain)) for domain in unique_domains]
        names = [name for name in names if name]
        if not names:
            return None

        return max(names, key=len)

    def _longest_logo_line(self, context: VendorContext) -> Optional[str]:
        candidates = []
        for line in context.logo_lines:
            text = line.text.strip()
            lower_text = text.lower()
            if len(text) > 3 and not any(word in lower_text for word in self.LABEL_WORDS):
                candidates.append(text)

        if not candidates:
            return None

        candidates.sort(key=len, reverse=True)
        for name in candidates:
            if len(name.split()) > 1:
                return name
        return candidates[0]

    def _first_header_line(self, context: VendorContext) -> Optional[str]:
        for line in context.header_lines:
            text = line.text.strip()
            if len(text) > 3:
                return text
        return None
