"""
Invoice Record Data Class.

The structured result of field extraction for one document.
"""

from dataclasses import dataclass
from typing import Any, Dict
import json

UNKNOWN = "UNKNOWN"


@dataclass(frozen=True)
class InvoiceRecord:
    """
    Extracted invoice header fields.

    Text fields hold either the recognised value or ``"UNKNOWN"``; the
    amount is 0.0 when no total was found.

    Attributes:
        vendor_name: Name of the seller
        invoice_number: Invoice / reference number
        date: Date text exactly as printed
        total_amount: Total amount due
        currency: One of USD, EUR, GBP

    Example:
        >>> record = InvoiceRecord(
        ...     vendor_name="Acme Corp",
        ...     invoice_number="4521",
        ...     date="15/01/2024",
        ...     total_amount=1234.5,
        ...     currency="EUR"
        ... )
        >>> record.missing_fields
        []
    """
    vendor_name: str = UNKNOWN
    invoice_number: str = UNKNOWN
    date: str = UNKNOWN
    total_amount: float = 0.0
    currency: str = "EUR"

    @property
    def missing_fields(self) -> list:
        """Names of fields the engine could not resolve."""
        missing = [
            name for name in ('vendor_name', 'invoice_number', 'date')
            if getattr(self, name) == UNKNOWN
        ]
        if self.total_amount == 0.0:
            missing.append('total_amount')
        return missing

    @property
    def extraction_rate(self) -> float:
        """Percentage of the four fields that were resolved (0-100)."""
        return (4 - len(self.missing_fields)) / 4 * 100

    def to_dict(self) -> Dict[str, Any]:
        return {
            'vendor_name': self.vendor_name,
            'invoice_number': self.invoice_number,
            'date': self.date,
            'total_amount': self.total_amount,
            'currency': self.currency
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'InvoiceRecord':
        return cls(
            vendor_name=data.get('vendor_name', UNKNOWN),
            invoice_number=data.get('invoice_number', UNKNOWN),
            date=data.get('date', UNKNOWN),
            total_amount=float(data.get('total_amount', 0.0)),
            currency=data.get('currency', "EUR")
        )

    def __repr__(self) -> str:
        return (
            f"InvoiceRecord("
            f"vendor={self.vendor_name!r}, "
            f"invoice={self.invoice_number!r}, "
            f"date={self.date!r}, "
            f"total={self.total_amount:.2f} {self.currency})"
        )
