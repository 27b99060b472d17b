"""
Scan Result Data Class.

Wraps the extracted InvoiceRecord with the audit information kept for
each scanned document: where it came from, the raw text the fields were
read from, and how the scan went.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional
import json

from src.extraction.invoice_record import InvoiceRecord


@dataclass
class ScanResult:
    """
    Result of scanning one document.

    Attributes:
        record: Extracted invoice fields
        raw_text: Document text the fields were extracted from
        source_file: Source filename, None for in-memory payloads
        normalized_date: Record date in the configured output format,
            None when it could not be parsed
        line_count: Number of text lines seen by the extractor
        processing_time: Seconds spent scanning
        scan_timestamp: When the scan was performed (ISO 8601)
        success: Whether the scan completed
        errors: Errors encountered

    Example:
        >>> result = scanner.scan_file("invoice_ocr.json")
        >>> result.record.invoice_number
        '4521'
        >>> result.normalized_date
        '2024-01-15'
    """
    record: InvoiceRecord = field(default_factory=InvoiceRecord)
    raw_text: str = ""
    source_file: Optional[str] = None
    normalized_date: Optional[str] = None
    line_count: int = 0
    processing_time: float = 0.0
    scan_timestamp: Optional[str] = None
    success: bool = True
    errors: List[str] = field(default_factory=list)

    def __post_init__(self):
        if self.scan_timestamp is None:
            self.scan_timestamp = datetime.now().isoformat()

    def add_error(self, error: str) -> None:
        """Add an error message and mark the scan as failed."""
        self.errors.append(error)
        self.success = False

    def to_dict(self, include_raw_text: bool = True) -> Dict[str, Any]:
        """
        Convert to dictionary format.

        Record fields are flattened to the top level next to the scan
        metadata.

        Args:
            include_raw_text: Whether to include the raw document text.
        """
        data = self.record.to_dict()
        data.update({
            'normalized_date': self.normalized_date,
            'source_file': self.source_file,
            'line_count': self.line_count,
            'processing_time': round(self.processing_time, 4),
            'scan_timestamp': self.scan_timestamp,
            'success': self.success,
            'errors': list(self.errors),
        })
        if include_raw_text:
            data['raw_text'] = self.raw_text
        return data

    def to_json(self, indent: int = 2, include_raw_text: bool = True) -> str:
        return json.dumps(
            self.to_dict(include_raw_text=include_raw_text),
            indent=indent,
            ensure_ascii=False
        )

    def __repr__(self) -> str:
        return (
            f"ScanResult(source='{self.source_file}', "
            f"record={self.record!r}, "
            f"success={self.success})"
        )
