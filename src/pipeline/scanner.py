"""
Invoice Scanner Pipeline.

Runs one document through the full scan:

    load file -> normalise OCR lines -> extract fields -> normalise date

OCR result documents go through the positional engine; plain text files
go through the position-free fallback extractor.

Usage:
    from src.pipeline import InvoiceScanner

    scanner = InvoiceScanner()
    result = scanner.scan_file("invoice_ocr.json")
    print(result.record.vendor_name, result.normalized_date)
"""

import time
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from src.utils.logger import get_logger
from src.utils.exceptions import InvoiceScanError
from src.input_handler.handler import InputHandler, InputResult, OCR_JSON
from src.ocr_reader.line_normalizer import normalize_lines
from src.ocr_reader.ocr_result import OCRResult
from src.extraction.extractor import InvoiceFieldExtractor
from src.extraction.text_extractor import TextInvoiceExtractor
from src.postprocessor.normalizers import DateNormalizer
from .scan_result import ScanResult

logger = get_logger(__name__)


class InvoiceScanner:
    """
    End-to-end scanner for OCR result and plain text documents.

    Attributes:
        input_handler: Loads files from disk
        extractor: Positional field extractor
        text_extractor: Fallback extractor for unpositioned text
        date_normalizer: Converts extracted dates to the report format
    """

    def __init__(self) -> None:
        self.input_handler = InputHandler()
        self.extractor = InvoiceFieldExtractor()
        self.text_extractor = TextInvoiceExtractor()
        self.date_normalizer = DateNormalizer()

    def scan_file(self, filepath: Union[str, Path]) -> ScanResult:
        """
        Scan a single file.

        Loading failures are reported in the returned result rather than
        raised, so batch runs carry on.

        Args:
            filepath: Path to a ``.json`` OCR result or a ``.txt`` file.
        """
        start_time = time.time()
        loaded = self.input_handler.load(filepath)

        if not loaded.success:
            result = ScanResult(source_file=loaded.filename)
            result.add_error(loaded.error)
            result.processing_time = time.time() - start_time
            return result

        result = self._scan_loaded(loaded)
        result.processing_time = time.time() - start_time
        return result

    def scan_files(self, filepaths: List[Union[str, Path]]) -> List[ScanResult]:
        """Scan several files in order."""
        results = []
        for index, filepath in enumerate(filepaths, start=1):
            logger.info(f"Scanning [{index}/{len(filepaths)}]: {Path(filepath).name}")
            results.append(self.scan_file(filepath))
        return results

    def scan_ocr_result(
        self,
        payload: Union[OCRResult, Dict[str, Any]],
        source_file: Optional[str] = None
    ) -> ScanResult:
        """
        Scan an OCR result already in memory.

        Args:
            payload: OCRResult or the raw OCR service JSON document.
            source_file: Optional name recorded in the result.
        """
        start_time = time.time()
        result = ScanResult(source_file=source_file)

        try:
            ocr_result = payload if isinstance(payload, OCRResult) else OCRResult.from_dict(payload)
        except InvoiceScanError as e:
            logger.error(f"Cannot read OCR result{self._label(source_file)}: {e}")
            result.add_error(str(e))
            result.processing_time = time.time() - start_time
            return result

        lines = normalize_lines(ocr_result)
        if not lines:
            logger.warning(f"No usable text lines{self._label(source_file)}")

        result.record = self.extractor.extract(lines)
        result.raw_text = ocr_result.text
        result.line_count = len(lines)
        result.normalized_date = self.date_normalizer.normalize(result.record.date)
        result.processing_time = time.time() - start_time
        return result

    def scan_text(self, text: str, source_file: Optional[str] = None) -> ScanResult:
        """
        Scan plain text without positions.

        Args:
            text: Document text, one OCR line per text line.
            source_file: Optional name recorded in the result.
        """
        start_time = time.time()
        record = self.text_extractor.extract(text)

        return ScanResult(
            record=record,
            raw_text=text,
            source_file=source_file,
            normalized_date=self.date_normalizer.normalize(record.date),
            line_count=sum(1 for line in text.splitlines() if line.strip()),
            processing_time=time.time() - start_time
        )

    def _scan_loaded(self, loaded: InputResult) -> ScanResult:
        if loaded.file_type == OCR_JSON:
            return self.scan_ocr_result(loaded.content, source_file=loaded.filename)
        return self.scan_text(loaded.content, source_file=loaded.filename)

    @staticmethod
    def _label(source_file: Optional[str]) -> str:
        return f" in {source_file}" if source_file else ""
