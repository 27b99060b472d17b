"""
OCR Reader Module for the Invoice Scanner.

Reads the output of the external OCR service and turns it into the
canonical line records consumed by the extraction engine:
    - OCR result data classes (region -> line -> word)
    - Bounding box parsing
    - Line normalisation into TextLine records
"""

from .ocr_result import OCRResult, OCRRegion, OCRLine, OCRWord
from .text_line import TextLine
from .line_normalizer import normalize_lines, parse_bounding_box

__all__ = [
    'OCRResult',
    'OCRRegion',
    'OCRLine',
    'OCRWord',
    'TextLine',
    'normalize_lines',
    'parse_bounding_box'
]
