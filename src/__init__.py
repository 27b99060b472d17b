"""
Invoice Scanner - Source Package.

Heuristic extraction of invoice header fields (vendor name, invoice
number, date, total amount and currency) from OCR text lines and their
page positions. No model, no training data: layout zones, keyword
patterns and ordered fallback strategies.

Modules:
    - input_handler: Loading OCR result and text files
    - ocr_reader: OCR result model and line normalisation
    - extraction: The field extraction engine
    - postprocessor: Date normalisation for reports
    - output_handler: JSON output
    - pipeline: End-to-end scanning of one document
    - utils: Logging, exceptions and helpers

Architecture:
    Input -> OCR lines -> Field extraction -> Post-processing -> Output
"""

__version__ = "1.0.0"

__all__ = [
    'input_handler',
    'ocr_reader',
    'extraction',
    'postprocessor',
    'output_handler',
    'pipeline',
    'utils'
]
