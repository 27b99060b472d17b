"""
Input Handler Module for the Invoice Scanner.

Loading of scan inputs from disk:
    - OCR result documents (.json)
    - Plain text documents (.txt)
    - Directory discovery and batch loading
"""

from .handler import InputHandler, InputResult, OCR_JSON, PLAIN_TEXT

__all__ = ['InputHandler', 'InputResult', 'OCR_JSON', 'PLAIN_TEXT']
