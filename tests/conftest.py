"""
Pytest configuration and shared fixtures.
"""

import pytest

from config import ConfigurationManager
from src.ocr_reader.text_line import TextLine


@pytest.fixture(autouse=True)
def reset_config():
    """Give every test a freshly loaded configuration"""
    ConfigurationManager.reset()
    yield
    ConfigurationManager.reset()


@pytest.fixture
def make_line():
    """Factory for TextLine records: make_line("Total: 5.00", x=50, y=900)"""
    def _make(text, x=0, y=0, width=100, height=20):
        return TextLine(text=text, x=x, y=y, width=width, height=height)
    return _make


@pytest.fixture
def acme_lines(make_line):
    """Four-line invoice: title top right, vendor top left, website mid page, total at the bottom"""
    return [
        make_line("INVOICE #4521", x=600, y=50),
        make_line("Acme Corp", x=50, y=40),
        make_line("www.acmecorp.com", x=50, y=600),
        make_line("Total: €1.234,50", x=50, y=900),
    ]


def _ocr_line(text, box):
    return {
        "boundingBox": box,
        "words": [{"boundingBox": box, "text": word} for word in text.split()],
    }


@pytest.fixture
def acme_payload():
    """OCR service result for the Acme invoice, with a dated header"""
    return {
        "language": "en",
        "orientation": "Up",
        "textAngle": 0.0,
        "regions": [
            {
                "boundingBox": "50,40,200,30",
                "lines": [
                    _ocr_line("Acme Corp", "50,40,120,18"),
                ],
            },
            {
                "boundingBox": "600,50,200,60",
                "lines": [
                    _ocr_line("INVOICE #4521", "600,50,150,18"),
                    _ocr_line("Date: 15/01/2024", "600,80,150,18"),
                ],
            },
            {
                "boundingBox": "50,600,300,320",
                "lines": [
                    _ocr_line("www.acmecorp.com", "50,600,160,14"),
                    _ocr_line("Total: €1.234,50", "50,900,180,18"),
                ],
            },
        ],
    }
