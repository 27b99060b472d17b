"""
Line Normalizer.

Flattens the OCR region/line/word hierarchy into the list of
``TextLine`` records the extraction engine works on.

Author: Invoice Scanner Team
"""

import re
from typing import Any, Dict, List, Optional, Union

from src.utils.logger import get_logger
from .ocr_result import OCRResult
from .text_line import TextLine

logger = get_logger(__name__)

# x, y, width, height
BOUNDING_BOX_FIELDS = 4

_INTEGER = re.compile(r'-?[0-9]+')


def parse_bounding_box(bounding_box: Optional[str]) -> List[int]:
    """
    Parse a ``"x,y,width,height"`` string into integers.

    Each comma-separated fragment that is not a plain integer (optional
    minus sign, digits only, no whitespace) becomes 0 rather than
    invalidating the whole box. A missing box yields an empty list.

    Example:
        >>> parse_bounding_box("50,40,120,18")
        [50, 40, 120, 18]
        >>> parse_bounding_box("50,abc,120,18")
        [50, 0, 120, 18]
        >>> parse_bounding_box(None)
        []
    """
    if bounding_box is None:
        return []

    return [
        int(part) if _INTEGER.fullmatch(part) else 0
        for part in str(bounding_box).split(',')
    ]


def normalize_lines(ocr_result: Union[OCRResult, Dict[str, Any]]) -> List[TextLine]:
    """
    Convert an OCR result into TextLine records.

    Output order is the OCR service's own region/line order. Lines whose
    bounding box yields fewer than four integers are dropped.

    Args:
        ocr_result: An OCRResult or the raw JSON payload.

    Returns:
        List of TextLine records.
    """
    if not isinstance(ocr_result, OCRResult):
        ocr_result = OCRResult.from_dict(ocr_result)

    lines = []
    dropped = 0

    for ocr_line in ocr_result.lines:
        box = parse_bounding_box(ocr_line.bounding_box)
        if len(box) < BOUNDING_BOX_FIELDS:
            dropped += 1
            continue

        x, y, width, height = box[:BOUNDING_BOX_FIELDS]
        lines.append(TextLine(text=ocr_line.text, x=x, y=y, width=width, height=height))

    if dropped:
        logger.debug(f"Dropped {dropped} line(s) without a usable bounding box")
    logger.debug(f"Normalized {len(lines)} text lines")

    return lines
