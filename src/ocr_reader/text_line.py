"""
TextLine record: one OCR line with its position on the page.
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class TextLine:
    """
    One recognised line of text in document coordinates.

    The origin is the top-left corner of the image and ``y`` grows
    downward. Instances are immutable; callers re-sort lists of lines
    rather than modifying them.

    Attributes:
        text: Trimmed, space-joined words of the line
        x: Left edge in pixels
        y: Top edge in pixels
        width: Bounding box width
        height: Bounding box height
    """
    text: str
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'text': self.text,
            'x': self.x,
            'y': self.y,
            'width': self.width,
            'height': self.height
        }

    def __repr__(self) -> str:
        return f"TextLine('{self.text}', x={self.x}, y={self.y})"
