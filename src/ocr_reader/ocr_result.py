"""
OCR Result Data Classes.

Typed view of the payload returned by the external OCR service
("recognize printed text"): a page is a list of regions, a region a
list of lines, a line a list of words. Every level carries a
``boundingBox`` string of the form ``"x,y,width,height"``.

Classes:
    OCRWord: Single recognised word
    OCRLine: Line of words with its bounding box string
    OCRRegion: Block of lines
    OCRResult: Complete OCR output for one page
"""

from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional
import json

from src.utils.exceptions import MalformedOCRResultError


def _mappings(items: Any) -> List[Dict[str, Any]]:
    """Object entries of a JSON array; anything else is skipped."""
    if not isinstance(items, list):
        return []
    return [item for item in items if isinstance(item, dict)]


@dataclass
class OCRWord:
    """
    A single word as recognised by the OCR service.

    Attributes:
        text: The recognised text content
        bounding_box: Raw "x,y,width,height" string, if provided
    """
    text: str = ""
    bounding_box: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'OCRWord':
        return cls(
            text=str(data.get('text') or ''),
            bounding_box=data.get('boundingBox')
        )

    def to_dict(self) -> Dict[str, Any]:
        return {'boundingBox': self.bounding_box, 'text': self.text}


@dataclass
class OCRLine:
    """
    A line of words.

    Attributes:
        words: Words in reading order
        bounding_box: Raw "x,y,width,height" string, if provided

    Example:
        >>> line = OCRLine.from_dict({
        ...     "boundingBox": "50,40,120,18",
        ...     "words": [{"text": "Acme"}, {"text": "Corp"}]
        ... })
        >>> line.text
        'Acme Corp'
    """
    words: List[OCRWord] = field(default_factory=list)
    bounding_box: Optional[str] = None

    @property
    def text(self) -> str:
        """Words concatenated with a trailing space each, then trimmed."""
        return ''.join(f"{word.text} " for word in self.words).strip()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'OCRLine':
        return cls(
            words=[OCRWord.from_dict(w) for w in _mappings(data.get('words'))],
            bounding_box=data.get('boundingBox')
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'boundingBox': self.bounding_box,
            'words': [w.to_dict() for w in self.words]
        }


@dataclass
class OCRRegion:
    """A block of lines detected by the OCR service."""
    lines: List[OCRLine] = field(default_factory=list)
    bounding_box: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'OCRRegion':
        return cls(
            lines=[OCRLine.from_dict(l) for l in _mappings(data.get('lines'))],
            bounding_box=data.get('boundingBox')
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'boundingBox': self.bounding_box,
            'lines': [l.to_dict() for l in self.lines]
        }


@dataclass
class OCRResult:
    """
    Complete OCR result for a single page.

    Attributes:
        regions: Regions in the order the OCR service returned them
        language: Detected language code
        orientation: Detected page orientation
        text_angle: Detected skew angle

    Example:
        >>> result = OCRResult.from_dict(payload)
        >>> print(f"{len(result.lines)} lines")
        >>> print(result.text)
    """
    regions: List[OCRRegion] = field(default_factory=list)
    language: Optional[str] = None
    orientation: Optional[str] = None
    text_angle: Optional[float] = None

    @property
    def lines(self) -> List[OCRLine]:
        """All lines flattened in region/line order."""
        return [line for region in self.regions for line in region.lines]

    @property
    def text(self) -> str:
        """All line texts joined with newlines."""
        return '\n'.join(line.text for line in self.lines)

    def is_empty(self) -> bool:
        return not self.lines

    @classmethod
    def from_dict(cls, data: Any) -> 'OCRResult':
        """
        Build an OCRResult from the service's JSON payload.

        Missing ``lines``/``words`` collections degrade to empty lists and
        entries that are not objects are skipped.

        Raises:
            MalformedOCRResultError: If the payload is not a mapping or its
                ``regions`` entry is not a list.
        """
        if not isinstance(data, dict):
            raise MalformedOCRResultError(
                f"expected an object at top level, got {type(data).__name__}"
            )

        regions = data.get('regions', [])
        if not isinstance(regions, list):
            raise MalformedOCRResultError("'regions' must be a list")

        return cls(
            regions=[OCRRegion.from_dict(r) for r in _mappings(regions)],
            language=data.get('language'),
            orientation=data.get('orientation'),
            text_angle=data.get('textAngle')
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'language': self.language,
            'orientation': self.orientation,
            'textAngle': self.text_angle,
            'regions': [r.to_dict() for r in self.regions]
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    def __repr__(self) -> str:
        return f"OCRResult(regions={len(self.regions)}, lines={len(self.lines)})"
