"""
Zone Analyzer.

Derives document extents from a line list and classifies positions
into the named regions the resolvers bias toward: the header (top 30%),
the top half, the footer (bottom 30%) and the left/right halves.
"""

from dataclasses import dataclass
from typing import Iterable

from src.ocr_reader.text_line import TextLine

TOP_ZONE_RATIO = 0.3
HALF_RATIO = 0.5
BOTTOM_ZONE_RATIO = 0.7


@dataclass(frozen=True)
class ZoneMetrics:
    """
    Maximum observed line coordinates and the thresholds derived from them.

    Built fresh for every resolver call with ``ZoneMetrics.from_lines``.
    For an empty document all extents and thresholds are 0.

    Example:
        >>> zones = ZoneMetrics(max_x=600, max_y=1000)
        >>> zones.is_top_30(290), zones.is_top_30(310)
        (True, False)
    """
    max_x: int = 0
    max_y: int = 0

    @classmethod
    def from_lines(cls, lines: Iterable[TextLine]) -> 'ZoneMetrics':
        max_x = 0
        max_y = 0
        for line in lines:
            if line.x > max_x:
                max_x = line.x
            if line.y > max_y:
                max_y = line.y
        return cls(max_x=max_x, max_y=max_y)

    @property
    def top_30_threshold(self) -> float:
        return self.max_y * TOP_ZONE_RATIO

    @property
    def top_half_threshold(self) -> float:
        return self.max_y * HALF_RATIO

    @property
    def bottom_30_threshold(self) -> float:
        return self.max_y * BOTTOM_ZONE_RATIO

    @property
    def half_width_threshold(self) -> float:
        return self.max_x * HALF_RATIO

    def is_top_30(self, y: int) -> bool:
        return y < self.top_30_threshold

    def is_top_half(self, y: int) -> bool:
        return y < self.top_half_threshold

    def is_bottom_30(self, y: int) -> bool:
        return y > self.bottom_30_threshold

    def is_left_half(self, x: int) -> bool:
        return x < self.half_width_threshold

    def is_right_half(self, x: int) -> bool:
        return x > self.half_width_threshold

    def in_logo_zone(self, line: TextLine) -> bool:
        """Top 30% of the height, left half of the width."""
        return self.is_top_30(line.y) and self.is_left_half(line.x)

    def in_header_zone(self, line: TextLine) -> bool:
        """Top 30% of the height, any width."""
        return self.is_top_30(line.y)

    def in_top_right_zone(self, line: TextLine) -> bool:
        """Top 30% of the height, right half of the width."""
        return self.is_top_30(line.y) and self.is_right_half(line.x)


def analyze_zones(lines: Iterable[TextLine]) -> ZoneMetrics:
    """Compute ZoneMetrics for a line list."""
    return ZoneMetrics.from_lines(lines)
