"""
Tests for document extents and zone classification.
"""

from src.extraction.zones import ZoneMetrics, analyze_zones


class TestZoneMetrics:
    """Extents come from the largest observed x and y"""

    def test_extents_from_lines(self, make_line):
        """max_x and max_y are the largest line coordinates"""
        zones = analyze_zones([
            make_line("a", x=10, y=900),
            make_line("b", x=650, y=20),
        ])
        assert zones.max_x == 650
        assert zones.max_y == 900

    def test_empty_document_has_zero_extents(self):
        zones = ZoneMetrics.from_lines([])
        assert zones.max_x == 0
        assert zones.max_y == 0
        assert zones.is_top_30(0) is False

    def test_top_30_boundary(self, make_line):
        """Lines at 0% and 29% of the height are top 30%, a line at 31% is not"""
        max_y = 1000
        lines = [
            make_line("first", y=0),
            make_line("second", y=int(max_y * 0.29)),
            make_line("third", y=int(max_y * 0.31)),
            make_line("footer", y=max_y),
        ]
        zones = ZoneMetrics.from_lines(lines)

        top = [line.text for line in lines if zones.in_header_zone(line)]
        assert top == ["first", "second"]

    def test_bottom_30_is_strictly_below_threshold(self):
        zones = ZoneMetrics(max_x=600, max_y=1000)
        assert zones.is_bottom_30(701) is True
        assert zones.is_bottom_30(700) is False

    def test_halves_exclude_the_midline(self):
        """A line exactly at half width is neither left nor right"""
        zones = ZoneMetrics(max_x=600, max_y=1000)
        assert zones.is_left_half(299) is True
        assert zones.is_right_half(301) is True
        assert zones.is_left_half(300) is False
        assert zones.is_right_half(300) is False

    def test_named_regions(self, make_line):
        zones = ZoneMetrics(max_x=650, max_y=900)

        assert zones.in_logo_zone(make_line("Acme Corp", x=50, y=40)) is True
        assert zones.in_logo_zone(make_line("INVOICE", x=600, y=50)) is False
        assert zones.in_top_right_zone(make_line("INVOICE", x=600, y=50)) is True
        assert zones.in_top_right_zone(make_line("Total", x=600, y=850)) is False
