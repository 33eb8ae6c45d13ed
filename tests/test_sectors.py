"""Tests for wheelgeom/geometry.py outline generators and label placement."""
import math
import pytest
from wheelgeom.geometry import (
    generate_outline_sector_data, generate_outline_line_data,
    calculate_sector_text_data, text_transform, TEXT_OFFSET_RATIO,
)
from wheelgeom.polar import polar_to_rect
from wheelgeom.types import Sector, DividerLine, TextPlacement


# ============================================================
# Outline sectors
# ============================================================

class TestOutlineSectorData:
    @pytest.mark.parametrize("n", [1, 2, 3, 7, 12, 24, 60])
    def test_count(self, n):
        assert len(generate_outline_sector_data(n, 100, 30, 90, 0)) == n

    @pytest.mark.parametrize("n", [2, 5, 24])
    def test_continuity(self, n):
        sectors = generate_outline_sector_data(n, 100, 30, 90, 45)
        for a, b in zip(sectors, sectors[1:]):
            assert a.end_inner == b.start_inner
            assert a.end_outer == b.start_outer

    def test_boundaries_are_shared_objects(self):
        sectors = generate_outline_sector_data(4, 100, 30, 90, 0)
        assert sectors[0].end_outer is sectors[1].start_outer

    def test_steps_are_one_indexed(self):
        sectors = generate_outline_sector_data(5, 100, 30, 90, 0)
        assert [s.step for s in sectors] == [1, 2, 3, 4, 5]

    def test_start_angles(self):
        sectors = generate_outline_sector_data(4, 100, 30, 90, 90)
        assert [s.angle for s in sectors] == pytest.approx([90, 180, 270, 360])

    def test_points_on_radii(self):
        s = generate_outline_sector_data(6, 100, 30, 90, 0)[2]
        assert s.start_inner == pytest.approx(polar_to_rect(100, 100, 30, s.angle))
        assert s.start_outer == pytest.approx(polar_to_rect(100, 100, 90, s.angle))

    def test_closes_the_ring(self):
        sectors = generate_outline_sector_data(8, 100, 30, 90, 10)
        assert sectors[-1].end_outer == pytest.approx(sectors[0].start_outer)

    def test_returns_sector_tuples(self):
        assert all(isinstance(s, Sector) for s in generate_outline_sector_data(3, 0, 1, 2, 0))

    @pytest.mark.parametrize("n", [0, -3])
    def test_nonpositive_count_is_empty(self, n):
        assert generate_outline_sector_data(n, 100, 30, 90, 0) == []

    def test_idempotent(self):
        a = generate_outline_sector_data(12, 100, 30, 90, 0)
        b = generate_outline_sector_data(12, 100, 30, 90, 0)
        assert a == b
        assert [s.step for s in b] == list(range(1, 13))


# ============================================================
# Divider lines
# ============================================================

class TestOutlineLineData:
    @pytest.mark.parametrize("n", [1, 3, 12, 24])
    def test_count_and_endpoints(self, n):
        lines = generate_outline_line_data(n, 100, 30, 90)
        assert len(lines) == n + 1
        assert lines[0].angle == 0
        assert lines[n].angle == 360

    def test_even_spacing(self):
        lines = generate_outline_line_data(8, 100, 30, 90)
        assert [l.angle for l in lines] == pytest.approx([45 * i for i in range(9)])

    def test_points_match_polar_conversion(self):
        for line in generate_outline_line_data(5, 100, 30, 90):
            assert line.inner == pytest.approx(polar_to_rect(100, 100, 30, line.angle))
            assert line.outer == pytest.approx(polar_to_rect(100, 100, 90, line.angle))

    def test_plain_floats(self):
        line = generate_outline_line_data(4, 100, 30, 90)[1]
        assert isinstance(line, DividerLine)
        assert type(line.angle) is float
        assert type(line.inner[0]) is float

    def test_zero_sectors_gives_nan_line(self):
        lines = generate_outline_line_data(0, 100, 30, 90)
        assert len(lines) == 1
        assert math.isnan(lines[0].angle)

    def test_idempotent(self):
        assert generate_outline_line_data(6, 50, 10, 40) == generate_outline_line_data(6, 50, 10, 40)


# ============================================================
# Label placement
# ============================================================

class TestSectorTextData:
    def test_midpoint(self):
        p = calculate_sector_text_data(100, 90, 0, 30)
        assert p.text_angle == 15
        assert isinstance(p.flip, bool)
        assert p.text_offset > 0
        assert isinstance(p.text_center[0], float)
        assert isinstance(p.text_center[1], float)

    def test_wraparound_midpoint(self):
        p = calculate_sector_text_data(100, 90, 350, 10)
        assert p.text_angle == 360
        assert p.flip is False
        assert p.text_center == pytest.approx(polar_to_rect(100, 100, 90, 0))

    @pytest.mark.parametrize("start, end, flip", [
        (0, 30, False),
        (80, 100, True),      # 90 is flipped
        (250, 290, False),    # 270 is not
        (200, 220, True),
        (300, 340, False),
    ])
    def test_flip_band(self, start, end, flip):
        assert calculate_sector_text_data(100, 90, start, end).flip is flip

    def test_center_and_offset(self):
        p = calculate_sector_text_data(100, 90, 0, 60)
        assert p.text_center == pytest.approx(polar_to_rect(100, 100, 90, 30))
        assert p.text_offset == pytest.approx(90 * TEXT_OFFSET_RATIO)


class TestTextTransform:
    def test_unflipped(self):
        t = text_transform(TextPlacement(15, False, (110.0, 80.0), 4.0), 100)
        assert t.text_anchor == "start"
        assert t.rotation == 15
        assert (t.x, t.y) == (14.0, -20.0)
        assert t.origin == (10.0, -20.0)

    def test_flipped(self):
        t = text_transform(TextPlacement(180, True, (190.0, 100.0), 4.0), 100)
        assert t.text_anchor == "end"
        assert t.rotation == 360
        assert (t.x, t.y) == (86.0, 0.0)
        assert t.origin == (90.0, 0.0)
