import math

import pytest

from tank_assault.core.geometry import (
    normalize_angle,
    point_in_rect,
    point_near,
    rects_overlap,
    square_overlaps_rect,
    within_bounds,
)


def test_touching_rectangles_do_not_overlap():
    assert rects_overlap(0, 0, 10, 10, 10, 0, 10, 10) is False
    assert rects_overlap(0, 0, 10, 10, 9.5, 0, 10, 10) is True


def test_square_overlap_uses_half_extent():
    assert square_overlaps_rect(85, 100, 15, 100, 50, 20, 100) is False
    assert square_overlaps_rect(86, 100, 15, 100, 50, 20, 100) is True


def test_point_in_rect_is_strict():
    assert point_in_rect(100, 120, 100, 100, 50, 50) is False
    assert point_in_rect(100.5, 120, 100, 100, 50, 50) is True
    assert point_in_rect(150, 120, 100, 100, 50, 50) is False


def test_point_near_is_exclusive():
    assert point_near(3, 4, 0, 0, 5) is False
    assert point_near(3, 3.9, 0, 0, 5) is True


def test_within_bounds_includes_margin_edges():
    assert within_bounds(15, 15, 1200, 800, margin=15)
    assert within_bounds(1185, 785, 1200, 800, margin=15)
    assert not within_bounds(14.9, 400, 1200, 800, margin=15)


@pytest.mark.parametrize(
    "angle, expected",
    [
        (0.0, 0.0),
        (math.pi, math.pi),
        (-math.pi, math.pi),
        (3 * math.pi / 2, -math.pi / 2),
        (-5 * math.pi / 2, -math.pi / 2),
    ],
)
def test_normalize_angle_range(angle, expected):
    assert normalize_angle(angle) == pytest.approx(expected)
