"""Tests for path length and Douglas-Peucker simplification."""

import math

import numpy as np
import pytest

from shapesight.utils.contour import (
    douglas_peucker,
    path_perimeter,
    perpendicular_distances,
    simplify_epsilon,
)


ZIGZAG = [(0, 0), (1, 2), (2, 0), (3, 2), (4, 0)]


def test_path_perimeter_closed_and_open():
    square = [(0, 0), (1, 0), (1, 1), (0, 1)]
    assert path_perimeter(square) == pytest.approx(4.0)
    assert path_perimeter(square, closed=False) == pytest.approx(3.0)


def test_path_perimeter_degenerate():
    assert path_perimeter([]) == 0.0
    assert path_perimeter([(3, 3)]) == 0.0


def test_perpendicular_distances():
    pts = np.array([[5, 3], [20, 4], [0, 0]], dtype=np.float64)
    a = np.array([0.0, 0.0])
    b = np.array([10.0, 0.0])
    # A point beyond the segment still measures to the infinite line
    assert perpendicular_distances(pts, a, b).tolist() == pytest.approx([3.0, 4.0, 0.0])


def test_perpendicular_distances_zero_length_chord():
    pts = np.array([[3, 4]], dtype=np.float64)
    origin = np.zeros(2)
    assert perpendicular_distances(pts, origin, origin)[0] == pytest.approx(5.0)


def test_simplify_epsilon_floor():
    assert simplify_epsilon(100.0, 0.02) == 4.0
    assert simplify_epsilon(1000.0, 0.02) == pytest.approx(20.0)


def test_douglas_peucker_zero_epsilon_keeps_everything():
    assert douglas_peucker(ZIGZAG, 0.0) == ZIGZAG


def test_douglas_peucker_huge_epsilon_keeps_endpoints():
    assert douglas_peucker(ZIGZAG, 1e9) == [(0, 0), (4, 0)]


def test_douglas_peucker_short_input_copied():
    pts = [(0, 0), (5, 5)]
    out = douglas_peucker(pts, 1.0)
    assert out == pts
    assert out is not pts


def test_douglas_peucker_keeps_corner():
    path = [(x, 0) for x in range(11)] + [(10, y) for y in range(1, 11)]
    assert douglas_peucker(path, 1.0) == [(0, 0), (10, 0), (10, 10)]


def test_douglas_peucker_long_path_is_iterative():
    path = [(i, i % 2) for i in range(10001)]
    out = douglas_peucker(path, 0.1)
    assert out[0] == path[0]
    assert out[-1] == path[-1]
    assert len(out) == len(path)


def test_douglas_peucker_closed_loop_same_endpoints():
    circle = [
        (round(50 * math.cos(t / 50 * 2 * math.pi)), round(50 * math.sin(t / 50 * 2 * math.pi)))
        for t in range(51)
    ]
    out = douglas_peucker(circle, 2.0)
    assert out[0] == circle[0]
    assert out[-1] == circle[-1]
    assert 3 < len(out) < len(circle)


def test_douglas_peucker_tie_keeps_earliest_point():
    # (1, 2) and (3, 2) are both exactly 2 from the chord; the first one splits
    assert douglas_peucker(ZIGZAG, 1.9) == [(0, 0), (1, 2), (4, 0)]
