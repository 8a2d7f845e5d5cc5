# src/tests/test_geometry.py
from __future__ import annotations

from src.minigun.geometry import boxes_overlap, circle_hits_box, horizontal_overlap, spans_overlap
from src.minigun.level import Platform


def test_spans_closed_intervals():
    assert spans_overlap(0, 10, 10, 20)      # touching counts
    assert not spans_overlap(0, 10, 10.001, 20)
    assert spans_overlap(5, 6, 0, 20)


def test_boxes_touching_edges_overlap():
    a = Platform(0, 0, 10, 10)
    assert boxes_overlap(a, Platform(10, 10, 5, 5))
    assert not boxes_overlap(a, Platform(10.5, 0, 5, 5))
    assert horizontal_overlap(a, Platform(5, 100, 5, 5))


def test_circle_vs_box():
    box = Platform(100, 100, 48, 64)
    assert circle_hits_box(124, 132, 6, box)        # centre inside
    assert circle_hits_box(94, 132, 6, box)         # exactly r from left edge
    assert not circle_hits_box(93.9, 132, 6, box)
    # corner: distance sqrt(3^2 + 4^2) = 5
    assert circle_hits_box(97, 96, 5, box)
    assert not circle_hits_box(97, 96, 4.9, box)
