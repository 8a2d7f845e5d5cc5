# src/minigun/geometry.py
"""
Axis-aligned overlap tests shared by the simulation.

Every box-like argument only needs ``x, y, w, h`` attributes (top-left
anchored, +y down). All interval tests are closed: touching edges count
as overlap, so nothing flickers at an exact boundary.
"""
from __future__ import annotations


def clamp(v: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, v))


def spans_overlap(a0: float, a1: float, b0: float, b1: float) -> bool:
    """Closed interval test [a0, a1] ∩ [b0, b1] != ∅."""
    return a1 >= b0 and a0 <= b1


def horizontal_overlap(a, b) -> bool:
    return spans_overlap(a.x, a.x + a.w, b.x, b.x + b.w)


def boxes_overlap(a, b) -> bool:
    return horizontal_overlap(a, b) and spans_overlap(a.y, a.y + a.h, b.y, b.y + b.h)


def circle_hits_box(cx: float, cy: float, r: float, box) -> bool:
    """Circle vs rect via the closest point of the rect to the circle centre."""
    px = clamp(cx, box.x, box.x + box.w)
    py = clamp(cy, box.y, box.y + box.h)
    dx, dy = cx - px, cy - py
    return dx * dx + dy * dy <= r * r
