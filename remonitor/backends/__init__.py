"""Windowing backends for monitor placement."""

from __future__ import annotations

from typing import Iterable, Optional, TypeVar

T = TypeVar("T")

Rect = tuple[int, int, int, int]  # x, y, width, height


def overlap_area(a: Rect, b: Rect) -> int:
    """Area shared by two rectangles in desktop coordinates."""
    ax, ay, aw, ah = a
    bx, by, bw, bh = b
    w = min(ax + aw, bx + bw) - max(ax, bx)
    h = min(ay + ah, by + bh) - max(ay, by)
    if w <= 0 or h <= 0:
        return 0
    return w * h


def best_overlap(window: Rect, candidates: Iterable[tuple[T, Rect]]) -> Optional[T]:
    """Return the candidate whose rectangle overlaps ``window`` most, if any does."""
    best: Optional[T] = None
    best_area = 0
    for handle, rect in candidates:
        area = overlap_area(window, rect)
        if area > best_area:
            best, best_area = handle, area
    return best


__all__ = ["Rect", "best_overlap", "overlap_area"]
