"""Extreme edges of a set of boxes."""

from typing import Callable, Iterable

from alignkit.dsl.schema import BoundingBox


def _fold(boxes: Iterable[BoundingBox], edge: Callable[[BoundingBox], int], smaller: bool) -> int:
    """Left-to-right fold keeping the first strictly smaller/larger value."""
    best: int | None = None
    for box in boxes:
        value = edge(box)
        if best is None or (value < best if smaller else value > best):
            best = value
    if best is None:
        raise ValueError("Cannot compute an extreme of an empty element set")
    return best


def min_top(boxes: Iterable[BoundingBox]) -> int:
    """Topmost edge of the set."""
    return _fold(boxes, lambda b: b.top, smaller=True)


def max_bottom(boxes: Iterable[BoundingBox]) -> int:
    """Bottommost edge (top + height) of the set."""
    return _fold(boxes, lambda b: b.bottom, smaller=False)


def min_left(boxes: Iterable[BoundingBox]) -> int:
    """Leftmost edge of the set."""
    return _fold(boxes, lambda b: b.left, smaller=True)


def max_right(boxes: Iterable[BoundingBox]) -> int:
    """Rightmost edge (left + width) of the set."""
    return _fold(boxes, lambda b: b.right, smaller=False)
