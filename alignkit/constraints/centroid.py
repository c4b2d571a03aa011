"""Center and middle reference lines for a set of boxes.

Both axes share one policy. The box with the largest extent on the axis is
the anchor. When every box fits inside the anchor's span the reference line
is the midpoint of that span; otherwise it is the mean of the boxes' own
centers. Both results are floored.
"""

import logging
from typing import Iterable, Sequence

from alignkit.dsl.schema import Axis, BoundingBox

logger = logging.getLogger(__name__)

Span = tuple[int, int]


def widest_span(spans: Sequence[Span]) -> Span:
    """Span of the first element with the largest extent."""
    if not spans:
        raise ValueError("Cannot compute a centroid of an empty element set")
    best = spans[0]
    for span in spans[1:]:
        if span[1] - span[0] > best[1] - best[0]:
            best = span
    return best


def is_contained(spans: Iterable[Span], outer: Span) -> bool:
    """Whether every span lies within ``outer``; stops at the first miss."""
    near, far = outer
    return all(near <= s_near and s_far <= far for s_near, s_far in spans)


def span_center(spans: Sequence[Span]) -> int:
    """Reference line for a list of (near, far) spans on one axis."""
    anchor = widest_span(spans)
    if is_contained(spans, anchor):
        return (anchor[0] + anchor[1]) // 2

    # mean of (near + extent / 2), kept in integers: sum(2 * near + extent) / 2n
    doubled = sum(near + far for near, far in spans)
    return doubled // (2 * len(spans))


def _center_on(boxes: Iterable[BoundingBox], axis: Axis) -> int:
    spans = [box.span(axis) for box in boxes]
    reference = span_center(spans)
    logger.debug("Centroid on %s axis for %d boxes: %d", axis.value, len(spans), reference)
    return reference


def horizontal_center(boxes: Iterable[BoundingBox]) -> int:
    """Horizontal center line of the set."""
    return _center_on(boxes, Axis.HORIZONTAL)


def vertical_middle(boxes: Iterable[BoundingBox]) -> int:
    """Vertical middle line of the set."""
    return _center_on(boxes, Axis.VERTICAL)
