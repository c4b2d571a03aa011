"""Alignment of a set of elements to one another."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Sequence

from alignkit.constraints.centroid import horizontal_center, vertical_middle
from alignkit.constraints.errors import CardinalityError
from alignkit.constraints.extremes import max_bottom, max_right, min_left, min_top
from alignkit.constraints.reporter import ChangeRecorder, CompletionHandler, deliver, ensure_handler
from alignkit.dsl.schema import BoundingBox, PositionChange
from alignkit.constraints.accessor import GeometryAccessor, snapshot_all

logger = logging.getLogger(__name__)

MIN_ELEMENTS = 2


class AlignType(str, Enum):
    """Alignment types."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    TOP = "top"
    MIDDLE = "middle"
    BOTTOM = "bottom"


def resolve_group(accessor: GeometryAccessor, selectors: Any) -> Sequence[Any]:
    """Resolve selectors to at least two elements."""
    elements = accessor.resolve(selectors, require_multiple=True)
    if len(elements) < MIN_ELEMENTS:
        raise CardinalityError(MIN_ELEMENTS, len(elements))
    return elements


@dataclass
class AlignmentConstraint:
    """Aligns every element of a group to a reference line of the group."""

    accessor: GeometryAccessor
    selectors: Any
    align_type: AlignType
    handler: Optional[CompletionHandler] = None
    include_node: bool = True

    def apply(self) -> list[PositionChange]:
        """Apply the alignment constraint.

        Returns:
            One record per element, in resolution order.

        Raises:
            ResolutionError: The selectors matched nothing.
            CardinalityError: Fewer than two elements matched.
            CallbackTypeError: The handler is not callable.
        """
        align_type = AlignType(self.align_type)
        elements = resolve_group(self.accessor, self.selectors)
        handler = ensure_handler(self.handler)

        boxes = snapshot_all(self.accessor, elements)
        recorder = ChangeRecorder(self.accessor, include_node=self.include_node)

        if align_type == AlignType.LEFT:
            self._align_left(elements, boxes, recorder)
        elif align_type == AlignType.CENTER:
            self._align_center_h(elements, boxes, recorder)
        elif align_type == AlignType.RIGHT:
            self._align_right(elements, boxes, recorder)
        elif align_type == AlignType.TOP:
            self._align_top(elements, boxes, recorder)
        elif align_type == AlignType.MIDDLE:
            self._align_center_v(elements, boxes, recorder)
        elif align_type == AlignType.BOTTOM:
            self._align_bottom(elements, boxes, recorder)

        logger.debug("Aligned %d elements (%s)", len(elements), align_type.value)
        return deliver(recorder.records, handler)

    def _align_left(self, elements: Sequence[Any], boxes: list[BoundingBox], recorder: ChangeRecorder) -> None:
        """Align elements to the leftmost edge."""
        target_x = min_left(boxes)
        for element in elements:
            recorder.move(element, left=target_x)

    def _align_center_h(self, elements: Sequence[Any], boxes: list[BoundingBox], recorder: ChangeRecorder) -> None:
        """Align elements to the group's horizontal center."""
        target_center = horizontal_center(boxes)
        for element, box in zip(elements, boxes):
            recorder.move(element, left=target_center - box.width // 2)

    def _align_right(self, elements: Sequence[Any], boxes: list[BoundingBox], recorder: ChangeRecorder) -> None:
        """Align elements to the rightmost edge."""
        target_right = max_right(boxes)
        for element, box in zip(elements, boxes):
            recorder.move(element, left=target_right - box.width)

    def _align_top(self, elements: Sequence[Any], boxes: list[BoundingBox], recorder: ChangeRecorder) -> None:
        """Align elements to the topmost edge."""
        target_y = min_top(boxes)
        for element in elements:
            recorder.move(element, top=target_y)

    def _align_center_v(self, elements: Sequence[Any], boxes: list[BoundingBox], recorder: ChangeRecorder) -> None:
        """Align elements to the group's vertical middle."""
        target_middle = vertical_middle(boxes)
        for element, box in zip(elements, boxes):
            recorder.move(element, top=target_middle - box.height // 2)

    def _align_bottom(self, elements: Sequence[Any], boxes: list[BoundingBox], recorder: ChangeRecorder) -> None:
        """Align elements to the bottommost edge."""
        target_bottom = max_bottom(boxes)
        for element, box in zip(elements, boxes):
            recorder.move(element, top=target_bottom - box.height)


def align_elements(
    accessor: GeometryAccessor,
    selectors: Any,
    align_type: AlignType,
    handler: Optional[CompletionHandler] = None,
    include_node: bool = True,
) -> list[PositionChange]:
    """Convenience function to align elements to one another.

    Args:
        accessor: Environment the elements live in.
        selectors: Selector, handle or handle collection.
        align_type: Type of alignment.
        handler: Optional callable receiving the records.
        include_node: Whether records carry the element handle.

    Returns:
        Position-change records.
    """
    constraint = AlignmentConstraint(accessor, selectors, align_type, handler, include_node)
    return constraint.apply()
