"""Alignment of a group of elements to an independent canvas rectangle.

The group is translated as a whole: one shift is computed from the group's
edge or center and the canvas's matching edge or center, then added to every
element's current position. The canvas itself never moves.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional, Sequence

from alignkit.constraints.alignment import AlignType
from alignkit.constraints.centroid import horizontal_center, vertical_middle
from alignkit.constraints.errors import ResolutionError
from alignkit.constraints.extremes import max_bottom, max_right, min_left, min_top
from alignkit.constraints.reporter import ChangeRecorder, CompletionHandler, deliver, ensure_handler
from alignkit.dsl.schema import BoundingBox, Edge, PositionChange
from alignkit.constraints.accessor import GeometryAccessor, snapshot, snapshot_all

logger = logging.getLogger(__name__)

# Border edge subtracted from the shift when borders are excluded
BORDER_EDGES: dict[AlignType, Edge] = {
    AlignType.TOP: Edge.TOP,
    AlignType.BOTTOM: Edge.BOTTOM,
    AlignType.LEFT: Edge.LEFT,
    AlignType.RIGHT: Edge.RIGHT,
    AlignType.CENTER: Edge.LEFT,
    AlignType.MIDDLE: Edge.TOP,
}

HORIZONTAL_TYPES = frozenset({AlignType.LEFT, AlignType.CENTER, AlignType.RIGHT})


def canvas_shift(boxes: list[BoundingBox], canvas: BoundingBox, align_type: AlignType) -> int:
    """Signed distance that moves the group onto the canvas reference.

    Positive values move right/down.
    """
    align_type = AlignType(align_type)
    if align_type == AlignType.TOP:
        return canvas.top - min_top(boxes)
    if align_type == AlignType.BOTTOM:
        return canvas.bottom - max_bottom(boxes)
    if align_type == AlignType.LEFT:
        return canvas.left - min_left(boxes)
    if align_type == AlignType.RIGHT:
        return canvas.right - max_right(boxes)
    if align_type == AlignType.CENTER:
        return canvas.left + canvas.width // 2 - horizontal_center(boxes)
    return canvas.top + canvas.height // 2 - vertical_middle(boxes)


@dataclass
class CanvasAlignmentConstraint:
    """Moves a group so its edge or center meets the canvas's."""

    accessor: GeometryAccessor
    selectors: Any
    canvas: Any
    align_type: AlignType
    handler: Optional[CompletionHandler] = None
    include_border: bool = True
    include_node: bool = True

    def apply(self) -> list[PositionChange]:
        """Apply the canvas alignment.

        Returns:
            One record per element, in resolution order.

        Raises:
            ResolutionError: The elements or the canvas matched nothing.
            CallbackTypeError: The handler is not callable.
        """
        align_type = AlignType(self.align_type)
        elements = self.accessor.resolve(self.selectors)
        if not elements:
            raise ResolutionError(self.selectors)
        canvas_box = self._canvas_box()
        handler = ensure_handler(self.handler)

        boxes = snapshot_all(self.accessor, elements)
        shift = canvas_shift(boxes, canvas_box, align_type)
        logger.debug(
            "Canvas %s alignment of %d elements: shift %d", align_type.value, len(elements), shift
        )

        recorder = ChangeRecorder(self.accessor, include_node=self.include_node)
        self._translate(elements, align_type, shift, recorder)
        return deliver(recorder.records, handler)

    def _canvas_box(self) -> BoundingBox:
        """Bounding box of the canvas; the first match when several resolve."""
        if isinstance(self.canvas, BoundingBox):
            return self.canvas
        canvases = self.accessor.resolve(self.canvas)
        if not canvases:
            raise ResolutionError(self.canvas)
        canvas = canvases[0]
        return snapshot(self.accessor, canvas)

    def _translate(
        self,
        elements: Sequence[Any],
        align_type: AlignType,
        shift: int,
        recorder: ChangeRecorder,
    ) -> None:
        edge = BORDER_EDGES[align_type]
        for element in elements:
            offset = shift
            if not self.include_border:
                offset -= self.accessor.border_thickness(element, edge)

            current = self.accessor.position(element)
            if align_type in HORIZONTAL_TYPES:
                recorder.move(element, left=current.left + offset)
            else:
                recorder.move(element, top=current.top + offset)


def align_to_canvas(
    accessor: GeometryAccessor,
    selectors: Any,
    canvas: Any,
    align_type: AlignType,
    handler: Optional[CompletionHandler] = None,
    include_border: bool = True,
    include_node: bool = True,
) -> list[PositionChange]:
    """Convenience function to align a group to a canvas.

    Args:
        accessor: Environment the elements live in.
        selectors: Selector, handle or handle collection for the group.
        canvas: Selector or handle of the canvas, or its BoundingBox.
        align_type: Edge or center to align on.
        handler: Optional callable receiving the records.
        include_border: When False each element's border on the aligned edge
            is subtracted from its shift.
        include_node: Whether records carry the element handle.

    Returns:
        Position-change records.
    """
    constraint = CanvasAlignmentConstraint(
        accessor,
        selectors,
        canvas,
        align_type,
        handler=handler,
        include_border=include_border,
        include_node=include_node,
    )
    return constraint.apply()
