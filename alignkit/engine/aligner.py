"""Aligner: one entry point per alignment, canvas and distribution operation.

Usage:
    scene = Scene(elements=[...])
    aligner = Aligner(SceneAccessor(scene))

    aligner.top(".card")
    aligner.canvas_center(".card", "#frame", include_border=False)
    aligner.sort_center([first, second, third], spacing=16)

Every method validates its input before moving anything, then returns the
position-change records (after passing them to ``handler`` when given).
"""

from typing import Any, Optional

from alignkit.constraints.alignment import AlignType, align_elements
from alignkit.constraints.canvas import align_to_canvas
from alignkit.constraints.reporter import CompletionHandler
from alignkit.constraints.spacing import distribute
from alignkit.dsl.schema import Axis, PositionChange
from alignkit.constraints.accessor import GeometryAccessor


class Aligner:
    """Alignment operations bound to one geometry accessor."""

    def __init__(self, accessor: GeometryAccessor, include_node: bool = True) -> None:
        """Initialize the aligner.

        Args:
            accessor: Environment the elements live in.
            include_node: Whether records carry the element handle.
        """
        self.accessor = accessor
        self.include_node = include_node

    # ------------------------------------------------------------------
    # Self alignment
    # ------------------------------------------------------------------

    def align(self, selectors: Any, align_type: AlignType, handler: Optional[CompletionHandler] = None) -> list[PositionChange]:
        return align_elements(self.accessor, selectors, align_type, handler, self.include_node)

    def top(self, selectors: Any, handler: Optional[CompletionHandler] = None) -> list[PositionChange]:
        return self.align(selectors, AlignType.TOP, handler)

    def bottom(self, selectors: Any, handler: Optional[CompletionHandler] = None) -> list[PositionChange]:
        return self.align(selectors, AlignType.BOTTOM, handler)

    def left(self, selectors: Any, handler: Optional[CompletionHandler] = None) -> list[PositionChange]:
        return self.align(selectors, AlignType.LEFT, handler)

    def right(self, selectors: Any, handler: Optional[CompletionHandler] = None) -> list[PositionChange]:
        return self.align(selectors, AlignType.RIGHT, handler)

    def center(self, selectors: Any, handler: Optional[CompletionHandler] = None) -> list[PositionChange]:
        return self.align(selectors, AlignType.CENTER, handler)

    def vertical(self, selectors: Any, handler: Optional[CompletionHandler] = None) -> list[PositionChange]:
        """Align on the group's vertical middle."""
        return self.align(selectors, AlignType.MIDDLE, handler)

    # ------------------------------------------------------------------
    # Canvas alignment
    # ------------------------------------------------------------------

    def align_to_canvas(
        self,
        selectors: Any,
        canvas: Any,
        align_type: AlignType,
        handler: Optional[CompletionHandler] = None,
        include_border: bool = True,
    ) -> list[PositionChange]:
        return align_to_canvas(
            self.accessor,
            selectors,
            canvas,
            align_type,
            handler=handler,
            include_border=include_border,
            include_node=self.include_node,
        )

    def canvas_top(self, selectors: Any, canvas: Any, handler: Optional[CompletionHandler] = None, include_border: bool = True) -> list[PositionChange]:
        return self.align_to_canvas(selectors, canvas, AlignType.TOP, handler, include_border)

    def canvas_bottom(self, selectors: Any, canvas: Any, handler: Optional[CompletionHandler] = None, include_border: bool = True) -> list[PositionChange]:
        return self.align_to_canvas(selectors, canvas, AlignType.BOTTOM, handler, include_border)

    def canvas_left(self, selectors: Any, canvas: Any, handler: Optional[CompletionHandler] = None, include_border: bool = True) -> list[PositionChange]:
        return self.align_to_canvas(selectors, canvas, AlignType.LEFT, handler, include_border)

    def canvas_right(self, selectors: Any, canvas: Any, handler: Optional[CompletionHandler] = None, include_border: bool = True) -> list[PositionChange]:
        return self.align_to_canvas(selectors, canvas, AlignType.RIGHT, handler, include_border)

    def canvas_center(self, selectors: Any, canvas: Any, handler: Optional[CompletionHandler] = None, include_border: bool = True) -> list[PositionChange]:
        return self.align_to_canvas(selectors, canvas, AlignType.CENTER, handler, include_border)

    def canvas_vertical(self, selectors: Any, canvas: Any, handler: Optional[CompletionHandler] = None, include_border: bool = True) -> list[PositionChange]:
        """Align the group's vertical middle with the canvas's."""
        return self.align_to_canvas(selectors, canvas, AlignType.MIDDLE, handler, include_border)

    # ------------------------------------------------------------------
    # Distribution
    # ------------------------------------------------------------------

    def sort_center(self, selectors: Any, spacing: Any, handler: Optional[CompletionHandler] = None) -> list[PositionChange]:
        """Lay elements out left to right, ``spacing`` apart."""
        return distribute(self.accessor, selectors, spacing, Axis.HORIZONTAL, handler, self.include_node)

    def sort_vertical(self, selectors: Any, spacing: Any, handler: Optional[CompletionHandler] = None) -> list[PositionChange]:
        """Lay elements out top to bottom, ``spacing`` apart."""
        return distribute(self.accessor, selectors, spacing, Axis.VERTICAL, handler, self.include_node)
