"""Alignment, canvas alignment and distribution of rectangles."""

from alignkit.constraints.accessor import GeometryAccessor, snapshot, snapshot_all
from alignkit.constraints.alignment import AlignmentConstraint, AlignType, align_elements
from alignkit.constraints.canvas import CanvasAlignmentConstraint, align_to_canvas, canvas_shift
from alignkit.constraints.centroid import horizontal_center, is_contained, span_center, vertical_middle
from alignkit.constraints.errors import (
    AlignmentError,
    CallbackTypeError,
    CardinalityError,
    InvalidSpacingError,
    ResolutionError,
)
from alignkit.constraints.extremes import max_bottom, max_right, min_left, min_top
from alignkit.constraints.ordering import sort_ascending, sort_by_axis
from alignkit.constraints.reporter import ChangeRecorder, deliver, ensure_handler
from alignkit.constraints.spacing import SpacingConstraint, distribute, parse_spacing

__all__ = [
    # Accessor
    "GeometryAccessor",
    "snapshot",
    "snapshot_all",
    # Alignment
    "AlignmentConstraint",
    "AlignType",
    "align_elements",
    # Canvas
    "CanvasAlignmentConstraint",
    "align_to_canvas",
    "canvas_shift",
    # Spacing
    "SpacingConstraint",
    "distribute",
    "parse_spacing",
    # Calculators
    "horizontal_center",
    "is_contained",
    "max_bottom",
    "max_right",
    "min_left",
    "min_top",
    "span_center",
    "vertical_middle",
    # Ordering
    "sort_ascending",
    "sort_by_axis",
    # Reporting
    "ChangeRecorder",
    "deliver",
    "ensure_handler",
    # Errors
    "AlignmentError",
    "CallbackTypeError",
    "CardinalityError",
    "InvalidSpacingError",
    "ResolutionError",
]
