"""alignkit - alignment, canvas alignment and distribution of rectangles."""

from alignkit.constraints import (
    AlignmentError,
    AlignType,
    CallbackTypeError,
    CardinalityError,
    GeometryAccessor,
    InvalidSpacingError,
    ResolutionError,
)
from alignkit.dsl.schema import Axis, BorderWidths, BoundingBox, Edge, Element, PositionChange, Scene
from alignkit.engine import Aligner, SceneAccessor

__version__ = "0.1.0"

__all__ = [
    "Aligner",
    "AlignmentError",
    "AlignType",
    "Axis",
    "BorderWidths",
    "BoundingBox",
    "CallbackTypeError",
    "CardinalityError",
    "Edge",
    "Element",
    "GeometryAccessor",
    "InvalidSpacingError",
    "PositionChange",
    "ResolutionError",
    "Scene",
    "SceneAccessor",
]
