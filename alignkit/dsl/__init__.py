"""Geometry and record models."""

from alignkit.dsl.schema import (
    Axis,
    BorderWidths,
    BoundingBox,
    Edge,
    Element,
    Position,
    PositionChange,
    Scene,
    Size,
)

__all__ = [
    "Axis",
    "BorderWidths",
    "BoundingBox",
    "Edge",
    "Element",
    "Position",
    "PositionChange",
    "Scene",
    "Size",
]
