"""Geometry accessors and the Aligner facade."""

from alignkit.constraints.accessor import GeometryAccessor, snapshot, snapshot_all
from alignkit.engine.aligner import Aligner
from alignkit.engine.scene import SceneAccessor

__all__ = [
    "Aligner",
    "GeometryAccessor",
    "SceneAccessor",
    "snapshot",
    "snapshot_all",
]
