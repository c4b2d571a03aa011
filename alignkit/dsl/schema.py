"""Pydantic v2 models for rectangles, scenes and position-change records.

All coordinates are integers in the containing coordinate space. ``x`` is the
left offset and ``y`` the top offset; sizes are never negative.
"""

from enum import Enum
from typing import Any, Callable, Optional

from pydantic import BaseModel, ConfigDict, Field


class Edge(str, Enum):
    """Box edges."""

    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"


class Axis(str, Enum):
    """Layout axes."""

    HORIZONTAL = "horizontal"  # left / width
    VERTICAL = "vertical"  # top / height


# ============================================================================
# Geometry Models
# ============================================================================


class Position(BaseModel):
    """Top/left offset of an element."""

    model_config = ConfigDict(frozen=True)

    top: int
    left: int


class Size(BaseModel):
    """Width/height of an element."""

    model_config = ConfigDict(frozen=True)

    width: int = Field(ge=0)
    height: int = Field(ge=0)


class BoundingBox(BaseModel):
    """Read-only snapshot of a rectangle."""

    model_config = ConfigDict(frozen=True)

    x: int = Field(description="Left offset")
    y: int = Field(description="Top offset")
    width: int = Field(ge=0, description="Width")
    height: int = Field(ge=0, description="Height")

    @classmethod
    def from_geometry(cls, position: Position, size: Size) -> "BoundingBox":
        """Build a box from an accessor's position and size readings."""
        return cls(x=position.left, y=position.top, width=size.width, height=size.height)

    @property
    def left(self) -> int:
        return self.x

    @property
    def top(self) -> int:
        return self.y

    @property
    def right(self) -> int:
        """Right edge position."""
        return self.x + self.width

    @property
    def bottom(self) -> int:
        """Bottom edge position."""
        return self.y + self.height

    def span(self, axis: Axis) -> tuple[int, int]:
        """Near and far edge on an axis."""
        if axis == Axis.HORIZONTAL:
            return self.x, self.right
        return self.y, self.bottom


class BorderWidths(BaseModel):
    """Border thickness per edge."""

    model_config = ConfigDict(frozen=True)

    top: int = Field(default=0, ge=0)
    right: int = Field(default=0, ge=0)
    bottom: int = Field(default=0, ge=0)
    left: int = Field(default=0, ge=0)

    def on(self, edge: Edge) -> int:
        return getattr(self, Edge(edge).value)


# ============================================================================
# Records
# ============================================================================


class PositionChange(BaseModel):
    """Before/after coordinates of one element from one operation call."""

    model_config = ConfigDict(frozen=True)

    node: Optional[Any] = Field(default=None, description="Element handle, when requested")
    prev_x: int
    prev_y: int
    next_x: int
    next_y: int

    @property
    def dx(self) -> int:
        return self.next_x - self.prev_x

    @property
    def dy(self) -> int:
        return self.next_y - self.prev_y

    @property
    def moved(self) -> bool:
        return self.dx != 0 or self.dy != 0

    def to_dict(self, node_key: Optional[Callable[[Any], Any]] = None) -> dict[str, Any]:
        """Wire shape of the record.

        Args:
            node_key: Callable mapping the node handle to a serializable value.
                When omitted the handle is emitted as is.
        """
        data: dict[str, Any] = {}
        if self.node is not None:
            data["node"] = node_key(self.node) if node_key else self.node
        data.update(
            prevX=self.prev_x,
            prevY=self.prev_y,
            nextX=self.next_x,
            nextY=self.next_y,
        )
        return data


# ============================================================================
# Scene Models
# ============================================================================


class Element(BaseModel):
    """A positioned, sized element living in a scene."""

    id: str = Field(min_length=1, description="Unique element ID")
    name: Optional[str] = Field(default=None, description="Display/lookup name")
    classes: list[str] = Field(default_factory=list, description="Class names for selector lookup")
    bbox: BoundingBox
    border: BorderWidths = Field(default_factory=BorderWidths)

    def __hash__(self) -> int:
        return hash(self.id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Element):
            return NotImplemented
        return self.id == other.id


class Scene(BaseModel):
    """A flat collection of elements sharing one coordinate space."""

    elements: list[Element] = Field(default_factory=list)
    bounds: Optional[BoundingBox] = Field(
        default=None,
        description="Area elements are clamped into when repositioned",
    )

    def get_element(self, element_id: str) -> Optional[Element]:
        """Get element by ID."""
        for element in self.elements:
            if element.id == element_id:
                return element
        return None

    def get_elements_by_class(self, class_name: str) -> list[Element]:
        """Get all elements carrying a class name."""
        return [e for e in self.elements if class_name in e.classes]

    def get_elements_by_name(self, name: str) -> list[Element]:
        """Get all elements whose name or id matches."""
        return [e for e in self.elements if e.name == name or e.id == name]
