"""Contract between the alignment operations and the element environment.

Operations never touch elements directly. They resolve selectors, read
geometry and write positions through a :class:`GeometryAccessor`, so the same
calculators work against an in-memory scene, a GUI toolkit or a document
model.
"""

from typing import Any, Optional, Protocol, Sequence, runtime_checkable

from alignkit.dsl.schema import BoundingBox, Edge, Position, Size


@runtime_checkable
class GeometryAccessor(Protocol):
    """Capabilities an environment supplies to the alignment operations."""

    def resolve(self, selectors: Any, require_multiple: bool = False) -> Sequence[Any]:
        """Resolve a selector, handle or collection of handles to elements.

        Raises:
            ResolutionError: Nothing matched.
            CardinalityError: ``require_multiple`` is set and fewer than two
                elements matched.
        """
        ...

    def position(self, element: Any) -> Position:
        """Current top/left of an element."""
        ...

    def size(self, element: Any) -> Size:
        """Current width/height of an element."""
        ...

    def border_thickness(self, element: Any, edge: Edge) -> int:
        """Border width of an element on one edge."""
        ...

    def reposition(self, element: Any, top: Optional[int] = None, left: Optional[int] = None) -> None:
        """Move an element. Omitted coordinates stay unchanged.

        The environment may adjust the requested position (clamping); callers
        read the effective position back with :meth:`position`.
        """
        ...


def snapshot(accessor: GeometryAccessor, element: Any) -> BoundingBox:
    """Current bounding box of an element."""
    return BoundingBox.from_geometry(accessor.position(element), accessor.size(element))


def snapshot_all(accessor: GeometryAccessor, elements: Sequence[Any]) -> list[BoundingBox]:
    """Current bounding boxes of elements, in order."""
    return [snapshot(accessor, element) for element in elements]
