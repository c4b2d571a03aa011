"""In-memory geometry accessor over a :class:`Scene`."""

import logging
from typing import Any, Iterable, Optional

from alignkit.constraints.errors import CardinalityError, ResolutionError
from alignkit.dsl.schema import BoundingBox, Edge, Element, Position, Scene, Size

logger = logging.getLogger(__name__)


def _clamp(value: int, extent: int, low: int, high: int) -> int:
    """Keep ``[value, value + extent]`` inside ``[low, high]`` where it fits."""
    return max(low, min(value, high - extent))


class SceneAccessor:
    """Geometry accessor backed by a scene of elements.

    Selectors:
        - an :class:`Element` of the scene resolves to itself
        - ``"#id"`` resolves to the element with that id
        - ``".name"`` resolves to every element carrying that class
        - any other string resolves to elements whose name or id matches;
          all of them when several are required, otherwise the first
        - a list or tuple resolves each entry in turn, dropping repeats;
          unordered collections such as sets are not selectors
    """

    def __init__(self, scene: Scene) -> None:
        self.scene = scene

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def resolve(self, selectors: Any, require_multiple: bool = False) -> list[Element]:
        elements = self._match(selectors, require_multiple)
        if not elements:
            raise ResolutionError(selectors)
        if require_multiple and len(elements) < 2:
            raise CardinalityError(2, len(elements))
        return elements

    def _match(self, selectors: Any, multiple: bool) -> list[Element]:
        if isinstance(selectors, Element):
            found = self.scene.get_element(selectors.id)
            return [found] if found is not None else []

        if isinstance(selectors, str):
            return self._match_string(selectors.strip(), multiple)

        if isinstance(selectors, (list, tuple)):
            return self._match_many(selectors)

        return []

    def _match_string(self, selector: str, multiple: bool) -> list[Element]:
        if selector.startswith("#"):
            found = self.scene.get_element(selector[1:])
            return [found] if found is not None else []
        if selector.startswith("."):
            return self.scene.get_elements_by_class(selector[1:])

        matches = self.scene.get_elements_by_name(selector)
        return matches if multiple else matches[:1]

    def _match_many(self, selectors: Iterable[Any]) -> list[Element]:
        seen: set[str] = set()
        elements: list[Element] = []
        for selector in selectors:
            for element in self._match(selector, True):
                if element.id not in seen:
                    seen.add(element.id)
                    elements.append(element)
        return elements

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------

    def position(self, element: Element) -> Position:
        return Position(top=element.bbox.y, left=element.bbox.x)

    def size(self, element: Element) -> Size:
        return Size(width=element.bbox.width, height=element.bbox.height)

    def border_thickness(self, element: Element, edge: Edge) -> int:
        return element.border.on(edge)

    def reposition(self, element: Element, top: Optional[int] = None, left: Optional[int] = None) -> None:
        bbox = element.bbox
        x = bbox.x if left is None else left
        y = bbox.y if top is None else top

        bounds = self.scene.bounds
        if bounds is not None:
            x = _clamp(x, bbox.width, bounds.left, bounds.right)
            y = _clamp(y, bbox.height, bounds.top, bounds.bottom)
            if (left is not None and x != left) or (top is not None and y != top):
                logger.debug("Clamped %s to (%d, %d)", element.id, x, y)

        element.bbox = BoundingBox(x=x, y=y, width=bbox.width, height=bbox.height)
