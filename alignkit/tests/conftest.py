"""Pytest configuration and fixtures."""

from typing import Iterable, Optional

import pytest

from alignkit.dsl.schema import BorderWidths, BoundingBox, Element, Scene
from alignkit.engine import Aligner, SceneAccessor


def make_element(
    element_id: str,
    x: int,
    y: int,
    width: int,
    height: int,
    classes: Iterable[str] = ("card",),
    name: Optional[str] = None,
    border: Optional[BorderWidths] = None,
) -> Element:
    """Create a scene element."""
    return Element(
        id=element_id,
        name=name,
        classes=list(classes),
        bbox=BoundingBox(x=x, y=y, width=width, height=height),
        border=border or BorderWidths(),
    )


@pytest.fixture
def scene() -> Scene:
    """Three cards and a frame.

    a: x 10..110,  y 40..90
    b: x 140..220, y 10..40
    c: x 60..100,  y 100..160
    frame: x 0..400, y 0..300
    """
    return Scene(
        elements=[
            make_element("a", 10, 40, 100, 50, border=BorderWidths(top=2, left=3)),
            make_element("b", 140, 10, 80, 30),
            make_element("c", 60, 100, 40, 60),
            make_element("frame", 0, 0, 400, 300, classes=["frame"]),
        ]
    )


@pytest.fixture
def accessor(scene: Scene) -> SceneAccessor:
    """Accessor over the sample scene."""
    return SceneAccessor(scene)


@pytest.fixture
def aligner(accessor: SceneAccessor) -> Aligner:
    """Aligner over the sample scene."""
    return Aligner(accessor)


@pytest.fixture
def sample_scene_payload() -> dict:
    """JSON form of the sample scene."""
    return {
        "elements": [
            {"id": "a", "classes": ["card"], "bbox": {"x": 10, "y": 40, "width": 100, "height": 50}},
            {"id": "b", "classes": ["card"], "bbox": {"x": 140, "y": 10, "width": 80, "height": 30}},
            {"id": "c", "classes": ["card"], "bbox": {"x": 60, "y": 100, "width": 40, "height": 60}},
            {
                "id": "frame",
                "classes": ["frame"],
                "bbox": {"x": 0, "y": 0, "width": 400, "height": 300},
            },
        ]
    }


def positions(scene: Scene, *ids: str) -> list[tuple[int, int]]:
    """(x, y) of the given elements."""
    return [(scene.get_element(i).bbox.x, scene.get_element(i).bbox.y) for i in ids]


class FailingAccessor(SceneAccessor):
    """Scene accessor whose writes fail for one element."""

    def __init__(self, scene: Scene, fail_on: str) -> None:
        super().__init__(scene)
        self.fail_on = fail_on

    def reposition(self, element: Element, top: Optional[int] = None, left: Optional[int] = None) -> None:
        if element.id == self.fail_on:
            raise RuntimeError(f"cannot move {element.id}")
        super().reposition(element, top=top, left=left)
