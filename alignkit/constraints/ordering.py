"""Positional ordering of elements."""

from typing import Any, Callable, Sequence, TypeVar

from alignkit.dsl.schema import Axis
from alignkit.constraints.accessor import GeometryAccessor

T = TypeVar("T")


def sort_ascending(elements: Sequence[T], key: Callable[[T], int]) -> list[T]:
    """Return elements sorted by ascending ``key``.

    The key is read once per element before any comparison. Elements with
    equal keys keep their input order.
    """
    keyed = [(key(element), index, element) for index, element in enumerate(elements)]
    keyed.sort(key=lambda item: (item[0], item[1]))
    return [element for _, _, element in keyed]


def sort_by_axis(accessor: GeometryAccessor, elements: Sequence[Any], axis: Axis) -> list[Any]:
    """Sort elements by their current left (horizontal) or top (vertical)."""
    if axis == Axis.HORIZONTAL:
        return sort_ascending(elements, lambda e: accessor.position(e).left)
    return sort_ascending(elements, lambda e: accessor.position(e).top)
