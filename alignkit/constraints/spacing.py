"""Sequential distribution of elements in a row or column."""

import logging
import math
import numbers
import re
from dataclasses import dataclass
from typing import Any, Optional

from alignkit.constraints.alignment import resolve_group
from alignkit.constraints.errors import InvalidSpacingError
from alignkit.constraints.ordering import sort_by_axis
from alignkit.constraints.reporter import ChangeRecorder, CompletionHandler, deliver, ensure_handler
from alignkit.dsl.schema import Axis, PositionChange
from alignkit.constraints.accessor import GeometryAccessor, snapshot

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_spacing(value: Any) -> int:
    """Parse a spacing value into an integer.

    Accepts integers, finite reals (truncated toward zero) and strings that
    start with an optionally signed integer, so ``"12px"`` gives 12.

    Raises:
        InvalidSpacingError: The value has no integer reading.
    """
    if isinstance(value, bool):
        raise InvalidSpacingError(value)
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, numbers.Real):
        if not math.isfinite(value):
            raise InvalidSpacingError(value)
        return int(value)
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        if match:
            return int(match.group(1))
    raise InvalidSpacingError(value)


@dataclass
class SpacingConstraint:
    """Lines elements up along an axis with a fixed gap between them."""

    accessor: GeometryAccessor
    selectors: Any
    spacing: Any
    axis: Axis = Axis.HORIZONTAL
    handler: Optional[CompletionHandler] = None
    include_node: bool = True

    def apply(self) -> list[PositionChange]:
        """Apply the spacing constraint.

        Elements are ordered by their current position on the axis. The first
        one stays put; every other one is placed ``spacing`` past the far
        edge of its predecessor, as read back after the predecessor moved.

        Returns:
            One record per element, in positional order.

        Raises:
            ResolutionError: The selectors matched nothing.
            CardinalityError: Fewer than two elements matched.
            InvalidSpacingError: The spacing is not an integer.
            CallbackTypeError: The handler is not callable.
        """
        axis = Axis(self.axis)
        elements = resolve_group(self.accessor, self.selectors)
        gap = parse_spacing(self.spacing)
        handler = ensure_handler(self.handler)

        ordered = sort_by_axis(self.accessor, elements, axis)
        recorder = ChangeRecorder(self.accessor, include_node=self.include_node)

        previous = None
        for element in ordered:
            if previous is None:
                recorder.keep(element)
            else:
                anchor = snapshot(self.accessor, previous)
                if axis == Axis.HORIZONTAL:
                    recorder.move(element, left=anchor.right + gap)
                else:
                    recorder.move(element, top=anchor.bottom + gap)
            previous = element

        logger.debug("Distributed %d elements %s with gap %d", len(ordered), axis.value, gap)
        return deliver(recorder.records, handler)


def distribute(
    accessor: GeometryAccessor,
    selectors: Any,
    spacing: Any,
    axis: Axis = Axis.HORIZONTAL,
    handler: Optional[CompletionHandler] = None,
    include_node: bool = True,
) -> list[PositionChange]:
    """Convenience function to distribute elements with a fixed gap.

    Args:
        accessor: Environment the elements live in.
        selectors: Selector, handle or handle collection.
        spacing: Gap between neighbours; anything :func:`parse_spacing` accepts.
        axis: Row (horizontal) or column (vertical).
        handler: Optional callable receiving the records.
        include_node: Whether records carry the element handle.

    Returns:
        Position-change records in positional order.
    """
    constraint = SpacingConstraint(accessor, selectors, spacing, axis, handler, include_node)
    return constraint.apply()
