"""Position-change records and completion handler delivery."""

import logging
from typing import Any, Callable, Optional

from alignkit.constraints.errors import CallbackTypeError
from alignkit.dsl.schema import PositionChange
from alignkit.constraints.accessor import GeometryAccessor

logger = logging.getLogger(__name__)

CompletionHandler = Callable[[list[PositionChange]], Any]


def ensure_handler(handler: Any) -> Optional[CompletionHandler]:
    """Validate a completion handler before anything is moved.

    Raises:
        CallbackTypeError: ``handler`` is neither None nor callable.
    """
    if handler is not None and not callable(handler):
        raise CallbackTypeError(handler)
    return handler


class ChangeRecorder:
    """Moves elements through an accessor and logs each move."""

    def __init__(self, accessor: GeometryAccessor, include_node: bool = True) -> None:
        self.accessor = accessor
        self.include_node = include_node
        self.records: list[PositionChange] = []

    def move(self, element: Any, top: Optional[int] = None, left: Optional[int] = None) -> PositionChange:
        """Reposition an element and record where it actually ended up."""
        before = self.accessor.position(element)
        if top is not None or left is not None:
            self.accessor.reposition(element, top=top, left=left)
        after = self.accessor.position(element)

        record = PositionChange(
            node=element if self.include_node else None,
            prev_x=before.left,
            prev_y=before.top,
            next_x=after.left,
            next_y=after.top,
        )
        self.records.append(record)
        return record

    def keep(self, element: Any) -> PositionChange:
        """Record an element that stays where it is."""
        return self.move(element)


def deliver(records: list[PositionChange], handler: Optional[CompletionHandler] = None) -> list[PositionChange]:
    """Hand the records to the completion handler, then return them."""
    if handler is not None:
        logger.debug("Invoking completion handler with %d records", len(records))
        handler(records)
    return records
