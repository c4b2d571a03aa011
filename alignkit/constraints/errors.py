"""Errors raised by alignment operations.

Every error is raised before the first element is moved, except for failures
coming out of the geometry accessor while positions are being written.
"""


class AlignmentError(Exception):
    """Base class for alignment failures."""


class ResolutionError(AlignmentError, LookupError):
    """A selector or handle matched no element."""

    def __init__(self, selectors: object) -> None:
        super().__init__(f"Element not found: {selectors!r}")
        self.selectors = selectors


class CardinalityError(AlignmentError, ValueError):
    """Fewer elements than the operation needs."""

    def __init__(self, required: int, actual: int) -> None:
        super().__init__(
            f"The number of elements must be at least {required}, got {actual}"
        )
        self.required = required
        self.actual = actual


class InvalidSpacingError(AlignmentError, ValueError):
    """A spacing value that does not parse as an integer."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Spacing must be an integer, got {value!r}")
        self.value = value


class CallbackTypeError(AlignmentError, TypeError):
    """A completion handler that is neither None nor callable."""

    def __init__(self, handler: object) -> None:
        super().__init__(f"Completion handler must be callable, got {type(handler).__name__}")
        self.handler = handler
