"""Core exception hierarchy.

Precondition violations (bad indices, operations a kind does not support)
are reported to the caller. Config/value kind mismatches are programming
errors and fail loud.
"""


class FormBuilderError(Exception):
    """Base class for form builder errors."""


class IndexOutOfRangeError(FormBuilderError, IndexError):
    """Raised when an option or question index is outside the valid range."""

    def __init__(self, what: str, index: int, length: int):
        super().__init__(f"{what} index {index} out of range (length {length})")
        self.what = what
        self.index = index
        self.length = length


class UnsupportedOperationError(FormBuilderError, TypeError):
    """Raised when an edit is applied to a question kind that has no such field."""


class KindMismatchError(FormBuilderError, AssertionError):
    """Raised when a question's config and value are not the same kind."""
