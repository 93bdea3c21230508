"""IO exceptions."""

from pyqt_formbuilder.core.errors import FormBuilderError


class DeserializationError(FormBuilderError, ValueError):
    """Raised when a saved state blob cannot be turned back into an AppState."""


class StorageError(FormBuilderError):
    """Raised when the state store cannot be read or written."""
