"""
Widget ABC contracts for the Qt host.

QtRenderSurface treats every input widget the same way: push the model's
value in, subscribe to user edits, read the value back. These ABCs name
that contract so the surface never branches on Qt widget classes.

Design Philosophy:
- Explicit inheritance over duck typing
- Fail-loud over fail-silent
- Multiple inheritance for composable capabilities
"""

from abc import ABC, abstractmethod
from typing import Any, Callable


class ValueGettable(ABC):
    """ABC for widgets that can return a value."""

    @abstractmethod
    def get_value(self) -> Any:
        """Get the current value from the widget."""
        pass


class ValueSettable(ABC):
    """ABC for widgets that can accept a value."""

    @abstractmethod
    def set_value(self, value: Any) -> None:
        """
        Set the widget's value without reporting it as a user edit.

        Args:
            value: The value to set
        """
        pass


class RangeConfigurable(ABC):
    """
    ABC for widgets that support numeric range configuration.

    Implemented by the spin boxes behind drag_value().
    """

    @abstractmethod
    def configure_range(self, minimum: int, maximum: int) -> None:
        """
        Configure the valid range for numeric input.

        Args:
            minimum: Minimum allowed value
            maximum: Maximum allowed value
        """
        pass


class ChangeSignalEmitter(ABC):
    """
    ABC for widgets that report user edits.

    Hides the per-widget signal names (textEdited vs valueChanged vs
    clicked) behind one call.
    """

    @abstractmethod
    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """
        Connect callback to the widget's user-edit signal.

        Args:
            callback: Called with the new value after each user edit.
                     Signature: callback(new_value: Any) -> None
        """
        pass
