"""
Rendering surface contract for question editors and previews.

The core draws through this ABC and nothing else. A surface is immediate
mode: every call emits one element for the current frame and returns the
user's interaction with it synchronously (new text, whether it was
clicked, the picked menu entry). Hosts decide how elements map to real
widgets; QtRenderSurface maps them onto PyQt6 widgets.

Design Philosophy:
- Values in, values out: the core owns all state, the surface owns none
- Layout through context managers so nesting mirrors the code
- Numeric fields clamp, so returned numbers are always in range
"""

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Iterator, List, Optional


class RenderSurface(ABC):
    """Imperative drawing context supplied by the host for one frame."""

    # ========== DISPLAY ELEMENTS ==========

    @abstractmethod
    def label(self, text: str) -> None:
        """Emit a static text label."""
        pass

    @abstractmethod
    def heading(self, text: str) -> None:
        """Emit a section heading."""
        pass

    @abstractmethod
    def separator(self) -> None:
        """Emit a horizontal divider."""
        pass

    # ========== INPUT ELEMENTS ==========

    @abstractmethod
    def text_field(self, text: str, hint: str = "", multiline: bool = False) -> str:
        """
        Emit an editable text field.

        Args:
            text: Current text
            hint: Placeholder shown while empty
            multiline: Use a multi-line editor

        Returns:
            The text after this frame's edits
        """
        pass

    @abstractmethod
    def button(self, text: str) -> bool:
        """Emit a push button. Returns True if it was clicked."""
        pass

    @abstractmethod
    def checkbox(self, checked: bool, text: str = "") -> bool:
        """Emit a checkbox. Returns the checked state after this frame."""
        pass

    @abstractmethod
    def radio(self, selected: bool, text: str = "") -> bool:
        """
        Emit a radio button.

        Radios are not grouped by the surface; the caller decides which one is
        selected. Returns True if it was clicked.
        """
        pass

    @abstractmethod
    def drag_value(self, value: int, minimum: int, maximum: int) -> int:
        """
        Emit a numeric field constrained to [minimum, maximum].

        Returns:
            The value after this frame's edits, clamped to the range
        """
        pass

    @abstractmethod
    def menu(self, label: str, items: List[str]) -> Optional[int]:
        """
        Emit a menu button showing ``label``.

        Returns:
            Index into ``items`` of the entry picked this frame, or None
        """
        pass

    # ========== LAYOUT ==========

    @abstractmethod
    @contextmanager
    def row(self) -> Iterator[None]:
        """Lay out the enclosed elements left to right."""
        pass

    @abstractmethod
    @contextmanager
    def group(self) -> Iterator[None]:
        """Frame the enclosed elements as one visual group, top to bottom."""
        pass

    @abstractmethod
    @contextmanager
    def grid(self) -> Iterator[None]:
        """Lay out the enclosed elements in cells; call end_row() between rows."""
        pass

    @abstractmethod
    def end_row(self) -> None:
        """Start the next grid row."""
        pass
