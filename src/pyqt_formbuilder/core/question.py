"""
Question: a display name bound to one matching (config, value) pair.

The pair is only ever replaced as a whole (switch_kind) or realigned
(reset_value), so config and value never disagree on their kind.
"""

from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING
import logging

from pyqt_formbuilder.core.errors import KindMismatchError
from pyqt_formbuilder.core.question_kind import QuestionKind, defaults_for
from pyqt_formbuilder.core.question_types import OptionAxis, QuestionConfig, QuestionValue
from pyqt_formbuilder.protocols.form_config import get_form_config

if TYPE_CHECKING:
    from pyqt_formbuilder.protocols.render_surface import RenderSurface

logger = logging.getLogger(__name__)


@dataclass
class Question:
    """
    One question of a form.

    Equality compares name, config and value. Use same_kind() to compare
    kinds only.

    Attributes:
        name: Display name shown above the question
        config: Author-time structure (options, rows, scale bounds)
        value: Respondent-time answer, always the same kind as config
    """

    name: str
    config: QuestionConfig
    value: QuestionValue

    def __post_init__(self):
        if self.config.kind is not self.value.kind:
            raise KindMismatchError(
                f"Question '{self.name}' built with {self.config.kind} config "
                f"and {self.value.kind} value"
            )

    @classmethod
    def new(cls, kind: QuestionKind = QuestionKind.SHORT_ANSWER, name: Optional[str] = None) -> "Question":
        """Create a question of ``kind`` with default config and an unanswered value."""
        config, value = defaults_for(kind)
        if name is None:
            name = get_form_config().default_question_name
        return cls(name=name, config=config, value=value)

    @property
    def kind(self) -> QuestionKind:
        return self.config.kind

    def switch_kind(self, kind: QuestionKind) -> None:
        """Replace config and value with the defaults of ``kind`` in one step."""
        previous = self.kind
        self.config, self.value = defaults_for(kind)
        logger.debug(f"Question '{self.name}' switched from {previous.value} to {kind.value}")

    def reset_value(self) -> None:
        """
        Return the value to unanswered, sized to the current config.

        Raises:
            KindMismatchError: If config and value disagree on kind
        """
        self.value.reset(self.config)

    def is_consistent(self) -> bool:
        """Check that the value's shape still matches the config."""
        return self.value.conforms_to(self.config)

    def add_option(self, axis: OptionAxis = OptionAxis.OPTIONS) -> str:
        return self.config.add_option(axis)

    def remove_option(self, index: int, axis: OptionAxis = OptionAxis.OPTIONS) -> str:
        return self.config.remove_option(index, axis)

    def answer_text(self) -> str:
        return self.value.describe(self.config)

    def edit(self, surface: "RenderSurface") -> bool:
        """
        Draw the editor for this question.

        Returns:
            True if the user asked to delete the question
        """
        from pyqt_formbuilder.services.question_view_service import get_question_view_service
        return get_question_view_service().edit(self, surface)

    def preview(self, surface: "RenderSurface") -> None:
        """Draw the fill-in view, writing user input into ``value``."""
        from pyqt_formbuilder.services.question_view_service import get_question_view_service
        get_question_view_service().preview(self, surface)
