"""
Per-kind configuration and value types.

Every question kind has one config class (author-time structure) and one
value class (respondent-time answer). Both carry the same ``kind`` tag and
register themselves in the catalog through QuestionPartMeta.

Value classes know how to reset themselves against a config, check that
their shape still fits a config, and describe themselves for display.
"""

from abc import abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, List, Optional, Tuple
import logging

from pyqt_formbuilder.core.errors import (
    IndexOutOfRangeError,
    KindMismatchError,
    UnsupportedOperationError,
)
from pyqt_formbuilder.core.question_kind import QuestionKind, QuestionPartMeta

logger = logging.getLogger(__name__)

# Drag ranges offered by the linear scale editor
SCALE_START_RANGE: Tuple[int, int] = (0, 1)
SCALE_END_RANGE: Tuple[int, int] = (2, 10)

MONTH_RANGE: Tuple[int, int] = (1, 12)
DAY_RANGE: Tuple[int, int] = (1, 31)
YEAR_RANGE: Tuple[int, int] = (0, 9999)
HOUR_RANGE: Tuple[int, int] = (1, 12)
MINUTE_RANGE: Tuple[int, int] = (0, 59)


def clamp(value: int, bounds: Tuple[int, int]) -> int:
    low, high = bounds
    return max(low, min(high, value))


class OptionAxis(Enum):
    """Which label list an option edit applies to."""

    OPTIONS = "options"
    ROWS = "rows"
    COLUMNS = "columns"

    @property
    def label(self) -> str:
        """Singular label used for synthesized entries ("Option 3")."""
        return {
            OptionAxis.OPTIONS: "Option",
            OptionAxis.ROWS: "Row",
            OptionAxis.COLUMNS: "Column",
        }[self]


class DayPeriod(Enum):
    AM = "AM"
    PM = "PM"


# ========== CONFIGS ==========


@dataclass
class QuestionConfig(metaclass=QuestionPartMeta):
    """Base class for per-kind question configuration."""

    _role: ClassVar[str] = "config"
    kind: ClassVar[Optional[QuestionKind]] = None

    def axes(self) -> Tuple[OptionAxis, ...]:
        """Label lists this config carries. Empty for kinds without options."""
        return ()

    def labels(self, axis: OptionAxis) -> List[str]:
        """
        Return the live label list for an axis.

        Raises:
            UnsupportedOperationError: If this kind has no such list
        """
        if axis not in self.axes():
            raise UnsupportedOperationError(
                f"{self.kind.display_name} questions have no {axis.value}"
            )
        return getattr(self, axis.value)

    def add_option(self, axis: OptionAxis = OptionAxis.OPTIONS) -> str:
        """
        Append a synthesized label ("Option 2", "Row 3", ...) to an axis.

        Returns:
            The label that was added
        """
        labels = self.labels(axis)
        label = f"{axis.label} {len(labels) + 1}"
        labels.append(label)
        logger.debug(f"Added {axis.value} entry '{label}' to {self.kind.value} config")
        return label

    def remove_option(self, index: int, axis: OptionAxis = OptionAxis.OPTIONS) -> str:
        """
        Remove the label at ``index`` from an axis.

        Returns:
            The removed label

        Raises:
            IndexOutOfRangeError: If index is outside the list; never clamped
        """
        labels = self.labels(axis)
        if not 0 <= index < len(labels):
            raise IndexOutOfRangeError(axis.label.lower(), index, len(labels))
        removed = labels.pop(index)
        logger.debug(f"Removed {axis.value} entry '{removed}' from {self.kind.value} config")
        return removed


@dataclass
class ShortAnswerConfig(QuestionConfig):
    kind: ClassVar[QuestionKind] = QuestionKind.SHORT_ANSWER


@dataclass
class ParagraphConfig(QuestionConfig):
    kind: ClassVar[QuestionKind] = QuestionKind.PARAGRAPH


@dataclass
class OptionsConfig(QuestionConfig):
    """Shared shape of multiple choice, checkboxes and dropdown."""

    options: List[str] = field(default_factory=lambda: ["Option 1"])

    def axes(self) -> Tuple[OptionAxis, ...]:
        return (OptionAxis.OPTIONS,)


@dataclass
class MultipleChoiceConfig(OptionsConfig):
    kind: ClassVar[QuestionKind] = QuestionKind.MULTIPLE_CHOICE


@dataclass
class CheckboxesConfig(OptionsConfig):
    kind: ClassVar[QuestionKind] = QuestionKind.CHECKBOXES


@dataclass
class DropdownConfig(OptionsConfig):
    kind: ClassVar[QuestionKind] = QuestionKind.DROPDOWN


@dataclass
class LinearScaleConfig(QuestionConfig):
    """
    Integer scale from ``start`` to ``end`` with optional end labels.

    The setters clamp to the editor's drag ranges. Changing a bound never
    touches an existing answer; only a value reset realigns it.
    """

    kind: ClassVar[QuestionKind] = QuestionKind.LINEAR_SCALE

    start: int = 1
    end: int = 5
    start_label: str = ""
    end_label: str = ""

    def set_start(self, start: int) -> None:
        self.start = clamp(start, SCALE_START_RANGE)

    def set_end(self, end: int) -> None:
        self.end = clamp(end, SCALE_END_RANGE)

    def points(self) -> range:
        return range(self.start, self.end + 1)


@dataclass
class GridConfig(QuestionConfig):
    """Shared shape of the two grid kinds."""

    rows: List[str] = field(default_factory=lambda: ["Row 1"])
    columns: List[str] = field(default_factory=lambda: ["Column 1"])

    def axes(self) -> Tuple[OptionAxis, ...]:
        return (OptionAxis.ROWS, OptionAxis.COLUMNS)


@dataclass
class MultipleChoiceGridConfig(GridConfig):
    kind: ClassVar[QuestionKind] = QuestionKind.MULTIPLE_CHOICE_GRID


@dataclass
class CheckboxGridConfig(GridConfig):
    kind: ClassVar[QuestionKind] = QuestionKind.CHECKBOX_GRID


@dataclass
class DateConfig(QuestionConfig):
    kind: ClassVar[QuestionKind] = QuestionKind.DATE


@dataclass
class TimeConfig(QuestionConfig):
    kind: ClassVar[QuestionKind] = QuestionKind.TIME


# ========== VALUES ==========


@dataclass
class QuestionValue(metaclass=QuestionPartMeta):
    """
    Base class for per-kind answer state.

    Subclasses implement the kind-specific parts; the public methods here
    check the config's kind first and fail loud on a mismatch.
    """

    _role: ClassVar[str] = "value"
    kind: ClassVar[Optional[QuestionKind]] = None

    def _check_config(self, config: QuestionConfig) -> None:
        if config.kind is not self.kind:
            raise KindMismatchError(
                f"{type(self).__name__} ({self.kind}) paired with "
                f"{type(config).__name__} ({config.kind})"
            )

    def reset(self, config: QuestionConfig) -> None:
        """Return to the unanswered state, sized to ``config``."""
        self._check_config(config)
        self._reset(config)

    def conforms_to(self, config: QuestionConfig) -> bool:
        """Check that this value's shape fits ``config``."""
        self._check_config(config)
        return self._conforms_to(config)

    def describe(self, config: QuestionConfig) -> str:
        """Human-readable answer for response listings."""
        self._check_config(config)
        return self._describe(config)

    @abstractmethod
    def _reset(self, config: QuestionConfig) -> None:
        pass

    @abstractmethod
    def _conforms_to(self, config: QuestionConfig) -> bool:
        pass

    @abstractmethod
    def _describe(self, config: QuestionConfig) -> str:
        pass


@dataclass
class TextValue(QuestionValue):
    text: str = ""

    def _reset(self, config):
        self.text = ""

    def _conforms_to(self, config):
        return True

    def _describe(self, config):
        return self.text


@dataclass
class ShortAnswerValue(TextValue):
    kind: ClassVar[QuestionKind] = QuestionKind.SHORT_ANSWER


@dataclass
class ParagraphValue(TextValue):
    kind: ClassVar[QuestionKind] = QuestionKind.PARAGRAPH


@dataclass
class ChoiceValue(QuestionValue):
    """Single selected option label; empty means unanswered."""

    choice: str = ""

    def _reset(self, config):
        self.choice = ""

    def _conforms_to(self, config):
        return self.choice == "" or self.choice in config.options

    def _describe(self, config):
        return self.choice


@dataclass
class MultipleChoiceValue(ChoiceValue):
    kind: ClassVar[QuestionKind] = QuestionKind.MULTIPLE_CHOICE


@dataclass
class DropdownValue(ChoiceValue):
    kind: ClassVar[QuestionKind] = QuestionKind.DROPDOWN


@dataclass
class CheckboxesValue(QuestionValue):
    kind: ClassVar[QuestionKind] = QuestionKind.CHECKBOXES

    # One flag per config option, by index
    choices: List[bool] = field(default_factory=list)

    def _reset(self, config):
        self.choices = [False] * len(config.options)

    def _conforms_to(self, config):
        return len(self.choices) == len(config.options)

    def _describe(self, config):
        return ", ".join(
            option for option, checked in zip(config.options, self.choices) if checked
        )


@dataclass
class LinearScaleValue(QuestionValue):
    kind: ClassVar[QuestionKind] = QuestionKind.LINEAR_SCALE

    value: int = 1

    def _reset(self, config):
        self.value = config.start

    def _conforms_to(self, config):
        return config.start <= self.value <= config.end

    def _describe(self, config):
        return str(self.value)


@dataclass
class MultipleChoiceGridValue(QuestionValue):
    kind: ClassVar[QuestionKind] = QuestionKind.MULTIPLE_CHOICE_GRID

    # Selected column label per row, "" for no selection
    choices: List[str] = field(default_factory=list)

    def _reset(self, config):
        self.choices = [""] * len(config.rows)

    def _conforms_to(self, config):
        if len(self.choices) != len(config.rows):
            return False
        return all(choice == "" or choice in config.columns for choice in self.choices)

    def _describe(self, config):
        return "; ".join(
            f"{row}: {choice}" for row, choice in zip(config.rows, self.choices) if choice
        )


@dataclass
class CheckboxGridValue(QuestionValue):
    kind: ClassVar[QuestionKind] = QuestionKind.CHECKBOX_GRID

    # choices[row][column]
    choices: List[List[bool]] = field(default_factory=list)

    def _reset(self, config):
        self.choices = [[False] * len(config.columns) for _ in config.rows]

    def _conforms_to(self, config):
        if len(self.choices) != len(config.rows):
            return False
        return all(len(row) == len(config.columns) for row in self.choices)

    def _describe(self, config):
        parts = []
        for row, flags in zip(config.rows, self.choices):
            checked = [column for column, flag in zip(config.columns, flags) if flag]
            if checked:
                parts.append(f"{row}: {', '.join(checked)}")
        return "; ".join(parts)


@dataclass
class DateValue(QuestionValue):
    """Month/day/year fields. Not calendar-validated (Feb 31 is accepted)."""

    kind: ClassVar[QuestionKind] = QuestionKind.DATE

    year: int = 0
    month: int = 1
    day: int = 1

    def _reset(self, config):
        self.year = 0
        self.month = 1
        self.day = 1

    def _conforms_to(self, config):
        return (
            MONTH_RANGE[0] <= self.month <= MONTH_RANGE[1]
            and DAY_RANGE[0] <= self.day <= DAY_RANGE[1]
            and YEAR_RANGE[0] <= self.year <= YEAR_RANGE[1]
        )

    def _describe(self, config):
        return f"{self.month:02d}/{self.day:02d}/{self.year:04d}"


@dataclass
class TimeValue(QuestionValue):
    kind: ClassVar[QuestionKind] = QuestionKind.TIME

    hour: int = 1
    minute: int = 0
    period: DayPeriod = DayPeriod.AM

    def _reset(self, config):
        self.hour = 1
        self.minute = 0
        self.period = DayPeriod.AM

    def _conforms_to(self, config):
        return (
            HOUR_RANGE[0] <= self.hour <= HOUR_RANGE[1]
            and MINUTE_RANGE[0] <= self.minute <= MINUTE_RANGE[1]
        )

    def _describe(self, config):
        return f"{self.hour}:{self.minute:02d} {self.period.value}"
