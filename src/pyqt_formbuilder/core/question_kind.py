"""
Question kind catalog with metaclass auto-registration.

Config and value classes register themselves against their QuestionKind
when they are defined, so the catalog can build matching pairs without a
hand-maintained table.

Design:
- QuestionKind: the closed set of question kinds, in display order
- QuestionPartMeta: registers concrete config/value classes by kind
- CONFIG_IMPLEMENTATIONS / VALUE_IMPLEMENTATIONS: kind -> class
- defaults_for(): the only place a fresh (config, value) pair is built
"""

from abc import ABCMeta
from enum import Enum
from typing import Any, Dict, List, Tuple, Type
import importlib
import logging

logger = logging.getLogger(__name__)


class QuestionKind(Enum):
    """The ten question kinds. Declaration order is display order."""

    SHORT_ANSWER = "short_answer"
    PARAGRAPH = "paragraph"
    MULTIPLE_CHOICE = "multiple_choice"
    CHECKBOXES = "checkboxes"
    DROPDOWN = "dropdown"
    LINEAR_SCALE = "linear_scale"
    MULTIPLE_CHOICE_GRID = "multiple_choice_grid"
    CHECKBOX_GRID = "checkbox_grid"
    DATE = "date"
    TIME = "time"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES: Dict[QuestionKind, str] = {
    QuestionKind.SHORT_ANSWER: "Short answer",
    QuestionKind.PARAGRAPH: "Paragraph",
    QuestionKind.MULTIPLE_CHOICE: "Multiple choice",
    QuestionKind.CHECKBOXES: "Checkboxes",
    QuestionKind.DROPDOWN: "Dropdown",
    QuestionKind.LINEAR_SCALE: "Linear scale",
    QuestionKind.MULTIPLE_CHOICE_GRID: "Multiple choice grid",
    QuestionKind.CHECKBOX_GRID: "Checkbox grid",
    QuestionKind.DATE: "Date",
    QuestionKind.TIME: "Time",
}

# Maps kind -> config class
CONFIG_IMPLEMENTATIONS: Dict[QuestionKind, Type] = {}

# Maps kind -> value class
VALUE_IMPLEMENTATIONS: Dict[QuestionKind, Type] = {}

_ROLE_REGISTRIES = {
    "config": CONFIG_IMPLEMENTATIONS,
    "value": VALUE_IMPLEMENTATIONS,
}

_BUILTIN_TYPES_MODULE = "pyqt_formbuilder.core.question_types"


class QuestionPartMeta(ABCMeta):
    """
    Metaclass for automatic config/value registration.

    A class registers when it declares its own ``kind`` in its body and
    inherits a ``_role`` of "config" or "value". Intermediate bases such as
    OptionsConfig declare no kind and are skipped.

    Example:
        @dataclass
        class DropdownConfig(OptionsConfig):
            kind: ClassVar[QuestionKind] = QuestionKind.DROPDOWN

    DropdownConfig lands in CONFIG_IMPLEMENTATIONS[QuestionKind.DROPDOWN]
    when the class is defined.
    """

    def __new__(cls, name, bases, attrs):
        new_class = super().__new__(cls, name, bases, attrs)

        kind = attrs.get("kind")
        if kind is None:
            logger.debug(f"Skipping registration for {name} - no kind of its own")
            return new_class

        role = getattr(new_class, "_role", None)
        if role not in _ROLE_REGISTRIES:
            raise TypeError(f"{name} declares kind {kind} but has no valid _role (got {role!r})")

        registry = _ROLE_REGISTRIES[role]
        if kind in registry:
            logger.warning(
                f"{role} for '{kind.value}' already registered to {registry[kind].__name__}. "
                f"Overwriting with {name}."
            )
        registry[kind] = new_class
        logger.debug(f"Registered {name} as {role} for '{kind.value}'")
        return new_class


def _ensure_builtin_types() -> None:
    if len(CONFIG_IMPLEMENTATIONS) < len(QuestionKind) or len(VALUE_IMPLEMENTATIONS) < len(QuestionKind):
        importlib.import_module(_BUILTIN_TYPES_MODULE)


def all_kinds() -> List[QuestionKind]:
    """Return the fixed catalog in display order."""
    return list(QuestionKind)


def display_name(kind: QuestionKind) -> str:
    """Return the human label for a kind (e.g. "Multiple choice grid")."""
    return kind.display_name


def config_class(kind: QuestionKind) -> Type:
    _ensure_builtin_types()
    if kind not in CONFIG_IMPLEMENTATIONS:
        raise KeyError(
            f"No config registered for kind '{kind}'. "
            f"Available kinds: {[k.value for k in CONFIG_IMPLEMENTATIONS]}"
        )
    return CONFIG_IMPLEMENTATIONS[kind]


def value_class(kind: QuestionKind) -> Type:
    _ensure_builtin_types()
    if kind not in VALUE_IMPLEMENTATIONS:
        raise KeyError(
            f"No value registered for kind '{kind}'. "
            f"Available kinds: {[k.value for k in VALUE_IMPLEMENTATIONS]}"
        )
    return VALUE_IMPLEMENTATIONS[kind]


def defaults_for(kind: QuestionKind) -> Tuple[Any, Any]:
    """
    Build a fresh (config, value) pair for a kind.

    The value is the unanswered state for the default config, so resetting
    it straight away changes nothing.

    Args:
        kind: The question kind

    Returns:
        Tuple of (config, value), both of ``kind``
    """
    config = config_class(kind)()
    value = value_class(kind)()
    value.reset(config)
    return config, value


def kind_of(obj: Any) -> QuestionKind:
    """Return the kind of a QuestionKind, question, config or value."""
    if isinstance(obj, QuestionKind):
        return obj
    return obj.kind


def same_kind(a: Any, b: Any) -> bool:
    """
    Check whether two objects are of the same question kind.

    Accepts kinds, questions, configs and values in any combination. Payload
    is ignored: two Checkboxes configs with different options are the same
    kind but not equal.
    """
    return kind_of(a) is kind_of(b)
