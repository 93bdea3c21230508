"""
pyqt-formbuilder: a Google Forms style questionnaire builder for PyQt6.

Architecture:
- Tier 1 (Core): question kinds, questions, forms and app state, no Qt
- Tier 2 (Protocols): RenderSurface contract, config, widget ABCs/adapters
- Tier 3 (Services): enum-dispatched views drawing into a RenderSurface
- Tier 4 (IO): JSON snapshot codec and key/value state stores
- Tier 5 (Widgets): immediate-mode Qt surface and main window

Key Features:
- Ten question kinds, each a matching config/value pair
- Reset semantics that keep every answer shaped like its question
- Preview, submit and browse responses
- Best-effort persistence through QSettings
"""

__version__ = "0.1.0"

from pyqt_formbuilder.core import (
    AppState,
    Form,
    FormResponse,
    Question,
    QuestionKind,
    defaults_for,
    same_kind,
)
from pyqt_formbuilder.io import load, save

__all__ = [
    "__version__",
    "AppState",
    "Form",
    "FormResponse",
    "Question",
    "QuestionKind",
    "defaults_for",
    "same_kind",
    "load",
    "save",
]
