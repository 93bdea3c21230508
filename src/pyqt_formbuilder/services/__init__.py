"""
Service layer for drawing forms.

Enum-dispatched views that render questions, form tabs and the form
catalog into a RenderSurface. Nothing here imports Qt.
"""

from .enum_dispatch_service import EnumDispatchService
from .question_view_service import (
    QuestionEditorService,
    QuestionPreviewService,
    QuestionViewService,
    get_question_view_service,
)
from .form_view_service import AppViewService, FormTabService

__all__ = [
    "EnumDispatchService",
    "QuestionEditorService",
    "QuestionPreviewService",
    "QuestionViewService",
    "get_question_view_service",
    "AppViewService",
    "FormTabService",
]
