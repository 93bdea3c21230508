"""
Form: a titled, ordered list of questions plus submitted responses.

All structural edits go through the methods here so index checks are made
in one place. Indices are never clamped; a bad index is the caller's bug
and is reported as IndexOutOfRangeError.
"""

import copy
import logging
from dataclasses import dataclass, field
from typing import List

from pyqt_formbuilder.core.errors import IndexOutOfRangeError
from pyqt_formbuilder.core.question import Question
from pyqt_formbuilder.core.question_kind import QuestionKind, all_kinds
from pyqt_formbuilder.protocols.form_config import get_form_config

logger = logging.getLogger(__name__)

COPY_SUFFIX = " Copy"


def _default_title() -> str:
    return get_form_config().default_form_title


@dataclass
class FormResponse:
    """
    One submitted set of answers.

    ``answers`` are deep copies of the questions at submit time, so later
    edits to the form do not rewrite history.
    """

    response_id: int
    answers: List[Question] = field(default_factory=list)


@dataclass
class Form:
    title: str = field(default_factory=_default_title)
    description: str = ""
    questions: List[Question] = field(default_factory=list)
    responses: List[FormResponse] = field(default_factory=list)

    @classmethod
    def demo(cls) -> "Form":
        """Form with one default question of every kind, in catalog order."""
        return cls(questions=[Question.new(kind) for kind in all_kinds()])

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.questions):
            raise IndexOutOfRangeError("question", index, len(self.questions))

    # ========== QUESTION EDITS ==========

    def add_question(self, kind: QuestionKind = QuestionKind.SHORT_ANSWER) -> Question:
        """Append a new question (short answer unless told otherwise)."""
        question = Question.new(kind)
        self.questions.append(question)
        logger.debug(f"Form '{self.title}': added {kind.value} question at {len(self.questions) - 1}")
        return question

    def remove_question(self, index: int) -> Question:
        self._check_index(index)
        question = self.questions.pop(index)
        logger.debug(f"Form '{self.title}': removed question {index} ('{question.name}')")
        return question

    def duplicate_question(self, index: int) -> Question:
        """Insert a deep copy of the question at ``index`` right after it."""
        self._check_index(index)
        duplicate = copy.deepcopy(self.questions[index])
        self.questions.insert(index + 1, duplicate)
        return duplicate

    def move_question(self, source: int, destination: int) -> None:
        """Move a question so it ends up at ``destination``."""
        self._check_index(source)
        self._check_index(destination)
        question = self.questions.pop(source)
        self.questions.insert(destination, question)
        logger.debug(f"Form '{self.title}': moved question {source} -> {destination}")

    # ========== WHOLE-FORM OPERATIONS ==========

    def duplicate(self) -> "Form":
        """
        Deep-copy title, description and questions.

        Non-empty title fields get a " Copy" suffix. Responses belong to the
        original form and are not copied.
        """
        title = self.title + COPY_SUFFIX if self.title else self.title
        return Form(
            title=title,
            description=self.description,
            questions=copy.deepcopy(self.questions),
        )

    def reset_all_preview_values(self) -> None:
        """Clear every answer, e.g. when a filled-in preview is cleared."""
        for question in self.questions:
            question.reset_value()

    # ========== RESPONSES ==========

    def submit_response(self) -> FormResponse:
        """Record the current preview answers as a new response."""
        next_id = max((response.response_id for response in self.responses), default=0) + 1
        response = FormResponse(response_id=next_id, answers=copy.deepcopy(self.questions))
        self.responses.append(response)
        logger.info(f"Form '{self.title}': recorded response #{next_id}")
        return response

    def clear_responses(self) -> None:
        count = len(self.responses)
        self.responses.clear()
        logger.info(f"Form '{self.title}': deleted {count} responses")
