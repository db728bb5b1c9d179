from __future__ import annotations

"""Quiz session state machine.

States run ``NOT_STARTED -> IN_PROGRESS -> COMPLETED``. The engine owns the
question sequence, the current index and an append-only answer log, and
reports transitions through three notification channels:

- ``question_changed(question, index)``
- ``answer_submitted(record)``
- ``completed(result)``

No call raises for any call sequence. Calls that make no sense in the
current state (submitting after completion, with no current question) are
ignored.

Submitting twice for the same question before ``next()`` appends two
records; callers must not do that.
"""

from enum import Enum
from typing import Any, Callable, List, Optional, Sequence, Tuple

from ..app.explain import trace as xtrace
from ..models import AnswerRecord, CompletionResult, Question
from ..scoring.calculator import calculate_progress, calculate_score
from .events import ANSWER_SUBMITTED, COMPLETED, QUESTION_CHANGED, EventChannels


class EngineState(str, Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class QuizEngine:
    def __init__(self, questions: Sequence[Question] | None = None) -> None:
        self._questions: Tuple[Question, ...] = tuple(questions or ())
        self._index = 0
        self._answers: List[AnswerRecord] = []
        self._state = EngineState.NOT_STARTED
        self._events = EventChannels()

    # --- handler registration ---

    def on_question_change(self, handler: Optional[Callable[[Optional[Question], int], Any]]) -> None:
        self._events.set_handler(QUESTION_CHANGED, handler)

    def on_answer_submit(self, handler: Optional[Callable[[AnswerRecord], Any]]) -> None:
        self._events.set_handler(ANSWER_SUBMITTED, handler)

    def on_complete(self, handler: Optional[Callable[[CompletionResult], Any]]) -> None:
        self._events.set_handler(COMPLETED, handler)

    # --- accessors ---

    @property
    def questions(self) -> Tuple[Question, ...]:
        return self._questions

    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def current_index(self) -> int:
        return self._index

    @property
    def is_completed(self) -> bool:
        return self._state is EngineState.COMPLETED

    @property
    def answers(self) -> Tuple[AnswerRecord, ...]:
        return tuple(self._answers)

    def current_question(self) -> Optional[Question]:
        if self.is_completed or not (0 <= self._index < len(self._questions)):
            return None
        return self._questions[self._index]

    def total_questions(self) -> int:
        return len(self._questions)

    def progress(self) -> int:
        """0..100 share of questions passed; 100 once completed."""
        total = len(self._questions)
        if total == 0:
            return 0
        if self.is_completed:
            return 100
        return calculate_progress(self._index, total)

    def correct_count(self) -> int:
        return sum(1 for a in self._answers if a.is_correct)

    # --- transitions ---

    def start(self) -> None:
        """Begin a fresh run from the first question."""
        self.reset()
        self._state = EngineState.IN_PROGRESS
        xtrace("quiz_started", {"total": len(self._questions)})
        self._emit_question_change()

    def submit_answer(self, answer: Any) -> Optional[AnswerRecord]:
        """Record ``answer`` for the current question without advancing.

        Correctness is exact equality with the question's correct answer.
        """
        question = self.current_question()
        if question is None or self.is_completed:
            return None

        record = AnswerRecord(
            question_index=self._index,
            question=question,
            user_answer=answer,
            is_correct=question.correct_answer == answer,
        )
        self._answers.append(record)
        xtrace("answer_submitted", {"index": self._index, "answer": answer, "correct": record.is_correct})
        self._events.emit(ANSWER_SUBMITTED, record)
        return record

    def next(self) -> bool:
        """Advance to the next question.

        Returns False when there was no next question; the engine is then
        completed and the ``completed`` notification has fired (only once).
        """
        if self.is_completed:
            return False
        if self._index < len(self._questions) - 1:
            self._index += 1
            self._emit_question_change()
            return True
        self._complete()
        return False

    def reset(self) -> None:
        self._index = 0
        self._answers = []
        self._state = EngineState.NOT_STARTED

    def result(self) -> CompletionResult:
        total = len(self._questions)
        correct = self.correct_count()
        return CompletionResult(
            total=total,
            correct_count=correct,
            score=calculate_score(correct, total),
            answers=tuple(self._answers),
        )

    def _emit_question_change(self) -> None:
        question = self.current_question()
        xtrace("question_changed", {"index": self._index, "has_question": question is not None})
        self._events.emit(QUESTION_CHANGED, question, self._index)

    def _complete(self) -> None:
        self._state = EngineState.COMPLETED
        result = self.result()
        xtrace("quiz_completed", {"total": result.total, "correct": result.correct_count, "score": result.score})
        self._events.emit(COMPLETED, result)
