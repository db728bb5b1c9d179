"""quizrunner: terminal quiz runner.

Loads question sets from JSON, runs them through the quiz engine one
question at a time, and grades the result.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .engine.quiz_engine import EngineState, QuizEngine
from .models import AnswerRecord, CompletionResult, Question, QuestionSet
from .results.summary import ResultSummary, build_summary, summarize
from .scoring.calculator import calculate_score
from .scoring.grading import DEFAULT_GRADE_TABLE, GradeDescriptor, GradingPolicy

__all__ = [
    "__version__",
    "EngineState",
    "QuizEngine",
    "AnswerRecord",
    "CompletionResult",
    "Question",
    "QuestionSet",
    "ResultSummary",
    "build_summary",
    "summarize",
    "calculate_score",
    "DEFAULT_GRADE_TABLE",
    "GradeDescriptor",
    "GradingPolicy",
]
