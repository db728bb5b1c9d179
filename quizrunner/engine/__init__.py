from .events import EventChannels, QUESTION_CHANGED, ANSWER_SUBMITTED, COMPLETED
from .quiz_engine import EngineState, QuizEngine

__all__ = [
    "EventChannels",
    "QUESTION_CHANGED",
    "ANSWER_SUBMITTED",
    "COMPLETED",
    "EngineState",
    "QuizEngine",
]
