from .schema import ATTEMPT_DTYPES, ANSWER_DTYPES, AttemptRow, AnswerRow
from .store import (
    init_store,
    validate_attempts,
    validate_answers,
    append_attempt,
    load_attempts,
    load_answers,
    query_trend,
    export_ndjson,
)

__all__ = [
    "ATTEMPT_DTYPES",
    "ANSWER_DTYPES",
    "AttemptRow",
    "AnswerRow",
    "init_store",
    "validate_attempts",
    "validate_answers",
    "append_attempt",
    "load_attempts",
    "load_answers",
    "query_trend",
    "export_ndjson",
]
