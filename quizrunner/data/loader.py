from __future__ import annotations

"""Question-set loader.

Usage:
    loader = DataLoader("./data")
    qset = loader.load_quiz("ox")
    engine = QuizEngine(qset.questions)
"""

import json
from pathlib import Path
from typing import Dict

from pydantic import ValidationError

from ..app.explain import trace as xtrace
from ..app.quiz_types import get_quiz_type
from ..models import QuestionSet
from .schema import QuestionSetModel


class DataLoadError(Exception):
    """A question set could not be read, parsed or validated."""


class DataLoader:
    def __init__(self, base_path: str | Path = "./data") -> None:
        self.base_path = Path(base_path)
        self._cache: Dict[Path, QuestionSet] = {}

    def resolve(self, filename: str | Path) -> Path:
        p = Path(filename)
        return p if p.is_absolute() else self.base_path / p

    def load(self, filename: str | Path) -> QuestionSet:
        """Load and validate a question-set file; results are cached per path."""
        path = self.resolve(filename)
        if path in self._cache:
            return self._cache[path]

        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError as exc:
            raise DataLoadError(f"Failed to load: {path} (not found)") from exc
        except OSError as exc:
            raise DataLoadError(f"Failed to load: {path} ({exc})") from exc
        except UnicodeDecodeError as exc:
            raise DataLoadError(f"Not UTF-8 text: {path} ({exc})") from exc
        except json.JSONDecodeError as exc:
            raise DataLoadError(f"Invalid JSON in {path}: {exc}") from exc

        # A bare list is accepted as the question list itself
        if isinstance(raw, list):
            raw = {"questions": raw}
        try:
            qset = QuestionSetModel.model_validate(raw).to_question_set()
        except ValidationError as exc:
            raise DataLoadError(f"Invalid question set in {path}:\n{exc}") from exc

        self._cache[path] = qset
        xtrace("quiz_loaded", {"path": str(path), "questions": len(qset)})
        return qset

    def load_quiz(self, quiz_type: str) -> QuestionSet:
        """Load the question set registered for ``quiz_type``."""
        return self.load(get_quiz_type(quiz_type).filename)

    def clear_cache(self) -> None:
        self._cache.clear()
