from __future__ import annotations

"""Configuration loading and validation for quizrunner.

Loads YAML configuration, applies defaults, and validates enumerations and
the grade table before a quiz is run.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

import sys

import yaml

from ..app.quiz_types import list_quiz_types
from ..scoring.grading import DEFAULT_GRADE_TABLE, GradeDescriptor, is_well_formed


def _load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except FileNotFoundError:
        print(f"ERROR: Config file not found: {path}", file=sys.stderr)
        sys.exit(1)


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load configuration from YAML or defaults.

    Args:
        path: Optional path to a YAML config. If None, use package defaults.

    Returns:
        A dictionary with configuration values.
    """
    if path:
        return _load_yaml(Path(path))
    return _load_yaml(Path(__file__).with_name("defaults.yml"))


def _default_grades() -> List[Dict[str, Any]]:
    return [g.to_json() for g in DEFAULT_GRADE_TABLE]


def _validated_grades(raw: Any) -> List[Dict[str, Any]]:
    if raw is None:
        return _default_grades()
    try:
        table = [GradeDescriptor.from_json(g) for g in raw]
    except (KeyError, TypeError, ValueError) as exc:
        print(f"WARNING: Invalid grade table ({exc}), using defaults.")
        return _default_grades()
    if not is_well_formed(table):
        print("WARNING: Grade thresholds must strictly decrease down to 0, using defaults.")
        return _default_grades()
    return [g.to_json() for g in table]


def validate_config(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Apply defaults and validate configuration values.

    Args:
        cfg: The raw configuration dictionary.

    Returns:
        The validated and merged configuration dictionary.
    """
    cfg.setdefault("data", {})
    cfg.setdefault("quiz", {})
    cfg.setdefault("stats", {})

    data = cfg["data"]
    quiz = cfg["quiz"]
    stats = cfg["stats"]

    data.setdefault("base_path", "./data")
    data.setdefault("default_type", "multiple-choice")

    quiz.setdefault("shuffle_questions", False)
    quiz.setdefault("max_questions", None)
    quiz.setdefault("show_feedback", True)
    quiz.setdefault("show_explanation", True)

    stats.setdefault("enabled", True)
    stats.setdefault("data_dir", "./storage/data")

    known_types = {m.id for m in list_quiz_types()}
    default_type = data.get("default_type")
    if default_type not in known_types:
        print(f"WARNING: Unsupported quiz type '{default_type}', using 'multiple-choice'.")
        data["default_type"] = "multiple-choice"

    max_q = quiz.get("max_questions")
    if max_q is not None:
        try:
            max_q = int(max_q)
        except (TypeError, ValueError):
            max_q = 0
        if max_q < 1:
            print(f"WARNING: Invalid max_questions '{quiz.get('max_questions')}', using all questions.")
            max_q = None
        quiz["max_questions"] = max_q

    cfg["grades"] = _validated_grades(cfg.get("grades"))
    return cfg
