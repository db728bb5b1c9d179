from __future__ import annotations

"""Explain mode: terse one-line traces of quiz milestones.

Off by default; the CLI turns it on with ``--explain``.
"""

import json
import sys
from typing import Any, Dict

_ENABLED = False


def enable(flag: bool = True) -> None:
    global _ENABLED
    _ENABLED = bool(flag)


def trace(event: str, payload: Dict[str, Any] | None = None) -> None:
    if not _ENABLED:
        return
    try:
        body = json.dumps(payload or {}, separators=(",", ":"), ensure_ascii=False, default=str)
    except (TypeError, ValueError):
        body = "{}"
    print(f"[EXPLAIN] {event} :: {body}", file=sys.stderr)
