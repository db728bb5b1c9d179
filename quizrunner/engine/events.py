from __future__ import annotations

"""Notification channels for the quiz engine.

Each channel holds at most one handler. Handlers run synchronously, in the
order events are emitted, before the emitting call returns.
"""

from typing import Any, Callable, Dict, Optional

QUESTION_CHANGED = "question_changed"
ANSWER_SUBMITTED = "answer_submitted"
COMPLETED = "completed"

CHANNELS = (QUESTION_CHANGED, ANSWER_SUBMITTED, COMPLETED)


class EventChannels:
    def __init__(self) -> None:
        self._handlers: Dict[str, Optional[Callable[..., Any]]] = {name: None for name in CHANNELS}

    def set_handler(self, event: str, handler: Optional[Callable[..., Any]]) -> None:
        """Register ``handler`` for ``event``, replacing any previous one. ``None`` clears it."""
        if event not in self._handlers:
            raise KeyError(f"Unknown event channel: {event}")
        self._handlers[event] = handler

    def emit(self, event: str, *payload: Any) -> None:
        h = self._handlers.get(event)
        if h is not None:
            h(*payload)
