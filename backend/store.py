"""
In-memory session store.

Sessions live in a plain ordered list for the lifetime of the process.
main.py creates one SessionStore on app.state; routes receive it through
the get_store dependency so tests can swap in a fresh one.
"""

import logging
import math
import uuid
from typing import Any, Optional

from fastapi import Request

from errors import NotFoundError, ValidationError
from models.session import StudySession

logger = logging.getLogger(__name__)

DEFAULT_MOOD = "neutral"
DEFAULT_PRODUCTIVITY = "medium"


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


def _coerce_hours(hours: Any) -> float:
    if isinstance(hours, bool):
        raise ValidationError("hours must be a number")
    try:
        value = float(hours)
    except (TypeError, ValueError):
        raise ValidationError("hours must be a number")
    if not math.isfinite(value):
        raise ValidationError("hours must be a number")
    if value < 0:
        raise ValidationError("hours must not be negative")
    return value


class SessionStore:
    """Ordered collection of StudySession records."""

    def __init__(self):
        self._sessions: list[StudySession] = []

    def __len__(self) -> int:
        return len(self._sessions)

    def list(self) -> list[StudySession]:
        """All sessions in insertion order."""
        return list(self._sessions)

    def get(self, session_id: str) -> StudySession:
        for session in self._sessions:
            if session.id == session_id:
                return session
        raise NotFoundError("Session not found")

    def create(
        self,
        date: Optional[str],
        subject: Optional[str],
        hours: Any,
        mood: Optional[str] = None,
        productivity: Optional[str] = None,
    ) -> StudySession:
        """
        Validates and appends a new session.

        date and subject must be non-empty and hours present. hours is
        coerced to float; an empty or missing mood/productivity falls back
        to its default. Nothing is stored when validation fails.
        """
        if _is_blank(date) or _is_blank(subject) or hours is None:
            logger.warning("Rejected session: missing date, subject, or hours")
            raise ValidationError("date, subject, and hours are required")

        try:
            value = _coerce_hours(hours)
        except ValidationError as exc:
            logger.warning("Rejected session: %s (got %r)", exc.message, hours)
            raise

        session = StudySession(
            id=self._new_id(),
            date=date,
            subject=subject,
            hours=value,
            mood=DEFAULT_MOOD if _is_blank(mood) else mood,
            productivity=DEFAULT_PRODUCTIVITY if _is_blank(productivity) else productivity,
        )
        self._sessions.append(session)

        logger.info("Created session %s (%s, %.2fh)", session.id, session.subject, session.hours)
        return session

    def delete(self, session_id: str) -> StudySession:
        """Removes the session with this id and returns it."""
        for index, session in enumerate(self._sessions):
            if session.id == session_id:
                del self._sessions[index]
                logger.info("Deleted session %s", session_id)
                return session

        logger.warning("Delete requested for unknown session %s", session_id)
        raise NotFoundError("Session not found")

    def clear(self) -> None:
        self._sessions.clear()

    def _new_id(self) -> str:
        taken = {s.id for s in self._sessions}
        while True:
            session_id = str(uuid.uuid4())
            if session_id not in taken:
                return session_id


def get_store(request: Request) -> SessionStore:
    """FastAPI dependency: the store attached to the running app."""
    return request.app.state.store
