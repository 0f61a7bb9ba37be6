"""
Errors raised by the session store.

Each carries the HTTP status it maps to; main.py renders them as
{"error": message}.
"""


class StudyTrackerError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(StudyTrackerError):
    """Missing or malformed fields on session creation."""

    status_code = 400


class NotFoundError(StudyTrackerError):
    """No session with the requested id."""

    status_code = 404
