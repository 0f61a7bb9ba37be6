"""
Aggregate statistics over a session collection.

One pass over the sessions produces everything the suggestion rules need.
"""

from typing import Iterable, Optional

from models.session import StudySession
from models.stats import SessionStats

HEAVY_LOAD_HOURS = 4
LATE_NIGHT_KEYWORD = "night"
LOW_MOODS = {"sad", "tired"}


def _most_frequent(frequency: dict[str, int]) -> Optional[str]:
    """Highest count wins; on a tie the subject seen first wins."""
    best = None
    best_count = 0
    for subject, count in frequency.items():
        if count > best_count:
            best, best_count = subject, count
    return best


def compute_session_stats(sessions: Iterable[StudySession]) -> SessionStats:
    count = 0
    total_hours = 0.0
    heavy_load = 0
    late_night = 0
    low_mood = 0
    frequency: dict[str, int] = {}

    for s in sessions:
        count += 1
        total_hours += s.hours

        if s.hours >= HEAVY_LOAD_HOURS:
            heavy_load += 1

        # No time-of-day field exists; the subject text stands in for it
        if LATE_NIGHT_KEYWORD in s.subject.lower():
            late_night += 1

        if s.mood in LOW_MOODS:
            low_mood += 1

        frequency[s.subject] = frequency.get(s.subject, 0) + 1

    return SessionStats(
        session_count=count,
        total_hours=total_hours,
        avg_hours=total_hours / count if count else 0.0,
        heavy_load_count=heavy_load,
        late_night_count=late_night,
        low_mood_count=low_mood,
        subject_frequency=frequency,
        most_studied_subject=_most_frequent(frequency),
    )
