"""
Rule-based study suggestions.

generate_suggestions() is a pure function of the session list. Rules are
evaluated in a fixed order and each appends at most one string:

  1. average hours: always exactly one of low, burnout or balanced
  2. late-night: any subject mentioning "night"
  3. low mood: more than 30% of sessions "sad" or "tired"
  4. subject focus: names the most studied subject
  5. long sessions: more than 40% of sessions at 4h or more

An empty collection short-circuits to the onboarding pair.
"""

import logging
from typing import Sequence

from models.session import StudySession
from suggestions import messages
from suggestions.stats import compute_session_stats

logger = logging.getLogger(__name__)

LOW_AVG_HOURS = 2
HIGH_AVG_HOURS = 5
LOW_MOOD_SHARE = 0.3
HEAVY_LOAD_SHARE = 0.4


def generate_suggestions(sessions: Sequence[StudySession]) -> list[str]:
    if not sessions:
        return list(messages.ONBOARDING)

    stats = compute_session_stats(sessions)
    logger.debug("Suggestion stats: %s", stats)

    n = stats.session_count
    suggestions = []

    # Strict bounds: 2.0 and 5.0 exactly are "balanced"
    if stats.avg_hours < LOW_AVG_HOURS:
        suggestions.append(messages.LOW_TIME)
    elif stats.avg_hours > HIGH_AVG_HOURS:
        suggestions.append(messages.BURNOUT)
    else:
        suggestions.append(messages.BALANCED)

    if stats.late_night_count > 0:
        suggestions.append(messages.LATE_NIGHT)

    if stats.low_mood_count > n * LOW_MOOD_SHARE:
        suggestions.append(messages.LOW_MOOD)

    if stats.most_studied_subject:
        suggestions.append(messages.SUBJECT_FOCUS.format(subject=stats.most_studied_subject))

    if stats.heavy_load_count > n * HEAVY_LOAD_SHARE:
        suggestions.append(messages.LONG_SESSIONS)

    # Unreachable while the average-hours rule always appends; keeps the
    # result non-empty if that rule ever changes.
    if not suggestions:
        suggestions.append(messages.FALLBACK)

    return suggestions
