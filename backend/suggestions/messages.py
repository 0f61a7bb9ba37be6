"""
Advice strings returned by the suggestion engine.

Kept apart from the rules so the wording can change without touching
thresholds.
"""

ONBOARDING = [
    "Start by logging your study sessions for at least one week.",
    "Try to keep a consistent daily study routine (even 1–2 hours).",
]

LOW_TIME = (
    "Your average study time is low. Try to reach at least 2–3 hours per day "
    "by adding one extra focused session."
)
BURNOUT = "You are studying many hours. Ensure you take regular breaks to avoid burnout."
BALANCED = (
    "Your daily study time looks balanced. Keep the consistency and avoid big "
    "gaps between study days."
)

LATE_NIGHT = (
    "You have some late-night sessions. Shift heavy topics earlier in the day "
    "to improve focus and sleep."
)
LOW_MOOD = (
    "Many sessions have low mood. Try shorter, more frequent sessions and "
    "include breaks or lighter topics when you feel tired."
)
SUBJECT_FOCUS = 'You focus a lot on "{subject}". Ensure you also revise other subjects regularly.'
LONG_SESSIONS = (
    "You often have long sessions. Consider splitting them into 2–3 shorter "
    "blocks with small breaks."
)

FALLBACK = (
    "Your pattern looks okay. Keep logging sessions and adjust based on how "
    "you feel and your results."
)
