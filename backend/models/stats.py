from typing import Optional
from pydantic import BaseModel, Field


class SessionStats(BaseModel):
    session_count: int
    total_hours: float
    avg_hours: float
    heavy_load_count: int       # sessions with hours >= 4
    late_night_count: int       # subject mentions "night"
    low_mood_count: int         # mood is "sad" or "tired"
    subject_frequency: dict[str, int] = Field(default_factory=dict)   # first-seen order
    most_studied_subject: Optional[str] = None
