from pydantic import BaseModel


class StudySession(BaseModel):
    id: str
    date: str                   # calendar date as sent by the client
    subject: str
    hours: float                # >= 0
    mood: str = "neutral"       # free text, e.g. "happy" | "tired" | "sad"
    productivity: str = "medium"
