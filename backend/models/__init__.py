from models.session import StudySession
from models.stats import SessionStats

__all__ = ["StudySession", "SessionStats"]
