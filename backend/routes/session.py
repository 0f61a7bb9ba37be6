from typing import Any, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from models.session import StudySession
from store import SessionStore, get_store

router = APIRouter(prefix="/api", tags=["sessions"])


# ---------- Request / Response schemas ----------

class CreateSessionRequest(BaseModel):
    # All optional here: the store reports missing fields as a 400, not a 422
    date: Optional[str] = None
    subject: Optional[str] = None
    hours: Any = None           # number or numeric string
    mood: Optional[str] = None
    productivity: Optional[str] = None


class DeleteSessionResponse(BaseModel):
    message: str
    id: str


# ---------- Endpoints ----------

@router.get("/sessions", response_model=list[StudySession])
def list_sessions(store: SessionStore = Depends(get_store)):
    """Returns every logged session in the order it was added."""
    return store.list()


@router.post("/sessions", response_model=StudySession, status_code=201)
def create_session(body: CreateSessionRequest, store: SessionStore = Depends(get_store)):
    """
    Logs a study session.
    The server assigns the id and fills in mood/productivity defaults.
    """
    return store.create(
        date=body.date,
        subject=body.subject,
        hours=body.hours,
        mood=body.mood,
        productivity=body.productivity,
    )


@router.delete("/sessions/{session_id}", response_model=DeleteSessionResponse)
def delete_session(session_id: str, store: SessionStore = Depends(get_store)):
    removed = store.delete(session_id)
    return DeleteSessionResponse(message="Session deleted", id=removed.id)
