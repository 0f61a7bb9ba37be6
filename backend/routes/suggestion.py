from fastapi import APIRouter, Depends
from pydantic import BaseModel

from store import SessionStore, get_store
from suggestions.engine import generate_suggestions

router = APIRouter(prefix="/api", tags=["suggestions"])


class SuggestionsResponse(BaseModel):
    suggestions: list[str]


@router.get("/suggestions", response_model=SuggestionsResponse)
def get_suggestions(store: SessionStore = Depends(get_store)):
    """Rule-based advice computed from the current session list."""
    return SuggestionsResponse(suggestions=generate_suggestions(store.list()))
