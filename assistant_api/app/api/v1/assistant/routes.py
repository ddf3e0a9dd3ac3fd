"""
Assistant API - form field suggestions from the user's profile and uploaded documents.
All endpoints require authentication.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from assistant_api.app.core.dependencies import get_current_user, get_db
from assistant_api.app.models.user import User
from assistant_api.app.schemas.suggestion import (
    DocumentSuggestionsIn,
    FormSuggestionsIn,
    SuggestionsOut,
)
from assistant_api.app.services.suggestion_service import SuggestionService

router = APIRouter(prefix="/assistant", tags=["assistant"])


@router.post("/form-suggestions", response_model=SuggestionsOut)
def form_suggestions(
    payload: FormSuggestionsIn,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> SuggestionsOut:
    """
    Suggest values for each field in form_data.

    - **form_data**: field name -> current value (may be null or empty)
    """
    suggestions = SuggestionService.get_form_suggestions(db, current_user, payload.form_data)
    return SuggestionsOut(data=suggestions)


@router.post("/documents/{document_id}/suggestions", response_model=SuggestionsOut)
def document_suggestions(
    document_id: int,
    payload: DocumentSuggestionsIn,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> SuggestionsOut:
    """Suggest values for form_fields using only the given completed document."""
    suggestions = SuggestionService.get_document_suggestions(
        db, current_user, document_id, payload.form_fields
    )
    return SuggestionsOut(data=suggestions)
