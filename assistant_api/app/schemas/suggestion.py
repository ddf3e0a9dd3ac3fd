"""
Form suggestion Pydantic schemas - matcher inputs, suggestions, request/response bodies
"""
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from assistant_api.app.core.config import FORM_VALUE_MAX_LENGTH

SourceType = Literal["document", "profile", "history"]
ProcessingStatus = Literal["pending", "processing", "completed", "failed"]


# --- Matcher inputs ---
class UserProfile(BaseModel):
    """Profile values a form field can be filled from."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    phone: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    zip_code: Optional[str] = None
    country: Optional[str] = None
    date_of_birth: Optional[str] = None


class DocumentRecord(BaseModel):
    """A document's flattened extracted data."""
    id: int
    extracted_data: Dict[str, str] = Field(default_factory=dict)
    processing_status: ProcessingStatus = "completed"


# --- Output ---
class Suggestion(BaseModel):
    """
    A proposed value for one form field.
    `id` is the position within a single response (1..n), not a stored key.
    """
    id: int = 0
    field_name: str
    suggested_value: str
    confidence_score: int = Field(ge=0, le=100)
    source_type: SourceType
    source_id: Optional[int] = None


# --- Request / response bodies ---
class FormSuggestionsIn(BaseModel):
    form_data: Dict[str, Optional[str]]

    @field_validator("form_data")
    @classmethod
    def _check_form_data(cls, value: Dict[str, Optional[str]]) -> Dict[str, Optional[str]]:
        for field_name, current in value.items():
            if not field_name or not field_name.strip():
                raise ValueError("form_data field names must be non-empty")
            if current is not None and len(current) > FORM_VALUE_MAX_LENGTH:
                raise ValueError(
                    f"form_data value for '{field_name}' exceeds {FORM_VALUE_MAX_LENGTH} characters"
                )
        return value


class DocumentSuggestionsIn(BaseModel):
    form_fields: List[str]

    @field_validator("form_fields")
    @classmethod
    def _check_form_fields(cls, value: List[str]) -> List[str]:
        if any(not name or not name.strip() for name in value):
            raise ValueError("form_fields entries must be non-empty")
        return value


class SuggestionsOut(BaseModel):
    success: bool = True
    data: List[Suggestion]
