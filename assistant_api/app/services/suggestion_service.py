"""
Suggestion service - loads profile and completed documents, runs the field matcher
"""
import time
from typing import List, Mapping, Optional

from sqlalchemy.orm import Session

from assistant_api.app.core.logging_config import get_logger
from assistant_api.app.models.document import Document
from assistant_api.app.models.user import User
from assistant_api.app.schemas.suggestion import DocumentRecord, Suggestion, UserProfile
from assistant_api.app.services.document_service import DocumentService
from assistant_api.app.services.field_matcher import document_matcher, form_matcher
from assistant_api.app.utils.extracted_data import flatten_extracted_data

logger = get_logger("services.suggestions")


def document_to_record(document: Document) -> DocumentRecord:
    return DocumentRecord(
        id=document.id,
        extracted_data=flatten_extracted_data(document.extracted_data),
        processing_status=document.processing_status,
    )


def user_to_profile(user: User) -> UserProfile:
    return UserProfile.model_validate(user)


class SuggestionService:
    @staticmethod
    def get_form_suggestions(
        db: Session, user: User, form_data: Mapping[str, Optional[str]]
    ) -> List[Suggestion]:
        """Suggestions for every field in form_data from the profile and all completed documents."""
        started_at = time.monotonic()
        documents = [
            document_to_record(d) for d in DocumentService.get_completed_documents(db, user)
        ]
        suggestions = form_matcher().get_form_suggestions(
            form_data, user_to_profile(user), documents
        )
        logger.info(
            "Form suggestions user_id=%s fields=%d documents=%d suggestions=%d elapsed_ms=%d",
            user.id,
            len(form_data),
            len(documents),
            len(suggestions),
            int((time.monotonic() - started_at) * 1000),
        )
        return suggestions

    @staticmethod
    def get_document_suggestions(
        db: Session, user: User, document_id: int, form_fields: List[str]
    ) -> List[Suggestion]:
        """Suggestions drawn only from one completed document; [] if it isn't available."""
        document = DocumentService.get_completed_document(db, user, document_id)
        if document is None or not document.extracted_data:
            logger.info(
                "Document suggestions skipped user_id=%s document_id=%s reason=unavailable",
                user.id,
                document_id,
            )
            return []
        suggestions = document_matcher().get_document_suggestions(
            form_fields, document_to_record(document)
        )
        logger.info(
            "Document suggestions user_id=%s document_id=%s fields=%d suggestions=%d",
            user.id,
            document_id,
            len(form_fields),
            len(suggestions),
        )
        return suggestions
