"""
Document service - lookups and processing-status transitions for uploaded documents
"""
from typing import Any, List, Optional

from sqlalchemy.orm import Session

from assistant_api.app.core.logging_config import get_logger
from assistant_api.app.models.document import Document
from assistant_api.app.models.user import User

logger = get_logger("services.documents")


class DocumentService:
    @staticmethod
    def get_completed_documents(db: Session, user: User) -> List[Document]:
        """All of the user's documents whose extraction has completed, oldest first."""
        return (
            db.query(Document)
            .filter(Document.user_id == user.id, Document.processing_status == "completed")
            .order_by(Document.id)
            .all()
        )

    @staticmethod
    def get_completed_document(db: Session, user: User, document_id: int) -> Optional[Document]:
        """The user's document if it exists and has completed; None otherwise."""
        return (
            db.query(Document)
            .filter(
                Document.id == document_id,
                Document.user_id == user.id,
                Document.processing_status == "completed",
            )
            .first()
        )

    @staticmethod
    def mark_completed(db: Session, document: Document, extracted_data: dict[str, Any]) -> Document:
        """Store extraction output and make the document available for suggestions."""
        document.extracted_data = extracted_data
        document.processing_status = "completed"
        db.commit()
        db.refresh(document)
        logger.info(
            "Document extraction completed document_id=%s keys=%d",
            document.id,
            len(extracted_data or {}),
        )
        return document

    @staticmethod
    def mark_failed(db: Session, document: Document) -> Document:
        document.processing_status = "failed"
        db.commit()
        db.refresh(document)
        logger.warning("Document extraction failed document_id=%s", document.id)
        return document
