"""
Document - an uploaded file and the key/value data extracted from it
"""
from datetime import datetime

from sqlalchemy import BigInteger, Column, DateTime, Enum, ForeignKey, Index, Integer, JSON, String
from sqlalchemy.orm import relationship

from assistant_api.app.core.config import DOCUMENT_STATUSES
from assistant_api.app.db.base import Base


class Document(Base):
    __tablename__ = "documents"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    filename = Column(String(255), nullable=False)  # stored name, e.g. "<uuid>.pdf"
    original_name = Column(String(255), nullable=False)
    mime_type = Column(String(255), nullable=False)
    size = Column(BigInteger, nullable=False)

    # extracted_data: field key -> value, filled once processing completes
    extracted_data = Column(JSON, nullable=True)
    processing_status = Column(
        Enum(*DOCUMENT_STATUSES, name="document_processing_status", native_enum=False),
        nullable=False,
        default="pending",
    )

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    user = relationship("User", back_populates="documents")

    __table_args__ = (Index("ix_documents_user_status", "user_id", "processing_status"),)
