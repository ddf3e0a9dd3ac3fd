"""
Pytest fixtures for assistant API tests.
Uses in-memory SQLite, provides test user, documents and auth token.
"""
import os
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

# Use in-memory SQLite for tests - set before config/session load
# Must override any .env DATABASE_URL
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["SECRET_KEY"] = "test-secret-key"

from assistant_api.app.db.base import Base
from assistant_api.main import app
from assistant_api.app.core.dependencies import get_db
from assistant_api.app.core.security import create_access_token
from assistant_api.app.models.document import Document
from assistant_api.app.models.user import User

# In-memory SQLite for tests - StaticPool ensures all sessions share same DB
engine = create_engine(
    "sqlite:///:memory:",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Patch the session module so app uses our test engine
import assistant_api.app.db.session as session_module
session_module.engine = engine
session_module.SessionLocal = TestingSessionLocal


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db

MOCK_EXTRACTED_DATA = {
    "full_name": "John Doe",
    "email_address": "john.doe@example.com",
    "phone_number": "+1-555-0123",
    "street_address": "123 Main Street",
    "city_name": "New York",
    "postal_code": "10001",
    "country_name": "United States",
    "date_of_birth": "1990-01-15",
}


@pytest.fixture(scope="function")
def db_session():
    """Create tables and a fresh DB session per test."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def test_user(db_session):
    """Create a test user in the DB."""
    user = User(
        id=1,
        name="Test User",
        email="test@example.com",
        is_active=1,
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def make_document(db_session, test_user):
    """Factory: add a document for the test user with the given status and extracted data."""
    def _make(extracted_data=None, processing_status="completed", user_id=None, name="scan.pdf"):
        document = Document(
            user_id=user_id or test_user.id,
            filename=f"stored-{name}",
            original_name=name,
            mime_type="application/pdf",
            size=2048,
            extracted_data=extracted_data,
            processing_status=processing_status,
        )
        db_session.add(document)
        db_session.commit()
        db_session.refresh(document)
        return document
    return _make


@pytest.fixture
def completed_document(make_document):
    """A completed document carrying the standard extraction sample."""
    return make_document(dict(MOCK_EXTRACTED_DATA))


@pytest.fixture
def auth_headers(test_user):
    """Bearer token for test user."""
    token = create_access_token(data={"sub": str(test_user.id), "email": test_user.email})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def client(db_session, test_user):
    """TestClient with DB and test user pre-seeded."""
    return TestClient(app)
