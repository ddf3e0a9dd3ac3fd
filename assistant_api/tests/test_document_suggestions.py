"""Tests for POST /api/assistant/documents/{id}/suggestions and document status transitions"""
from assistant_api.app.models.user import User
from assistant_api.app.services.document_service import DocumentService
from assistant_api.app.services.suggestion_service import SuggestionService


def _url(document_id):
    return f"/api/assistant/documents/{document_id}/suggestions"


def test_document_suggestions_requires_auth(client, completed_document):
    r = client.post(_url(completed_document.id), json={"form_fields": ["postal_code"]})
    assert r.status_code == 401


def test_document_suggestions_postal_code(client, auth_headers, completed_document):
    r = client.post(
        _url(completed_document.id),
        headers=auth_headers,
        json={"form_fields": ["postal_code", "favorite_color"]},
    )
    assert r.status_code == 200
    data = r.json()["data"]
    assert len(data) == 1
    assert data[0]["field_name"] == "postal_code"
    assert data[0]["suggested_value"] == "10001"
    assert data[0]["source_type"] == "document"
    assert data[0]["source_id"] == completed_document.id
    assert 80 <= data[0]["confidence_score"] <= 95


def test_document_suggestions_pending_document_is_empty(client, auth_headers, make_document):
    document = make_document({"postal_code": "10001"}, processing_status="pending")
    r = client.post(_url(document.id), headers=auth_headers, json={"form_fields": ["postal_code"]})
    assert r.status_code == 200
    assert r.json()["data"] == []


def test_document_suggestions_unknown_document_is_empty(client, auth_headers):
    r = client.post(_url(404), headers=auth_headers, json={"form_fields": ["postal_code"]})
    assert r.status_code == 200
    assert r.json()["data"] == []


def test_document_suggestions_other_users_document_is_empty(client, auth_headers, db_session, make_document):
    other = User(id=2, name="Other", email="other@example.com", is_active=1)
    db_session.add(other)
    db_session.commit()
    document = make_document({"postal_code": "10001"}, user_id=other.id)
    r = client.post(_url(document.id), headers=auth_headers, json={"form_fields": ["postal_code"]})
    assert r.json()["data"] == []


def test_document_suggestions_nested_extracted_data(client, auth_headers, make_document):
    document = make_document({"applicant": {"email": "a@b.c"}})
    r = client.post(_url(document.id), headers=auth_headers, json={"form_fields": ["email"]})
    data = r.json()["data"]
    assert [s["suggested_value"] for s in data] == ["a@b.c"]
    assert 80 <= data[0]["confidence_score"] < 95


def test_document_suggestions_invalid_body(client, auth_headers, completed_document):
    r = client.post(_url(completed_document.id), headers=auth_headers, json={"form_fields": [""]})
    assert r.status_code == 422
    r = client.post(_url(completed_document.id), headers=auth_headers, json={})
    assert r.status_code == 422


def test_mark_completed_makes_document_available(db_session, test_user, make_document):
    document = make_document(None, processing_status="processing")
    assert SuggestionService.get_document_suggestions(db_session, test_user, document.id, ["city"]) == []

    DocumentService.mark_completed(db_session, document, {"city_name": "New York"})

    assert document.processing_status == "completed"
    result = SuggestionService.get_document_suggestions(db_session, test_user, document.id, ["city"])
    assert [s.suggested_value for s in result] == ["New York"]


def test_mark_failed_hides_document(db_session, test_user, completed_document):
    DocumentService.mark_failed(db_session, completed_document)
    assert completed_document.processing_status == "failed"
    assert DocumentService.get_completed_documents(db_session, test_user) == []


def test_non_string_falsy_values_are_not_suggested(db_session, test_user, make_document):
    document = make_document({"newsletter_opt_in": False, "dependents": 0, "spouse_name": None})
    result = SuggestionService.get_document_suggestions(
        db_session, test_user, document.id, ["newsletter_opt_in", "dependents", "spouse_name"]
    )
    assert result == []


def test_form_suggestions_skip_non_string_falsy_values(client, auth_headers, make_document):
    make_document({"newsletter_opt_in": False, "dependents": 0, "household_size": 3})
    r = client.post(
        "/api/assistant/form-suggestions",
        headers=auth_headers,
        json={"form_data": {"newsletter_opt_in": "", "dependents": "", "household_size": ""}},
    )
    assert r.status_code == 200
    assert [(s["field_name"], s["suggested_value"]) for s in r.json()["data"]] == [
        ("household_size", "3"),
    ]
