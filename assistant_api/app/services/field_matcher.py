"""Suggest form field values from the user's profile and extracted document data."""
from __future__ import annotations

from typing import Any, Iterable, Mapping, Sequence

from assistant_api.app.core.config import settings
from assistant_api.app.schemas.suggestion import Suggestion
from assistant_api.app.services.field_normalization import FieldCategoryService, match_key


def _number(suggestions: list[Suggestion]) -> list[Suggestion]:
    for index, suggestion in enumerate(suggestions, start=1):
        suggestion.id = index
    return suggestions


def _check_confidence_range(low: int, high: int) -> None:
    if not 0 <= low <= high <= 100:
        raise ValueError(f"Invalid confidence range {low}-{high}; expected 0 <= min <= max <= 100")


def _keys_match(field_key: str, data_key: str) -> bool:
    if not field_key or not data_key:
        return False
    return field_key == data_key or data_key in field_key or field_key in data_key


class FieldMatcher:
    """
    Heuristic field-name matcher.

    Profile matches go through the category table and always score
    `profile_confidence`. Document matches compare normalized names and score
    inside `document_confidence`: the maximum for an exact match, scaled down by
    how much of the longer name the shorter one covers otherwise.
    """

    def __init__(
        self,
        profile_confidence: int = 95,
        document_confidence: tuple[int, int] = (75, 90),
    ) -> None:
        _check_confidence_range(profile_confidence, profile_confidence)
        _check_confidence_range(*document_confidence)
        self.profile_confidence = profile_confidence
        self.document_confidence = document_confidence

    def _document_score(self, field_key: str, data_key: str) -> int:
        low, high = self.document_confidence
        if field_key == data_key:
            return high
        shorter, longer = sorted((len(field_key), len(data_key)))
        return low + round((high - low) * shorter / longer)

    def match_profile_fields(self, field_name: str, user_profile: Any) -> list[Suggestion]:
        """At most one suggestion: the profile value behind the field's category."""
        category = FieldCategoryService.categorize(field_name)
        if category is None:
            return []
        attribute = FieldCategoryService.profile_attribute(category)
        value = getattr(user_profile, attribute, None) if attribute else None
        if not value:
            return []
        return _number([
            Suggestion(
                field_name=field_name,
                suggested_value=str(value),
                confidence_score=self.profile_confidence,
                source_type="profile",
                source_id=user_profile.id,
            )
        ])

    def match_document_fields(self, field_name: str, documents: Iterable[Any]) -> list[Suggestion]:
        """One suggestion per matching, non-empty extracted key, in document-then-key order."""
        field_key = match_key(field_name)
        suggestions: list[Suggestion] = []
        for document in documents:
            for data_key, value in (document.extracted_data or {}).items():
                normalized_key = match_key(data_key)
                if not value or not _keys_match(field_key, normalized_key):
                    continue
                suggestions.append(
                    Suggestion(
                        field_name=field_name,
                        suggested_value=str(value),
                        confidence_score=self._document_score(field_key, normalized_key),
                        source_type="document",
                        source_id=document.id,
                    )
                )
        return _number(suggestions)

    def get_form_suggestions(
        self,
        form_data: Mapping[str, Any],
        user_profile: Any,
        documents: Sequence[Any],
    ) -> list[Suggestion]:
        """Profile suggestions then document suggestions, field by field, as one flat list."""
        suggestions: list[Suggestion] = []
        for field_name in form_data:
            suggestions.extend(self.match_profile_fields(field_name, user_profile))
            suggestions.extend(self.match_document_fields(field_name, documents))
        return _number(suggestions)

    def get_document_suggestions(self, form_fields: Iterable[str], document: Any) -> list[Suggestion]:
        if not document.extracted_data:
            return []
        suggestions: list[Suggestion] = []
        for field_name in form_fields:
            suggestions.extend(self.match_document_fields(field_name, [document]))
        return _number(suggestions)


def form_matcher() -> FieldMatcher:
    """Matcher for general form suggestions (profile + all completed documents)."""
    return FieldMatcher(
        profile_confidence=settings.profile_suggestion_confidence,
        document_confidence=(
            settings.form_suggestion_confidence_min,
            settings.form_suggestion_confidence_max,
        ),
    )


def document_matcher() -> FieldMatcher:
    """Matcher for suggestions drawn from one specific document."""
    return FieldMatcher(
        profile_confidence=settings.profile_suggestion_confidence,
        document_confidence=(
            settings.document_suggestion_confidence_min,
            settings.document_suggestion_confidence_max,
        ),
    )
