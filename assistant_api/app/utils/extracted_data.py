"""Extracted document data flattening - nested extraction output to flat string key/values."""
from typing import Any


def _scalar_text(value: Any) -> str:
    # False, 0, 0.0 and None carry no answer; "0" as a string does
    if isinstance(value, str):
        return value.strip()
    if not value:
        return ""
    return str(value)


def _put(flat: dict[str, str], key: str, text: str) -> None:
    """First non-empty value for a key wins."""
    if not flat.get(key):
        flat[key] = text


def flatten_extracted_data(data: Any, prefix: str = "") -> dict[str, str]:
    """
    Flatten extraction output into {key: text}.
    Nested mappings join keys with '_' ({"applicant": {"email": x}} -> "applicant_email"),
    lists of scalars join with ", ", non-string falsy values become "".
    When two paths flatten to the same key, the first non-empty value is kept.
    """
    if not isinstance(data, dict):
        return {}
    flat: dict[str, str] = {}
    for key, value in data.items():
        full_key = f"{prefix}_{key}" if prefix else str(key)
        if isinstance(value, dict):
            for nested_key, text in flatten_extracted_data(value, full_key).items():
                _put(flat, nested_key, text)
        elif isinstance(value, (list, tuple)):
            _put(flat, full_key, ", ".join(
                _scalar_text(item) for item in value
                if not isinstance(item, (dict, list, tuple)) and _scalar_text(item)
            ))
        else:
            _put(flat, full_key, _scalar_text(value))
    return flat
