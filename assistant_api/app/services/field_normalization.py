"""Field normalization for form suggestions - maps raw field names to categories and match keys."""
import re
from typing import Optional

_SEPARATOR_RUN = re.compile(r"[\s\-]+")
_STRIPPED_CHARS = re.compile(r"[_\- ]")


def category_text(field_name: str) -> str:
    """Lowercase; runs of whitespace/hyphens become '_' ("Email Address" -> "email_address")."""
    return _SEPARATOR_RUN.sub("_", (field_name or "").strip().lower())


def match_key(text: str) -> str:
    """Lowercase and drop '_', '-' and spaces ("Postal-Code" -> "postalcode")."""
    return _STRIPPED_CHARS.sub("", (text or "").lower())


class FieldCategoryService:
    """
    Classifies a form field name into a profile category using synonym substrings.
    Order matters: the first category with a matching synonym wins.
    """

    # category -> synonyms; "ssn" from the legacy table is left out since
    # profiles never store it
    PATTERNS = {
        "name": ["full_name", "first_name", "last_name", "customer_name"],
        "email": ["email_address", "contact_email", "user_email"],
        "phone": ["phone_number", "mobile", "contact_number", "telephone"],
        "address": ["street_address", "home_address", "billing_address"],
        "city": ["city_name", "location", "municipality"],
        "zip": ["postal_code", "zip_code", "postcode"],
        "country": ["country_name", "nation"],
        "date_of_birth": ["birth_date", "dob", "birthday"],
    }

    # category -> UserProfile attribute holding its value
    PROFILE_ATTRIBUTES = {
        "name": "name",
        "email": "email",
        "phone": "phone",
        "address": "address",
        "city": "city",
        "zip": "zip_code",
        "country": "country",
        "date_of_birth": "date_of_birth",
    }

    @classmethod
    def categorize(cls, field_name: str) -> Optional[str]:
        """
        Return the first category whose synonym contains the field name or is
        contained in it. Returns None when nothing matches.
        """
        text = category_text(field_name)
        if not text.strip("_"):
            return None
        for category, synonyms in cls.PATTERNS.items():
            for synonym in synonyms:
                if synonym in text or text in synonym:
                    return category
        return None

    @classmethod
    def profile_attribute(cls, category: str) -> Optional[str]:
        return cls.PROFILE_ATTRIBUTES.get(category)
