import re
from typing import Any, Dict, Optional
from .error_handler import ValidationError

class InputValidator:
    """Input validation utilities for contact records"""

    # local@label.label[.label...], no empty domain labels
    EMAIL_REGEX = re.compile(
        r'^[a-zA-Z0-9._%+-]+@(?:[a-zA-Z0-9](?:[a-zA-Z0-9-]*[a-zA-Z0-9])?\.)+[a-zA-Z]{2,}$'
    )

    # Fields a caller may change through an update
    MUTABLE_FIELDS = ("company", "person", "email", "phone", "country")

    @classmethod
    def validate_email(cls, email: str) -> str:
        """Validate an email address and return it stripped"""
        if not email or not isinstance(email, str) or not email.strip():
            raise ValidationError("Email address is required")

        email = email.strip()
        if len(email) > 254:  # RFC 5321 limit
            raise ValidationError("Email address too long")

        if not cls.EMAIL_REGEX.match(email):
            raise ValidationError(f"Invalid email address format: {email}")

        return email

    @classmethod
    def validate_person(cls, person: str) -> str:
        """Validate the contact's person name"""
        if not person or not isinstance(person, str) or not person.strip():
            raise ValidationError("Person is required")
        return person.strip()

    @classmethod
    def validate_contact(
        cls,
        company: str,
        person: str,
        email: str,
        phone: str = "",
        slug_hint: str = "",
        country: str = "",
    ) -> Dict[str, str]:
        """
        Check a contact's fields before anything is written.

        Only person and email are constrained; the remaining fields are
        passed through with surrounding whitespace removed.
        """
        validated = {
            "person": cls.validate_person(person),
            "email": cls.validate_email(email),
        }
        for name, value in (("company", company), ("phone", phone),
                            ("slug", slug_hint), ("country", country)):
            validated[name] = _optional_str(value, name)
        return validated

    @classmethod
    def validate_update_fields(cls, data: Optional[Dict[str, Any]]) -> Dict[str, str]:
        """Validate a partial field set coming from an API request"""
        if not isinstance(data, dict):
            raise ValidationError("Invalid request format")

        unknown = set(data) - set(cls.MUTABLE_FIELDS)
        if unknown:
            raise ValidationError(f"Fields cannot be updated: {', '.join(sorted(unknown))}")

        validated = {}
        for name in cls.MUTABLE_FIELDS:
            if name not in data:
                continue
            if name == "person":
                validated[name] = cls.validate_person(data[name])
            elif name == "email":
                validated[name] = cls.validate_email(data[name])
            else:
                validated[name] = _optional_str(data[name], name)
        return validated


def _optional_str(value: Any, name: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValidationError(f"{name} must be a string")
    return value.strip()

