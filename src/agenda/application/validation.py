"""Form-level checks for contact fields. Storage does not enforce these."""

import re

from agenda.application.errors import ValidationError
from agenda.domain import Contact

EMAIL_PATTERN = re.compile(
    r"[a-zA-Z0-9+._%\-]{1,256}"
    r"@"
    r"[a-zA-Z0-9][a-zA-Z0-9\-]{0,64}"
    r"(\.[a-zA-Z0-9][a-zA-Z0-9\-]{0,25})+"
)


def is_valid_name(name: str | None) -> bool:
    return bool(name and name.strip())


def is_valid_phone(phone: str | None) -> bool:
    return bool(phone and phone.strip())


def is_valid_email(email: str | None) -> bool:
    """Email is optional, but when given it must look like an address."""
    if email is None or not email.strip():
        return True
    return EMAIL_PATTERN.fullmatch(email.strip()) is not None


def validate_contact(contact: Contact) -> None:
    """Raise ValidationError listing every failing field."""
    reasons: dict[str, str] = {}
    if not is_valid_name(contact.name):
        reasons["name"] = "Name is required."
    if not is_valid_phone(contact.phone):
        reasons["phone"] = "Phone is required."
    if not is_valid_email(contact.email):
        reasons["email"] = "Email is not a valid address."
    if reasons:
        raise ValidationError(reasons)
