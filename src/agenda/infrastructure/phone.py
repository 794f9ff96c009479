"""Phone number formatting for dial and message URIs."""

import re

import phonenumbers

_WHITESPACE = re.compile(r"\s")


def to_e164(raw: str, default_region: str | None = None) -> str | None:
    """E.164 form for a tel:/smsto: URI, or None when the number does not parse.

    Stored phones are kept as typed; this only shapes what gets dialled.
    default_region applies to numbers without a leading +.
    """
    if not raw or not str(raw).strip():
        return None
    raw = str(raw).strip()
    try:
        parsed = phonenumbers.parse(raw, default_region)
    except phonenumbers.NumberParseException:
        return None
    if not phonenumbers.is_valid_number(parsed):
        return None
    return phonenumbers.format_number(parsed, phonenumbers.PhoneNumberFormat.E164)


def dialable(raw: str, default_region: str | None = None) -> str:
    """E.164 when the number parses, otherwise the input with whitespace removed."""
    return to_e164(raw, default_region) or _WHITESPACE.sub("", raw or "")
