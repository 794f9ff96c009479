"""JSON backup and restore of the full contact list.

A backup is a UTF-8 JSON array with one object per contact:
{"id", "name", "phone", "email", "category_id", "linkedin", "website"}.
Spanish field names ("nombre", "telefono", "categoriaId") are
accepted on read.
"""

import logging
from pathlib import Path

from pydantic import AliasChoices, BaseModel, Field, TypeAdapter, field_validator
from pydantic import ValidationError as PydanticValidationError

from agenda.application.errors import SerializationError
from agenda.domain import Contact

logger = logging.getLogger(__name__)


class ContactRecord(BaseModel):
    id: int = 0
    name: str = Field(validation_alias=AliasChoices("name", "nombre"))
    phone: str = Field(validation_alias=AliasChoices("phone", "telefono"))
    email: str | None = None
    category_id: int | None = Field(
        default=None, validation_alias=AliasChoices("category_id", "categoriaId")
    )
    linkedin: str = ""
    website: str = ""

    @field_validator("linkedin", "website", mode="before")
    @classmethod
    def _null_as_empty(cls, value):
        return "" if value is None else value

    @classmethod
    def from_contact(cls, contact: Contact) -> "ContactRecord":
        return cls(
            id=contact.id,
            name=contact.name,
            phone=contact.phone,
            email=contact.email,
            category_id=contact.category_id,
            linkedin=contact.linkedin,
            website=contact.website,
        )

    def to_contact(self) -> Contact:
        return Contact(
            id=self.id,
            name=self.name,
            phone=self.phone,
            email=self.email,
            category_id=self.category_id,
            linkedin=self.linkedin,
            website=self.website,
        )


_RECORDS = TypeAdapter(list[ContactRecord])


def encode_contacts(contacts: list[Contact]) -> str:
    """Serialize contacts, in order, to a JSON array. None fields are written as null."""
    records = [ContactRecord.from_contact(c) for c in contacts]
    return _RECORDS.dump_json(records, indent=2).decode("utf-8")


def decode_contacts(text: str | bytes) -> list[Contact]:
    """Parse a backup. Raises SerializationError; never returns a partial list."""
    try:
        records = _RECORDS.validate_json(text)
    except PydanticValidationError as e:
        raise SerializationError(f"Invalid backup: {e.error_count()} error(s)") from e
    return [r.to_contact() for r in records]


def write_backup(path: str | Path, contacts: list[Contact]) -> bool:
    """Write a backup file. Returns False if the file could not be written."""
    try:
        Path(path).write_text(encode_contacts(contacts), encoding="utf-8")
    except OSError:
        logger.exception("Could not write backup to %s", path)
        return False
    logger.info("Wrote %d contacts to %s", len(contacts), path)
    return True


def read_backup(path: str | Path) -> list[Contact] | None:
    """Read a backup file. None means there is nothing to restore (unreadable or malformed)."""
    try:
        text = Path(path).read_text(encoding="utf-8")
        return decode_contacts(text)
    except (OSError, SerializationError) as e:
        logger.warning("Could not read backup from %s: %s", path, e)
        return None
