"""Application layer: use cases, ports, result types and errors. Depends only on domain."""

from agenda.application.contacts_repository import (
    DEFAULT_IMPORT_CATEGORY_ID,
    ContactsRepository,
    normalize_imported_phone,
)
from agenda.application.dto import DeviceContact, Err, Ok, Result
from agenda.application.errors import (
    AgendaError,
    ExternalSourceError,
    PersistenceError,
    SerializationError,
    ValidationError,
)
from agenda.application.ports import (
    AddressBook,
    CategoryDao,
    ContactActions,
    ContactDao,
    GroupDao,
    Observable,
)
from agenda.application.validation import (
    is_valid_email,
    is_valid_name,
    is_valid_phone,
    validate_contact,
)

__all__ = [
    "DEFAULT_IMPORT_CATEGORY_ID",
    "AddressBook",
    "AgendaError",
    "CategoryDao",
    "ContactActions",
    "ContactDao",
    "ContactsRepository",
    "DeviceContact",
    "Err",
    "ExternalSourceError",
    "GroupDao",
    "Observable",
    "Ok",
    "PersistenceError",
    "Result",
    "SerializationError",
    "ValidationError",
    "is_valid_email",
    "is_valid_name",
    "is_valid_phone",
    "normalize_imported_phone",
    "validate_contact",
]
