"""
Agenda core: clean-architecture layout.

- domain: entities (Contact, Category, Group, ContactGroupLink). No outer dependencies.
- application: use cases (ContactsRepository), ports (DAOs, AddressBook, ContactActions), results.
- infrastructure: adapters (SQLAlchemy store and DAOs, backup codec, card exporter).
"""

from agenda.application import (
    ContactsRepository,
    DeviceContact,
    Err,
    Ok,
)
from agenda.bootstrap import open_store
from agenda.domain import Category, Contact, ContactGroupLink, ContactWithGroups, Group
from agenda.infrastructure import Database

__all__ = [
    "Category",
    "Contact",
    "ContactGroupLink",
    "ContactWithGroups",
    "ContactsRepository",
    "Database",
    "DeviceContact",
    "Err",
    "Group",
    "Ok",
    "open_store",
]
