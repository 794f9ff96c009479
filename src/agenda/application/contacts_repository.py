"""Contact use cases composed from the DAOs: search, save with groups, device import, backup."""

import dataclasses
import logging
import re
from collections.abc import Callable, Iterable
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import TypeVar

from agenda.application.dto import Err, Ok, Result
from agenda.application.errors import AgendaError, ExternalSourceError
from agenda.application.ports import (
    AddressBook,
    CategoryDao,
    ContactDao,
    GroupDao,
    Observable,
)
from agenda.application.validation import validate_contact
from agenda.domain import (
    NEW_CONTACT_ID,
    Category,
    Contact,
    ContactGroupLink,
    ContactWithGroups,
    Group,
)

logger = logging.getLogger(__name__)

# Category given to every contact imported from the device ("Family" in the seed set).
DEFAULT_IMPORT_CATEGORY_ID = 1

R = TypeVar("R")

_WHITESPACE = re.compile(r"\s")


def normalize_imported_phone(raw: str | None) -> str:
    """Drop every whitespace character; nothing else is changed."""
    return _WHITESPACE.sub("", raw or "")


class ContactsRepository:
    """Domain-level use cases over the contact, category and group DAOs.

    Observable accessors return live queries. Every other use case returns
    Ok(value) or Err(error) and never raises. Multi-step use cases commit each
    step on its own; a failure part-way leaves earlier steps in place.
    """

    def __init__(
        self,
        contacts: ContactDao,
        categories: CategoryDao,
        groups: GroupDao,
        *,
        executor: Executor | None = None,
    ) -> None:
        self._contacts = contacts
        self._categories = categories
        self._groups = groups
        self._executor = executor
        self._owns_executor = False

    def _attempt(self, action: str, fn: Callable[[], R]) -> Result[R]:
        try:
            return Ok(fn())
        except AgendaError as e:
            logger.warning("%s failed: %s", action, e.reason)
            return Err(e)

    # --- observable queries ---

    def all_contacts(self) -> Observable[list[Contact]]:
        return self._contacts.all_contacts()

    def all_categories(self) -> Observable[list[Category]]:
        return self._categories.all_categories()

    def all_groups(self) -> Observable[list[Group]]:
        return self._groups.all_groups()

    def contact_by_id(self, contact_id: int) -> Observable[Contact | None]:
        return self._contacts.by_id(contact_id)

    def contacts_by_category(self, category_id: int) -> Observable[list[Contact]]:
        return self._contacts.by_category(category_id)

    def search(self, query: str) -> Observable[list[Contact]]:
        """Contacts whose name or phone contains query, by name. Empty query lists everything."""
        if not query:
            return self._contacts.all_contacts()
        return self._contacts.search(f"%{query}%")

    def get_contact_with_groups(self, contact_id: int) -> Observable[ContactWithGroups | None]:
        return self._groups.contact_with_groups(contact_id)

    # --- single-step writes ---

    def insert_contact(self, contact: Contact) -> Result[int]:
        def run() -> int:
            validate_contact(contact)
            return self._contacts.insert(contact)

        return self._attempt("Insert contact", run)

    def update_contact(self, contact: Contact) -> Result[None]:
        def run() -> None:
            validate_contact(contact)
            self._contacts.update(contact)

        return self._attempt("Update contact", run)

    def delete_contact(self, contact: Contact) -> Result[None]:
        return self._attempt("Delete contact", lambda: self._contacts.delete(contact))

    def insert_category(self, category: Category) -> Result[None]:
        return self._attempt("Insert category", lambda: self._categories.insert(category))

    def delete_category(self, category: Category) -> Result[None]:
        return self._attempt("Delete category", lambda: self._categories.delete(category))

    def create_group(self, name: str) -> Result[None]:
        """Create a group. Blank names are ignored."""
        name = (name or "").strip()
        if not name:
            return Ok()
        return self._attempt("Create group", lambda: self._groups.insert(Group(name=name)))

    def remove_contact_from_group(self, contact_id: int, group_id: int) -> Result[None]:
        return self._attempt(
            "Remove contact from group",
            lambda: self._groups.remove_link(ContactGroupLink(contact_id, group_id)),
        )

    # --- multi-step use cases ---

    def associate_groups(self, contact_id: int, group_ids: Iterable[int]) -> Result[None]:
        """Link the contact to every group in group_ids. Existing links are kept."""

        def run() -> None:
            for group_id in group_ids:
                self._groups.add_link(ContactGroupLink(contact_id, group_id))

        return self._attempt("Associate groups", run)

    def save_contact_and_associate_groups(
        self, contact: Contact, group_ids: Iterable[int]
    ) -> Result[int]:
        """Insert (id == 0) or update the contact, then link it to group_ids.

        Membership only grows: groups missing from group_ids keep their links.
        Returns the contact's id.
        """
        group_ids = list(group_ids)

        def run() -> int:
            validate_contact(contact)
            if contact.id == NEW_CONTACT_ID:
                contact_id = self._contacts.insert(contact)
            else:
                self._contacts.update(contact)
                contact_id = contact.id
            for group_id in group_ids:
                self._groups.add_link(ContactGroupLink(contact_id, group_id))
            return contact_id

        return self._attempt("Save contact", run)

    def import_from_address_book(self, source: AddressBook) -> Result[int]:
        """Copy device contacts whose phone is not stored yet. Returns how many were inserted.

        Nothing is written unless the whole address book was read.
        """

        def run() -> int:
            existing = {c.phone for c in self._contacts.snapshot()}
            try:
                rows = list(source.query_address_book())
            except ExternalSourceError:
                raise
            except Exception as e:
                raise ExternalSourceError(f"Could not read address book: {e}") from e

            new_contacts: list[Contact] = []
            for display_name, phone_number in rows:
                phone = normalize_imported_phone(phone_number)
                if not phone or phone in existing:
                    continue
                existing.add(phone)
                new_contacts.append(
                    Contact(
                        name=display_name,
                        phone=phone,
                        email="",
                        category_id=DEFAULT_IMPORT_CATEGORY_ID,
                    )
                )
            if new_contacts:
                self._contacts.insert_many(new_contacts)
            logger.info(
                "Imported %d of %d address book entries", len(new_contacts), len(rows)
            )
            return len(new_contacts)

        return self._attempt("Import from address book", run)

    def backup_all(self) -> Result[list[Contact]]:
        return self._attempt("Backup", self._contacts.snapshot)

    def restore_all(self, contacts: Iterable[Contact]) -> Result[int]:
        """Insert every contact under a fresh id. Returns how many were inserted."""

        def run() -> int:
            count = 0
            for contact in contacts:
                self._contacts.insert(dataclasses.replace(contact, id=NEW_CONTACT_ID))
                count += 1
            logger.info("Restored %d contacts", count)
            return count

        return self._attempt("Restore", run)

    # --- background execution ---

    def submit(self, use_case: Callable[..., R], *args) -> "Future[R]":
        """Run a use case off the caller's thread, e.g. submit(repo.backup_all)."""
        if self._executor is None:
            self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="agenda")
            self._owns_executor = True
        return self._executor.submit(use_case, *args)

    def close(self) -> None:
        if self._owns_executor and self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None
            self._owns_executor = False
