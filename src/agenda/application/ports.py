"""Application ports (interfaces). Implemented by infrastructure adapters."""

from collections.abc import Callable, Iterable
from typing import Any, Protocol, TypeVar

from agenda.application.dto import DeviceContact
from agenda.domain import Category, Contact, ContactGroupLink, ContactWithGroups, Group

T = TypeVar("T")


class Subscription(Protocol):
    def cancel(self) -> None: ...


class Observable(Protocol[T]):
    """Live query result: emits the current value on subscribe and after every relevant write."""

    def subscribe(
        self,
        callback: Callable[[T], Any],
        *,
        on_error: Callable[[Exception], Any] | None = None,
    ) -> Subscription:
        ...

    def value(self) -> T:
        """Run the query once and return its current result."""
        ...


class ContactDao(Protocol):
    """Typed queries over the contacts table."""

    def insert(self, contact: Contact) -> int:
        """Store a contact and return its generated id."""
        ...

    def update(self, contact: Contact) -> None: ...

    def delete(self, contact: Contact) -> None: ...

    def all_contacts(self) -> Observable[list[Contact]]: ...

    def by_id(self, contact_id: int) -> Observable[Contact | None]: ...

    def search(self, pattern: str) -> Observable[list[Contact]]:
        """Match name OR phone against a LIKE pattern the caller already wrapped in %."""
        ...

    def snapshot(self) -> list[Contact]:
        """All contacts, one-shot (backup and dedup)."""
        ...

    def insert_many(self, contacts: Iterable[Contact]) -> None:
        """Bulk insert; rows that conflict with an existing key are skipped."""
        ...

    def by_category(self, category_id: int) -> Observable[list[Contact]]: ...


class CategoryDao(Protocol):
    def insert(self, category: Category) -> None: ...

    def delete(self, category: Category) -> None: ...

    def all_categories(self) -> Observable[list[Category]]: ...


class GroupDao(Protocol):
    def insert(self, group: Group) -> None: ...

    def all_groups(self) -> Observable[list[Group]]: ...

    def add_link(self, link: ContactGroupLink) -> None: ...

    def remove_link(self, link: ContactGroupLink) -> None: ...

    def contact_with_groups(self, contact_id: int) -> Observable[ContactWithGroups | None]: ...


class AddressBook(Protocol):
    """External contact source supplied by the host environment."""

    def query_address_book(self) -> Iterable[DeviceContact]:
        ...


class ContactActions(Protocol):
    """What a contact list row lets the user do."""

    def call(self, phone: str) -> None: ...

    def message(self, phone: str) -> None: ...

    def open_item(self, contact: Contact) -> None: ...

    def open_linkedin(self, profile: str) -> None: ...

    def open_website(self, url: str) -> None: ...
