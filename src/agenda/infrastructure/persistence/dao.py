"""SQLAlchemy implementations of the ContactDao, CategoryDao and GroupDao ports.

Inserts that "ignore duplicates" use SQLite's ON CONFLICT DO NOTHING, so a
key clash turns that row into a no-op instead of an error.
"""

from collections.abc import Iterable

from sqlalchemy import delete, or_, select, update
from sqlalchemy.dialects.sqlite import insert as sqlite_insert

from agenda.domain import Category, Contact, ContactGroupLink, ContactWithGroups, Group
from agenda.infrastructure.live import LiveQuery
from agenda.infrastructure.persistence.database import Database
from agenda.infrastructure.persistence.schema import (
    CATEGORIES,
    CONTACTS,
    GROUPS,
    LINKS,
    CategoryRow,
    ContactGroupLinkRow,
    ContactRow,
    GroupRow,
)


def _to_contact(row: ContactRow) -> Contact:
    return Contact(
        id=row.id,
        name=row.name,
        phone=row.phone,
        email=row.email,
        category_id=row.category_id,
        linkedin=row.linkedin,
        website=row.website,
    )


def _contact_values(contact: Contact) -> dict:
    return {
        "name": contact.name,
        "phone": contact.phone,
        "email": contact.email,
        "category_id": contact.category_id,
        "linkedin": contact.linkedin,
        "website": contact.website,
    }


class SqlContactDao:
    def __init__(self, db: Database) -> None:
        self._db = db

    def _live(self, statement) -> LiveQuery[list[Contact]]:
        def load() -> list[Contact]:
            with self._db.read() as session:
                return [_to_contact(row) for row in session.scalars(statement)]

        return LiveQuery(self._db.tracker, (CONTACTS,), load)

    def insert(self, contact: Contact) -> int:
        """Insert and return the generated id. A non-zero id replaces that row."""
        with self._db.write(CONTACTS) as session:
            if contact.is_new:
                row = ContactRow(**_contact_values(contact))
                session.add(row)
            else:
                row = session.merge(ContactRow(id=contact.id, **_contact_values(contact)))
            session.flush()
            return row.id

    def update(self, contact: Contact) -> None:
        with self._db.write(CONTACTS) as session:
            session.execute(
                update(ContactRow)
                .where(ContactRow.id == contact.id)
                .values(**_contact_values(contact))
            )

    def delete(self, contact: Contact) -> None:
        with self._db.write(CONTACTS) as session:
            session.execute(delete(ContactRow).where(ContactRow.id == contact.id))

    def all_contacts(self) -> LiveQuery[list[Contact]]:
        return self._live(select(ContactRow).order_by(ContactRow.name))

    def by_id(self, contact_id: int) -> LiveQuery[Contact | None]:
        def load() -> Contact | None:
            with self._db.read() as session:
                row = session.get(ContactRow, contact_id)
                return _to_contact(row) if row is not None else None

        return LiveQuery(self._db.tracker, (CONTACTS,), load)

    def search(self, pattern: str) -> LiveQuery[list[Contact]]:
        return self._live(
            select(ContactRow)
            .where(or_(ContactRow.name.like(pattern), ContactRow.phone.like(pattern)))
            .order_by(ContactRow.name)
        )

    def snapshot(self) -> list[Contact]:
        with self._db.read() as session:
            return [
                _to_contact(row)
                for row in session.scalars(select(ContactRow).order_by(ContactRow.id))
            ]

    def insert_many(self, contacts: Iterable[Contact]) -> None:
        rows = [
            {"id": contact.id or None, **_contact_values(contact)} for contact in contacts
        ]
        if not rows:
            return
        statement = sqlite_insert(ContactRow.__table__).on_conflict_do_nothing()
        with self._db.write(CONTACTS) as session:
            session.execute(statement, rows)

    def by_category(self, category_id: int) -> LiveQuery[list[Contact]]:
        return self._live(
            select(ContactRow)
            .where(ContactRow.category_id == category_id)
            .order_by(ContactRow.name)
        )


class SqlCategoryDao:
    def __init__(self, db: Database) -> None:
        self._db = db

    def insert(self, category: Category) -> None:
        statement = (
            sqlite_insert(CategoryRow.__table__)
            .values(id=category.id or None, name=category.name)
            .on_conflict_do_nothing()
        )
        with self._db.write(CATEGORIES) as session:
            session.execute(statement)

    def delete(self, category: Category) -> None:
        # contacts.category_id is cleared by ON DELETE SET NULL.
        with self._db.write(CATEGORIES, CONTACTS) as session:
            session.execute(delete(CategoryRow).where(CategoryRow.id == category.id))

    def all_categories(self) -> LiveQuery[list[Category]]:
        def load() -> list[Category]:
            with self._db.read() as session:
                rows = session.scalars(select(CategoryRow).order_by(CategoryRow.name))
                return [Category(id=row.id, name=row.name) for row in rows]

        return LiveQuery(self._db.tracker, (CATEGORIES,), load)


class SqlGroupDao:
    def __init__(self, db: Database) -> None:
        self._db = db

    def insert(self, group: Group) -> None:
        statement = (
            sqlite_insert(GroupRow.__table__)
            .values(id=group.id or None, name=group.name)
            .on_conflict_do_nothing()
        )
        with self._db.write(GROUPS) as session:
            session.execute(statement)

    def all_groups(self) -> LiveQuery[list[Group]]:
        def load() -> list[Group]:
            with self._db.read() as session:
                rows = session.scalars(select(GroupRow).order_by(GroupRow.name))
                return [Group(id=row.id, name=row.name) for row in rows]

        return LiveQuery(self._db.tracker, (GROUPS,), load)

    def add_link(self, link: ContactGroupLink) -> None:
        statement = (
            sqlite_insert(ContactGroupLinkRow.__table__)
            .values(contact_id=link.contact_id, group_id=link.group_id)
            .on_conflict_do_nothing()
        )
        with self._db.write(LINKS) as session:
            session.execute(statement)

    def remove_link(self, link: ContactGroupLink) -> None:
        with self._db.write(LINKS) as session:
            session.execute(
                delete(ContactGroupLinkRow).where(
                    ContactGroupLinkRow.contact_id == link.contact_id,
                    ContactGroupLinkRow.group_id == link.group_id,
                )
            )

    def contact_with_groups(self, contact_id: int) -> LiveQuery[ContactWithGroups | None]:
        def load() -> ContactWithGroups | None:
            with self._db.read() as session:
                row = session.get(ContactRow, contact_id)
                if row is None:
                    return None
                groups = session.scalars(
                    select(GroupRow)
                    .join(ContactGroupLinkRow, ContactGroupLinkRow.group_id == GroupRow.id)
                    .where(ContactGroupLinkRow.contact_id == contact_id)
                    .order_by(GroupRow.name)
                )
                return ContactWithGroups(
                    contact=_to_contact(row),
                    groups=[Group(id=g.id, name=g.name) for g in groups],
                )

        return LiveQuery(self._db.tracker, (CONTACTS, GROUPS, LINKS), load)
