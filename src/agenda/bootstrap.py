"""Composition: build the store handle and hand it to the DAOs and the repository."""

from concurrent.futures import Executor

from agenda.application import ContactsRepository
from agenda.infrastructure.persistence import (
    Database,
    SqlCategoryDao,
    SqlContactDao,
    SqlGroupDao,
)


def open_store(
    url: str = "sqlite://",
    *,
    echo: bool = False,
    executor: Executor | None = None,
) -> tuple[Database, ContactsRepository]:
    """Open (and on first use create and seed) the store at url."""
    db = Database(url, echo=echo, executor=executor)
    db.create_schema()
    repository = ContactsRepository(
        SqlContactDao(db),
        SqlCategoryDao(db),
        SqlGroupDao(db),
        executor=executor,
    )
    return db, repository
