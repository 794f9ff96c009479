"""Store handle: SQLAlchemy engine, sessions, schema creation and seed data.

Built explicitly and passed to the DAOs; there is no module-level engine.
"""

import logging
import sqlite3
import threading
from collections.abc import Iterator
from concurrent.futures import Executor
from contextlib import contextmanager, nullcontext

from sqlalchemy import create_engine, event, inspect
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from agenda.application.errors import PersistenceError
from agenda.infrastructure.live import InvalidationTracker
from agenda.infrastructure.persistence.schema import (
    CATEGORIES,
    CONTACTS,
    GROUPS,
    Base,
    CategoryRow,
    GroupRow,
)

logger = logging.getLogger(__name__)

DEFAULT_CATEGORIES = ("Family", "Work", "Friends", "General")
DEFAULT_GROUPS = ("Group 1", "Group 2", "Group 3")

# sqlite3 errors can surface unwrapped, e.g. from commit on a busy connection.
_DRIVER_ERRORS = (SQLAlchemyError, sqlite3.Error)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """One local relational store shared by every DAO.

    write() commits and then notifies the InvalidationTracker of the tables it
    was told it touched, which refreshes any live query reading them.
    """

    def __init__(
        self,
        url: str = "sqlite://",
        *,
        echo: bool = False,
        executor: Executor | None = None,
    ) -> None:
        parsed = make_url(url)
        kwargs: dict = {}
        is_sqlite = parsed.get_backend_name() == "sqlite"
        shared_connection = False
        if is_sqlite:
            kwargs["connect_args"] = {"check_same_thread": False}
            if parsed.database in (None, "", ":memory:"):
                # Every session must see the same in-memory database.
                kwargs["poolclass"] = StaticPool
                shared_connection = True
        self.engine = create_engine(url, echo=echo, **kwargs)
        if is_sqlite:
            event.listen(self.engine, "connect", _enable_sqlite_foreign_keys)
        self._session_factory = sessionmaker(
            self.engine, expire_on_commit=False, autoflush=False
        )
        # One sqlite3 connection behind StaticPool; sessions on it take turns.
        self._lock = threading.RLock() if shared_connection else nullcontext()
        self.tracker = InvalidationTracker(executor)

    def create_schema(self) -> bool:
        """Create the tables; seed default categories and groups the first time only.

        Returns True when the store was freshly created.
        """
        try:
            with self._lock:
                fresh = not inspect(self.engine).has_table(CONTACTS)
                Base.metadata.create_all(self.engine)
        except _DRIVER_ERRORS as e:
            raise PersistenceError(f"Could not create schema: {e}") from e
        if fresh:
            with self.write(CATEGORIES, GROUPS) as session:
                session.add_all(CategoryRow(name=name) for name in DEFAULT_CATEGORIES)
                session.add_all(GroupRow(name=name) for name in DEFAULT_GROUPS)
            logger.info(
                "Created contacts store with %d categories and %d groups",
                len(DEFAULT_CATEGORIES),
                len(DEFAULT_GROUPS),
            )
        return fresh

    @contextmanager
    def read(self) -> Iterator[Session]:
        try:
            with self._lock, self._session_factory() as session:
                yield session
        except _DRIVER_ERRORS as e:
            raise PersistenceError(str(e)) from e

    @contextmanager
    def write(self, *tables: str) -> Iterator[Session]:
        """Session that commits on exit and then invalidates tables."""
        try:
            with self._lock, self._session_factory() as session, session.begin():
                yield session
        except _DRIVER_ERRORS as e:
            raise PersistenceError(str(e)) from e
        self.tracker.notify(tables)

    def close(self) -> None:
        self.engine.dispose()
