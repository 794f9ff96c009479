"""Observable query results.

InvalidationTracker is a callback registry keyed by table name. A LiveQuery
registers its subscribers for the tables it reads; after every committed write
the store notifies the touched tables and each affected subscriber re-runs the
query and receives the fresh value.
"""

import logging
import threading
from collections import defaultdict
from collections.abc import Callable, Iterable
from concurrent.futures import Executor
from typing import Any, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class InvalidationTracker:
    """Fans table-change notifications out to registered refresh callbacks.

    With an executor, refreshes run there instead of on the writer's thread.
    """

    def __init__(self, executor: Executor | None = None) -> None:
        self._executor = executor
        self._lock = threading.Lock()
        self._observers: dict[str, set[Callable[[], None]]] = defaultdict(set)

    def add_observer(self, tables: Iterable[str], refresh: Callable[[], None]) -> None:
        with self._lock:
            for table in tables:
                self._observers[table].add(refresh)

    def remove_observer(self, refresh: Callable[[], None]) -> None:
        with self._lock:
            for observers in self._observers.values():
                observers.discard(refresh)

    def observer_count(self, table: str) -> int:
        with self._lock:
            return len(self._observers.get(table, ()))

    def notify(self, tables: Iterable[str]) -> None:
        with self._lock:
            pending = {fn for table in tables for fn in self._observers.get(table, ())}
        for refresh in pending:
            try:
                self.dispatch(refresh)
            except Exception:
                logger.exception("Observer refresh failed")

    def dispatch(self, refresh: Callable[[], None]) -> None:
        if self._executor is None:
            refresh()
        else:
            self._executor.submit(refresh)


class Subscription(Generic[T]):
    """Handle returned by LiveQuery.subscribe. cancel() stops further emissions."""

    def __init__(
        self,
        query: "LiveQuery[T]",
        callback: Callable[[T], Any],
        on_error: Callable[[Exception], Any] | None,
    ) -> None:
        self._query = query
        self._callback = callback
        self._on_error = on_error
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def refresh(self) -> None:
        if self._cancelled:
            return
        try:
            value = self._query.value()
        except Exception as exc:
            logger.exception("Live query over %s failed to refresh", ", ".join(self._query.tables))
            self._fail(exc)
            return
        try:
            self._callback(value)
        except Exception as exc:
            logger.exception("Subscriber to %s failed", ", ".join(self._query.tables))
            self._fail(exc)

    def _fail(self, exc: Exception) -> None:
        if self._on_error is not None:
            self._on_error(exc)

    def cancel(self) -> None:
        self._cancelled = True
        self._query.tracker.remove_observer(self.refresh)


class LiveQuery(Generic[T]):
    """A query that can be read once (value) or observed (subscribe)."""

    def __init__(
        self,
        tracker: InvalidationTracker,
        tables: Iterable[str],
        compute: Callable[[], T],
    ) -> None:
        self.tracker = tracker
        self.tables = tuple(tables)
        self._compute = compute

    def value(self) -> T:
        return self._compute()

    def subscribe(
        self,
        callback: Callable[[T], Any],
        *,
        on_error: Callable[[Exception], Any] | None = None,
    ) -> Subscription[T]:
        """Emit the current value now and again after every write to self.tables."""
        subscription = Subscription(self, callback, on_error)
        self.tracker.add_observer(self.tables, subscription.refresh)
        self.tracker.dispatch(subscription.refresh)
        return subscription
