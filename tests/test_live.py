"""Tests for the invalidation tracker and live queries, independent of SQL."""

from concurrent.futures import ThreadPoolExecutor

from agenda.infrastructure import InvalidationTracker, LiveQuery


def test_notify_refreshes_each_subscriber_once():
    tracker = InvalidationTracker()
    state = {"n": 0}
    query = LiveQuery(tracker, ("a", "b"), lambda: state["n"])
    seen = []
    query.subscribe(seen.append)

    state["n"] = 1
    tracker.notify(["a", "b"])
    assert seen == [0, 1]

    tracker.notify(["c"])
    assert seen == [0, 1]


def test_value_recomputes_without_subscribing():
    tracker = InvalidationTracker()
    calls = []
    query = LiveQuery(tracker, ("a",), lambda: calls.append(1) or len(calls))
    assert query.value() == 1
    assert query.value() == 2
    assert tracker.observer_count("a") == 0


def test_refreshes_run_on_executor():
    with ThreadPoolExecutor(max_workers=1) as executor:
        tracker = InvalidationTracker(executor)
        seen = []
        LiveQuery(tracker, ("a",), lambda: "value").subscribe(seen.append)
        tracker.notify(["a"])
    assert seen == ["value", "value"]


def test_failed_refresh_without_handler_keeps_subscription():
    tracker = InvalidationTracker()
    outcomes = iter([ValueError("boom"), "ok"])

    def compute():
        outcome = next(outcomes)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    seen = []
    subscription = LiveQuery(tracker, ("a",), compute).subscribe(seen.append)
    assert seen == []
    tracker.notify(["a"])
    assert seen == ["ok"]
    assert not subscription.cancelled


def test_raising_subscriber_does_not_stop_the_others():
    tracker = InvalidationTracker()
    state = {"n": 0}
    query = LiveQuery(tracker, ("a",), lambda: state["n"])

    def fragile(value):
        if value:
            raise RuntimeError("render failed")

    errors = []
    healthy = []
    query.subscribe(fragile, on_error=errors.append)
    query.subscribe(healthy.append)

    state["n"] = 1
    tracker.notify(["a"])

    assert healthy == [0, 1]
    assert [str(e) for e in errors] == ["render failed"]
