"""Tests for the alert store."""

import threading

import pytest

from app.models.alert import ConfidenceLevel
from app.services.alert_store import (
    AlertNotFoundError,
    AlertStore,
    DuplicateAlertError,
    get_alert_store,
    reset_alert_store,
)


@pytest.fixture
def store(make_alert):
    """Store with three alerts in feed order a, b, c."""
    return AlertStore([
        make_alert("a", supporter_count=14),
        make_alert("b", supporter_count=39),
        make_alert("c", supporter_count=0),
    ])


class TestAddAndGet:
    """Tests for ingestion and lookup."""

    def test_get_returns_alert(self, store):
        assert store.get("b").supporter_count == 39

    def test_get_unknown_raises(self, store):
        with pytest.raises(AlertNotFoundError) as exc_info:
            store.get("missing")
        assert exc_info.value.alert_id == "missing"

    def test_not_found_is_lookup_error(self, store):
        with pytest.raises(LookupError):
            store.get("missing")

    def test_add_puts_new_alert_first(self, store, make_alert):
        store.add(make_alert("d"))
        assert [a.id for a in store.all()] == ["d", "a", "b", "c"]

    def test_add_append_keeps_it_last(self, store, make_alert):
        store.add(make_alert("d"), append=True)
        assert [a.id for a in store.all()] == ["a", "b", "c", "d"]

    def test_duplicate_id_rejected(self, store, make_alert):
        with pytest.raises(DuplicateAlertError):
            store.add(make_alert("a", supporter_count=99))
        assert store.get("a").supporter_count == 14
        assert len(store) == 3

    def test_len_and_contains(self, store):
        assert len(store) == 3
        assert "a" in store
        assert "zzz" not in store

    def test_empty_store(self):
        store = AlertStore()
        assert len(store) == 0
        assert store.all() == ()


class TestSupportAlert:
    """Tests for support_alert()."""

    def test_fourteen_becomes_medium(self, store):
        alert = store.support_alert("a")
        assert alert.supporter_count == 15
        assert alert.confidence == ConfidenceLevel.MEDIUM

    def test_thirty_nine_becomes_high(self, store):
        alert = store.support_alert("b")
        assert alert.supporter_count == 40
        assert alert.confidence == ConfidenceLevel.HIGH

    def test_replaces_stored_record(self, store):
        returned = store.support_alert("c")
        assert store.get("c") == returned

    def test_keeps_feed_order(self, store):
        store.support_alert("b")
        assert [a.id for a in store.all()] == ["a", "b", "c"]

    def test_unknown_id_leaves_store_unchanged(self, store):
        before = store.all()
        with pytest.raises(AlertNotFoundError):
            store.support_alert("missing")
        assert store.all() == before
        assert "missing" not in store

    def test_monotonic_sequence(self, store):
        previous = store.get("c")
        for _ in range(45):
            current = store.support_alert("c")
            assert current.supporter_count == previous.supporter_count + 1
            assert current.confidence >= previous.confidence
            previous = current
        assert previous.confidence == ConfidenceLevel.HIGH

    def test_other_alerts_untouched(self, store):
        store.support_alert("a")
        assert store.get("b").supporter_count == 39
        assert store.get("c").supporter_count == 0


class TestRecordView:
    """Tests for record_view()."""

    def test_increments_view_count(self, store):
        assert store.record_view("a").view_count == 1
        assert store.record_view("a").view_count == 2

    def test_does_not_change_confidence(self, store):
        alert = store.record_view("b")
        assert alert.supporter_count == 39
        assert alert.confidence == ConfidenceLevel.MEDIUM

    def test_unknown_id_raises(self, store):
        with pytest.raises(AlertNotFoundError):
            store.record_view("missing")


class TestSnapshots:
    """all() hands out snapshots, not live views."""

    def test_snapshot_unaffected_by_support(self, store):
        snapshot = store.all()
        store.support_alert("a")
        store.record_view("a")
        assert snapshot[0].supporter_count == 14
        assert snapshot[0].view_count == 0

    def test_snapshot_unaffected_by_add(self, store, make_alert):
        snapshot = store.all()
        store.add(make_alert("d"))
        assert len(snapshot) == 3

    def test_snapshot_is_immutable_sequence(self, store):
        assert isinstance(store.all(), tuple)


class TestConcurrency:
    """Concurrent mutations must never lose or double-count an update."""

    def _run_concurrently(self, target, count):
        barrier = threading.Barrier(count)

        def worker():
            barrier.wait()
            target()

        threads = [threading.Thread(target=worker) for _ in range(count)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

    def test_two_concurrent_supports_add_exactly_two(self, store):
        self._run_concurrently(lambda: store.support_alert("a"), 2)
        assert store.get("a").supporter_count == 16

    def test_many_concurrent_supports(self, store):
        self._run_concurrently(lambda: store.support_alert("c"), 50)
        alert = store.get("c")
        assert alert.supporter_count == 50
        assert alert.confidence == ConfidenceLevel.HIGH

    def test_supports_and_views_interleave(self, store):
        def both():
            store.support_alert("a")
            store.record_view("a")

        self._run_concurrently(both, 20)
        alert = store.get("a")
        assert alert.supporter_count == 34
        assert alert.view_count == 20

    def test_independent_ids(self, store):
        def spread():
            store.support_alert("a")
            store.support_alert("c")

        self._run_concurrently(spread, 10)
        assert store.get("a").supporter_count == 24
        assert store.get("c").supporter_count == 10
        assert store.get("b").supporter_count == 39

    def test_readers_see_consistent_records(self, store):
        errors = []
        done = threading.Event()

        def reader():
            while not done.is_set():
                for alert in store.all():
                    if alert.confidence != ConfidenceLevel.from_supporters(alert.supporter_count):
                        errors.append(alert)

        reader_thread = threading.Thread(target=reader)
        reader_thread.start()
        try:
            self._run_concurrently(lambda: store.support_alert("c"), 30)
        finally:
            done.set()
            reader_thread.join()

        assert errors == []
        assert store.get("c").supporter_count == 30


class TestSingleton:
    """Tests for the global store accessor."""

    def test_get_returns_same_instance(self, global_store):
        assert get_alert_store() is get_alert_store()
        assert get_alert_store() is global_store

    def test_reset_installs_given_store(self, global_store, make_alert):
        custom = AlertStore([make_alert("x")])
        assert reset_alert_store(custom) is custom
        assert get_alert_store() is custom
