"""
Unit tests for BookingStore.

Tests:
- Initial observation of the empty list
- Append-only add
- Delete of the first equal entry, and of absent entries
- Observer subscription lifecycle
"""
from datetime import date

from models.schemas import BookingEntry
from services.booking_store import BookingStore


class Recorder:
    """Observer that keeps every list it receives."""

    def __init__(self):
        self.received = []

    def __call__(self, entries):
        self.received.append(entries)

    @property
    def last(self):
        return self.received[-1]


class TestObserve:
    """Test observation of the store."""

    def test_observe_starts_with_empty_list(self, booking_store: BookingStore):
        """Test that a new observer immediately receives the empty list."""
        recorder = Recorder()

        booking_store.observe(recorder)

        assert recorder.received == [[]]

    def test_observe_receives_current_list(self, booking_store: BookingStore, entry_a):
        """Test that a late observer receives the entries added before it."""
        booking_store.add(entry_a)
        recorder = Recorder()

        booking_store.observe(recorder)

        assert recorder.received == [[entry_a]]

    def test_all_observers_see_changes(self, booking_store: BookingStore, entry_a):
        """Test that every observer is notified."""
        first, second = Recorder(), Recorder()
        booking_store.observe(first)
        booking_store.observe(second)

        booking_store.add(entry_a)

        assert first.last == [entry_a]
        assert second.last == [entry_a]

    def test_unsubscribe_stops_notifications(self, booking_store: BookingStore, entry_a):
        """Test that a detached observer is no longer called."""
        recorder = Recorder()
        unsubscribe = booking_store.observe(recorder)

        unsubscribe()
        unsubscribe()
        booking_store.add(entry_a)

        assert recorder.received == [[]]

    def test_unsubscribe_during_notification(self, booking_store: BookingStore, entry_a):
        """Test that an observer leaving mid-notification does not skip others."""
        later = Recorder()
        handles = {}

        def leaving(entries):
            if entries:
                handles["leaving"]()

        handles["leaving"] = booking_store.observe(leaving)
        booking_store.observe(later)

        booking_store.add(entry_a)

        assert later.last == [entry_a]

    def test_snapshots_are_independent(self, booking_store: BookingStore, entry_a):
        """Test that mutating a received list does not change the store."""
        recorder = Recorder()
        booking_store.observe(recorder)

        recorder.last.append(entry_a)

        assert booking_store.entries == []


class TestAdd:
    """Test append-only add."""

    def test_add_appends_last(self, booking_store: BookingStore, entry_a, entry_b):
        """Test that add puts the entry at the end and grows the list by one."""
        booking_store.add(entry_a)
        before = booking_store.entries

        booking_store.add(entry_b)

        assert booking_store.entries == before + [entry_b]
        assert len(booking_store) == len(before) + 1

    def test_add_allows_duplicates(self, booking_store: BookingStore, entry_a):
        """Test that equal entries are all kept."""
        booking_store.add(entry_a)
        booking_store.add(entry_a)

        assert booking_store.entries == [entry_a, entry_a]

    def test_add_then_observe_keeps_order(self, booking_store: BookingStore, entry_a, entry_b, entry_c):
        """Test that entries come back in insertion order."""
        recorder = Recorder()
        booking_store.observe(recorder)

        for entry in (entry_a, entry_b, entry_c):
            booking_store.add(entry)

        assert recorder.last == [entry_a, entry_b, entry_c]
        assert len(recorder.received) == 4


class TestDelete:
    """Test delete by value."""

    def test_delete_middle_entry(self, booking_store: BookingStore, entry_a, entry_b, entry_c):
        """Test that deleting B from [A, B, C] leaves [A, C]."""
        for entry in (entry_a, entry_b, entry_c):
            booking_store.add(entry)

        booking_store.delete(entry_b)

        assert booking_store.entries == [entry_a, entry_c]

    def test_delete_matches_by_value(self, booking_store: BookingStore, entry_a):
        """Test that an equal but distinct object deletes the stored entry."""
        booking_store.add(entry_a)
        copy = BookingEntry(name="Alice", arrival_date=date(2099, 12, 23), departure_date=date(2099, 12, 27))

        booking_store.delete(copy)

        assert booking_store.entries == []

    def test_delete_removes_first_occurrence_only(self, booking_store: BookingStore, entry_a, entry_b):
        """Test that only the first of several equal entries is removed."""
        for entry in (entry_a, entry_b, entry_a):
            booking_store.add(entry)

        booking_store.delete(entry_a)

        assert booking_store.entries == [entry_b, entry_a]
        assert len(booking_store) == 2

    def test_delete_absent_entry_is_noop(self, booking_store: BookingStore, entry_a, entry_b):
        """Test that deleting a missing entry changes nothing and notifies no one."""
        booking_store.add(entry_a)
        recorder = Recorder()
        booking_store.observe(recorder)

        booking_store.delete(entry_b)

        assert booking_store.entries == [entry_a]
        assert recorder.received == [[entry_a]]

    def test_delete_from_empty_store(self, booking_store: BookingStore, entry_a):
        """Test that deleting from an empty store is allowed."""
        booking_store.delete(entry_a)

        assert booking_store.entries == []

    def test_delete_publishes_new_list(self, booking_store: BookingStore, entry_a, entry_b):
        """Test that observers receive the list after a delete."""
        booking_store.add(entry_a)
        booking_store.add(entry_b)
        recorder = Recorder()
        booking_store.observe(recorder)

        booking_store.delete(entry_a)

        assert recorder.last == [entry_b]
