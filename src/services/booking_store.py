"""
BookingStore - the authoritative in-memory collection of booking entries.

The store holds the entries in insertion order and pushes the whole list to
its observers whenever the list changes. State lives only as long as the
store object; nothing is persisted.
"""
from typing import Callable, List, Tuple

from loguru import logger

from models.schemas import BookingEntry


Observer = Callable[[List[BookingEntry]], None]


class BookingStore:
    """
    Observable, ordered list of booking entries.

    Every change replaces the whole list, so observers always receive a
    complete snapshot. Like a state holder, a change that leaves the list
    equal to its previous value is not published again.
    """

    def __init__(self):
        self._entries: Tuple[BookingEntry, ...] = ()
        self._observers: List[Observer] = []

    @property
    def entries(self) -> List[BookingEntry]:
        """Current snapshot of the entries, in insertion order."""
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def observe(self, observer: Observer) -> Callable[[], None]:
        """
        Subscribe to the list of entries.

        The observer is called right away with the current list (empty for a
        new store) and then with the full list after every change.

        Args:
            observer: Callable receiving the list of entries

        Returns:
            Callable that detaches the observer; calling it twice is harmless
        """
        self._observers.append(observer)
        logger.debug(f"Observer attached ({len(self._observers)} total)")
        observer(list(self._entries))

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)
                logger.debug(f"Observer detached ({len(self._observers)} left)")

        return unsubscribe

    def add(self, entry: BookingEntry) -> None:
        """
        Append an entry to the end of the list.

        No duplicate check and no validation happen here; callers validate
        before adding.

        Args:
            entry: Entry to append
        """
        self._publish(self._entries + (entry,))

    def delete(self, entry: BookingEntry) -> None:
        """
        Remove the first entry equal to the given one.

        Deleting an entry that is not in the list does nothing.

        Args:
            entry: Entry to remove, matched by value
        """
        try:
            index = self._entries.index(entry)
        except ValueError:
            logger.debug(f"Delete ignored, entry not in store: {entry!r}")
            return

        self._publish(self._entries[:index] + self._entries[index + 1:])

    def _publish(self, entries: Tuple[BookingEntry, ...]) -> None:
        if entries == self._entries:
            return

        self._entries = entries
        logger.debug(f"Store now holds {len(entries)} entries")

        # Observers may unsubscribe while being notified
        for observer in list(self._observers):
            observer(list(entries))
