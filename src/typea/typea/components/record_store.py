# ABOUTME: Append-only, thread-safe record store for accumulated entries
# ABOUTME: Preserves insertion order and hands out point-in-time snapshots

import threading
from typing import Iterator, List, Tuple

from typea.models.entry import Entry


class RecordStore:
    """
    Ordered, append-only sequence of entries.

    Entries are never reordered or removed once appended. Reads go through
    ``snapshot``, which copies the current contents under the lock so callers
    never observe a partially applied append.
    """

    def __init__(self) -> None:
        self._entries: List[Entry] = []
        self._lock = threading.RLock()

    def append(self, entry: Entry) -> int:
        """
        Append an entry to the end of the store.

        Args:
            entry: The entry to append.

        Returns:
            int: Position of the appended entry.
        """
        with self._lock:
            self._entries.append(entry)
            return len(self._entries) - 1

    def snapshot(self) -> Tuple[Entry, ...]:
        """
        Get a point-in-time copy of the store contents.

        Returns:
            Tuple of entries in insertion order.
        """
        with self._lock:
            return tuple(self._entries)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.snapshot())

    def __repr__(self) -> str:
        return f"RecordStore(size={len(self)})"
