"""Thread-safe rule registry keyed by atomic class name."""

from __future__ import annotations

import threading
from typing import Iterable

from atomstyle.model.entry import AtomicClassEntry


class RuleRegistry:
    """Content-addressed store of every atomic rule seen during a compile.

    Insertion is insert-if-absent: the first writer wins and later
    inserts of the same class name are no-ops.  Identical class names
    always carry identical rules, so no ordering between concurrent
    writers is needed.  All public methods are protected by a lock so
    one registry can be shared by parallel class processing.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: dict[str, AtomicClassEntry] = {}

    # --- read / write ---------------------------------------------------------

    def insert(self, entry: AtomicClassEntry) -> bool:
        """Store *entry* unless its class is already present.

        Returns True when the entry was added.  Unset markers carry no
        rule and are never stored.
        """
        if entry.class_name is None:
            return False
        with self._lock:
            if entry.class_name in self._entries:
                return False
            self._entries[entry.class_name] = entry
            return True

    def insert_all(self, entries: Iterable[AtomicClassEntry]) -> int:
        """Insert several entries under one lock; returns how many were new."""
        added = 0
        with self._lock:
            for entry in entries:
                if entry.class_name is None or entry.class_name in self._entries:
                    continue
                self._entries[entry.class_name] = entry
                added += 1
        return added

    def get(self, class_name: str) -> AtomicClassEntry | None:
        with self._lock:
            return self._entries.get(class_name)

    def __contains__(self, class_name: str) -> bool:
        with self._lock:
            return class_name in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    # --- bulk operations ------------------------------------------------------

    def snapshot(self) -> dict[str, AtomicClassEntry]:
        """Return a shallow copy of the class-name to entry mapping."""
        with self._lock:
            return dict(self._entries)

    def sorted_entries(self) -> list[AtomicClassEntry]:
        """Entries in cascade order: priority, property, selector, class."""
        return sorted(self.snapshot().values(), key=lambda e: e.sort_key)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    # --- dunder helpers -------------------------------------------------------

    def __repr__(self) -> str:
        with self._lock:
            return f"RuleRegistry(entries={len(self._entries)})"
