"""Integer hash set using open addressing with linear probing."""

from __future__ import annotations

from enum import Enum
from typing import Union


class TableFullError(RuntimeError):
    """Raised when no free slot can be found for a new key."""


class SlotState(Enum):
    """Markers for slots that hold no key."""

    EMPTY = "empty"
    DIRTY = "dirty"


Slot = Union[int, SlotState]


class OpenAddressingTable:
    """Fixed-size table of integer keys with tombstone deletion."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("table size must be at least 1")
        self._size = size
        self._slots: list[Slot] = [SlotState.EMPTY] * size

    @property
    def size(self) -> int:
        """Number of slots."""
        return self._size

    def hash(self, key: int) -> int:
        """Return the home slot for ``key``."""
        return key % self._size

    def _probe_order(self, home: int) -> range:
        return range(home + 1, home + self._size)

    def add(self, key: int) -> int:
        """Insert ``key`` and return the slot it was placed in.

        The home slot is taken only if it has never been used; otherwise
        the following slots are probed for an empty or dirty one.
        Raises TableFullError when none is found.
        """
        home = self.hash(key)
        if self._slots[home] is SlotState.EMPTY:
            self._slots[home] = key
            return home
        for step in self._probe_order(home):
            index = step % self._size
            if isinstance(self._slots[index], SlotState):
                self._slots[index] = key
                return index
        raise TableFullError(f"no free slot for {key}")

    def _find(self, key: int) -> int | None:
        home = self.hash(key)
        if self._slots[home] == key:
            return home
        for step in self._probe_order(home):
            index = step % self._size
            slot = self._slots[index]
            if slot == key:
                return index
            if slot is SlotState.EMPTY:
                return None
        return None

    def remove(self, key: int) -> int:
        """Mark the slot holding ``key`` dirty and return its index.

        Raises KeyError if the key is not present.
        """
        index = self._find(key)
        if index is None:
            raise KeyError(key)
        self._slots[index] = SlotState.DIRTY
        return index

    def search(self, key: int) -> int:
        """Return the slot index holding ``key``; raise KeyError if absent."""
        index = self._find(key)
        if index is None:
            raise KeyError(key)
        return index

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and self._find(key) is not None

    def slots(self) -> list[Slot]:
        """Return a copy of the slot contents."""
        return list(self._slots)

    def format_table(self) -> str:
        """Render every slot on its own line."""
        lines = []
        for index, slot in enumerate(self._slots):
            if slot is SlotState.EMPTY:
                text = "(Empty)"
            elif slot is SlotState.DIRTY:
                text = "(Dirty)"
            else:
                text = str(slot)
            lines.append(f"Index {index}: {text}\n")
        return "".join(lines)