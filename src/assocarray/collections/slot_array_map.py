"""
SlotArrayMap: an associative array backed by a growable array of slots.
"""

import sys
import logging
from typing import Any, Dict, Iterable, Iterator, List, Optional, Union
from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass

from assocarray.config import config

logger = logging.getLogger(__name__)

_MISSING = object()


class KeyNotFoundError(KeyError):
    """Raised when no occupied slot holds the requested key."""

    def __init__(self, key: Any):
        super().__init__(key)
        self.key = key


@dataclass
class _Entry:
    """Contents of an occupied slot."""
    key: Any
    value: Any


class SlotArrayMap(MutableMapping):
    """
    A mapping that stores key/value pairs in an array of slots.

    Lookups scan the slots in index order, so keys need not be hashable.
    New keys go into the first free slot; when every slot is occupied the
    array grows by the ``config.growth_factor`` in effect when the map
    was created, and the key lands at the old capacity boundary. Capacity
    never shrinks.
    """

    def __init__(self,
                 initial: Optional[Union[Mapping, Iterable]] = None,
                 capacity: Optional[int] = None):
        """
        Initialize SlotArrayMap.

        Args:
            initial: Mapping or iterable of (key, value) pairs to set in order
            capacity: Initial number of slots (None for config default)
        """
        if capacity is None:
            capacity = config.default_capacity
        if not isinstance(capacity, int) or capacity < 1:
            raise ValueError(f"capacity must be a positive int, got {capacity!r}")

        self._slots: List[Optional[_Entry]] = [None] * capacity
        self._size = 0
        self._expansions = 0
        self._growth_factor = config.growth_factor

        if initial is not None:
            pairs = initial.items() if isinstance(initial, Mapping) else initial
            for key, value in pairs:
                self.set(key, value)

    # Core operations

    def set(self, key: Any, value: Any) -> None:
        """Associate value with key, replacing any previous value."""
        index = self._find(key)
        if index is not None:
            self._slots[index].value = value
            return

        index = self._first_free()
        if index is None:
            index = len(self._slots)
            self._expand()
        self._slots[index] = _Entry(key, value)
        self._size += 1

    def get(self, key: Any, default: Any = _MISSING) -> Any:
        """
        Get the value associated with key.

        Raises KeyNotFoundError when the key is absent, unless a default
        is given, in which case the default is returned instead.
        """
        index = self._find(key)
        if index is None:
            if default is not _MISSING:
                return default
            raise KeyNotFoundError(key)
        return self._slots[index].value

    def has_key(self, key: Any) -> bool:
        """Determine if key appears in the map."""
        return self._find(key) is not None

    def remove(self, key: Any) -> None:
        """Remove the pair for key. Does nothing if key is absent."""
        index = self._find(key)
        if index is not None:
            self._slots[index] = None
            self._size -= 1

    def size(self) -> int:
        """Number of key/value pairs."""
        return self._size

    def clone(self) -> 'SlotArrayMap':
        """Independent copy keeping capacity and slot positions."""
        cloned = self._new_empty()
        cloned._slots = [
            None if entry is None else _Entry(entry.key, entry.value)
            for entry in self._slots
        ]
        cloned._size = self._size
        cloned._expansions = self._expansions
        cloned._growth_factor = self._growth_factor
        return cloned

    def format(self) -> str:
        """Render as ``{ key0: value0, key1: value1 }``."""
        if not self._size:
            return "{}"
        body = ", ".join(f"{entry.key}: {entry.value}" for entry in self._entries())
        return "{ " + body + " }"

    # Mapping protocol

    def __len__(self) -> int:
        return self._size

    def __getitem__(self, key: Any) -> Any:
        return SlotArrayMap.get(self, key)

    def __setitem__(self, key: Any, value: Any) -> None:
        SlotArrayMap.set(self, key, value)

    def __delitem__(self, key: Any) -> None:
        index = self._find(key)
        if index is None:
            raise KeyNotFoundError(key)
        self._slots[index] = None
        self._size -= 1

    def __iter__(self) -> Iterator[Any]:
        for entry in self._entries():
            yield entry.key

    def __contains__(self, key: Any) -> bool:
        return self._find(key) is not None

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Mapping):
            return NotImplemented
        if len(self) != len(other):
            return False
        for entry in self._entries():
            try:
                value = other[entry.key]
            except (KeyError, TypeError):
                # TypeError: unhashable key against a dict
                return False
            if value is not entry.value and value != entry.value:
                return False
        return True

    __hash__ = None

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        body = ", ".join(f"{entry.key!r}: {entry.value!r}" for entry in self._entries())
        return f"{type(self).__name__}({{{body}}})"

    def copy(self) -> 'SlotArrayMap':
        return self.clone()

    __copy__ = copy

    # Introspection

    @property
    def capacity(self) -> int:
        """Current number of slots."""
        return len(self._slots)

    def memory_usage(self) -> int:
        """Estimate memory usage in bytes."""
        total = sys.getsizeof(self._slots)
        for entry in self._entries():
            total += sys.getsizeof(entry)
            total += sys.getsizeof(entry.key) + sys.getsizeof(entry.value)
        return total

    def get_stats(self) -> Dict[str, Any]:
        """Get usage statistics."""
        capacity = len(self._slots)
        return {
            "size": self._size,
            "capacity": capacity,
            "free_slots": capacity - self._size,
            "load_factor": self._size / capacity,
            "expansions": self._expansions,
            "memory_usage": self.memory_usage(),
        }

    # Internals

    def _new_empty(self) -> 'SlotArrayMap':
        """Empty map of the same type; used by clone()."""
        return type(self)()

    def _entries(self) -> Iterator[_Entry]:
        """Occupied slots in index order."""
        for entry in self._slots:
            if entry is not None:
                yield entry

    def _find(self, key: Any) -> Optional[int]:
        """Index of the first occupied slot holding key, or None."""
        seen = 0
        for index, entry in enumerate(self._slots):
            if seen == self._size:
                break
            if entry is None:
                continue
            seen += 1
            if entry.key is None or key is None:
                if entry.key is key:
                    return index
            elif entry.key is key or entry.key == key:
                return index
        return None

    def _first_free(self) -> Optional[int]:
        """Index of the first empty slot, or None when full."""
        if self._size == len(self._slots):
            return None
        for index, entry in enumerate(self._slots):
            if entry is None:
                return index
        return None

    def _expand(self) -> None:
        """Grow the slot array, keeping existing slots in place."""
        old_capacity = len(self._slots)
        new_capacity = old_capacity * self._growth_factor
        self._slots.extend([None] * (new_capacity - old_capacity))
        self._expansions += 1
        if config.log_growth:
            logger.debug("Expanded %s from %d to %d slots",
                         type(self).__name__, old_capacity, new_capacity)
