"""
ReportingSlotArrayMap: a SlotArrayMap that echoes every call to a pen.
"""

import sys
import logging
from typing import Any, Optional, TextIO

from assocarray.collections.slot_array_map import SlotArrayMap, KeyNotFoundError, _MISSING

logger = logging.getLogger(__name__)


class ReportingSlotArrayMap(SlotArrayMap):
    """
    A SlotArrayMap that writes one line per public operation, e.g.
    ``s2s.get(a) -> apple``, so experiment traces can be read back.
    """

    def __init__(self, name: str, pen: Optional[TextIO] = None, capacity: Optional[int] = None):
        """
        Initialize ReportingSlotArrayMap.

        Args:
            name: Label printed in front of every reported call
            pen: Text stream for reports (None for stdout)
            capacity: Initial number of slots (None for config default)
        """
        super().__init__(capacity=capacity)
        self.name = name
        self.pen = pen

    def _report(self, line: str) -> None:
        pen = self.pen if self.pen is not None else sys.stdout
        print(f"{self.name}.{line}", file=pen)
        logger.debug("%s.%s", self.name, line)

    def set(self, key: Any, value: Any) -> None:
        super().set(key, value)
        self._report(f"set({key}, {value})")

    def get(self, key: Any, default: Any = _MISSING) -> Any:
        try:
            value = super().get(key, default)
        except KeyNotFoundError:
            self._report(f"get({key}) -> {KeyNotFoundError.__name__}: {key}")
            raise
        self._report(f"get({key}) -> {value}")
        return value

    def has_key(self, key: Any) -> bool:
        result = super().has_key(key)
        self._report(f"has_key({key}) -> {result}")
        return result

    def remove(self, key: Any) -> None:
        super().remove(key)
        self._report(f"remove({key})")

    def size(self) -> int:
        result = super().size()
        self._report(f"size() -> {result}")
        return result

    def _new_empty(self) -> 'ReportingSlotArrayMap':
        return type(self)(self.name, self.pen)
