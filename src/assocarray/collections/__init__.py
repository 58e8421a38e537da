"""Slot-array associative containers."""

from assocarray.collections.slot_array_map import SlotArrayMap, KeyNotFoundError
from assocarray.collections.reporting import ReportingSlotArrayMap

__all__ = [
    "SlotArrayMap",
    "KeyNotFoundError",
    "ReportingSlotArrayMap",
]
