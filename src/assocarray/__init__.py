"""
assocarray: associative arrays backed by a growable array of slots.

Keys are found by a linear scan instead of hashing, so any type that
supports ``==`` can be a key, ``None`` included.
"""

from assocarray.config import AssocArrayConfig
from assocarray.collections import SlotArrayMap, ReportingSlotArrayMap, KeyNotFoundError

__version__ = "0.1.0"
__author__ = "assocarray Contributors"
__license__ = "Apache-2.0"

__all__ = [
    "AssocArrayConfig",
    "SlotArrayMap",
    "ReportingSlotArrayMap",
    "KeyNotFoundError",
]
