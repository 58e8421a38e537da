#!/usr/bin/env python3
"""
Basic usage examples for assocarray.
"""

import io
from assocarray import (
    SlotArrayMap,
    ReportingSlotArrayMap,
    KeyNotFoundError,
    AssocArrayConfig,
)


def example_slot_array_map():
    """Example: set, get, remove and format."""
    print("\n=== SlotArrayMap Example ===")

    fruits = SlotArrayMap()
    fruits.set("a", "apple")
    fruits.set("b", "banana")
    fruits["c"] = "cherry"

    print(f"Size: {fruits.size()}")
    print(f"a -> {fruits.get('a')}")
    print(f"Contents: {fruits.format()}")

    fruits.remove("b")
    fruits.remove("zebra")  # absent keys are ignored
    try:
        fruits.get("b")
    except KeyNotFoundError as e:
        print(f"Missing key: {e.key}")

    # The freed slot is reused by the next new key
    fruits.set("d", "date")
    print(f"Contents: {fruits}")


def example_unhashable_keys():
    """Example: keys only need ==, not hashing."""
    print("\n=== Unhashable Keys Example ===")

    points = SlotArrayMap()
    points.set([0, 0], "origin")
    points.set([1, 0], "east")
    points.set(None, "nowhere")

    print(f"[0, 0] -> {points.get([0, 0])}")
    print(f"None -> {points.get(None)}")
    print(f"Has [2, 2]: {points.has_key([2, 2])}")


def example_growth():
    """Example: capacity doubles once every slot is taken."""
    print("\n=== Growth Example ===")

    squares = SlotArrayMap()
    print(f"Initial capacity: {squares.capacity}")
    for i in range(17):
        squares.set(i, i * i)
    print(f"Capacity after 17 inserts: {squares.capacity}")
    print(f"Stats: {squares.get_stats()}")


def example_clone():
    """Example: clones are independent of the original."""
    print("\n=== Clone Example ===")

    original = SlotArrayMap({"x": 1, "y": 2})
    copy = original.clone()
    original.set("x", 100)
    copy.remove("y")
    print(f"Original: {original}")
    print(f"Clone: {copy}")


def example_reporting():
    """Example: trace every call."""
    print("\n=== Reporting Example ===")

    pen = io.StringIO()
    traced = ReportingSlotArrayMap("demo", pen)
    traced.set("k", "v")
    traced.has_key("k")
    traced.size()
    print(pen.getvalue(), end="")


def main():
    """Run all examples."""
    print("=== assocarray Examples ===")

    AssocArrayConfig.set_defaults(default_capacity=16, growth_factor=2)

    example_slot_array_map()
    example_unhashable_keys()
    example_growth()
    example_clone()
    example_reporting()

    print("\n=== All examples completed! ===")


if __name__ == "__main__":
    main()
