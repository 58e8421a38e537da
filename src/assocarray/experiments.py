"""
Experiments with SlotArrayMap.

Runs two traces through ReportingSlotArrayMap so each call and its result
is printed, then shows the final contents of both maps.
"""

import sys
import logging
import argparse
from typing import List, Optional, TextIO

import psutil

from assocarray.collections import ReportingSlotArrayMap, KeyNotFoundError

logger = logging.getLogger(__name__)


def divider(pen: TextIO) -> None:
    """Print a divider."""
    print(file=pen)
    print("-" * 48, file=pen)
    print(file=pen)


def _try_get(amap: ReportingSlotArrayMap, key) -> None:
    # A missing key is an expected outcome here; the map already reported it
    try:
        amap.get(key)
    except KeyNotFoundError as e:
        logger.debug("%s has no key %r", amap.name, e.key)


def experiment_strings_to_strings(pen: TextIO) -> ReportingSlotArrayMap:
    """Strings as both keys and values."""
    s2s = ReportingSlotArrayMap("s2s", pen)
    s2s.size()                 # 0
    s2s.set("a", "apple")
    s2s.set("A", "aardvark")
    s2s.size()                 # 2
    s2s.has_key("a")           # True
    s2s.has_key("A")           # True
    _try_get(s2s, "a")         # apple
    _try_get(s2s, "A")         # aardvark
    s2s.remove("a")
    s2s.size()                 # 1
    _try_get(s2s, "a")         # missing
    _try_get(s2s, "A")         # aardvark
    s2s.remove("aardvark")     # values are not keys: no-op
    s2s.size()                 # 1
    _try_get(s2s, "a")         # missing
    _try_get(s2s, "A")         # aardvark
    return s2s


def experiment_big_int_to_big_int(pen: TextIO) -> ReportingSlotArrayMap:
    """Integers as keys and values."""
    b2b = ReportingSlotArrayMap("b2b", pen)

    for i in range(11):
        b2b.set(i, i * i)

    for i in range(11):
        _try_get(b2b, i)

    # Remove the odd keys
    for i in range(1, 11, 2):
        b2b.remove(i)

    # Only 0, 2, 4, 6, 8, 10 are left
    for i in range(11):
        _try_get(b2b, i)

    # 0 -> 10, 3 -> 13, 6 -> 16, 9 -> 19
    for i in range(0, 11, 3):
        b2b.set(i, i + 10)

    for i in range(11):
        _try_get(b2b, i)
    return b2b


def run_experiments(pen: Optional[TextIO] = None) -> List[ReportingSlotArrayMap]:
    """Run every experiment, printing the trace to pen."""
    pen = pen if pen is not None else sys.stdout

    divider(pen)
    s2s = experiment_strings_to_strings(pen)
    divider(pen)
    b2b = experiment_big_int_to_big_int(pen)
    divider(pen)

    for amap in (s2s, b2b):
        print(f"{amap.name} = {amap.format()}", file=pen)

    process = psutil.Process()
    memory_mb = process.memory_info().rss / 1024 / 1024
    print(f"Current memory usage: {memory_mb:.1f} MB", file=pen)

    return [s2s, b2b]


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="assocarray-experiments",
        description="Trace SlotArrayMap operations",
    )
    parser.add_argument("--output", default=None, help="Write the trace to this file instead of stdout")
    parser.add_argument(
        "--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"]
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level))

    if args.output:
        with open(args.output, "w", encoding="utf-8") as pen:
            run_experiments(pen)
        logger.info("Wrote experiment trace to %s", args.output)
    else:
        run_experiments(sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
