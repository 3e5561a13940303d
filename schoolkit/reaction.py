"""Reaction time game: press enter as soon as the box appears."""

from __future__ import annotations

import argparse
import random
import sys
import time
from collections.abc import Callable

MAX_WAIT = 15
"""The random wait is a whole number of seconds below this."""

ROW = "<------------->"
BOX = "\n".join(f"\t\t\t{ROW}" for _ in range(4))


def _decimal(value: int, unit: int, suffix: str) -> str:
    whole, fraction = divmod(value, unit)
    digits = len(str(unit)) - 1
    fraction_text = str(fraction).rjust(digits, "0").rstrip("0")
    if fraction_text:
        return f"{whole}.{fraction_text}{suffix}"
    return f"{whole}{suffix}"


def _format_duration(seconds: float) -> str:
    nanoseconds = round(seconds * 1_000_000_000)
    sign = "-" if nanoseconds < 0 else ""
    nanoseconds = abs(nanoseconds)
    if nanoseconds == 0:
        return "0s"
    if nanoseconds < 1_000:
        return f"{sign}{nanoseconds}ns"
    if nanoseconds < 1_000_000:
        return sign + _decimal(nanoseconds, 1_000, "µs")
    if nanoseconds < 1_000_000_000:
        return sign + _decimal(nanoseconds, 1_000_000, "ms")
    hours, rest = divmod(nanoseconds, 3600 * 1_000_000_000)
    minutes, rest = divmod(rest, 60 * 1_000_000_000)
    text = _decimal(rest, 1_000_000_000, "s")
    if hours:
        return f"{sign}{hours}h{minutes}m{text}"
    if minutes:
        return f"{sign}{minutes}m{text}"
    return sign + text


def measure_reaction(
    wait: Callable[[], object],
    read_line: Callable[[], object],
    clock: Callable[[], float],
) -> float:
    """Wait, show the box, and return the seconds until a line is read."""
    wait()
    start = clock()
    print(BOX)
    read_line()
    return clock() - start


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="goreaction", description=__doc__)
    parser.parse_args(argv)
    try:
        input("Press enter to start!")
        elapsed = measure_reaction(
            lambda: time.sleep(random.randrange(MAX_WAIT)),
            input,
            time.perf_counter,
        )
    except EOFError:
        return 1
    print(f"Your reaction time is: {_format_duration(elapsed)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())