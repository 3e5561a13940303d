"""Merit value calculator for Swedish upper secondary school grades."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable

_GRADE_POINTS = {
    "A": 20.0,
    "B": 17.5,
    "C": 15.0,
    "D": 12.5,
    "E": 10.0,
    "F": 0.0,
}

MAX_EXTRA = 2.5


def grade_points(letter: str) -> float:
    """Return the points for a grade letter from A to F."""
    try:
        return _GRADE_POINTS[letter]
    except KeyError:
        raise ValueError("Inte ett giltigt betyg!") from None


def _check_extra(extra: float) -> None:
    if extra < 0 or extra > MAX_EXTRA:
        raise ValueError("Inte ett giltigt antal extramerit!")


def merit(grades: Iterable[str], extra: float) -> float:
    """Return the mean grade points plus extra merit points (0 to 2.5)."""
    _check_extra(extra)
    points = [grade_points(letter) for letter in grades]
    if not points:
        raise ValueError("at least one grade is needed")
    return sum(points) / len(points) + extra


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="meritcalc", description="Compute a merit value from grades."
    )
    parser.parse_args(argv)
    try:
        count = int(input("Ange antal betyg från gymnasiet: "))
        extra = float(input("Antal extramerit från kurser: "))
        _check_extra(extra)
        print("Skriv in ett betyg per rad:")
        grades = [input().strip() for _ in range(count)]
        value = merit(grades, extra)
    except (ValueError, EOFError) as error:
        print(error, file=sys.stderr)
        return 1
    print(f"Meritpoäng: {value:.2f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())