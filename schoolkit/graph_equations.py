"""Recover straight-line, quadratic and cubic equations from points on a graph."""

from __future__ import annotations

import argparse
import math
import re
import sys
from collections.abc import Callable

USAGE = (
    "Usage: eqfunc [equation-type]\n"
    "Valid equation types are straight, quadratic and cubic."
)

_POINT = re.compile(r"\(\s*([^,()]+?)\s*,\s*([^,()]+?)\s*\)")


def _go_float(value: float) -> str:
    """Render a float the way a shortest-form %v would."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value.is_integer() and abs(value) < 1e21:
        if value == 0 and math.copysign(1.0, value) < 0:
            return "-0"
        return str(int(value))
    return repr(value)


def _whole(value: float) -> str:
    return f"{value:.0f}"


def _signed(value: float, render: Callable[[float], str]) -> str:
    sign = "-" if value < 0 else "+"
    return f"{sign} {render(abs(value))}"


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def line_from_points(x1: float, y1: float, x2: float, y2: float) -> tuple[float, float]:
    """Return (gradient, intercept) of the line through two points."""
    if x1 == x2 or y1 == y2:
        raise ValueError("The specified points need to be different!")
    gradient = (y2 - y1) / (x2 - x1)
    intercept = y1 - gradient * x1
    return gradient, intercept


def format_line(gradient: float, intercept: float) -> str:
    """Return ``y = kx + m`` without a plus sign before a negative number."""
    return f"y = {_go_float(gradient)}x {_signed(intercept, _go_float)}"


def quadratic_from_roots(
    x: float, y: float, root1: float, root2: float
) -> tuple[float, float, float]:
    """Return (a, b, c) of the parabola with the given roots through (x, y)."""
    denominator = (x - root1) * (x - root2)
    if denominator == 0:
        raise ValueError("the given point must not lie on a root")
    a = y / denominator
    b = a * (-root1 + -root2)
    c = a * (root1 * root2)
    return a, b, c


def format_quadratic(a: float, b: float, c: float) -> str:
    """Return ``y = ax² + bx + c`` with signs folded into the operators."""
    return (
        f"y = {_go_float(a)}x² {_signed(b, _go_float)}x {_signed(c, _go_float)}"
    )


def cubic_from_roots(
    x: float, y: float, root1: float, root2: float, root3: float
) -> tuple[float, float, float, float]:
    """Return (a, b, c, d) of the cubic with the given roots through (x, y)."""
    denominator = (x - root1) * (x - root2) * (x - root3)
    if denominator == 0:
        raise ValueError("the given point must not lie on a root")
    a = y / denominator
    b = a * (-root3 - root2 - root1)
    c = a * (root2 * root3 + root1 * root3 + root1 * root2)
    d = a * -(root1 * root2 * root3)
    return a, b, c, d


def format_cubic(a: float, b: float, c: float, d: float) -> str:
    """Return ``y = ax³ + bx² + cx + d`` with coefficients rounded to integers.

    A leading coefficient that rounds to 1 is left out.
    """
    lead = "" if _round_half_away(a) == 1 else _whole(a)
    return (
        f"y = {lead}x³ {_signed(b, _whole)}x² "
        f"{_signed(c, _whole)}x {_signed(d, _whole)}"
    )


def _ask_float(prompt: str) -> float:
    return float(input(prompt))


def _ask_point(prompt: str) -> tuple[float, float]:
    text = input(prompt)
    match = _POINT.search(text)
    if match is None:
        raise ValueError(f"expected a point written as (x, y), got {text!r}")
    return float(match.group(1)), float(match.group(2))


def _quadratic_roots(count: int) -> tuple[float, float]:
    if count == 2:
        print("\nEnter x-values for the two root points:")
        return _ask_float("First x-value: "), _ask_float("Second x-value: ")
    if count == 1:
        print("\nEnter x-value for the root point:")
        root = _ask_float("X-value: ")
        return root, root
    if count == 0:
        raise ValueError(
            "The function has no real roots and can't be parsed by this program!"
        )
    raise ValueError("A quadratic function can only have 2, 1 or 0 roots!")


def _cubic_roots(count: int) -> tuple[float, float, float]:
    if count == 3:
        return (
            _ask_float("First x-value: "),
            _ask_float("Second x-value: "),
            _ask_float("Third x-value: "),
        )
    if count == 2:
        first = _ask_float("First x-value: ")
        second = _ask_float("Second x-value: ")
        rebound = int(input("Which root point is it that rebounds? 1 or 2: "))
        if rebound == 1:
            return first, second, first
        if rebound == 2:
            return first, second, second
        raise ValueError("Invalid root point for rebound!")
    raise ValueError(
        f"A cubic function can't have {count} root points. "
        "Please enter 2 or 3 root points!"
    )


def _run_straight() -> str:
    print("Enter two points from straight line graph to get the equation for it!")
    x1, y1 = _ask_point("\nEnter first point (x, y): ")
    x2, y2 = _ask_point("Enter second point (x, y): ")
    return format_line(*line_from_points(x1, y1, x2, y2))


def _run_quadratic() -> str:
    print("Enter a couple values from graph to get the quadratic equation!")
    count = int(input("\nAmount of roots on the graph (points where y = 0): "))
    root1, root2 = _quadratic_roots(count)
    x, y = _ask_point("\nEnter a given point on the graph (x, y): ")
    return format_quadratic(*quadratic_from_roots(x, y, root1, root2))


def _run_cubic() -> str:
    print("Enter a couple values from graph to get the cubic equation!")
    count = int(
        input(
            "\nAmount of roots on the graph "
            "(points where y = 0, does not work for 1): "
        )
    )
    roots = _cubic_roots(count)
    x, y = _ask_point("\nEnter a given point on the graph (x, y): ")
    return format_cubic(*cubic_from_roots(x, y, *roots))


_COMMANDS: dict[str, Callable[[], str]] = {
    "straight": _run_straight,
    "quadratic": _run_quadratic,
    "cubic": _run_cubic,
}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="eqfunc", description=__doc__)
    parser.add_argument("kind", nargs="?")
    args = parser.parse_args(argv)

    command = _COMMANDS.get(args.kind or "")
    if command is None:
        print(USAGE)
        return 0
    try:
        equation = command()
    except (ValueError, EOFError) as error:
        print(error, file=sys.stderr)
        return 1
    print("\nYour equation is:")
    print(equation)
    return 0


if __name__ == "__main__":
    sys.exit(main())