"""Closed-form solvers for quadratic and cubic equations."""

from __future__ import annotations

import argparse
import math
import sys

Root = float | complex

_SQRT3 = math.sqrt(3)


def _cbrt(value: float) -> float:
    return math.copysign(abs(value) ** (1 / 3), value)


def solve_quadratic(a: float, b: float, c: float) -> tuple[Root, Root]:
    """Solve a*x**2 + b*x + c = 0; complex roots come as complex numbers."""
    if a == 0:
        raise ValueError("Not a quadratic equation")
    if a != 1:
        b, c = b / a, c / a
    half = -(b / 2)
    discriminant = (b / 2) ** 2 - c
    if discriminant < 0:
        imaginary = math.sqrt(-discriminant)
        return complex(half, imaginary), complex(half, -imaginary)
    spread = math.sqrt(discriminant)
    return half + spread, half - spread


def _three_real_roots(a: float, b: float, g: float, h: float) -> tuple[float, float, float]:
    i = math.sqrt(g**2 / 4 - h)
    j = _cbrt(i)
    k = math.acos(max(-1.0, min(1.0, -(g / (2 * i)))))
    m = math.cos(k / 3)
    n = _SQRT3 * math.sin(k / 3)
    p = -(b / (3 * a))
    return 2 * j * m + p, -j * (m + n) + p, -j * (m - n) + p


def _one_real_root(a: float, b: float, g: float, h: float) -> tuple[float, complex, complex]:
    s = _cbrt(-(g / 2) + math.sqrt(h))
    u = _cbrt(-(g / 2) - math.sqrt(h))
    shift = b / (3 * a)
    real = -(s + u) / 2 - shift
    imaginary = (s - u) * _SQRT3 / 2
    return (s + u) - shift, complex(real, imaginary), complex(real, -imaginary)


def solve_cubic(a: float, b: float, c: float, d: float) -> tuple[Root, Root, Root]:
    """Solve a*x**3 + b*x**2 + c*x + d = 0."""
    if a == 0:
        raise ValueError("Not a cubic equation")
    f = ((3 * c) / a - b**2 / a**2) / 3
    g = (2 * b**3 / a**3 - (9 * b * c) / a**2 + (27 * d) / a) / 27
    h = g**2 / 4 + f**3 / 27
    if h > 0:
        return _one_real_root(a, b, g, h)
    if f == 0 and g == 0 and h == 0:
        root = -_cbrt(d / a)
        return root, root, root
    return _three_real_roots(a, b, g, h)


def _format(value: Root) -> str:
    if isinstance(value, complex):
        return f"({value.real:.3f}{value.imag:+.3f}i)"
    return f"{value:.3f}"


def _ask(names: str, form: str) -> list[float]:
    print(f"Enter values for equation in format {form} = 0:")
    return [float(input(f"Value of {name}: ")) for name in names]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="solve", description=__doc__)
    kinds = parser.add_subparsers(dest="kind", required=True)
    for kind in ("quadratic", "cubic"):
        sub = kinds.add_parser(kind)
        sub.add_argument("coefficients", nargs="*", type=float)
    args = parser.parse_args(argv)

    if args.kind == "quadratic":
        names, form, solver = "ABC", "ax² + bx + c", solve_quadratic
    else:
        names, form, solver = "ABCD", "ax³ + bx² + cx + d", solve_cubic

    try:
        coefficients = args.coefficients or _ask(names, form)
        if len(coefficients) != len(names):
            parser.error(f"{args.kind} needs {len(names)} coefficients")
        roots = solver(*coefficients)
    except (ValueError, EOFError) as error:
        print(error, file=sys.stderr)
        return 1

    print("\nSolutions for equation:")
    for number, root in enumerate(roots, start=1):
        print(f"X{number}: {_format(root)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())