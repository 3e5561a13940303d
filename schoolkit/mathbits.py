"""Small number exercises: binary digits, Fibonacci terms, integrals and more."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator


def to_binary(number: int) -> int:
    """Return the binary digits of a positive number read as a decimal integer."""
    if number <= 0:
        return 0
    return int(format(number, "b"))


def fibonacci(count: int) -> Iterator[int]:
    """Yield the first ``count`` Fibonacci terms, starting at 0."""
    current, following = 0, 1
    for _ in range(count):
        yield current
        current, following = following, current + following


def integrate(
    func: Callable[[float], float], start: float, end: float, amount: int
) -> float:
    """Approximate the integral of ``func`` with the trapezoidal rule.

    The interior sum runs over points 1 .. amount - 2.
    """
    if amount < 1:
        raise ValueError("the number of trapezoids must be positive")
    step = (end - start) / amount
    total = 0.5 * (func(start) + func(end))
    for position in range(1, amount - 1):
        total += func(start + position * step)
    return step * total


def second_number(r1: int, s: int) -> int:
    """Return R2 such that S is the mean of R1 and R2."""
    return 2 * s - r1


def _square(x: float) -> float:
    return x * x


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="mathbits", description=__doc__)
    commands = parser.add_subparsers(dest="command", required=True)

    binary = commands.add_parser("binary", help="print a number in binary")
    binary.add_argument("number", nargs="?", type=int)

    fib = commands.add_parser("fibonacci", help="print Fibonacci terms")
    fib.add_argument("count", nargs="?", type=int)

    integral = commands.add_parser("integral", help="integrate x*x from 2 to 4")
    integral.add_argument("--start", type=float, default=2.0)
    integral.add_argument("--end", type=float, default=4.0)
    integral.add_argument("--amount", type=int, default=1000000)

    commands.add_parser("r2", help="read R1 and S from standard input")

    args = parser.parse_args(argv)
    try:
        if args.command == "binary":
            number = args.number
            if number is None:
                number = int(input("Please enter an integer number: "))
            print(f"Your binary number is: {to_binary(number)}")
        elif args.command == "fibonacci":
            count = args.count
            if count is None:
                count = int(input("Enter number of passes: "))
            print("Fibonacci series:")
            for term in fibonacci(count):
                print(term)
        elif args.command == "integral":
            print(integrate(_square, args.start, args.end, args.amount))
        else:
            fields = sys.stdin.read().split()
            if len(fields) < 2:
                raise ValueError("expected R1 and S on standard input")
            r1, s = int(fields[0]), int(fields[1])
            print(second_number(r1, s))
    except (ValueError, EOFError) as error:
        print(error, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())