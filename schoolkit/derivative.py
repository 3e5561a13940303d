"""Term-by-term derivative of a polynomial written like ``5x^3 - 5x^2 + 9x + 6``."""

from __future__ import annotations

import argparse
import re
import sys

DEFAULT_EXPRESSION = "5x^3 - 5x^2 + 9x + 6"

_POWER_TERM = re.compile(r"([+-]?\d+)x\^([+-]?\d+)")
_INTEGER = re.compile(r"[+-]?\d+")


def differentiate(expression: str) -> str:
    """Differentiate a space separated polynomial.

    Constants are dropped together with the operator before them. Power
    terms need an explicit coefficient.
    """
    terms = expression.split(" ")
    for position, term in enumerate(terms):
        if "x^" in term:
            match = _POWER_TERM.match(term)
            if match is None:
                raise ValueError(f"cannot read the term {term!r}")
            coefficient, exponent = int(match.group(1)), int(match.group(2))
            derived = f"{coefficient * exponent}x^{exponent - 1}"
            terms[position] = derived.replace("^1", "")
        elif _INTEGER.fullmatch(term):
            terms[position] = ""
            if position:
                terms[position - 1] = ""
        elif "x" in term:
            terms[position] = "1" if term == "x" else term.replace("x", "")
    return " ".join(term for term in terms if term)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="derivata", description=__doc__)
    parser.add_argument("expression", nargs="*")
    args = parser.parse_args(argv)
    expression = " ".join(args.expression) or DEFAULT_EXPRESSION
    try:
        result = differentiate(expression)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    print("Din deriverade funktion är:", result)
    return 0


if __name__ == "__main__":
    sys.exit(main())