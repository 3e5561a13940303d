"""Integer calculator for expressions such as ``2 + 3 * 4``.

Only decimal integer literals and the binary operators ``+ - * /`` carry a
value; any other operand or operator (unary signs, ``%``, names, floats,
hexadecimal literals) counts as zero. Parentheses group. Arithmetic wraps
around like a 64-bit signed integer and division truncates toward zero.
"""

from __future__ import annotations

import argparse
import re
import sys

_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1

_LEXEME = re.compile(
    r"\s*(?:(?P<number>\.?\d(?:[eEpP][+-]|[\w.])*)"
    r"|(?P<name>[A-Za-z_]\w*)"
    r"|(?P<op>[-+*/%()]))"
)


def _wrap(value: int) -> int:
    return (value - _INT_MIN) % 2**64 + _INT_MIN


def _literal(text: str) -> int:
    if not (text.isascii() and text.isdecimal()):
        return 0
    return min(int(text), _INT_MAX)


def _scan(expression: str) -> list[tuple[str, str]]:
    lexemes = []
    position = 0
    stripped = expression.rstrip()
    while position < len(stripped):
        match = _LEXEME.match(stripped, position)
        if match is None:
            raise ValueError(f"unexpected character at {position + 1}")
        kind = match.lastgroup
        lexemes.append((kind, match.group(kind)))
        position = match.end()
    return lexemes


def _divide(left: int, right: int) -> int:
    if right == 0:
        raise ZeroDivisionError("integer divide by zero")
    quotient = abs(left) // abs(right)
    return -quotient if (left < 0) != (right < 0) else quotient


class _Parser:
    def __init__(self, lexemes: list[tuple[str, str]]) -> None:
        self._lexemes = lexemes
        self._position = 0

    def _peek(self) -> tuple[str, str] | None:
        if self._position < len(self._lexemes):
            return self._lexemes[self._position]
        return None

    def _next(self) -> tuple[str, str]:
        lexeme = self._peek()
        if lexeme is None:
            raise ValueError("unexpected end of expression")
        self._position += 1
        return lexeme

    def _at_operator(self, operators: str) -> str | None:
        lexeme = self._peek()
        if lexeme is not None and lexeme[0] == "op" and lexeme[1] in operators:
            self._position += 1
            return lexeme[1]
        return None

    def parse(self) -> int:
        value = self._sum()
        lexeme = self._peek()
        if lexeme is not None:
            raise ValueError(f"unexpected {lexeme[1]!r}")
        return value

    def _sum(self) -> int:
        value = self._product()
        while (operator := self._at_operator("+-")) is not None:
            right = self._product()
            value = _wrap(value + right if operator == "+" else value - right)
        return value

    def _product(self) -> int:
        value = self._unary()
        while (operator := self._at_operator("*/%")) is not None:
            right = self._unary()
            if operator == "*":
                value = _wrap(value * right)
            elif operator == "/":
                value = _wrap(_divide(value, right))
            else:
                value = 0
        return value

    def _unary(self) -> int:
        if self._at_operator("+-") is not None:
            self._unary()
            return 0
        return self._primary()

    def _primary(self) -> int:
        kind, text = self._next()
        if kind == "number":
            return _literal(text)
        if kind == "name":
            return 0
        if text == "(":
            value = self._sum()
            if self._at_operator(")") is None:
                raise ValueError("missing ')'")
            return value
        raise ValueError(f"unexpected {text!r}")


def evaluate(expression: str) -> int:
    """Evaluate an integer expression; raise ValueError if it cannot be parsed."""
    lexemes = _scan(expression)
    if not lexemes:
        raise ValueError("empty expression")
    return _Parser(lexemes).parse()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="eval-calculator", description=__doc__)
    parser.add_argument("expression", nargs="*")
    args = parser.parse_args(argv)

    if args.expression:
        line = " ".join(args.expression)
    else:
        try:
            line = input("Enter mathematical expression: ")
        except EOFError:
            return 2
    try:
        result = evaluate(line)
    except ValueError as error:
        print(f"parsing failed: {error}", file=sys.stderr)
        return 1
    except ZeroDivisionError as error:
        print(error, file=sys.stderr)
        return 1
    print("Result:", result)
    return 0


if __name__ == "__main__":
    sys.exit(main())