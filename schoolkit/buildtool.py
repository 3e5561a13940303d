"""Build a single C++ or Go source file with tuned compiler settings."""

from __future__ import annotations

import argparse
import re
import shlex
import subprocess
import sys

FLAGS = "-O3 -march=native -mtune=native -flto -ffast-math -pipe -Wall -v"

USAGE = (
    "Usage:\n"
    "   build [file-to-build]\n"
    "      Valid languages:\n"
    "        C++ - Uses same optimizing compiler flags as C in Clang++ compiler.\n"
    "        Go  - Builds without debug and dwarf data.\n"
    "\n"
    "        File to build:\n"
    "        Specify file - Filetypes .go, .cpp and .cxx are supported."
)

_PATTERNS = (
    ("*.cpp", "C++"),
    ("*.cxx", "C++"),
    ("*.go", "Go"),
)


def _match(pattern: str, name: str) -> bool:
    """Shell-style match in which ``*`` never crosses a ``/``."""
    regex = re.escape(pattern).replace(r"\*", "[^/]*")
    return re.fullmatch(regex, name) is not None


def detect_language(filename: str) -> str | None:
    """Return ``"C++"`` or ``"Go"`` for a supported file name, else None."""
    for pattern, language in _PATTERNS:
        if _match(pattern, filename):
            return language
    return None


def build_command(filename: str) -> str:
    """Return the shell command that compiles ``filename``."""
    language = detect_language(filename)
    quoted = shlex.quote(filename)
    if language == "C++":
        return f"clang++ -std=c++14 -stdlib=libc++ {quoted} -o compiled-cpp {FLAGS}"
    if language == "Go":
        return f'go build -ldflags="-s -w" -o compiled-go {quoted}'
    raise ValueError(f"unsupported file type: {filename!r}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="build", description=__doc__)
    parser.add_argument("file", nargs="?", default="")
    args = parser.parse_args(argv)

    try:
        command = build_command(args.file)
    except ValueError:
        print(USAGE)
        return 0
    try:
        result = subprocess.run(
            ["sh", "-c", command],
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
        )
    except OSError as error:
        print(error, file=sys.stderr)
        return 1
    if result.returncode != 0:
        print(result.stdout, file=sys.stderr)
        return 1
    print(result.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())