"""Download a file from a URL to disk."""

from __future__ import annotations

import shutil
import sys
import urllib.error
import urllib.request
from pathlib import Path

USAGE = "Usage: get [url to file]\nOr:    get [url to file] -o [path to save to]"
OUTPUT_USAGE = (
    "In order to specify output path, you need to add a path after -o:\n"
    "Usage: get [url to file] -o/-O/--output/-output [path to save to]"
)

_OUTPUT_FLAGS = ("--output", "-output", "-o", "-O")


def _base_name(url: str) -> str:
    if not url:
        return "."
    stripped = url.rstrip("/")
    if not stripped:
        return "/"
    return stripped.rsplit("/", 1)[-1]


def target_path(url: str, outpath: str | Path | None) -> Path:
    """Return where a download goes: ``outpath``, or the URL's last part in the cwd."""
    if outpath is not None:
        return Path(outpath)
    return Path.cwd() / _base_name(url)


def download(url: str, outpath: str | Path | None = None) -> Path:
    """Save the body of ``url`` to a file and return its path.

    The file is created before the request is made. Error responses are
    saved like any other body.
    """
    target = target_path(url, outpath)
    with target.open("wb") as out:
        try:
            response = urllib.request.urlopen(url)
        except urllib.error.HTTPError as error:
            response = error
        with response:
            shutil.copyfileobj(response, out)
    return target


def main(argv: list[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    args += [""] * (3 - len(args))
    url, flag, path = args[:3]
    output = flag in _OUTPUT_FLAGS

    if url in ("", "help"):
        print(USAGE, file=sys.stderr)
        return 1
    if output and not path:
        print(OUTPUT_USAGE, file=sys.stderr)
        return 1
    try:
        download(url, path if output else None)
    except (OSError, ValueError) as error:
        print(error, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())