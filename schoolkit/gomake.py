"""Helper around ``go build`` for release builds and cross compiling."""

from __future__ import annotations

import argparse
import os
import subprocess
import sys
from pathlib import Path

OUTPUTS = ("main-linux-x64", "main-darwin-x64", "main-windows-x64")

_SYSTEMS = ("linux", "darwin", "windows")
_STRIP = '-ldflags="-s -w"'

Build = tuple[str, dict[str, str]]


def release_command() -> Build:
    """Return the command and environment for a stripped 64-bit Linux build."""
    return f"go build {_STRIP}", {"GOOS": "linux", "GOARCH": "amd64"}


def cross_compile_commands(release: bool) -> list[Build]:
    """Return commands and environments for Linux, macOS and Windows builds."""
    builds = []
    for system, output in zip(_SYSTEMS, OUTPUTS):
        parts = ["go build"]
        if release:
            parts.append(_STRIP)
        parts.append(f"-o $(pwd)/{output}")
        builds.append((" ".join(parts), {"GOOS": system, "GOARCH": "amd64"}))
    return builds


def _run(build: Build) -> None:
    command, env = build
    subprocess.run(["/bin/bash", "-c", command], env={**os.environ, **env}, check=True)


def _cleanup(directory: Path) -> bool:
    """Remove cross compiled binaries; return False if any was missing."""
    complete = True
    for output in OUTPUTS:
        try:
            (directory / output).unlink()
        except FileNotFoundError:
            complete = False
    return complete


def main(argv: list[str] | None = None) -> int:
    if not sys.platform.startswith("linux"):
        print(
            f"{sys.platform} is not a supported operatingsystem, use Linux instead!",
            file=sys.stderr,
        )
        return 1

    parser = argparse.ArgumentParser(prog="gomake", description=__doc__)
    parser.add_argument(
        "--release",
        "-release",
        action="store_true",
        help="strip debug data for a smaller binary file.",
    )
    parser.add_argument(
        "--cross-compile",
        "-cross-compile",
        dest="cross_compile",
        action="store_true",
        help="compile for amd64 on Linux, MacOS and Windows.",
    )
    parser.add_argument("target", nargs="?", default="")
    args = parser.parse_args(argv)

    try:
        if args.target == "clean":
            print("Cleaning up files from cross compiling...")
            if not _cleanup(Path.cwd()):
                print("No cross compiled packages to remove", file=sys.stderr)
                return 1
        elif args.cross_compile:
            if args.release:
                print("Compiling 64-bit binaries (no debug) for Linux, MacOS and Windows...")
            else:
                print("Compiling 64-bit binaries for Linux, MacOS and Windows...")
            for build in cross_compile_commands(args.release):
                _run(build)
        elif args.release:
            print("Compiling binaries without debug symbols...")
            _run(release_command())
    except (subprocess.CalledProcessError, OSError) as error:
        print(error, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())