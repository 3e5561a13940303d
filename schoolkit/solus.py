"""Fetch package repositories and manage the local build repository."""

from __future__ import annotations

import argparse
import subprocess
import sys
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

SOURCE_URL = "https://dev.getsol.us/source/{}.git"
LOCAL_REPO = "/var/lib/solbuild/local"

FETCH_USAGE = "Usage: solfetch [repository name] [optional] [optional]"
ALREADY_FETCHED = "Don't fetch repos that are already fetched!"


def clone_command(repo: str) -> list[str]:
    """Return the git command that clones ``repo``."""
    return ["git", "clone", SOURCE_URL.format(repo)]


def fetch(repo: str) -> str:
    """Clone ``repo`` and return git's combined output.

    Raises subprocess.CalledProcessError, carrying the output, on failure.
    """
    result = subprocess.run(
        clone_command(repo),
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        text=True,
        check=True,
    )
    return result.stdout


def fetch_all(repos: Iterable[str]) -> list[str]:
    """Clone every repository at once; return their outputs in order."""
    repos = list(repos)
    if any(Path(repo).exists() for repo in repos):
        raise FileExistsError(ALREADY_FETCHED)
    if not repos or not repos[0]:
        raise ValueError(FETCH_USAGE)
    with ThreadPoolExecutor(max_workers=len(repos)) as pool:
        return list(pool.map(fetch, repos))


def local_repo_command(clean: bool) -> list[str]:
    """Return the command that fills or empties the local repository."""
    if clean:
        action = f"rm -fv {LOCAL_REPO}/*.eopkg"
    else:
        action = f"cp -v *.eopkg {LOCAL_REPO}"
    return ["sh", "-c", f"sudo {action}"]


def main_fetch(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="solfetch", description="Clone repositories.")
    parser.add_argument("repos", nargs="*")
    args = parser.parse_args(argv)
    try:
        outputs = fetch_all(args.repos)
    except subprocess.CalledProcessError as error:
        print(error.output or error, file=sys.stderr)
        return 1
    except (ValueError, OSError) as error:
        print(error, file=sys.stderr)
        return 1
    for output in outputs:
        print(output, end="")
    return 0


def main_local(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="solloc", description="Manage the local repo.")
    parser.add_argument(
        "--clean",
        "-clean",
        action="store_true",
        help="Clear the local repo of eopkg files.",
    )
    args = parser.parse_args(argv)
    try:
        result = subprocess.run(
            local_repo_command(args.clean),
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
        )
    except OSError as error:
        print(error, file=sys.stderr)
        return 1
    if result.returncode != 0:
        print(result.stdout, end="", file=sys.stderr)
        return 1
    print(result.stdout, end="")
    return 0


if __name__ == "__main__":
    sys.exit(main_fetch())