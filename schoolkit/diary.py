"""A diary that writes to a text file and expects written answers back."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

DEFAULT_PATH = Path("diary.txt")

WRITE_PAUSE = 5
"""Seconds a message stays in the diary before it fades."""

ANSWER_PAUSE = 15
"""Seconds the reader has to write an answer."""

MESSAGES = (
    "Hello and welcome to my diary!\nDo you want to hear a story?",
    "Wonderful!\nOnce up on a time I was a student at Hogwarts, and I wrote down "
    "my thoughts in this diary.\nNow I pass it along to you. Are you ready?",
    "Well then, let us begin!\nMy name is Tom Riddle and you have found my diary."
    "\nYou will help me get revenge! What do you think of that?",
    "I'm afraid that you don't have a choice, my dear.\n"
    "You will help me kill Harry Potter!",
)

ANSWERS = (
    "Yes",
    "Yes, of course I am",
    "I don't wanna help you!",
    "I will obey",
)


@dataclass
class Diary:
    """The diary file."""

    path: Path = DEFAULT_PATH

    def write(self, text: str) -> None:
        """Replace the diary's contents with ``text``."""
        Path(self.path).write_text(text, encoding="utf-8")

    def read(self) -> str:
        """Return the diary's contents."""
        return Path(self.path).read_text(encoding="utf-8")


def run_diary(diary: Diary, sleep: Callable[[float], object]) -> None:
    """Hold the conversation; raise ValueError on a wrong answer."""
    print("The book is opening...")
    for number, (message, answer) in enumerate(zip(MESSAGES, ANSWERS), start=1):
        print("Pass number:", number)
        print("Writing to diary...")
        diary.write(message)
        sleep(WRITE_PAUSE)
        diary.write("")
        print("Waiting for input...")
        sleep(ANSWER_PAUSE)
        if diary.read() != answer:
            raise ValueError("Invalid answer")
    print("The book is closing...")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="diary", description=__doc__)
    parser.add_argument("--path", type=Path, default=DEFAULT_PATH)
    args = parser.parse_args(argv)
    try:
        run_diary(Diary(args.path), time.sleep)
    except (ValueError, OSError) as error:
        print(error, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())