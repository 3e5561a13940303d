"""Visit counting from weekly access reports.

Names are read from the text of a report, visit totals are kept in an XML
file per school term, and students with few visits can be listed.
"""

from __future__ import annotations

import argparse
import sys
import xml.etree.ElementTree as ElementTree
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from pathlib import Path

USAGE = (
    "Usage:\n"
    "\tImporting a report:\n"
    "\t\tcmpp import [report.txt]\n"
    "\n"
    "\tShow users with < x visits:\n"
    "\t\tcmpp less [1 < value < 11]"
)

LIMIT_MESSAGE = "Enter a value from two up to ten."

_LINE_BREAKS = (
    "Person:",
    "TidKortnummerVärdekortResultatLäsareMeddelandeNytt besök",
)

_REMOVED = (
    "Dumtumintervall:",
    " totalt:",
    "Passagehistorik per person220Antal,",
    "Curt Nicolingymnasiet AB",
    "Curt Nicolingymnasiet AB (elever)",
)

_NAME_NOISE = (
    "0", "1", "2", "3", "4", "5", "6", "7", "8", "9",
    "-",
    " - ",
    "Passagehistorik per personAntal,",
    "Passagehistorik per personAntal,    (elever)",
    "    (elever)",
)

_ESCAPES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&#34;",
    "'": "&#39;",
    "\t": "&#x9;",
    "\n": "&#xA;",
    "\r": "&#xD;",
}


@dataclass
class Person:
    """A student and the number of weeks they have visited."""

    name: str
    visits: int = 1


def term_filename(today: date) -> str:
    """Return the data file name for the term containing ``today``.

    January to June is the spring term (VT), August to December the autumn
    term (HT); July has no term.
    """
    if today.month <= 6:
        term = "VT"
    elif today.month >= 8:
        term = "HT"
    else:
        raise ValueError(
            "You really shouldn't work in July. Please take some time off! :)"
        )
    return f"{term}-{today.year}.xml"


def parse_names(content: str) -> list[str]:
    """Extract the student names from the plain text of a weekly report."""
    for marker in _LINE_BREAKS:
        content = content.replace(marker, "\n")
    for marker in _REMOVED:
        content = content.replace(marker, "")
    names = []
    for name in content.split("\n")[1::2]:
        for noise in _NAME_NOISE:
            name = name.replace(noise, "")
        names.append(name)
    return names


def _escape(text: str) -> str:
    return "".join(_ESCAPES.get(char, char) for char in text)


def _serialise(people: Iterable[Person]) -> str:
    people = list(people)
    if not people:
        return "  <data></data>"
    lines = ["  <data>"]
    for person in people:
        lines += [
            "      <person>",
            f"          <name>{_escape(person.name)}</name>",
            f"          <visits>{person.visits}</visits>",
            "      </person>",
        ]
    lines.append("  </data>")
    return "\n".join(lines)


def save_visits(people: Iterable[Person], path: str | Path) -> None:
    """Write the visit totals to an XML file."""
    Path(path).write_text(_serialise(people), encoding="utf-8")


def _visits(element: ElementTree.Element) -> int:
    text = (element.findtext("visits") or "").strip()
    if not text:
        return 0
    try:
        return int(text)
    except ValueError:
        raise ValueError(f"visits is not a number: {text!r}") from None


def load_visits(path: str | Path) -> list[Person]:
    """Read the visit totals from an XML file with a ``<data>`` root."""
    try:
        root = ElementTree.parse(path).getroot()
    except ElementTree.ParseError as error:
        raise ValueError(f"malformed data file: {error}") from None
    if root.tag != "data":
        raise ValueError(f"expected a <data> root, found <{root.tag}>")
    return [
        Person(name=entry.findtext("name") or "", visits=_visits(entry))
        for entry in root.findall("person")
    ]


def record_visits(names: Iterable[str], path: str | Path) -> list[Person]:
    """Add one visit for each name to the data file and return the totals.

    A missing file is created; names not seen before start at one visit.
    """
    names = list(names)
    path = Path(path)
    if path.exists():
        people = load_visits(path)
        present = set(names)
        for person in people:
            if person.name in present:
                person.visits += 1
        known = {person.name for person in people}
        for name in names:
            if name not in known:
                people.append(Person(name, 1))
                known.add(name)
    else:
        people = [Person(name, 1) for name in names]
    save_visits(people, path)
    return people


def people_below(people: Iterable[Person], limit: int) -> list[Person]:
    """Return the people with fewer than ``limit`` visits."""
    return [person for person in people if person.visits < limit]


def format_below(people: Iterable[Person], limit: int) -> str:
    """Return one ``name: n besök`` line per person below ``limit`` visits."""
    return "".join(
        f"{person.name}: {person.visits} besök\n"
        for person in people_below(people, limit)
    )


def check_limit(text: str) -> int:
    """Parse a visit limit, which must be a whole number from 2 to 10."""
    try:
        limit = int(text)
    except (TypeError, ValueError):
        raise ValueError(LIMIT_MESSAGE) from None
    if not 2 <= limit <= 10:
        raise ValueError(LIMIT_MESSAGE)
    return limit


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="cmpp", description=__doc__)
    parser.add_argument("command", nargs="?", default="")
    parser.add_argument("argument", nargs="?", default="")
    parser.add_argument("--data", help="visit data file (default: the current term)")
    args = parser.parse_args(argv)

    if args.command not in ("import", "less"):
        print(USAGE)
        return 0

    try:
        data_path = Path(args.data or term_filename(date.today()))
        if args.command == "import":
            if not args.argument:
                raise ValueError("name the report file to import")
            names = parse_names(Path(args.argument).read_text(encoding="utf-8"))
            for name in names:
                print(name)
            print("Antal elever på medley under veckan:", len(names))
            record_visits(names, data_path)
        else:
            limit = check_limit(args.argument)
            for person in people_below(load_visits(data_path), limit):
                print(person.name, person.visits)
    except (ValueError, OSError, UnicodeDecodeError) as error:
        print(error, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())