"""Dimensioning of a mine hoist wire made of many parallel threads."""

from __future__ import annotations

import argparse
import math
import sys
import xml.etree.ElementTree as ElementTree
from dataclasses import dataclass
from pathlib import Path

GRAVITY = 9.82
"""Gravitational acceleration in m/s²."""

DEFAULT_LOAD = 2000.0
"""Load in kg used by the built-in materials."""

DEFAULT_LENGTH = 1_000_000.0
"""Wire length in mm used by the built-in materials."""

DEFAULT_SAFETY_FACTOR = 2.0

DEFAULT_XML = "material.xml"


@dataclass(frozen=True)
class Material:
    """Properties of a thread material and the hoist it is used in.

    Stresses are in N/mm², density in kg/m³, diameters and length in mm,
    load in kg.
    """

    name: str
    elasticity: float
    density: float
    yield_strength: float
    tensile_strength: float
    thread_diameter: float
    spool_diameter: float
    length: float = DEFAULT_LENGTH
    load: float = DEFAULT_LOAD
    safety_factor: float = DEFAULT_SAFETY_FACTOR


MATERIALS: dict[str, Material] = {
    "titan": Material("titan", 105000, 4600, 747.5, 962.5, 2.5, 500),
    "cfrp": Material("cfrp", 107000, 1550, 800, 800, 2.5, 500),
    "nylon": Material("nylon", 2910, 1130, 72.4, 127.5, 5, 2000),
}


@dataclass(frozen=True)
class WireReport:
    """Results of dimensioning a wire for one material."""

    material: Material
    allowed_stress: float
    thread_area: float
    thread_mass: float
    threads: int
    wire_mass: float
    wire_area: float
    wire_diameter: float
    safe_strength: float
    yield_strength: float
    tensile_strength: float
    extension: float
    elongation_percent: float
    spool_length: float
    three_layer_spool_length: float


def thread_area(thread_diameter: float) -> float:
    """Cross-section area in mm² of a thread with the given diameter."""
    return (math.pi * thread_diameter**2) / 4


def thread_mass(thread_diameter: float, density: float, length: float) -> float:
    """Mass in kg of a thread of ``length`` mm."""
    return (thread_area(thread_diameter) / 1_000_000) * density * (length / 1000)


def thread_capacity(stress: float, area: float, mass: float) -> float:
    """Load in kg a thread carries at ``stress`` after lifting its own mass."""
    return (stress * area) / GRAVITY - mass


def required_threads(thread_strength: float, load: float) -> int:
    """Number of threads needed to carry ``load``."""
    if thread_strength <= 0:
        raise ValueError("a single thread cannot even carry its own weight")
    return math.ceil(load / thread_strength)


def wire_diameter(wire_area: float) -> float:
    """Diameter in mm of a round wire with the given area."""
    return math.sqrt((wire_area * 4) / math.pi)


def total_extension(
    wire_mass: float,
    wire_area: float,
    elasticity: float,
    length: float,
    load: float,
) -> float:
    """Elongation in mm from the wire's own weight plus the load."""
    own_weight = wire_mass * GRAVITY
    load_force = load * GRAVITY
    from_own_weight = (own_weight * length) / (2 * wire_area * elasticity)
    from_load = (load_force * length) / (wire_area * elasticity)
    return from_load + from_own_weight


def spool_length(
    spool_diameter: float, wire_diameter: float, extension: float, length: float
) -> float:
    """Spool length in mm when the wire is wound in one layer."""
    circumference = (spool_diameter + wire_diameter) * math.pi
    laps = (length + extension) / circumference
    return laps * wire_diameter


def three_layer_spool_length(
    spool_diameter: float, wire_diameter: float, extension: float, length: float
) -> float:
    """Spool length in mm when the wire is wound in three layers."""
    diameters = (
        spool_diameter + wire_diameter,
        spool_diameter + 3 * wire_diameter,
        spool_diameter + 5 * wire_diameter,
    )
    circumference = sum(math.pi * diameter for diameter in diameters)
    laps = (length + extension) / circumference
    return laps * wire_diameter


def analyse(material: Material) -> WireReport:
    """Dimension a wire of ``material`` for its load and length."""
    if material.safety_factor <= 0:
        raise ValueError("the safety factor must be positive")
    allowed_stress = material.yield_strength / material.safety_factor
    area = thread_area(material.thread_diameter)
    mass = thread_mass(material.thread_diameter, material.density, material.length)

    allowed = thread_capacity(allowed_stress, area, mass)
    yielding = thread_capacity(material.yield_strength, area, mass)
    breaking = thread_capacity(material.tensile_strength, area, mass)

    threads = required_threads(allowed, material.load)
    wire_mass = threads * mass
    wire_area = area * threads
    diameter = wire_diameter(wire_area)

    extension = total_extension(
        wire_mass, wire_area, material.elasticity, material.length, material.load
    )
    return WireReport(
        material=material,
        allowed_stress=allowed_stress,
        thread_area=area,
        thread_mass=mass,
        threads=threads,
        wire_mass=wire_mass,
        wire_area=wire_area,
        wire_diameter=diameter,
        safe_strength=threads * allowed,
        yield_strength=threads * yielding,
        tensile_strength=threads * breaking,
        extension=extension,
        elongation_percent=100 * (extension / material.length),
        spool_length=spool_length(
            material.spool_diameter, diameter, extension, material.length
        ),
        three_layer_spool_length=three_layer_spool_length(
            material.spool_diameter, diameter, extension, material.length
        ),
    )


def _plain(value: float) -> str:
    """Shortest rendering of a number, without a trailing ``.0``."""
    if math.isfinite(value) and float(value).is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(float(value))


def format_report(report: WireReport) -> str:
    """Render a report as the lines printed for one material."""
    material = report.material
    lines = [
        "",
        f"Säkerhetsfaktor: {_plain(material.safety_factor)}",
        f"Diameter på lös tråd: {_plain(material.thread_diameter)} mm",
        "",
        f"Belastningsvikt: {_plain(material.load)}",
        f"Trådar som krävs: {report.threads} st",
        f"Vajerns vikt: {report.wire_mass:.2f} kg",
        "",
        f"Säker sträckgräns: {report.safe_strength:.2f} kg",
        f"Teoretisk sträckgräns: {report.yield_strength:.2f} kg",
        f"Teoretisk brottgräns: {report.tensile_strength:.2f} kg",
        "",
        f"Total förlängning: {report.extension:.2f} mm",
        f"Procentuell förlängning: {report.elongation_percent:.5f}%",
        "",
        f"Diameter på trumman: {material.spool_diameter:.2f} mm",
        f"Längd på trumman (ett lager): {report.spool_length:.2f} mm",
        f"Längd på trumman (tre lager): {report.three_layer_spool_length:.2f} mm",
    ]
    return "\n".join(lines)


_XML_FIELDS = {
    "elasticity": "elasticity",
    "dencity": "density",
    "yieldstrength": "yield_strength",
    "tensilestrength": "tensile_strength",
    "load": "load",
    "threaddiameter": "thread_diameter",
    "spooldiameter": "spool_diameter",
    "wirelength": "length",
    "safetyfactor": "safety_factor",
}


def _number(element: ElementTree.Element | None, tag: str) -> float:
    if element is None:
        return 0.0
    child = element.find(tag)
    if child is None or child.text is None or not child.text.strip():
        return 0.0
    try:
        return float(child.text.strip())
    except ValueError:
        raise ValueError(f"{tag} is not a number: {child.text.strip()!r}") from None


def load_materials(path: str | Path) -> list[Material]:
    """Read materials from an XML file with a ``<materials>`` root.

    Missing properties are read as zero; wire length is in mm.
    """
    try:
        root = ElementTree.parse(path).getroot()
    except ElementTree.ParseError as error:
        raise ValueError(f"malformed material file: {error}") from None
    if root.tag != "materials":
        raise ValueError(f"expected a <materials> root, found <{root.tag}>")
    materials = []
    for entry in root.findall("material"):
        properties = entry.find("properties")
        values = {
            field: _number(properties, tag) for tag, field in _XML_FIELDS.items()
        }
        name = (entry.findtext("name") or "").strip()
        materials.append(Material(name=name, **values))
    return materials


_PROMPTS = (
    ("elasticity", "Elasticitetsmodul (N/mm): "),
    ("density", "Dencitet (kg/m³): "),
    ("yield_strength", "Sträckgräns (N/mm²): "),
    ("tensile_strength", "Brottgräns (N/mm²): "),
    ("load", "Belastningsvikt (kg): "),
    ("thread_diameter", "Diameter på tråd (mm): "),
    ("spool_diameter", "Diameter på trumma (mm): "),
    ("length", "Längd på vajer (m): "),
    ("safety_factor", "Säkerhetsfaktor: "),
)


def _ask_material() -> Material:
    values = {field: float(input(prompt)) for field, prompt in _PROMPTS}
    values["length"] *= 1000
    return Material(name="", **values)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="gruvlinan", description=__doc__)
    parser.add_argument(
        "material", nargs="?", help="one of: " + ", ".join(MATERIALS)
    )
    parser.add_argument(
        "--xml",
        nargs="?",
        const=DEFAULT_XML,
        metavar="PATH",
        help="analyse every material in an XML file",
    )
    parser.add_argument(
        "--ask", action="store_true", help="enter the material properties by hand"
    )
    args = parser.parse_args(argv)

    try:
        if args.xml is not None:
            for material in load_materials(args.xml):
                print(f"\nEgenskaper för {material.name}:\n")
                print(format_report(analyse(material)).lstrip("\n"))
            return 0
        if args.ask:
            print(format_report(analyse(_ask_material())))
            return 0
        name = args.material
        if name is None:
            name = input(
                "\nMöjliga material är titan, cfrp eller nylon.\n"
                "Välj material att använda: "
            ).strip()
        material = MATERIALS.get(name)
        if material is None:
            print(f"Error: {name} är inte ett giltigt material!", file=sys.stderr)
            return 1
        print(format_report(analyse(material)))
    except (ValueError, EOFError, OSError) as error:
        print(error, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())