"""Writing particle states as legacy ASCII VTK files."""

from __future__ import annotations

import math
import os
from decimal import Decimal
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ruspahy.particle import ParticleSystem


def _format_number(value: float) -> str:
    """Shortest round-trip text of a float, without exponent notation."""
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def write_vtk(psys: ParticleSystem, filename: str | os.PathLike[str]) -> None:
    """Write particle positions and their scalar fields to a VTK file."""
    particles = psys.particles
    count = len(particles)
    material_types = [psys.materials[p.material_id].material_type.value for p in particles]

    with open(filename, "w", encoding="ascii", newline="\n") as out:
        out.write("# vtk DataFile Version 3.0\n")
        out.write("SPH particles\n")
        out.write("ASCII\n")
        out.write("DATASET POLYDATA\n")
        out.write(f"POINTS {count} float\n")
        for p in particles:
            out.write(" ".join(_format_number(c) for c in p.position) + "\n")

        out.write(f"\nPOINT_DATA {count}\n")
        scalars = [
            ("pressure", "float", [_format_number(p.pressure) for p in particles]),
            ("stress", "float", [_format_number(p.stress) for p in particles]),
            ("plastic_strain", "float", [_format_number(p.plastic_strain) for p in particles]),
            ("damage", "float", [_format_number(p.damage) for p in particles]),
            ("material_id", "int", [str(p.material_id) for p in particles]),
            ("material_type", "int", [str(t) for t in material_types]),
        ]
        for index, (name, kind, values) in enumerate(scalars):
            prefix = "" if index == 0 else "\n"
            out.write(f"{prefix}SCALARS {name} {kind} 1\n")
            out.write("LOOKUP_TABLE default\n")
            for text in values:
                out.write(text + "\n")