"""
PrintGuide derivation for the configurable-parameters workflow.

The guide depends only on the Project: the interfacing line appears when the
user's seam allowance exceeds 10 mm, and the notch/grainline lines follow the
project toggles.  Empty lines are dropped rather than rendered blank.
"""

from __future__ import annotations

from types import MappingProxyType

from sewstudio.schemas.project import PrintGuide, Project

# Seam allowances above this get an interfacing line in the materials list.
_INTERFACING_THRESHOLD_MM: float = 10


def format_number(value: float) -> str:
    """Format a numeric field the way it was entered: 42 → "42", 42.5 → "42.5"."""
    return f"{value:g}"


def generate_print_guide(project: Project) -> PrintGuide:
    """Derive the materials list, assembly steps, and settings table for *project*."""
    size = format_number(project.size)
    stretch = format_number(project.fabric_stretch_pct)
    seam = format_number(project.seam_allowance_mm)
    category = project.category.value

    materials = [
        f"Primary fabric: 2.5m ({project.garment_type}, {category})",
        "Matching thread: 1 spool",
        "Interfacing: 0.5m" if project.seam_allowance_mm > _INTERFACING_THRESHOLD_MM else "",
        "Pins, scissors, marking chalk",
        "Notch cutter or snips" if project.include_notches else "",
    ]
    steps = [
        "Print all pattern pages and verify 5cm calibration square.",
        f"Cut along solid lines with {seam}mm seam allowance included.",
        "Transfer all notch markings to fabric." if project.include_notches else "",
        "Align grainline arrows with fabric selvedge." if project.include_grainline else "",
        f"Pin pattern pieces to fabric ({stretch}% stretch considered).",
        f"Cut fabric pieces for size {size}.",
        "Assemble following numbered sequence.",
        "Press seams and finish edges.",
        "Final fitting and adjustments.",
    ]
    settings = {
        "Project": project.title,
        "Garment": project.garment_type,
        "Category": category,
        "Size": f"{size} (metric)",
        "Fabric Stretch": f"{stretch}%",
        "Seam Allowance": f"{seam}mm",
        "Notches": "Included" if project.include_notches else "Not included",
        "Grainline": "Included" if project.include_grainline else "Not included",
    }
    return PrintGuide(
        materials=tuple(m for m in materials if m),
        steps=tuple(s for s in steps if s),
        settings=MappingProxyType(settings),
    )
