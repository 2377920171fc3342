"""
Inference schemas: the recommendation record and construction steps.

GarmentInference is the output of the Inference Engine and the primary input
of the pattern-pack compositor.  It is a pure function of
(garment_type, size_system, size) and is never mutated after construction.

Positional fields matter downstream:
  stitch_types[0]   — main construction stitch (Sew main seams step)
  stitch_types[1]   — seam finishing stitch (Finish seams step)
  stitch_types[-1]  — hem stitch (Hem and final details step)
  notions[0]        — always "Matching thread"
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SizeSystem(str, Enum):
    """
    Sizing system a garment is cut for.

    AU_KIDS and DOGS are the "small" systems: they get a finer needle, and
    AU_KIDS scales the fabric quantity down.  DOGS is the animal system and
    switches the inferred seam allowance to 8 mm.
    """

    AU_WOMEN = "au_women"
    AU_MEN = "au_men"
    AU_KIDS = "au_kids"
    DOGS = "dogs"

    @property
    def is_animal(self) -> bool:
        return self is SizeSystem.DOGS

    @property
    def is_small(self) -> bool:
        return self in (SizeSystem.DOGS, SizeSystem.AU_KIDS)


class Difficulty(str, Enum):
    """Skill level printed on the title page."""

    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"


@dataclass(frozen=True)
class GarmentInference:
    """
    Sewing recommendation derived from a garment type and size.

    Attributes:
        garment_type: Free-form garment label; drives every other field.
        fabric_type: Recommended primary fabric.
        fabric_quantity_m: Fabric length in metres, rounded to 0.1 m.
        needle_type: Machine needle family.
        needle_size: Needle size as "metric/US".
        stitch_types: Ordered stitch list (main seam first, hem last).
        tension_range: Suggested upper-thread tension range.
        seam_allowance_mm: 8 for the animal size system, 15 otherwise.  Not
            related to the seam allowance a user sets on a Project.
        difficulty: Skill level.
        notions: Ordered, append-only list of notions.
        interfacing: Interfacing recommendation or "None required".
        thread: Thread recommendation.
    """

    garment_type: str
    fabric_type: str
    fabric_quantity_m: float
    needle_type: str
    needle_size: str
    stitch_types: tuple[str, ...]
    tension_range: str
    seam_allowance_mm: int
    difficulty: Difficulty
    notions: tuple[str, ...]
    interfacing: str
    thread: str

    def __post_init__(self) -> None:
        if self.fabric_quantity_m <= 0:
            raise ValueError(f"fabric_quantity_m must be positive, got {self.fabric_quantity_m}")
        if not self.stitch_types:
            raise ValueError("stitch_types must not be empty")
        if not self.notions:
            raise ValueError("notions must not be empty")

    @property
    def main_stitch(self) -> str:
        return self.stitch_types[0]

    @property
    def finish_stitch(self) -> str:
        return self.stitch_types[1]

    @property
    def hem_stitch(self) -> str:
        return self.stitch_types[-1]


@dataclass(frozen=True)
class InstructionStep:
    """One construction step: a short title and templated prose."""

    step: str
    detail: str
