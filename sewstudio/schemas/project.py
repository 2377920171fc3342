"""
Project schemas: the session-owned wizard record and its derived print guide.

A Project is created at wizard step 1, replaced wholesale at step 2 (never
mutated in place), and read by the print-guide compositor.  PrintGuide is a
pre-rendered summary derived from a Project alone; it does not consult the
Inference Engine.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from types import MappingProxyType


class Category(str, Enum):
    """Wizard category; selects the garment options offered at step 1."""

    WOMENS = "womens"
    MENS = "mens"
    KIDS = "kids"
    ANIMAL = "animal"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Project:
    """
    A single user's pattern project.

    Attributes:
        id: Generated identifier (UUID4 string).
        title: User-supplied project title.
        category: Wizard category.
        size: Numeric metric size.
        garment_type: Garment chosen from the category's options.
        fabric_stretch_pct: Fabric stretch, 0 for wovens.
        seam_allowance_mm: User-configured seam allowance.  Independent of
            GarmentInference.seam_allowance_mm.
        include_notches: Whether notch markings are part of the guide.
        include_grainline: Whether grainline markings are part of the guide.
        notes: Free-text notes.
        size_system: Always "metric" for wizard projects.
        created_at: Creation timestamp (UTC).
    """

    id: str
    title: str
    category: Category
    size: float
    garment_type: str
    fabric_stretch_pct: float = 0
    seam_allowance_mm: float = 10
    include_notches: bool = True
    include_grainline: bool = True
    notes: str = ""
    size_system: str = "metric"
    created_at: datetime = field(default_factory=_utc_now)


@dataclass(frozen=True)
class PrintGuide:
    """Materials, assembly steps, and a settings table for one Project."""

    materials: tuple[str, ...]
    steps: tuple[str, ...]
    settings: MappingProxyType[str, str]

    def __post_init__(self) -> None:
        if not isinstance(self.settings, MappingProxyType):
            raise TypeError(
                f"settings must be a MappingProxyType, got {type(self.settings).__name__}"
            )
