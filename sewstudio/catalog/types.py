"""
Catalog entry types.  All entries are frozen and loaded from YAML by the
CatalogRegistry; nothing constructs them at runtime outside the registry and
tests.
"""

from __future__ import annotations

from dataclasses import dataclass

from sewstudio.schemas.inference import SizeSystem
from sewstudio.schemas.project import Category


@dataclass(frozen=True)
class SizeOption:
    """One entry of a size picker: display label and submitted value."""

    label: str
    value: str


@dataclass(frozen=True)
class SizeSystemEntry:
    """A size system with its display label and ordered size options."""

    id: SizeSystem
    label: str
    options: tuple[SizeOption, ...]
    notes: str = ""


@dataclass(frozen=True)
class CategoryEntry:
    """A wizard category and the garment types it offers."""

    id: Category
    label: str
    garment_types: tuple[str, ...]


@dataclass(frozen=True)
class FallbackRule:
    """Secondary description heuristic: any keyword present → garment_type."""

    keywords: tuple[str, ...]
    garment_type: str
