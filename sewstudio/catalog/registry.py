"""
Catalog registry: loads the studio's lookup tables from YAML at startup,
validates cross-references, and exposes a read-only query API.

Tables
------
size_systems.yaml   — size systems, display labels, and size options
garment_types.yaml  — ordered description vocabulary, fallback heuristics,
                      and the default garment type
categories.yaml     — wizard categories and their garment options

The registry is a module-level singleton; call get_catalog() to obtain it.
Tables are loaded once at import time and never written afterwards.
"""

from __future__ import annotations

from pathlib import Path
from types import MappingProxyType
from typing import Any, cast

import yaml

from sewstudio.catalog.types import CategoryEntry, FallbackRule, SizeOption, SizeSystemEntry
from sewstudio.schemas.inference import SizeSystem
from sewstudio.schemas.project import Category

_DATA_DIR = Path(__file__).parent / "data"


class CatalogRegistry:
    """
    Read-only registry of all catalog lookup tables.

    Mapping attributes are wrapped in MappingProxyType after loading; sequence
    attributes are tuples.

    Instantiate directly to use a custom data directory (e.g. in tests);
    otherwise use get_catalog() for the module singleton.
    """

    def __init__(self, data_dir: Path = _DATA_DIR) -> None:
        self._data_dir = data_dir

        self.size_systems: MappingProxyType[SizeSystem, SizeSystemEntry]
        self.categories: MappingProxyType[Category, CategoryEntry]
        self.vocabulary: tuple[str, ...]
        self.fallbacks: tuple[FallbackRule, ...]
        self.default_garment_type: str

        self._load_all()
        self._validate_cross_references()

    # ── Loading ────────────────────────────────────────────────────────────────

    def _load_yaml(self, filename: str) -> dict[str, Any]:
        path = self._data_dir / filename
        try:
            with open(path, encoding="utf-8") as f:
                return cast(dict[str, Any], yaml.safe_load(f))
        except FileNotFoundError:
            raise FileNotFoundError(f"Catalog data file not found: {path}") from None
        except yaml.YAMLError as exc:
            raise ValueError(f"Failed to parse catalog data file {path}: {exc}") from exc

    def _load_all(self) -> None:
        self._load_size_systems()
        self._load_garment_types()
        self._load_categories()

    def _load_size_systems(self) -> None:
        data = self._load_yaml("size_systems.yaml")
        result: dict[SizeSystem, SizeSystemEntry] = {}
        for entry in data["entries"]:
            system = SizeSystem(entry["id"])
            template = entry.get("option_label", "{value}")
            result[system] = SizeSystemEntry(
                id=system,
                label=entry["label"],
                options=tuple(
                    SizeOption(label=template.format(value=str(v)), value=str(v))
                    for v in entry["values"]
                ),
                notes=entry.get("notes", "").strip(),
            )
        self.size_systems = MappingProxyType(result)

    def _load_garment_types(self) -> None:
        data = self._load_yaml("garment_types.yaml")
        self.vocabulary = tuple(data["vocabulary"])
        self.fallbacks = tuple(
            FallbackRule(keywords=tuple(f["keywords"]), garment_type=f["garment_type"])
            for f in data.get("fallbacks", [])
        )
        self.default_garment_type = data["default"]

    def _load_categories(self) -> None:
        data = self._load_yaml("categories.yaml")
        result: dict[Category, CategoryEntry] = {}
        for entry in data["entries"]:
            category = Category(entry["id"])
            result[category] = CategoryEntry(
                id=category,
                label=entry["label"],
                garment_types=tuple(entry["garment_types"]),
            )
        self.categories = MappingProxyType(result)

    # ── Cross-reference validation ─────────────────────────────────────────────

    def _validate_cross_references(self) -> None:
        """
        Run at startup.  Raises ValueError listing every problem found.
        """
        errors: list[str] = []
        self._check_size_systems(errors)
        self._check_vocabulary(errors)
        self._check_categories(errors)
        if errors:
            raise ValueError(
                "Catalog cross-reference validation failed:\n"
                + "\n".join(f"  • {e}" for e in errors)
            )

    def _check_size_systems(self, errors: list[str]) -> None:
        for system in SizeSystem:
            entry = self.size_systems.get(system)
            if entry is None:
                errors.append(f"size system {system.value!r} has no entry in size_systems")
            elif not entry.options:
                errors.append(f"size system {system.value!r} has no size options")

    def _check_vocabulary(self, errors: list[str]) -> None:
        """Labels must be unique case-insensitively; fallbacks must target the vocabulary."""
        seen: set[str] = set()
        for label in self.vocabulary:
            key = label.lower()
            if key in seen:
                errors.append(f"vocabulary label {label!r} is duplicated")
            seen.add(key)
        for rule in self.fallbacks:
            if not rule.keywords:
                errors.append(f"fallback for {rule.garment_type!r} has no keywords")
            if rule.garment_type not in self.vocabulary:
                errors.append(
                    f"fallback target {rule.garment_type!r} is not defined in vocabulary"
                )
        if self.default_garment_type not in self.vocabulary:
            errors.append(
                f"default garment type {self.default_garment_type!r} is not defined in vocabulary"
            )

    def _check_categories(self, errors: list[str]) -> None:
        for category in Category:
            entry = self.categories.get(category)
            if entry is None:
                errors.append(f"category {category.value!r} has no entry in categories")
            elif not entry.garment_types:
                errors.append(f"category {category.value!r} offers no garment types")

    # ── Query API ──────────────────────────────────────────────────────────────

    def get_size_system(self, system: SizeSystem) -> SizeSystemEntry:
        """Return the entry for *system*.  Raises KeyError if unknown."""
        try:
            return self.size_systems[system]
        except KeyError:
            raise KeyError(f"Unknown size system: {system!r}") from None

    def get_size_options(self, system: SizeSystem) -> tuple[SizeOption, ...]:
        """Return the ordered size options for *system*."""
        return self.get_size_system(system).options

    def get_category(self, category: Category) -> CategoryEntry:
        """Return the entry for *category*.  Raises KeyError if unknown."""
        try:
            return self.categories[category]
        except KeyError:
            raise KeyError(f"Unknown category: {category!r}") from None

    def get_garment_options(self, category: Category) -> tuple[str, ...]:
        """Return the garment types offered for *category* at wizard step 1."""
        return self.get_category(category).garment_types


# ── Module-level singleton ─────────────────────────────────────────────────────

_catalog: CatalogRegistry = CatalogRegistry()


def get_catalog() -> CatalogRegistry:
    """Return the module-level catalog singleton."""
    return _catalog
