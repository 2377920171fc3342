"""
Tests for sewstudio/catalog/registry.py — CatalogRegistry.

Covers:
  - Size systems: labels, option labels, and option values from YAML
  - Categories and their garment options
  - Vocabulary order, fallbacks, and default
  - Query API KeyErrors
  - Cross-reference validation against broken data directories
"""

from __future__ import annotations

import shutil
from pathlib import Path
from types import MappingProxyType

import pytest

from sewstudio.catalog import CatalogRegistry, get_catalog
from sewstudio.catalog.registry import _DATA_DIR
from sewstudio.schemas.inference import SizeSystem
from sewstudio.schemas.project import Category


@pytest.fixture(scope="module")
def catalog():
    return get_catalog()


def _copy_data(tmp_path: Path) -> Path:
    target = tmp_path / "data"
    shutil.copytree(_DATA_DIR, target)
    return target


# ── Size systems ───────────────────────────────────────────────────────────────


class TestSizeSystems:
    def test_every_size_system_has_an_entry(self, catalog):
        assert set(catalog.size_systems) == set(SizeSystem)

    def test_size_systems_is_read_only(self, catalog):
        assert isinstance(catalog.size_systems, MappingProxyType)

    def test_women_sizes_are_even_6_to_24(self, catalog):
        values = [o.value for o in catalog.get_size_options(SizeSystem.AU_WOMEN)]
        assert values == [str(n) for n in range(6, 25, 2)]

    def test_women_option_labels_are_prefixed(self, catalog):
        first = catalog.get_size_options(SizeSystem.AU_WOMEN)[0]
        assert first.label == "Size 6"
        assert first.value == "6"

    def test_men_sizes_are_letter_sizes(self, catalog):
        options = catalog.get_size_options(SizeSystem.AU_MEN)
        assert [o.value for o in options] == ["XS", "S", "M", "L", "XL", "2XL", "3XL", "4XL", "5XL"]
        assert all(o.label == o.value for o in options)

    def test_kids_sizes_skip_odd_numbers_above_8(self, catalog):
        values = [o.value for o in catalog.get_size_options(SizeSystem.AU_KIDS)]
        assert values[-4:] == ["8", "10", "12", "14"]
        assert len(values) == 12

    def test_dog_sizes(self, catalog):
        values = [o.value for o in catalog.get_size_options(SizeSystem.DOGS)]
        assert values == ["XS", "S", "M", "L", "XL", "2XL"]

    def test_display_labels(self, catalog):
        assert catalog.get_size_system(SizeSystem.AU_WOMEN).label == "AU Women"
        assert catalog.get_size_system(SizeSystem.DOGS).label == "Dogs"

    def test_unknown_size_system_raises_key_error(self, catalog):
        with pytest.raises(KeyError):
            catalog.get_size_system("cats")  # type: ignore[arg-type]


# ── Categories ─────────────────────────────────────────────────────────────────


class TestCategories:
    def test_every_category_has_an_entry(self, catalog):
        assert set(catalog.categories) == set(Category)

    def test_womens_garment_options(self, catalog):
        assert catalog.get_garment_options(Category.WOMENS) == (
            "Dress",
            "Blouse",
            "Skirt",
            "Pants",
            "Jacket",
        )

    def test_animal_options_include_pet_garments(self, catalog):
        assert "Dog Coat" in catalog.get_garment_options(Category.ANIMAL)

    def test_unknown_category_raises_key_error(self, catalog):
        with pytest.raises(KeyError):
            catalog.get_category("pets")  # type: ignore[arg-type]


# ── Garment vocabulary ─────────────────────────────────────────────────────────


class TestVocabulary:
    def test_vocabulary_order(self, catalog):
        assert catalog.vocabulary[:3] == ("Dress", "Blouse", "Skirt")
        assert catalog.vocabulary[-2:] == ("Dog Coat", "Dog Bandana")
        assert len(catalog.vocabulary) == 16

    def test_fallbacks_in_order(self, catalog):
        assert [f.garment_type for f in catalog.fallbacks] == ["Blouse", "Pants", "Hoodie"]
        assert catalog.fallbacks[2].keywords == ("sweater", "pullover")

    def test_default_is_dress(self, catalog):
        assert catalog.default_garment_type == "Dress"


# ── Cross-reference validation ─────────────────────────────────────────────────


class TestValidation:
    def test_fresh_registry_from_copied_data_loads(self, tmp_path):
        registry = CatalogRegistry(_copy_data(tmp_path))
        assert registry.vocabulary == get_catalog().vocabulary

    def test_missing_file_raises(self, tmp_path):
        data = _copy_data(tmp_path)
        (data / "categories.yaml").unlink()
        with pytest.raises(FileNotFoundError):
            CatalogRegistry(data)

    def test_fallback_outside_vocabulary_is_reported(self, tmp_path):
        data = _copy_data(tmp_path)
        path = data / "garment_types.yaml"
        path.write_text(path.read_text().replace("garment_type: Pants", "garment_type: Kilt"))
        with pytest.raises(ValueError, match="'Kilt' is not defined in vocabulary"):
            CatalogRegistry(data)

    def test_all_problems_are_listed(self, tmp_path):
        data = _copy_data(tmp_path)
        path = data / "garment_types.yaml"
        text = path.read_text().replace("default: Dress", "default: Gown")
        text = text.replace("  - Blouse\n", "  - Blouse\n  - blouse\n")
        path.write_text(text)
        with pytest.raises(ValueError) as exc_info:
            CatalogRegistry(data)
        message = str(exc_info.value)
        assert "'blouse' is duplicated" in message
        assert "'Gown'" in message

    def test_empty_category_is_reported(self, tmp_path):
        data = _copy_data(tmp_path)
        path = data / "categories.yaml"
        path.write_text(
            path.read_text().replace(
                "garment_types: [Dog Coat, Cat Sweater, Pet Bandana]", "garment_types: []"
            )
        )
        with pytest.raises(ValueError, match="'animal' offers no garment types"):
            CatalogRegistry(data)
