"""
Garment type inference from free-text descriptions.

infer_type() scans the catalog vocabulary in order and returns the first label
whose lowercase form occurs in the lowercased description.  If nothing
matches, the catalog's fallback heuristics are checked in order ("top" →
Blouse, "trouser" → Pants, "sweater"/"pullover" → Hoodie), then the default
("Dress") is returned.  It never fails.

GarmentClassifier is the protocol boundary: KeywordGarmentClassifier wraps
infer_type(); LLMGarmentClassifier (llm_classifier.py) is a drop-in
alternative.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from sewstudio.catalog.registry import CatalogRegistry, get_catalog


def infer_type(description: str, catalog: CatalogRegistry | None = None) -> str:
    """Return the garment type label inferred from *description*."""
    catalog = catalog or get_catalog()
    text = description.lower()
    for label in catalog.vocabulary:
        if label.lower() in text:
            return label
    for rule in catalog.fallbacks:
        if any(keyword in text for keyword in rule.keywords):
            return rule.garment_type
    return catalog.default_garment_type


@runtime_checkable
class GarmentClassifier(Protocol):
    """Protocol for description → garment type classifiers."""

    def classify(self, description: str) -> str: ...


class KeywordGarmentClassifier:
    """Deterministic classifier backed by infer_type()."""

    def __init__(self, catalog: CatalogRegistry | None = None) -> None:
        self._catalog = catalog or get_catalog()

    def classify(self, description: str) -> str:
        return infer_type(description, self._catalog)
