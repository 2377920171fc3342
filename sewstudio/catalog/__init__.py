from .registry import CatalogRegistry, get_catalog
from .types import CategoryEntry, FallbackRule, SizeOption, SizeSystemEntry

__all__ = [
    "CatalogRegistry",
    "get_catalog",
    "CategoryEntry",
    "FallbackRule",
    "SizeOption",
    "SizeSystemEntry",
]
