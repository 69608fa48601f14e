"""JSON product catalogue adapter."""

from __future__ import annotations

from .loader import load_catalog, read_catalog
from .schema import CatalogPayload, ProductEntry
from .translator import TranslationResult, translate_products

__all__ = [
    "CatalogPayload",
    "ProductEntry",
    "TranslationResult",
    "load_catalog",
    "read_catalog",
    "translate_products",
]
