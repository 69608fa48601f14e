"""Application entry points: build a repository and run lookups from raw text.

Raw text enters here and is turned into value types before any repository sees it.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from valuetypes.adapters.catalog import load_catalog
from valuetypes.adapters.memory import InMemoryProductRepository, sample_products
from valuetypes.domain.model import barcode, description

if TYPE_CHECKING:
    from pathlib import Path

    from valuetypes.domain.model import Product
    from valuetypes.domain.ports import ProductRepository

log = getLogger(__name__)


def build_repository(catalog_path: Path | None = None) -> InMemoryProductRepository:
    """Return a repository seeded from ``catalog_path``, or from the sample data when unset."""

    if catalog_path is None:
        log.debug("Using bundled sample catalogue")
        return InMemoryProductRepository(sample_products())
    return InMemoryProductRepository(load_catalog(catalog_path).products)


def lookup_by_barcode(raw: str, *, repository: ProductRepository) -> Product | None:
    """Validate ``raw`` and look it up; malformed input raises before the repository runs."""

    code = barcode.parse(raw)
    log.info("Looking up barcode %s", code)
    return repository.find_by_barcode(code)


def lookup_by_description(raw: str, *, repository: ProductRepository) -> list[Product]:
    text = description.make(raw)
    log.info("Looking up description %r", text)
    return repository.find_by_description(text)
