"""In-memory product repositories and the bundled sample catalogue."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Final

from valuetypes.domain.model import (
    PlainBarcode,
    PlainDescription,
    PlainProduct,
    Product,
    barcode,
    description,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from valuetypes.domain.model import Barcode, Description

log = logging.getLogger(__name__)

SAMPLE_CATALOG: Final[tuple[tuple[str, str], ...]] = (
    ("8-000137-001620", "Multivitamin and minerals"),
    ("1-234567-890123", "Apple iPhone 12 Pro"),
    ("1-234567-890234", "Apple MacBook Pro"),
    ("0-987654-321098", "Apple iPhone 12 Pro"),
)


def sample_products() -> list[Product]:
    return [
        Product(barcode=barcode.parse(code), description=description.make(text))
        for code, text in SAMPLE_CATALOG
    ]


class InMemoryProductRepository:
    """Dictionary-backed :class:`~valuetypes.domain.ports.ProductRepository`.

    Products are keyed by their barcode. Adding a second product with the same barcode
    replaces the first.
    """

    def __init__(self, products: Iterable[Product] = ()) -> None:
        self._products: dict[Barcode, Product] = {}
        for product in products:
            self.add(product)

    def add(self, entity: Product) -> None:
        code = barcode.parse(entity.barcode)
        if code in self._products:
            log.debug("Replacing product %s", code)
        self._products[code] = entity

    def find_by_barcode(self, code: Barcode) -> Product | None:
        return self._products.get(barcode.parse(code))

    def find_by_description(self, text: Description) -> list[Product]:
        return [
            product
            for product in self._products.values()
            if description.equals(product.description, text)
        ]

    def __len__(self) -> int:
        return len(self._products)


class WrapperProductRepository:
    """Lookups keyed by the plain wrapper classes.

    The wrappers are ordinary runtime classes, so the argument kind is checked on entry.
    """

    def __init__(self, products: Iterable[PlainProduct] = ()) -> None:
        self._products = list(products)

    def find_by_code(self, code: PlainBarcode) -> PlainProduct | None:
        if not isinstance(code, PlainBarcode):  # pyright: ignore[reportUnnecessaryIsInstance]
            raise TypeError(f"expected PlainBarcode, got {type(code).__name__}")
        return next((p for p in self._products if p.code == code.code), None)

    def find_by_description(self, text: PlainDescription) -> list[PlainProduct]:
        if not isinstance(text, PlainDescription):  # pyright: ignore[reportUnnecessaryIsInstance]
            raise TypeError(f"expected PlainDescription, got {type(text).__name__}")
        return [p for p in self._products if p.description == text.text]
