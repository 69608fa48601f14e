"""Ports for storing and looking up products."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from valuetypes.domain.model import Barcode, Description, Product


@runtime_checkable
class Repository[TEntity](Protocol):
    """Minimal repository contract for a store of records."""

    def add(self, entity: TEntity) -> None: ...


@runtime_checkable
class ProductRepository(Repository["Product"], Protocol):
    """Product lookups keyed by value types, never by raw text.

    Implementations re-validate the barcode they receive and raise
    :class:`~valuetypes.domain.errors.ValidationError` before querying storage.
    """

    def find_by_barcode(self, code: Barcode) -> Product | None: ...

    def find_by_description(self, text: Description) -> list[Product]: ...
