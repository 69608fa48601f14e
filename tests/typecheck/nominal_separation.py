"""Calls the type checker must reject.

Not collected by pytest. pyright runs with ``reportUnnecessaryTypeIgnoreComment = "error"``,
so if any of these calls stops being an error the ignore comment itself fails the check.
"""

from __future__ import annotations

from valuetypes.domain.model import Barcode, Description, Product, barcode, description
from valuetypes.domain.ports import ProductRepository


def mismatched_lookups(repository: ProductRepository, code: Barcode, text: Description) -> None:
    repository.find_by_barcode(text)  # pyright: ignore[reportArgumentType]
    repository.find_by_description(code)  # pyright: ignore[reportArgumentType]
    repository.find_by_barcode("8-000137-001620")  # pyright: ignore[reportArgumentType]
    repository.find_by_description("Multivitamin and minerals")  # pyright: ignore[reportArgumentType]


def mismatched_projections(code: Barcode, text: Description) -> None:
    barcode.value(text)  # pyright: ignore[reportArgumentType]
    description.value(code)  # pyright: ignore[reportArgumentType]
    barcode.equals(code, text)  # pyright: ignore[reportArgumentType]


def swapped_fields(code: Barcode, text: Description) -> Product:
    return Product(barcode=text, description=code)  # pyright: ignore[reportArgumentType]


def raw_result_is_not_a_barcode(raw: str) -> Barcode:
    return barcode.make(raw)  # pyright: ignore[reportReturnType]


def accepted_conversions(code: Barcode, text: Description) -> None:
    # Explicit paths that type-check: re-validation and documented projection.
    barcode.from_description(text)
    description.from_barcode(code)
    barcode.make(description.value(text))
