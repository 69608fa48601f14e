"""Free-form product description newtype.

Descriptions carry no invariant, so :func:`make` accepts any text, empty text included.
The type still keeps descriptions and barcodes apart for the type checker.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NewType

if TYPE_CHECKING:
    from valuetypes.domain.model.barcode import Barcode

Description = NewType("Description", str)


def make(raw: str) -> Description:
    return Description(raw)


def from_barcode(code: Barcode) -> Description:
    return Description(code)


def value(text: Description) -> str:
    return text


def equals(left: Description, right: Description) -> bool:
    return left == right
