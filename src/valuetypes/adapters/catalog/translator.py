"""Translate catalogue payloads into domain products."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from valuetypes.common.result import Err, Ok
from valuetypes.domain.model import Product, barcode, description

if TYPE_CHECKING:
    from valuetypes.domain.errors import ValidationError

    from .schema import CatalogPayload

log = getLogger(__name__)


@dataclass
class TranslationResult:
    products: list[Product] = field(default_factory=list[Product])
    rejected: list[ValidationError] = field(default_factory=list["ValidationError"])


def translate_products(payload: CatalogPayload) -> TranslationResult:
    """Build products from catalogue entries, collecting entries with malformed barcodes."""

    result = TranslationResult()
    for entry in payload.products:
        match barcode.make(entry.barcode):
            case Ok(value=code):
                result.products.append(
                    Product(barcode=code, description=description.make(entry.description))
                )
            case Err(error=error):
                log.warning("Skipping catalogue entry: %s", error)
                result.rejected.append(error)
    return result
