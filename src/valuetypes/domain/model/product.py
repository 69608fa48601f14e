"""Product record keyed by value types."""

from __future__ import annotations

from dataclasses import dataclass

from valuetypes.domain.model.barcode import Barcode  # noqa: TC001
from valuetypes.domain.model.description import Description  # noqa: TC001


@dataclass(frozen=True, slots=True)
class Product:
    barcode: Barcode
    description: Description
