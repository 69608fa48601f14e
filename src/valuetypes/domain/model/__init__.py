"""Public value-type surface.

``barcode`` and ``description`` are modules: ``barcode.make(raw)``, ``barcode.value(code)``,
``description.make(raw)`` and so on, with ``Barcode``/``Description`` as the types.
"""

from __future__ import annotations

from valuetypes.domain.model import barcode, description
from valuetypes.domain.model.barcode import Barcode
from valuetypes.domain.model.description import Description
from valuetypes.domain.model.product import Product
from valuetypes.domain.model.smart import CheckedBarcode
from valuetypes.domain.model.value_class import BarcodeValue, made_in_italy
from valuetypes.domain.model.wrappers import PlainBarcode, PlainDescription, PlainProduct

__all__ = [  # noqa: RUF022
    # newtypes
    "Barcode",
    "Description",
    "barcode",
    "description",
    # records
    "Product",
    "PlainProduct",
    # earlier techniques
    "PlainBarcode",
    "PlainDescription",
    "CheckedBarcode",
    "BarcodeValue",
    "made_in_italy",
]
