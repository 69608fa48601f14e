"""Pydantic models describing a JSON product catalogue file.

Shape::

    {"products": [{"barcode": "8-000137-001620", "description": "Multivitamin"}]}

The schema checks structure only; barcode format is the domain's concern.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CatalogBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class ProductEntry(CatalogBaseModel):
    barcode: str
    description: str = ""


class CatalogPayload(CatalogBaseModel):
    products: list[ProductEntry] = Field(default_factory=list[ProductEntry])
