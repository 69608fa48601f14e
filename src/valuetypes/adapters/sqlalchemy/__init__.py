"""SQLAlchemy adapter package."""

from __future__ import annotations

from .repositories import SqlAlchemyProductRepository
from .tables import create_all_tables, metadata, product_table

__all__ = [
    "SqlAlchemyProductRepository",
    "create_all_tables",
    "metadata",
    "product_table",
]
