"""SQLAlchemy table metadata for stored products."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import Column, MetaData, String, Table

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

log = logging.getLogger(__name__)

metadata = MetaData(
    naming_convention={
        "ix": "ix_%(column_0_label)s",
        "uq": "uq_%(table_name)s_%(column_0_label)s",
        "ck": "ck_%(table_name)s_%(constraint_name)s",
        "pk": "pk_%(table_name)s",
    }
)

# Barcodes are stored as plain strings: the newtype has no runtime form to convert.
product_table = Table(
    "product",
    metadata,
    Column("barcode", String(15), primary_key=True),
    Column("description", String, nullable=False, index=True),
)


def create_all_tables(engine: Engine) -> None:
    """Create database tables for the product metadata."""

    log.info("Creating all tables")
    metadata.create_all(engine)
