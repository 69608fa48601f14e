"""Repository implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import insert, select

from valuetypes.adapters.sqlalchemy.tables import product_table
from valuetypes.domain.model import Product, barcode, description

if TYPE_CHECKING:
    from sqlalchemy import Row
    from sqlalchemy.orm import Session

    from valuetypes.domain.model import Barcode, Description


def _to_product(row: Row[Any]) -> Product:
    # Rows may predate validation, so the stored barcode goes through the smart constructor.
    return Product(
        barcode=barcode.parse(row.barcode),
        description=description.make(row.description),
    )


class SqlAlchemyProductRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, entity: Product) -> None:
        code = barcode.parse(entity.barcode)
        self.session.execute(
            insert(product_table).values(barcode=code, description=entity.description)
        )

    def find_by_barcode(self, code: Barcode) -> Product | None:
        stmt = select(product_table).where(product_table.c.barcode == barcode.parse(code))
        row = self.session.execute(stmt).one_or_none()
        return None if row is None else _to_product(row)

    def find_by_description(self, text: Description) -> list[Product]:
        stmt = (
            select(product_table)
            .where(product_table.c.description == text)
            .order_by(product_table.c.barcode)
        )
        return [_to_product(row) for row in self.session.execute(stmt)]
