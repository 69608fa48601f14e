"""Tests for the SQLAlchemy product repository."""

from __future__ import annotations

import pytest
from sqlalchemy import insert
from sqlalchemy.orm import Session  # noqa: TC002

from valuetypes.adapters.memory import sample_products
from valuetypes.adapters.sqlalchemy import SqlAlchemyProductRepository, product_table
from valuetypes.domain.errors import ValidationError
from valuetypes.domain.model import Barcode, barcode, description
from valuetypes.domain.ports import ProductRepository


def _seeded(session: Session) -> SqlAlchemyProductRepository:
    repository = SqlAlchemyProductRepository(session)
    for product in sample_products():
        repository.add(product)
    session.commit()
    return repository


def test_repository_satisfies_port(sqlite_session: Session) -> None:
    assert isinstance(SqlAlchemyProductRepository(sqlite_session), ProductRepository)


def test_round_trip_by_barcode(sqlite_session: Session) -> None:
    repository = _seeded(sqlite_session)

    found = repository.find_by_barcode(barcode.parse("8-000137-001620"))

    assert found is not None
    assert found.barcode == "8-000137-001620"
    assert found.description == "Multivitamin and minerals"
    assert type(found.barcode) is str


def test_find_by_barcode_missing(sqlite_session: Session) -> None:
    repository = _seeded(sqlite_session)

    assert repository.find_by_barcode(barcode.parse("9-999999-999999")) is None


def test_find_by_description_is_ordered(sqlite_session: Session) -> None:
    repository = _seeded(sqlite_session)

    found = repository.find_by_description(description.make("Apple iPhone 12 Pro"))

    assert [product.barcode for product in found] == ["0-987654-321098", "1-234567-890123"]


def test_malformed_barcode_never_reaches_the_database(sqlite_session: Session) -> None:
    repository = SqlAlchemyProductRepository(sqlite_session)

    with pytest.raises(ValidationError):
        repository.find_by_barcode(Barcode("not-a-code"))


def test_malformed_stored_row_is_rejected_on_load(sqlite_session: Session) -> None:
    sqlite_session.execute(
        insert(product_table).values(barcode="legacy", description="Imported before validation")
    )
    sqlite_session.commit()
    repository = SqlAlchemyProductRepository(sqlite_session)

    with pytest.raises(ValidationError, match="legacy"):
        repository.find_by_description(description.make("Imported before validation"))
