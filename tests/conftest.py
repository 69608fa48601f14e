from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine  # noqa: TC002
from sqlalchemy.orm import Session, sessionmaker

from valuetypes.adapters.memory import InMemoryProductRepository, sample_products
from valuetypes.adapters.sqlalchemy import create_all_tables

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


@pytest.fixture
def sample_repository() -> InMemoryProductRepository:
    return InMemoryProductRepository(sample_products())


@pytest.fixture
def catalog_file(tmp_path: Path) -> Path:
    path = tmp_path / "catalog.json"
    payload = {
        "products": [
            {"barcode": "8-000137-001620", "description": "Multivitamin and minerals"},
            {"barcode": "I am a bar-code ;)", "description": "Counterfeit"},
            {"barcode": "3-141592-653589", "description": "Pi-shaped cookie cutter"},
        ]
    }
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


@pytest.fixture
def sqlite_engine() -> Iterator[Engine]:
    engine = create_engine("sqlite+pysqlite:///:memory:", future=True)
    create_all_tables(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def sqlite_session(sqlite_engine: Engine) -> Iterator[Session]:
    session_factory = sessionmaker(bind=sqlite_engine, future=True)
    session = session_factory()
    try:
        yield session
    finally:
        session.close()
