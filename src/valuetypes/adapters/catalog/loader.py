"""Read product catalogue files from disk."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import ValidationError as PydanticValidationError

from valuetypes.domain.errors import CatalogError

from .schema import CatalogPayload
from .translator import TranslationResult, translate_products

if TYPE_CHECKING:
    from pathlib import Path

log = getLogger(__name__)


def read_catalog(path: Path) -> CatalogPayload:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise CatalogError(f"Cannot read catalogue {path}: {exc}") from exc
    try:
        return CatalogPayload.model_validate_json(text)
    except PydanticValidationError as exc:
        raise CatalogError(f"Malformed catalogue {path}: {exc}") from exc


def load_catalog(path: Path) -> TranslationResult:
    result = translate_products(read_catalog(path))
    log.info(
        "Loaded catalogue %s: products=%s, rejected=%s",
        path,
        len(result.products),
        len(result.rejected),
    )
    return result
