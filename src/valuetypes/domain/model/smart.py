"""Wrapper class guarded by a smart constructor.

``CheckedBarcode(...)`` raises; :meth:`CheckedBarcode.make` is the only way to obtain an
instance, so every live ``CheckedBarcode`` holds a well-formed code. Unlike
:mod:`~valuetypes.domain.model.barcode` this costs one extra object per value.
"""

from __future__ import annotations

import logging
from typing import Final, Self

from valuetypes.common.result import Err, Ok, Result
from valuetypes.domain.errors import ValidationError
from valuetypes.domain.model import barcode

log = logging.getLogger(__name__)

_CONSTRUCTION_TOKEN: Final[object] = object()


class CheckedBarcode:
    __slots__ = ("_code",)

    _code: str

    def __init__(self, code: str, *, _token: object = None) -> None:
        if _token is not _CONSTRUCTION_TOKEN:
            raise TypeError("CheckedBarcode instances are created with CheckedBarcode.make()")
        object.__setattr__(self, "_code", code)

    @classmethod
    def make(cls, raw: str) -> Result[Self, ValidationError]:
        if not barcode.is_valid(raw):
            log.debug("Rejected checked barcode %r", raw)
            return Err(ValidationError(raw))
        return Ok(cls(raw, _token=_CONSTRUCTION_TOKEN))

    @property
    def code(self) -> str:
        return self._code

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CheckedBarcode):
            return NotImplemented
        return self._code == other._code

    def __hash__(self) -> int:
        return hash(self._code)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._code!r})"
