"""Barcode newtype with a validating smart constructor.

``Barcode`` is a :func:`typing.NewType` over ``str``. The type checker treats it as a
distinct type (a plain ``str`` or a :class:`~valuetypes.domain.model.description.Description`
is rejected where a ``Barcode`` is expected), while at runtime the wrapper is erased: a
``Barcode`` *is* the ``str`` it was made from, with no extra object or indirection.

Obtain values through :func:`make` (or :func:`parse`). Calling ``Barcode(text)`` directly is
the unchecked coercion escape hatch and skips validation; it is used only inside this module.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Final, NewType

from valuetypes.common.result import Err, Ok, Result
from valuetypes.domain.errors import ValidationError

if TYPE_CHECKING:
    from valuetypes.domain.model.description import Description

log = logging.getLogger(__name__)

Barcode = NewType("Barcode", str)

# One digit, six digits, six digits. ASCII only: "\d" would otherwise accept any Unicode digit.
PATTERN: Final[re.Pattern[str]] = re.compile(r"\d-\d{6}-\d{6}", re.ASCII)
ITALY_COUNTRY_CODE: Final[str] = "8"


def is_valid(raw: str) -> bool:
    return PATTERN.fullmatch(raw) is not None


def make(raw: str) -> Result[Barcode, ValidationError]:
    """Validate ``raw`` and wrap it.

    The accepted value is ``raw`` itself, never a normalized copy.
    """

    if not is_valid(raw):
        log.debug("Rejected barcode %r", raw)
        return Err(ValidationError(raw))
    return Ok(Barcode(raw))


def parse(raw: str) -> Barcode:
    """Like :func:`make`, but raise :class:`ValidationError` on malformed input."""

    return make(raw).unwrap()


def from_description(text: Description) -> Result[Barcode, ValidationError]:
    """Re-validate a description as a barcode. There is no unchecked conversion."""

    return make(text)


def value(code: Barcode) -> str:
    return code


def equals(left: Barcode, right: Barcode) -> bool:
    return left == right


def country_code(code: Barcode) -> str:
    """First group of the barcode (a single digit)."""
    return code[0]


def made_in_italy(code: Barcode) -> bool:
    return country_code(code) == ITALY_COUNTRY_CODE
