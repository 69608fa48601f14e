"""Single-field value class.

``BarcodeValue`` is a frozen, slotted dataclass around one ``str``: equality and hashing are
derived from the field and there is no per-instance ``__dict__``. It is still a separate
object from the text it wraps, and it does not validate.
"""

from __future__ import annotations

from dataclasses import dataclass

from valuetypes.domain.model.barcode import ITALY_COUNTRY_CODE


@dataclass(frozen=True, slots=True)
class BarcodeValue:
    code: str

    @property
    def country_code(self) -> str:
        return self.code[0]


def made_in_italy(value: BarcodeValue) -> bool:
    match value:
        case BarcodeValue(code=code):
            return code.startswith(ITALY_COUNTRY_CODE)
