"""Domain error definitions."""

from __future__ import annotations


class ValidationError(ValueError):
    """Raised (or returned inside ``Err``) when text does not have the barcode format.

    ``raw`` keeps the rejected input verbatim.
    """

    def __init__(self, raw: str) -> None:
        self.raw = raw
        super().__init__(f"The given code {raw} has not the right format")


class CatalogError(ValueError):
    """A product catalogue file could not be read or has the wrong shape."""
