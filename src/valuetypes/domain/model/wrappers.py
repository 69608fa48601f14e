"""Plain wrapper classes: distinct types, no invariants.

A ``PlainBarcode`` cannot be confused with a ``PlainDescription``, but nothing stops
``PlainBarcode("I am a bar-code ;)")``. :mod:`valuetypes.domain.model.smart` closes that gap.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PlainBarcode:
    code: str


@dataclass(frozen=True)
class PlainDescription:
    text: str


@dataclass(frozen=True)
class PlainProduct:
    """Product record as returned by lookups keyed by plain wrappers."""

    code: str
    description: str
