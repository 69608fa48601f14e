"""Domain port definitions for adapters."""

from __future__ import annotations

from .persistence import ProductRepository, Repository

__all__ = [
    "ProductRepository",
    "Repository",
]
