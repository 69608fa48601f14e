from __future__ import annotations

from .result import Err, Ok, Result

__all__ = [
    "Err",
    "Ok",
    "Result",
]
