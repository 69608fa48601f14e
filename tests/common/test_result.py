from __future__ import annotations

import pytest

from valuetypes.common.result import Err, Ok


def test_ok_unwraps_to_value() -> None:
    result = Ok(42)

    assert result.is_ok
    assert result.unwrap() == 42


def test_err_unwrap_raises_carried_error() -> None:
    result = Err(KeyError("missing"))

    assert not result.is_ok
    with pytest.raises(KeyError, match="missing"):
        result.unwrap()


def test_results_compare_structurally() -> None:
    assert Ok("a") == Ok("a")
    assert Ok("a") != Ok("b")
