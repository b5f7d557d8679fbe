from __future__ import annotations

from datetime import timedelta

import pytest

from guardclause import OutOfRangeError, is_index_in_range, is_not_negative


def test_is_index_in_range_excludes_count() -> None:
    is_index_in_range(0, 10, "index")
    is_index_in_range(5, 10, "index")
    is_index_in_range(9, 10, "index")

    for bad in (-1, 10, 11):
        with pytest.raises(OutOfRangeError) as info:
            is_index_in_range(bad, 10, "index")
        assert info.value.value == bad
        assert info.value.message == (
            "Index was out of range. Must be non-negative and less than 10."
        )


def test_is_index_in_range_with_empty_collection() -> None:
    with pytest.raises(OutOfRangeError):
        is_index_in_range(0, 0, "index")


@pytest.mark.parametrize("value", [0, 1, 2**63, 0.0, 3.5, timedelta(0), timedelta(seconds=1)])
def test_is_not_negative_accepts_zero_and_positive(value: int | float | timedelta) -> None:
    is_not_negative(value, "p")


@pytest.mark.parametrize(
    "value", [-1, -(2**63), -0.5, timedelta(microseconds=-1), timedelta(days=-1)]
)
def test_is_not_negative_rejects_negative(value: int | float | timedelta) -> None:
    with pytest.raises(OutOfRangeError) as info:
        is_not_negative(value, "p")
    assert info.value.value == value
    assert info.value.message == "Parameter must be greater than or equal to 0"


@pytest.mark.parametrize("count", [1, 2, 10])
def test_is_index_in_range_edges_for_any_count(count: int) -> None:
    is_index_in_range(0, count, "index")
    is_index_in_range(count - 1, count, "index")

    for bad in (-1, count):
        with pytest.raises(OutOfRangeError) as info:
            is_index_in_range(bad, count, "index")
        assert info.value.value == bad
        assert f"less than {count}." in info.value.message
