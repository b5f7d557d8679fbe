"""Guard checks for function parameters.

Each check returns ``None`` when its condition holds and raises a
`ParameterError` subclass otherwise. Checks are pure: they keep no state and
never mutate or retain their inputs.
"""
from __future__ import annotations

from datetime import timedelta
from typing import TypeVar

from guardclause.errors import InvalidArgumentError, NullArgumentError, OutOfRangeError
from guardclause.types import Comparable

T = TypeVar("T", bound=Comparable)


def is_(assertion: bool, message: str, parameter_name: str) -> None:
    """Assert that a parameter satisfies an arbitrary predicate.

    `message` is reported verbatim when `assertion` is false.
    """
    if not assertion:
        raise InvalidArgumentError(message, parameter_name)


def is_not_null(value: object | None, parameter_name: str) -> None:
    """Assert that a parameter is not None."""
    if value is None:
        raise NullArgumentError(parameter_name)


def is_not_null_or_empty(value: str | None, parameter_name: str) -> None:
    """Assert that a string parameter is neither None nor empty."""
    if value is None:
        raise NullArgumentError(parameter_name)
    if value == "":
        raise InvalidArgumentError(
            "Parameter must not be an empty string", parameter_name
        )


def is_not_negative(value: int | float | timedelta, parameter_name: str) -> None:
    """Assert that a number or duration is greater than or equal to zero."""
    zero: int | timedelta = timedelta(0) if isinstance(value, timedelta) else 0
    if not value >= zero:
        raise OutOfRangeError(
            parameter_name, value, "Parameter must be greater than or equal to 0"
        )


def is_greater_than(value: T, bound: T, parameter_name: str) -> None:
    if not value > bound:
        raise OutOfRangeError(
            parameter_name, value, f"Parameter must be greater than {bound}"
        )


def is_greater_than_or_equal_to(value: T, bound: T, parameter_name: str) -> None:
    if not value >= bound:
        raise OutOfRangeError(
            parameter_name, value, f"Parameter must be greater than or equal to {bound}"
        )


def is_less_than(value: T, bound: T, parameter_name: str) -> None:
    if not value < bound:
        raise OutOfRangeError(
            parameter_name, value, f"Parameter must be less than {bound}"
        )


def is_less_than_or_equal_to(value: T, bound: T, parameter_name: str) -> None:
    if not value <= bound:
        raise OutOfRangeError(
            parameter_name, value, f"Parameter must be less than or equal to {bound}"
        )


def is_within_range(value: T, low: T, high: T, parameter_name: str) -> None:
    """Assert that `low <= value <= high`; both bounds are inclusive."""
    if not (low <= value and value <= high):
        raise OutOfRangeError(
            parameter_name,
            value,
            f"Parameter must be a value between {low} and {high}",
        )


def is_index_in_range(index: int, count: int, parameter_name: str) -> None:
    """Assert that `index` is valid for a sequence of length `count`.

    Valid indices are ``0 .. count - 1``: the upper end is exclusive, unlike
    `is_within_range`.
    """
    if index < 0 or index >= count:
        raise OutOfRangeError(
            parameter_name,
            index,
            f"Index was out of range. Must be non-negative and less than {count}.",
        )
