"""Guard-clause checks for function parameters.

Provides single-line precondition checks that raise typed, self-describing
failures, an `Assert.parameter` accessor, and an optional FastAPI boundary
that turns escaped failures into structured JSON errors.
"""
from __future__ import annotations

from guardclause.accessor import Assert, ParameterAssertions
from guardclause.checks import (
    is_,
    is_greater_than,
    is_greater_than_or_equal_to,
    is_index_in_range,
    is_less_than,
    is_less_than_or_equal_to,
    is_not_negative,
    is_not_null,
    is_not_null_or_empty,
    is_within_range,
)
from guardclause.errors import (
    Failure,
    FailureKind,
    InvalidArgumentError,
    NullArgumentError,
    OutOfRangeError,
    ParameterError,
)

__all__ = [
    "Assert",
    "Failure",
    "FailureKind",
    "InvalidArgumentError",
    "NullArgumentError",
    "OutOfRangeError",
    "ParameterAssertions",
    "ParameterError",
    "is_",
    "is_greater_than",
    "is_greater_than_or_equal_to",
    "is_index_in_range",
    "is_less_than",
    "is_less_than_or_equal_to",
    "is_not_negative",
    "is_not_null",
    "is_not_null_or_empty",
    "is_within_range",
]
