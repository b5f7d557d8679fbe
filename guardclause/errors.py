from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

FailureKind = Literal["invalid-argument", "null-argument", "out-of-range"]


@dataclass(frozen=True)
class Failure:
    kind: FailureKind
    parameter_name: str
    value: object | None
    message: str


class ParameterError(ValueError):
    """Base class for guard failures.

    Carries an immutable `Failure` record; the string form names the parameter
    and, for out-of-range failures, the offending value.
    """

    kind: FailureKind

    def __init__(
        self, message: str, parameter_name: str, value: object | None = None
    ) -> None:
        self.failure = Failure(
            kind=self.kind,
            parameter_name=parameter_name,
            value=value,
            message=message,
        )
        super().__init__(self._render())

    def _render(self) -> str:
        return f"{self.failure.message} (parameter '{self.failure.parameter_name}')"

    def _init_args(self) -> tuple[object, ...]:
        return (self.message, self.parameter_name, self.value)

    def __reduce__(self) -> tuple[type[ParameterError], tuple[object, ...]]:
        # Pickling rebuilds through __init__, whose signature differs per kind
        return (type(self), self._init_args())

    @property
    def parameter_name(self) -> str:
        return self.failure.parameter_name

    @property
    def value(self) -> object | None:
        return self.failure.value

    @property
    def message(self) -> str:
        return self.failure.message


class InvalidArgumentError(ParameterError):
    """The value is wrong independent of any bound."""

    kind: FailureKind = "invalid-argument"

    def __init__(self, message: str, parameter_name: str) -> None:
        super().__init__(message, parameter_name)

    def _init_args(self) -> tuple[object, ...]:
        return (self.message, self.parameter_name)


class NullArgumentError(ParameterError):
    """The value is None where a value is required."""

    kind: FailureKind = "null-argument"

    def __init__(
        self, parameter_name: str, message: str = "Parameter must not be None"
    ) -> None:
        super().__init__(message, parameter_name)

    def _init_args(self) -> tuple[object, ...]:
        return (self.parameter_name, self.message)


class OutOfRangeError(ParameterError):
    """The value falls outside an allowed bound, range or index span."""

    kind: FailureKind = "out-of-range"

    def __init__(self, parameter_name: str, value: object, message: str) -> None:
        super().__init__(message, parameter_name, value)

    def _init_args(self) -> tuple[object, ...]:
        return (self.parameter_name, self.value, self.message)

    def _render(self) -> str:
        return (
            f"{self.failure.message} (parameter '{self.failure.parameter_name}', "
            f"actual value {self.failure.value!r})"
        )
