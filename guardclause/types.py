from __future__ import annotations

from typing import Protocol, TypeVar

_T = TypeVar("_T", bound="Comparable")


class Comparable(Protocol):
    """Protocol for values with a total ordering."""

    def __lt__(self: _T, other: _T, /) -> bool: ...

    def __le__(self: _T, other: _T, /) -> bool: ...

    def __gt__(self: _T, other: _T, /) -> bool: ...

    def __ge__(self: _T, other: _T, /) -> bool: ...


class LoggerProtocol(Protocol):
    """Protocol for a minimal structured logger interface."""

    def debug(self, msg: str, *args: object, **kwargs: object) -> None: ...

    def info(self, msg: str, *args: object, **kwargs: object) -> None: ...

    def warning(self, msg: str, *args: object, **kwargs: object) -> None: ...

    def error(self, msg: str, *args: object, **kwargs: object) -> None: ...
