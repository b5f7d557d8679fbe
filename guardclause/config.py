from __future__ import annotations

import os
from dataclasses import dataclass

from guardclause.checks import is_

_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})
_TRUTHY = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True)
class Settings:
    """Boundary settings loaded from environment in a type-safe, framework-free way.

    `log_level` applies to the `guardclause` logger hierarchy only.
    """

    log_level: str
    expose_values: bool

    def __post_init__(self) -> None:
        is_(
            self.log_level in _LEVELS,
            f"Unknown log level {self.log_level!r}",
            "log_level",
        )

    @staticmethod
    def from_env() -> Settings:
        prefix = "GUARDCLAUSE_"
        log_level = os.getenv(f"{prefix}LOG_LEVEL", "INFO").strip().upper() or "INFO"
        expose_raw = os.getenv(f"{prefix}EXPOSE_VALUES", "").strip().lower()
        return Settings(log_level=log_level, expose_values=expose_raw in _TRUTHY)
