from __future__ import annotations

from collections.abc import Callable

from guardclause import is_
from guardclause.logging import get_logger, setup_logging
from tools.guards import exceptions_guard, logging_guard, marker_guard, typing_guard

Runner = Callable[[list[str]], int]

DEFAULT_ROOTS = ["guardclause", "tests", "tools"]

_logger = get_logger(__name__)


def run_guards(roots: list[str]) -> int:
    is_(len(roots) > 0, "At least one root directory is required", "roots")
    runners: list[tuple[str, Runner]] = [
        ("typing", typing_guard.run),
        ("exceptions", exceptions_guard.run),
        ("marker", marker_guard.run),
        ("logging", logging_guard.run),
    ]
    for name, runner in runners:
        rc = runner(roots)
        if rc != 0:
            _logger.error("guard %s failed", name)
            return rc
    _logger.info("all guards passed")
    return 0


def main() -> int:
    setup_logging()
    return run_guards(DEFAULT_ROOTS)


if __name__ == "__main__":
    raise SystemExit(main())
