from __future__ import annotations

from pathlib import Path

import pytest

from guardclause import InvalidArgumentError
from tools import guard
from tools.guards import exceptions_guard, logging_guard, marker_guard, typing_guard


def _write(tmp_path: Path, name: str, text: str) -> Path:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_marker_guard_flags_marker_in_python_file(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    marker = "su" + "press"
    _write(tmp_path, "bad.py", f"# {marker} in comment\n")

    rc = marker_guard.run([str(tmp_path)])
    captured = capsys.readouterr()

    assert rc == 1
    assert marker in captured.err
    assert "forbidden marker" in captured.err


def test_exceptions_guard_flags_swallowing_handler(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    _write(tmp_path, "bad.py", "try:\n    x = 1\nexcept:\n    pass\n")

    rc = exceptions_guard.run([str(tmp_path)])
    err = capsys.readouterr().err

    assert rc == 1
    assert "bare 'except'" in err
    assert "without re-raise" in err


def test_logging_guard_flags_print(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    call = "pri" + "nt"
    _write(tmp_path, "bad.py", f"{call}('hi')\n")

    assert logging_guard.run([str(tmp_path)]) == 1
    assert "'print' is forbidden" in capsys.readouterr().err


def test_typing_guard_flags_any_and_ignores(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    ignore = "type: " + "ignore"
    _write(
        tmp_path,
        "bad.py",
        f"from typing import Any\n\nx: Any = 1  # {ignore}\n",
    )

    assert typing_guard.run([str(tmp_path)]) == 1
    err = capsys.readouterr().err
    assert "forbidden typing import 'Any'" in err
    assert f"forbidden '{ignore}'" in err


def test_guards_allow_clean_python_file(tmp_path: Path) -> None:
    _write(tmp_path, "clean.py", "x = 1\n")

    assert guard.run_guards([str(tmp_path)]) == 0


def test_run_guards_stops_at_first_failure(tmp_path: Path) -> None:
    marker = "su" + "press"
    _write(tmp_path, "bad.py", f"# {marker}\n")

    assert guard.run_guards([str(tmp_path)]) == 1


def test_run_guards_requires_roots() -> None:
    with pytest.raises(InvalidArgumentError):
        guard.run_guards([])


def test_repository_passes_its_own_guards() -> None:
    root = Path(__file__).resolve().parent.parent
    roots = [str(root / name) for name in guard.DEFAULT_ROOTS]
    assert guard.run_guards(roots) == 0
