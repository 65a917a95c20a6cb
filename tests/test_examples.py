"""Smoke tests for the bundled example programs."""

from __future__ import annotations

import logging
import runpy
import sys
from pathlib import Path

import pytest

_EXAMPLES = Path(__file__).resolve().parents[1] / "examples"


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_simple_example(capsys: pytest.CaptureFixture[str]) -> None:
    runpy.run_path(str(_EXAMPLES / "simple.py"), run_name="__main__")
    out = capsys.readouterr().out
    assert "Hello!" in out
    assert "Adiós, Alice." in out


def test_modules_example(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.syspath_prepend(str(_EXAMPLES / "modules"))
    for name in ("first", "second"):
        monkeypatch.delitem(sys.modules, name, raising=False)

    runpy.run_path(str(_EXAMPLES / "modules" / "main.py"), run_name="__main__")
    out = capsys.readouterr().out.splitlines()
    assert out[:3] == ["Hello!", "Goodbye, Alice.", "Cambios guardados."]
