from __future__ import annotations

import compileall
import importlib
from pathlib import Path


def test_compileall_src() -> None:
    src = Path(__file__).resolve().parents[1] / "src"
    ok = compileall.compile_dir(str(src), quiet=1)
    assert ok


def test_import_packages() -> None:
    for name in (
        "brightlight",
        "brightlight.cli",
        "brightlight.config",
        "brightlight.controller",
        "brightlight.errors",
        "brightlight.scale",
        "brightlight.system.backlight",
    ):
        importlib.import_module(name)
