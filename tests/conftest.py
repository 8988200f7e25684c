from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def sysfs(tmp_path: Path) -> Path:
    """A fake backlight control directory: max_brightness 255, brightness 128."""

    (tmp_path / "max_brightness").write_text("255\n", encoding="utf-8")
    (tmp_path / "brightness").write_text("128\n", encoding="utf-8")
    return tmp_path
