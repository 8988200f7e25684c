from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path

from brightlight.errors import AttributeIOError, ControlDirError

log = logging.getLogger(__name__)

# Same acceptance as scanf("%d"): optional whitespace and sign, then digits.
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_leading_int(text: str) -> int | None:
    m = _LEADING_INT.match(text)
    return int(m.group(1)) if m else None


@dataclass(frozen=True)
class Backlight:
    sysfs_dir: Path

    @property
    def _brightness(self) -> Path:
        return self.sysfs_dir / "brightness"

    @property
    def _max_brightness(self) -> Path:
        return self.sysfs_dir / "max_brightness"

    def validate(self) -> None:
        """Check that sysfs_dir is a readable directory holding both attribute files."""

        try:
            with os.scandir(self.sysfs_dir):
                pass
        except NotADirectoryError as e:
            raise ControlDirError(f"{self.sysfs_dir} is not a directory.") from e
        except PermissionError as e:
            raise ControlDirError(f"Could not access {self.sysfs_dir}: Permission denied.") from e
        except OSError as e:
            raise ControlDirError("Could not access control directory.") from e

        if not self._brightness.exists():
            raise ControlDirError(
                "Control directory exists but could not find brightness control file."
            )
        if not self._max_brightness.exists():
            raise ControlDirError(
                "Control directory exists but could not find max_brightness file."
            )
        log.debug("control directory %s ok", self.sysfs_dir)

    def _read_attr(self, path: Path, what: str) -> int:
        try:
            text = path.read_text(encoding="ascii", errors="replace")
        except OSError as e:
            raise AttributeIOError(f"Error occurred while trying to open {path.name} file.") from e

        value = _parse_leading_int(text)
        if value is None or value < 0:
            raise AttributeIOError(f"Could not read {what} from {path.name} file.")
        log.debug("read %s=%d", path, value)
        return value

    def read_brightness(self) -> int:
        return self._read_attr(self._brightness, "brightness")

    def read_max_brightness(self) -> int:
        return self._read_attr(self._max_brightness, "maximum brightness")

    def set_brightness(self, value: int) -> None:
        try:
            fh = self._brightness.open("w", encoding="ascii")
        except OSError as e:
            raise AttributeIOError("Error occurred while trying to open brightness file.") from e

        # sysfs reports a rejected value when the buffer is flushed on close.
        try:
            with fh:
                fh.write(str(int(value)))
        except OSError as e:
            raise AttributeIOError("Could not write brightness to brightness file.") from e
        log.debug("wrote %s=%d", self._brightness, value)
