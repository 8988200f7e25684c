from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path

from brightlight.errors import UsageError

DEFAULT_BACKLIGHT_DIR = Path("/sys/class/backlight/intel_backlight")

# Fixed cap on the -w argument, independent of the device maximum.
MAX_VALUE_DIGITS = 5


class Action(enum.Enum):
    READ = "read"
    WRITE = "write"
    MAX = "max"


@dataclass(frozen=True)
class Options:
    action: Action
    backlight_dir: Path = DEFAULT_BACKLIGHT_DIR
    percent: bool = False
    # Target for Action.WRITE, as given on the command line.
    value: int | None = None


def parse_brightness_arg(text: str) -> int:
    """Parse the -w argument: decimal digits only, at most five of them."""

    if len(text) > MAX_VALUE_DIGITS or not all(c in "0123456789" for c in text):
        raise UsageError("Invalid argument.")
    return int(text) if text else 0


def validate(opts: Options, maximum: int) -> None:
    if opts.action is not Action.WRITE:
        return
    upper = 100 if opts.percent else maximum
    if opts.value is None or not 0 <= opts.value <= upper:
        raise UsageError("Invalid argument.")
