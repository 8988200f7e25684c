from __future__ import annotations

import logging
from dataclasses import dataclass

from brightlight.config import Action, Options, validate
from brightlight.scale import from_percentage, to_percentage
from brightlight.system.backlight import Backlight

log = logging.getLogger(__name__)


@dataclass
class Controller:
    opts: Options

    def __post_init__(self) -> None:
        self._backlight = Backlight(self.opts.backlight_dir)
        self._maximum = 0

    def _unit(self) -> str:
        return "%" if self.opts.percent else ""

    def _display(self, raw: int) -> int:
        return to_percentage(raw, self._maximum) if self.opts.percent else raw

    def run(self) -> str:
        """Validate, read the maximum, perform the selected action.

        Returns the line to report on stdout. Nothing is written to the
        device unless every check before the write has passed.
        """

        self._backlight.validate()
        self._maximum = self._backlight.read_max_brightness()
        log.debug("maximum brightness %d", self._maximum)

        validate(self.opts, self._maximum)

        if self.opts.action is Action.READ:
            return self._read()
        if self.opts.action is Action.WRITE:
            return self._write()
        return self._read_max()

    def _read(self) -> str:
        current = self._display(self._backlight.read_brightness())
        return f"Current backlight brightness is: {current}{self._unit()}."

    def _write(self) -> str:
        assert self.opts.value is not None
        current = self._backlight.read_brightness()
        old = self._display(current)

        target = self.opts.value
        if self.opts.percent:
            target = from_percentage(target, self._maximum)
        self._backlight.set_brightness(target)

        unit = self._unit()
        return f"Changed backlight brightness: {old}{unit} => {self.opts.value}{unit}."

    def _read_max(self) -> str:
        # Always 100% in percentage mode.
        return f"Maximum backlight brightness is: {self._display(self._maximum)}{self._unit()}."
