from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from brightlight import __version__
from brightlight.config import DEFAULT_BACKLIGHT_DIR, Action, Options, parse_brightness_arg
from brightlight.controller import Controller
from brightlight.errors import BrightlightError, ControlDirError, UsageError

_VERSION_TEXT = f"""\
%(prog)s v{__version__}
Copyright (C) 2016 David Miller <multiplexd@gmx.com>
This is free software under the terms of the GNU General Public License,
version 2 or later. You are free to use, modify and redistribute it, however
there is NO WARRANTY; please see <https://gnu.org/licenses/gpl.html> for
further information."""

_EPILOG = """\
The flags -r, -w and -m are mutually exclusive, however one of the three is
required."""

_FLAGS = frozenset({"-r", "-p", "-m"})
_FLAGS_WITH_VALUE = frozenset({"-w", "-f"})
_ACTION_FLAGS = frozenset({"-r", "-w", "-m"})


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise UsageError("Error parsing options.")


class _SelectAction(argparse.Action):
    """Record one of -r/-w/-m, refusing a second selection."""

    def __call__(self, parser, namespace, values, option_string=None) -> None:
        if namespace.action is not None:
            raise UsageError("Conflicting options given!")
        namespace.action = self.const
        if isinstance(values, str):
            namespace.value = values


def _build_parser() -> argparse.ArgumentParser:
    ap = _Parser(
        prog="brightlight",
        usage="%(prog)s [OPTIONS]",
        description="Change the screen backlight brightness on Linux systems.",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    ap.add_argument(
        "-v", action="version", version=_VERSION_TEXT, help="Print program version and exit."
    )
    ap.add_argument("-h", action="help", help="Show this help message.")
    ap.add_argument(
        "-p",
        dest="percent",
        action="store_true",
        help="Read or write the brightness level as a percentage (0 to 100) instead of "
        "the internal scale the kernel uses (such as e.g. 0 to 7812).",
    )
    ap.add_argument(
        "-r",
        dest="action",
        action=_SelectAction,
        nargs=0,
        const=Action.READ,
        help="Read the backlight brightness level.",
    )
    ap.add_argument(
        "-w",
        dest="action",
        action=_SelectAction,
        const=Action.WRITE,
        metavar="<val>",
        help="Set the backlight brightness level to <val>, where <val> is a positive integer.",
    )
    ap.add_argument(
        "-f",
        dest="backlight_dir",
        default=str(DEFAULT_BACKLIGHT_DIR),
        metavar="<path>",
        help="Specify alternative path to backlight control directory, such as "
        f'"{DEFAULT_BACKLIGHT_DIR}/".',
    )
    ap.add_argument(
        "-m",
        dest="action",
        action=_SelectAction,
        nargs=0,
        const=Action.MAX,
        help="Show maximum brightness level of the screen backlight.",
    )
    ap.set_defaults(action=None, value=None)
    return ap


def _scan_tokens(argv: Sequence[str]) -> None:
    """Reject bad tokens in order, before argparse gets to act on any of them.

    Only whole tokens are accepted: no bundled (-rp) or attached (-w50)
    forms. Scanning stops at -v or -h, which win over anything after them.
    """

    selected = False
    i = 0
    while i < len(argv):
        tok = argv[i]
        if tok in ("-v", "-h"):
            return
        if tok in _FLAGS_WITH_VALUE and i + 1 < len(argv):
            step = 2
        elif tok in _FLAGS:
            step = 1
        else:
            raise UsageError("Error parsing options.")
        if tok in _ACTION_FLAGS:
            if selected:
                raise UsageError("Conflicting options given!")
            selected = True
        i += step


def parse_args(argv: Sequence[str]) -> Options:
    """Turn command-line tokens into Options.

    -h and -v print to stdout and raise SystemExit(0) straight from argparse.
    """

    if not argv:
        raise UsageError("No options specified.")

    _scan_tokens(argv)
    args = _build_parser().parse_args(list(argv))
    if args.action is None:
        raise UsageError("Error parsing options.")

    value = None
    if args.action is Action.WRITE:
        value = parse_brightness_arg(args.value)

    # Path("") would silently mean the working directory.
    if not args.backlight_dir:
        raise ControlDirError("Could not access control directory.")

    return Options(
        action=args.action,
        backlight_dir=Path(args.backlight_dir),
        percent=args.percent,
        value=value,
    )


def main(argv: Sequence[str] | None = None) -> int:
    try:
        opts = parse_args(sys.argv[1:] if argv is None else argv)
        print(Controller(opts).run())
    except BrightlightError as e:
        print(e, file=sys.stderr)
        return 1
    return 0
