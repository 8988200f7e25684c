from __future__ import annotations

HELP_HINT = "Pass the -h flag for help."


class BrightlightError(Exception):
    """Base for every failure that ends an invocation with exit status 1."""


class UsageError(BrightlightError, ValueError):
    def __str__(self) -> str:
        return f"{super().__str__()} {HELP_HINT}"


class ControlDirError(BrightlightError, OSError):
    pass


class AttributeIOError(BrightlightError, OSError):
    pass


class ScaleError(BrightlightError, ValueError):
    pass
