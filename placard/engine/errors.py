"""Validation errors raised while resolving a placeholder spec.

Every error is a synchronous, non-transient usage failure. Nothing here is
retried or recovered: the orchestrator aborts Scene construction on the first one.
"""

from __future__ import annotations

from typing import Any

# Exit code for usage errors, shared with the command-line front-end.
USAGE_EXIT_CODE = 2


class PlacardError(ValueError):
    """Base class for all placeholder validation failures."""

    type = "usage"
    code = USAGE_EXIT_CODE

    def __init__(self, message: str, hints: list[str] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.hints = list(hints or [])

    def to_dict(self) -> dict[str, Any]:
        return {
            "ok": False,
            "error": {
                "type": self.type,
                "code": self.code,
                "message": self.message,
                "hints": self.hints,
            },
        }


class InvalidColor(PlacardError):
    pass


class InvalidBackgroundSpec(PlacardError):
    pass


class InvalidMaskSpec(PlacardError):
    pass


class InvalidDimension(PlacardError):
    pass


class InvalidFontSpec(PlacardError):
    pass


class ConflictingOptions(PlacardError):
    pass
