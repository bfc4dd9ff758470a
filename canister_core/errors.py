from __future__ import annotations

from pathlib import Path
from typing import Optional


class CanisterCounterError(Exception):
    """Base class for every error the CLI reports and exits on."""


class FileReadError(CanisterCounterError):
    """The manifest could not be opened or read."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Could not read dfx.json from {str(path)!r}: {reason}")


class ParseError(CanisterCounterError):
    """The manifest text is not well-formed JSON."""

    def __init__(self, detail: str, path: Optional[Path] = None) -> None:
        self.path = path
        self.detail = detail
        where = f" at {str(path)!r}" if path is not None else ""
        super().__init__(f"Failed to parse dfx.json{where}: {detail}")


class MissingFieldError(CanisterCounterError):
    """A required object field is absent, null, or of the wrong type."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"No {field!r} field found in dfx.json")


__all__ = [
    "CanisterCounterError",
    "FileReadError",
    "ParseError",
    "MissingFieldError",
]
