from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Position:
    """A concrete buffer position.

    Offset, line and column are all 0-based; use `format()` for the 1-based
    form people expect in messages.
    """

    offset: int = 0
    line: int = 0
    column: int = 0

    def format(self) -> str:
        return f"{self.line + 1}:{self.column + 1}"


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open span [start, end) in a single file."""

    file: str = ""
    start: Position = Position()
    end: Position = Position()

    def format(self) -> str:
        if self.file == "":
            return self.start.format()

        return f"{self.file}:{self.start.format()}"
