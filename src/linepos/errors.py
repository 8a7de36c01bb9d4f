from __future__ import annotations

from dataclasses import dataclass


class LineposError(Exception):
    """Base class for errors raised by linepos."""


@dataclass(slots=True)
class NonMonotonicMove(LineposError):
    current: int
    requested: int
    hint: str | None = "build a new tracker, or use a LineIndex for random access"

    def __str__(self) -> str:
        base = f"cannot move tracker backwards from offset {self.current} to {self.requested}"
        if self.hint:
            return f"{base}\nhint: {self.hint}"
        return base
