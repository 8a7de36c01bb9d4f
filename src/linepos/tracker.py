from __future__ import annotations

from dataclasses import dataclass

import structlog

from .buffers import Buffer, freeze, markers
from .errors import NonMonotonicMove
from .spans import Position


logger = structlog.get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Advance:
    """What a single tracker move consumed.

    ``columns`` counts the column-advancing units after the last newline in
    ``text`` (all of them when ``lines`` is 0); ``\\r`` never counts.
    """

    text: bytes | bytearray | str
    lines: int
    columns: int


@dataclass(slots=True)
class PositionTracker:
    """Forward-only (offset, line, column) cursor.

    Each `advance` scans only the units between the previous and the new
    offset, so a full left-to-right pass costs one scan of the buffer. The
    buffer is passed on every call and must not change between calls.
    """

    offset: int = 0
    line: int = 0
    column: int = 0

    def advance(self, buffer: Buffer, new_offset: int) -> Advance:
        if new_offset < self.offset:
            logger.debug("tracker.backward_move", current=self.offset, requested=new_offset)
            raise NonMonotonicMove(current=self.offset, requested=new_offset)
        if new_offset > len(buffer):
            raise IndexError(f"offset {new_offset} is past the end of the buffer ({len(buffer)})")

        text = buffer[self.offset : new_offset]
        if isinstance(text, memoryview):
            text = text.tobytes()
        newline, carriage_return = markers(text)

        lines = text.count(newline)
        tail = text.rfind(newline) + 1 if lines else 0
        columns = len(text) - tail - text.count(carriage_return, tail)

        self.offset = new_offset
        self.line += lines
        if lines:
            self.column = 0
        self.column += columns
        return Advance(text=text, lines=lines, columns=columns)

    def snapshot(self) -> Position:
        return Position(offset=self.offset, line=self.line, column=self.column)

    def reset(self) -> None:
        self.offset = 0
        self.line = 0
        self.column = 0


class BoundTracker:
    """A `PositionTracker` that keeps its buffer.

    Mutable buffers are copied on construction, so the bound content cannot
    change under the tracker.
    """

    __slots__ = ("_buffer", "_inner")

    def __init__(self, buffer: Buffer) -> None:
        self._buffer = freeze(buffer)
        self._inner = PositionTracker()

    @property
    def buffer(self) -> bytes | str:
        return self._buffer

    def advance(self, new_offset: int) -> Advance:
        return self._inner.advance(self._buffer, new_offset)

    def advance_by(self, count: int) -> Advance:
        return self.advance(self._inner.offset + count)

    def snapshot(self) -> Position:
        return self._inner.snapshot()

    @property
    def position(self) -> Position:
        return self._inner.snapshot()
