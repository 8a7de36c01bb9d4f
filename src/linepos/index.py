from __future__ import annotations

from bisect import bisect_left

from .buffers import Buffer, find_all, freeze, markers
from .spans import Position, Span


class LineIndex:
    """Precomputed newline offsets for random-access (line, column) lookups.

    ``entries`` holds one ``(line_number, end_offset)`` pair per newline: line
    ``line_number`` (1-based) ends at ``end_offset`` and the next line starts
    right after it. The index is immutable once built and can be shared
    between threads without locking.

    Carriage returns are remembered too, so columns skip ``\\r`` the same way
    `PositionTracker` does and a CRLF pair behaves like a lone newline.
    """

    __slots__ = ("_ends", "_returns", "_size")

    def __init__(self, buffer: Buffer) -> None:
        buf = freeze(buffer)
        newline, carriage_return = markers(buf)
        self._ends = find_all(buf, newline)
        self._returns = find_all(buf, carriage_return)
        self._size = len(buf)

    @classmethod
    def build(cls, buffer: Buffer) -> "LineIndex":
        return cls(buffer)

    @property
    def entries(self) -> tuple[tuple[int, int], ...]:
        return tuple((lnr, end) for lnr, end in enumerate(self._ends, start=1))

    @property
    def size(self) -> int:
        """Length of the indexed buffer."""
        return self._size

    @property
    def line_count(self) -> int:
        return len(self._ends) + 1

    def __len__(self) -> int:
        return len(self._ends)

    def __repr__(self) -> str:
        return f"LineIndex(size={self._size}, lines={self.line_count})"

    def lookup(self, pos: int) -> tuple[int, int]:
        """Return the zero-based (line, column) of ``pos``.

        A position pointing at a newline belongs to the line that newline
        terminates. ``pos`` should lie within ``[0, size]``; larger values
        are not checked and extrapolate along the last line.
        """
        if pos < 0:
            raise ValueError(f"offset must not be negative: {pos}")
        line = bisect_left(self._ends, pos)
        start = self._ends[line - 1] + 1 if line else 0
        skipped = bisect_left(self._returns, pos) - bisect_left(self._returns, start)
        return line, pos - start - skipped

    def position(self, pos: int) -> Position:
        line, column = self.lookup(pos)
        return Position(offset=pos, line=line, column=column)

    def span(self, start: int, end: int, *, file: str = "") -> Span:
        if end < start:
            raise ValueError(f"span end {end} precedes start {start}")
        return Span(file=file, start=self.position(start), end=self.position(end))

    def line_start(self, line: int) -> int:
        """Offset at which zero-based ``line`` begins."""
        if line < 0 or line > len(self._ends):
            raise IndexError(f"line {line} out of range (buffer has {self.line_count} lines)")
        return self._ends[line - 1] + 1 if line else 0

    def line_range(self, line: int) -> tuple[int, int]:
        """Half-open offsets of ``line``, excluding its terminating newline."""
        start = self.line_start(line)
        end = self._ends[line] if line < len(self._ends) else self._size
        return start, end
