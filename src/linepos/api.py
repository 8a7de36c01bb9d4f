from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path

import structlog

from .buffers import Buffer
from .index import LineIndex
from .spans import Position
from .tracker import BoundTracker


logger = structlog.get_logger(__name__)


def index_source(src: Buffer) -> LineIndex:
    return LineIndex.build(src)


def index_file(path: str | Path) -> LineIndex:
    p = Path(path).expanduser().resolve()
    data = p.read_bytes()
    index = LineIndex.build(data)
    logger.debug("index.built", file=str(p), size=index.size, lines=index.line_count)
    return index


def locate(src: Buffer, offsets: Iterable[int]) -> list[Position]:
    """Resolve many offsets at once.

    Sorted offsets are walked with a single `BoundTracker`; anything else
    goes through a `LineIndex`. Every offset must lie within
    ``[0, len(src)]``; negative ones raise `ValueError`, ones past the end
    `IndexError`, whatever their order.
    """
    offs = list(offsets)
    size = len(src)
    for o in offs:
        if o < 0:
            raise ValueError(f"offset must not be negative: {o}")
        if o > size:
            raise IndexError(f"offset {o} is past the end of the buffer ({size})")
    if all(a <= b for a, b in zip(offs, offs[1:])):
        return list(track(src, offs))
    index = LineIndex.build(src)
    return [index.position(o) for o in offs]


def track(src: Buffer, offsets: Iterable[int]) -> Iterator[Position]:
    """Yield the position of each offset; offsets must not decrease."""
    tracker = BoundTracker(src)
    for off in offsets:
        tracker.advance(off)
        yield tracker.snapshot()
