from __future__ import annotations

from .api import index_file, index_source, locate, track
from .errors import LineposError, NonMonotonicMove
from .index import LineIndex
from .spans import Position, Span
from .tracker import Advance, BoundTracker, PositionTracker

__all__ = [
    "Advance",
    "BoundTracker",
    "LineIndex",
    "LineposError",
    "NonMonotonicMove",
    "Position",
    "PositionTracker",
    "Span",
    "index_file",
    "index_source",
    "locate",
    "track",
]
