from __future__ import annotations

from pathlib import Path

import pytest

from linepos import NonMonotonicMove, Position, index_file, index_source, locate, track


SRC = "Das ist ein Test!\nHurra!\n"


def test_locate_sorted_and_unsorted_agree() -> None:
    sorted_positions = locate(SRC, [3, 18, 20])
    assert sorted_positions == [
        Position(offset=3, line=0, column=3),
        Position(offset=18, line=1, column=0),
        Position(offset=20, line=1, column=2),
    ]
    assert locate(SRC, [20, 3, 18]) == [sorted_positions[2], sorted_positions[0], sorted_positions[1]]


def test_track_rejects_decreasing_offsets() -> None:
    it = track(SRC, [5, 2])
    assert next(it) == Position(offset=5, line=0, column=5)
    with pytest.raises(NonMonotonicMove):
        next(it)


def test_index_file(tmp_path: Path) -> None:
    p = tmp_path / "greeting.txt"
    p.write_bytes(SRC.encode("utf-8"))
    idx = index_file(p)
    assert idx.entries == index_source(SRC).entries
    assert idx.lookup(20) == (1, 2)


def test_index_file_missing(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        index_file(tmp_path / "missing.txt")


@pytest.mark.parametrize("offsets", [[0, 10], [10, 0]])
def test_locate_rejects_past_end_in_any_order(offsets: list[int]) -> None:
    with pytest.raises(IndexError):
        locate(b"ab\ncd", offsets)


@pytest.mark.parametrize("offsets", [[-1], [3, -1], [-1, 3]])
def test_locate_rejects_negative_in_any_order(offsets: list[int]) -> None:
    with pytest.raises(ValueError):
        locate(SRC, offsets)


def test_locate_accepts_end_of_buffer_in_any_order() -> None:
    end = Position(offset=5, line=1, column=2)
    assert locate(b"ab\ncd", [0, 5])[1] == end
    assert locate(b"ab\ncd", [5, 0])[0] == end
