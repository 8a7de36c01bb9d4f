from __future__ import annotations

from typing import Union

Buffer = Union[bytes, bytearray, memoryview, str]
"""Anything positions can be computed over.

Bytes-like buffers are measured in bytes, strings in characters.
"""


def markers(buf: bytes | bytearray | str) -> tuple[bytes | str, bytes | str]:
    """Return the (newline, carriage return) units matching ``buf``'s type."""
    if isinstance(buf, str):
        return "\n", "\r"
    return b"\n", b"\r"


def freeze(buf: Buffer) -> bytes | str:
    """Return an immutable copy of ``buf`` (the buffer itself when already immutable)."""
    if isinstance(buf, (bytes, str)):
        return buf
    if isinstance(buf, (bytearray, memoryview)):
        return bytes(buf)
    raise TypeError(f"expected bytes-like or str buffer, got {type(buf).__name__}")


def find_all(buf: bytes | str, unit: bytes | str) -> tuple[int, ...]:
    out: list[int] = []
    i = buf.find(unit)
    while i != -1:
        out.append(i)
        i = buf.find(unit, i + 1)
    return tuple(out)
