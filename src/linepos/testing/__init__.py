from __future__ import annotations

from .corpus import generate_buffer, generate_cases, generate_offsets

__all__ = ["generate_buffer", "generate_cases", "generate_offsets"]
