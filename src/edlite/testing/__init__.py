from __future__ import annotations

from .corpus import generate_address_lines

__all__ = ["generate_address_lines"]
