"""Compact text rendering of values and an order-free hash of int sequences."""

from __future__ import annotations

import operator
from collections.abc import Iterable
from functools import reduce
from typing import Any


def to_text(value: Any) -> str:
    """Render a value; sequences become ``[a,b,c]``, booleans ``1`` or ``0``."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, (list, tuple)):
        return "[" + ",".join(to_text(item) for item in value) + "]"
    return str(value)


def xor_hash(values: Iterable[int]) -> int:
    """XOR of the hashes of ``values``; independent of their order."""
    return reduce(operator.xor, map(hash, values), 0)