"""Small general-purpose helpers: string checks, ranges, randomness, sorting."""

from __future__ import annotations

import random
from typing import Iterable, TypeVar

T = TypeVar("T")


def start_with(line: str, text: str) -> bool:
    """Return True if ``line`` begins with ``text``."""
    return line.startswith(text)


def is_full(text: str, symbol: str) -> bool:
    """Return True if every character of ``text`` equals ``symbol``."""
    return all(char == symbol for char in text)


def conv_range(
    value: float, val_min: float, val_max: float, new_min: float, new_max: float
) -> float:
    """Map ``value`` linearly from [val_min, val_max] onto [new_min, new_max]."""
    return (value - val_min) * (new_max - new_min) / (val_max - val_min) + new_min


def get_random(low: int, high: int) -> int:
    """Return a random integer in the closed range [low, high]."""
    if low > high:
        raise ValueError(f"invalid range: {low} > {high}")
    return random.randint(low, high)


def get_random_float(low: float, high: float) -> float:
    """Return a random float in the half-open range [low, high)."""
    if low > high:
        raise ValueError(f"invalid range: {low} > {high}")
    return low + random.random() * (high - low)


def quick_sort(items: Iterable[T]) -> list[T]:
    """Return a new list with ``items`` sorted by quicksort (last element as pivot)."""
    values = list(items)
    if len(values) < 2:
        return values
    *rest, pivot = values
    lower = [item for item in rest if item <= pivot]
    upper = [item for item in rest if not item <= pivot]
    return [*quick_sort(lower), pivot, *quick_sort(upper)]


def to_utf8(text: str) -> bytes:
    """Encode text as UTF-8 bytes."""
    return text.encode("utf-8")


def from_utf8(data: bytes) -> str:
    """Decode UTF-8 bytes into text."""
    return data.decode("utf-8")