"""Helpers for working with ranges of in-memory buffers."""

from __future__ import annotations

from range_split.core.constants import MAX_INDEX
from range_split.core.errors import IndexOverflowError
from range_split.core.ranges import RangeTo, RangeToInclusive
from range_split.utils.logging import get_logger


def convert_inclusive_range(rng: RangeToInclusive) -> RangeTo:
    """
    Convert ``..=end`` into the equivalent ``..end + 1``.

    The exclusive form lines up with buffer lengths and zero-based offsets,
    so the RangeTo implementations can be reused for RangeToInclusive. Any
    inclusive end inside a real buffer is below MAX_INDEX, which keeps the
    increment in range.

    Raises:
        IndexOverflowError: If ``end`` equals MAX_INDEX
    """
    if rng.end >= MAX_INDEX:
        get_logger(__name__).debug("inclusive_range_overflow", end=rng.end)
        raise IndexOverflowError("integer overflow")
    return RangeTo(rng.end + 1)


__all__ = ["convert_inclusive_range"]
