"""
Exception hierarchy for range splitting and validation.

Every error derives from both RangeSplitError and the builtin exception a
caller would expect for the same mistake on a plain sequence, so
``except IndexError`` keeps working around a take on an undersized buffer.
"""

from __future__ import annotations

from typing import Optional


class RangeSplitError(Exception):
    """Base class for all range-split errors."""


class RangeBoundsError(RangeSplitError, IndexError):
    """Raised when a range bound lies past the end of the buffer."""

    def __init__(
        self,
        message: str,
        index: Optional[int] = None,
        length: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.index = index
        self.length = length


class IndexOverflowError(RangeSplitError, OverflowError):
    """Raised when an inclusive end bound cannot be made exclusive."""


class CharBoundaryError(RangeSplitError, ValueError):
    """Raised when a range bound falls inside a multi-byte UTF-8 sequence."""


class RangeConsistencyError(RangeSplitError, AssertionError):
    """Raised when a failure is reported for a range that is actually valid."""


__all__ = [
    "RangeSplitError",
    "RangeBoundsError",
    "IndexOverflowError",
    "CharBoundaryError",
    "RangeConsistencyError",
]
