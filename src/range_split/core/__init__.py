"""Range splitting core."""

from .buffers import MutableBytes, SharedBytes, SplittableBuffer
from .constants import MAX_INDEX
from .errors import (
    CharBoundaryError,
    IndexOverflowError,
    RangeBoundsError,
    RangeConsistencyError,
    RangeSplitError,
)
from .mem import convert_inclusive_range
from .ranges import (
    Bound,
    BoundKind,
    BoundRange,
    Range,
    RangeBounds,
    RangeFrom,
    RangeFull,
    RangeInclusive,
    RangeTo,
    RangeToInclusive,
    as_range,
    span,
)
from .take_range import TakeRange, impl_take_range, remove_range, supports, take_range
from . import impls  # noqa: F401  registers the buffer implementations
from .text import (
    BoundValidity,
    assert_str_range,
    is_char_boundary,
    is_valid_range,
    range_fail,
    remove_str_range,
    take_str_range,
    validate_range,
)

__all__ = [
    "MAX_INDEX",
    "Bound",
    "BoundKind",
    "BoundRange",
    "BoundValidity",
    "CharBoundaryError",
    "IndexOverflowError",
    "MutableBytes",
    "Range",
    "RangeBounds",
    "RangeBoundsError",
    "RangeConsistencyError",
    "RangeFrom",
    "RangeFull",
    "RangeInclusive",
    "RangeSplitError",
    "RangeTo",
    "RangeToInclusive",
    "SharedBytes",
    "SplittableBuffer",
    "TakeRange",
    "as_range",
    "assert_str_range",
    "convert_inclusive_range",
    "impl_take_range",
    "is_char_boundary",
    "is_valid_range",
    "range_fail",
    "remove_range",
    "remove_str_range",
    "span",
    "supports",
    "take_range",
    "take_str_range",
    "validate_range",
]
