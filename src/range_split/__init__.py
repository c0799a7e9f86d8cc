"""range-split - splitting byte buffers and UTF-8 text with ranges."""

__version__ = "0.1.0"

from .core import (  # noqa: E402
    MAX_INDEX,
    Bound,
    BoundRange,
    CharBoundaryError,
    IndexOverflowError,
    MutableBytes,
    Range,
    RangeBoundsError,
    RangeConsistencyError,
    RangeFrom,
    RangeFull,
    RangeInclusive,
    RangeSplitError,
    RangeTo,
    RangeToInclusive,
    SharedBytes,
    SplittableBuffer,
    TakeRange,
    assert_str_range,
    convert_inclusive_range,
    is_valid_range,
    remove_range,
    remove_str_range,
    span,
    take_range,
    take_str_range,
)
from .utils import configure_logging, get_logger, log_context  # noqa: E402

__all__ = [
    "MAX_INDEX",
    "Bound",
    "BoundRange",
    "CharBoundaryError",
    "IndexOverflowError",
    "MutableBytes",
    "Range",
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
    "assert_str_range",
    "configure_logging",
    "convert_inclusive_range",
    "get_logger",
    "is_valid_range",
    "log_context",
    "remove_range",
    "remove_str_range",
    "span",
    "take_range",
    "take_str_range",
]
