"""Validation of byte ranges on UTF-8 text."""

from __future__ import annotations

from enum import Enum
from typing import NoReturn, Tuple, Union

from range_split.core.buffers import SharedBytes, SplittableBuffer
from range_split.core.constants import (
    TEXT_ENCODING,
    UTF8_CONTINUATION_MASK,
    UTF8_CONTINUATION_TAG,
)
from range_split.core.errors import (
    CharBoundaryError,
    RangeBoundsError,
    RangeConsistencyError,
)
from range_split.core.ranges import (
    Bound,
    BoundKind,
    RangeLike,
    as_range,
    check_index,
)
from range_split.core.take_range import remove_range, take_range
from range_split.utils.logging import get_logger, log_context

__all__ = [
    "BoundValidity",
    "TextLike",
    "assert_str_range",
    "is_char_boundary",
    "is_valid_range",
    "range_fail",
    "remove_str_range",
    "take_str_range",
    "validate_end_bound",
    "validate_range",
    "validate_start_bound",
]

TextLike = Union[str, bytes, bytearray, memoryview, SplittableBuffer]
_Utf8 = Union[bytes, bytearray, memoryview]


class BoundValidity(str, Enum):
    """Outcome of checking one range bound against text."""

    VALID = "valid"
    OUT_OF_BUFFER = "out_of_buffer"
    NOT_CHAR_BOUNDARY = "not_char_boundary"

    def is_valid(self) -> bool:
        return self is BoundValidity.VALID


def _as_utf8(text: TextLike) -> _Utf8:
    if isinstance(text, str):
        return text.encode(TEXT_ENCODING)
    if isinstance(text, SharedBytes):
        return text.view
    if isinstance(text, SplittableBuffer):
        return bytes(text)
    if isinstance(text, (bytes, bytearray)):
        return text
    if isinstance(text, memoryview):
        return text if text.format == "B" else text.cast("B")
    raise TypeError(f"expected str or bytes-like text, got {type(text).__name__}")


def _is_char_boundary(data: _Utf8, index: int) -> bool:
    if index == 0:
        return True
    length = len(data)
    if index >= length:
        return index == length
    return (data[index] & UTF8_CONTINUATION_MASK) != UTF8_CONTINUATION_TAG


def is_char_boundary(text: TextLike, index: int) -> bool:
    """
    Check whether byte offset ``index`` falls between two code points.

    Offsets 0 and ``len`` count as boundaries. Negative offsets and offsets
    past the end do not.

    Raises:
        TypeError: If index is not an integer
    """
    try:
        index = check_index(index)
    except ValueError:
        return False
    return _is_char_boundary(_as_utf8(text), index)


def _validate_index(data: _Utf8, index: int) -> BoundValidity:
    # The boundary test also fails past the end; take it as the fast path
    # and work out the cause afterwards.
    if _is_char_boundary(data, index):
        return BoundValidity.VALID
    if index > len(data):
        return BoundValidity.OUT_OF_BUFFER
    return BoundValidity.NOT_CHAR_BOUNDARY


def _validate_next_index(data: _Utf8, index: int) -> BoundValidity:
    # index < len also keeps index + 1 within the index type
    if index >= len(data):
        return BoundValidity.OUT_OF_BUFFER
    if _is_char_boundary(data, index + 1):
        return BoundValidity.VALID
    return BoundValidity.NOT_CHAR_BOUNDARY


def validate_start_bound(data: _Utf8, bound: Bound) -> BoundValidity:
    """Check a start bound against UTF-8 encoded ``data``."""
    if bound.kind is BoundKind.UNBOUNDED:
        return BoundValidity.VALID
    if bound.kind is BoundKind.INCLUDED:
        return _validate_index(data, bound.index)
    return _validate_next_index(data, bound.index)


def validate_end_bound(data: _Utf8, bound: Bound) -> BoundValidity:
    """Check an end bound against UTF-8 encoded ``data``."""
    if bound.kind is BoundKind.UNBOUNDED:
        return BoundValidity.VALID
    if bound.kind is BoundKind.EXCLUDED:
        return _validate_index(data, bound.index)
    return _validate_next_index(data, bound.index)


def validate_range(
    text: TextLike, rng: RangeLike
) -> Tuple[BoundValidity, BoundValidity]:
    """Return the validity of the start and end bounds of ``rng``."""
    data = _as_utf8(text)
    rng = as_range(rng)
    return (
        validate_start_bound(data, rng.start_bound()),
        validate_end_bound(data, rng.end_bound()),
    )


def is_valid_range(text: TextLike, rng: RangeLike) -> bool:
    """
    Check that ``rng`` is valid for splitting ``text``.

    The range is valid if it fits within the text and both of its bounds
    sit on UTF-8 code point boundaries. Bounds are byte offsets, including
    for ``str`` input, which is measured in its UTF-8 encoding.
    """
    data = _as_utf8(text)
    rng = as_range(rng)
    return (
        validate_start_bound(data, rng.start_bound()).is_valid()
        and validate_end_bound(data, rng.end_bound()).is_valid()
    )


def range_fail(text: TextLike, rng: RangeLike) -> NoReturn:
    """
    Raise the error describing why ``rng`` is invalid for ``text``.

    Only call this after is_valid_range returned False.

    Raises:
        RangeBoundsError: If either bound lies past the end of the text
        CharBoundaryError: If a bound splits a multi-byte sequence
        RangeConsistencyError: If the range turns out to be valid
    """
    data = _as_utf8(text)
    rng = as_range(rng)
    start = validate_start_bound(data, rng.start_bound())
    end = validate_end_bound(data, rng.end_bound())
    get_logger(__name__).debug(
        "str_range_rejected",
        range=repr(rng),
        length=len(data),
        start=start.value,
        end=end.value,
    )

    if BoundValidity.OUT_OF_BUFFER in (start, end):
        if start is BoundValidity.OUT_OF_BUFFER:
            bound = rng.start_bound()
        else:
            bound = rng.end_bound()
        raise RangeBoundsError(
            f"range {rng!r} is out of bounds of the string buffer",
            index=bound.index,
            length=len(data),
        )
    if BoundValidity.NOT_CHAR_BOUNDARY in (start, end):
        raise CharBoundaryError(f"range {rng!r} does not split on a UTF-8 boundary")
    raise RangeConsistencyError("there was no problem with the range")


def assert_str_range(text: TextLike, rng: RangeLike) -> None:
    """
    Assert that ``rng`` is valid for ``text``.

    Example:
        >>> assert_str_range("Hello", span[:3])
        >>> assert_str_range("Привет", span[:1])
        Traceback (most recent call last):
            ...
        range_split.core.errors.CharBoundaryError: range ..1 does not split on a UTF-8 boundary
    """
    if not is_valid_range(text, rng):
        range_fail(text, rng)


def take_str_range(buffer: SplittableBuffer, rng: RangeLike) -> SplittableBuffer:
    """take_range on a buffer holding UTF-8 text, validating ``rng`` first."""
    rng = as_range(rng)
    with log_context(range=repr(rng), length=len(buffer)):
        assert_str_range(buffer, rng)
        return take_range(buffer, rng)


def remove_str_range(buffer: SplittableBuffer, rng: RangeLike) -> None:
    """remove_range on a buffer holding UTF-8 text, validating ``rng`` first."""
    rng = as_range(rng)
    with log_context(range=repr(rng), length=len(buffer)):
        assert_str_range(buffer, rng)
        remove_range(buffer, rng)
