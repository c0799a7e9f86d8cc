"""Range shapes and bounds used to address buffer regions."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Protocol, Union, runtime_checkable

from range_split.core.constants import MAX_INDEX


def check_index(value: Any, name: str = "index") -> int:
    """
    Coerce ``value`` to a buffer index.

    Raises:
        TypeError: If value is not an integer (bools are rejected)
        ValueError: If value is negative or above MAX_INDEX
    """
    if isinstance(value, bool):
        raise TypeError(f"{name} must be an integer, got bool")
    try:
        index = operator.index(value)
    except TypeError:
        raise TypeError(
            f"{name} must be an integer, got {type(value).__name__}"
        ) from None
    if index < 0 or index > MAX_INDEX:
        raise ValueError(f"{name} must be in [0, {MAX_INDEX}], got {index}")
    return index


class BoundKind(str, Enum):
    """Kinds of range bound."""

    UNBOUNDED = "unbounded"
    INCLUDED = "included"
    EXCLUDED = "excluded"


@dataclass(frozen=True, repr=False)
class Bound:
    """
    One edge of a range.

    Attributes:
        kind: Whether the edge is open, inclusive or exclusive
        index: Byte index of the edge (None when unbounded)
    """

    kind: BoundKind
    index: Optional[int] = None

    def __post_init__(self) -> None:
        if self.kind is BoundKind.UNBOUNDED:
            if self.index is not None:
                raise ValueError("unbounded bound cannot carry an index")
        else:
            object.__setattr__(self, "index", check_index(self.index))

    @classmethod
    def unbounded(cls) -> "Bound":
        return cls(BoundKind.UNBOUNDED)

    @classmethod
    def included(cls, index: int) -> "Bound":
        return cls(BoundKind.INCLUDED, index)

    @classmethod
    def excluded(cls, index: int) -> "Bound":
        return cls(BoundKind.EXCLUDED, index)

    @property
    def is_unbounded(self) -> bool:
        return self.kind is BoundKind.UNBOUNDED

    def __repr__(self) -> str:
        if self.kind is BoundKind.UNBOUNDED:
            return "Unbounded"
        return f"{self.kind.value.capitalize()}({self.index})"


@runtime_checkable
class RangeBounds(Protocol):
    """Anything that can report its start and end bounds."""

    def start_bound(self) -> Bound: ...

    def end_bound(self) -> Bound: ...


@dataclass(frozen=True, repr=False)
class RangeFull:
    """The whole buffer (``..``)."""

    def start_bound(self) -> Bound:
        return Bound.unbounded()

    def end_bound(self) -> Bound:
        return Bound.unbounded()

    def __repr__(self) -> str:
        return ".."


@dataclass(frozen=True, repr=False)
class RangeFrom:
    """From ``start`` (inclusive) to the end of the buffer (``start..``)."""

    start: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", check_index(self.start, "start"))

    def start_bound(self) -> Bound:
        return Bound.included(self.start)

    def end_bound(self) -> Bound:
        return Bound.unbounded()

    def __repr__(self) -> str:
        return f"{self.start}.."


@dataclass(frozen=True, repr=False)
class RangeTo:
    """From the start of the buffer up to ``end`` exclusive (``..end``)."""

    end: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "end", check_index(self.end, "end"))

    def start_bound(self) -> Bound:
        return Bound.unbounded()

    def end_bound(self) -> Bound:
        return Bound.excluded(self.end)

    def __repr__(self) -> str:
        return f"..{self.end}"


@dataclass(frozen=True, repr=False)
class RangeToInclusive:
    """From the start of the buffer up to and including ``end`` (``..=end``)."""

    end: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "end", check_index(self.end, "end"))

    def start_bound(self) -> Bound:
        return Bound.unbounded()

    def end_bound(self) -> Bound:
        return Bound.included(self.end)

    def __repr__(self) -> str:
        return f"..={self.end}"


@dataclass(frozen=True, repr=False)
class Range:
    """Half-open range ``start..end``."""

    start: int
    end: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", check_index(self.start, "start"))
        object.__setattr__(self, "end", check_index(self.end, "end"))

    def start_bound(self) -> Bound:
        return Bound.included(self.start)

    def end_bound(self) -> Bound:
        return Bound.excluded(self.end)

    def __repr__(self) -> str:
        return f"{self.start}..{self.end}"


@dataclass(frozen=True, repr=False)
class RangeInclusive:
    """Closed range ``start..=end``."""

    start: int
    end: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", check_index(self.start, "start"))
        object.__setattr__(self, "end", check_index(self.end, "end"))

    def start_bound(self) -> Bound:
        return Bound.included(self.start)

    def end_bound(self) -> Bound:
        return Bound.included(self.end)

    def __repr__(self) -> str:
        return f"{self.start}..={self.end}"


@dataclass(frozen=True, repr=False)
class BoundRange:
    """A range built from an arbitrary pair of bounds."""

    start: Bound
    end: Bound

    def start_bound(self) -> Bound:
        return self.start

    def end_bound(self) -> Bound:
        return self.end

    def __repr__(self) -> str:
        return f"({self.start!r}, {self.end!r})"


RangeLike = Union[RangeBounds, slice]


def as_range(value: RangeLike) -> RangeBounds:
    """
    Normalize ``value`` into a range object.

    Python slices map onto range shapes: ``[:]`` is RangeFull, ``[a:]`` is
    RangeFrom, ``[:b]`` is RangeTo and ``[a:b]`` is Range. Slices with a step
    or negative bounds are rejected, as there is no from-the-end indexing.

    Raises:
        TypeError: If value is neither a slice nor a range object
        ValueError: If the slice has a step or a negative bound
    """
    if isinstance(value, slice):
        if value.step not in (None, 1):
            raise ValueError(f"stepped slices are not supported: {value!r}")
        start, stop = value.start, value.stop
        if start is None and stop is None:
            return RangeFull()
        if stop is None:
            return RangeFrom(start)
        if start is None:
            return RangeTo(stop)
        return Range(start, stop)
    if isinstance(value, RangeBounds):
        return value
    raise TypeError(f"expected a range or slice, got {type(value).__name__}")


class _SpanFactory:
    """Build range shapes with slice syntax: ``span[:5]``, ``span[2:]``."""

    def __getitem__(self, key: slice) -> RangeBounds:
        if not isinstance(key, slice):
            raise TypeError(f"span[] expects a slice, got {type(key).__name__}")
        return as_range(key)

    def __repr__(self) -> str:
        return "span"


span = _SpanFactory()


__all__ = [
    "Bound",
    "BoundKind",
    "BoundRange",
    "Range",
    "RangeBounds",
    "RangeFrom",
    "RangeFull",
    "RangeInclusive",
    "RangeLike",
    "RangeTo",
    "RangeToInclusive",
    "as_range",
    "check_index",
    "span",
]
