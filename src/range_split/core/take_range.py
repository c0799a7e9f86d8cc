"""
Splitting part of a buffer out with a range.

Implementations are registered per (range shape, buffer type) pair with the
``impl_take_range`` class decorator; ``take_range`` and ``remove_range``
look the pair up and dispatch to it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Protocol, Tuple, Type, TypeVar

from range_split.core.ranges import RangeLike, as_range

__all__ = [
    "TakeRange",
    "RangeImpl",
    "impl_take_range",
    "take_range",
    "remove_range",
    "supports",
]

C = TypeVar("C", bound=type)


class TakeRange(Protocol):
    """Methods for splitting out part of a collection with a range."""

    def take_range(self, rng: RangeLike) -> Any:
        """
        Split off and return the part designated by ``rng``.

        The remaining part is left in self with indices adjusted after the
        removal.
        """
        ...

    def remove_range(self, rng: RangeLike) -> None:
        """
        Remove the part designated by ``rng``.

        The remaining part is left in self with indices adjusted after the
        removal.
        """
        ...


@dataclass(frozen=True)
class RangeImpl:
    """
    Registered implementation for one (range shape, buffer type) pair.

    Attributes:
        take: Splits off and returns the designated region
        remove: Discards the designated region (None = take and drop)
    """

    take: Callable[[Any, Any], Any]
    remove: Optional[Callable[[Any, Any], None]] = None


_REGISTRY: Dict[Tuple[type, type], RangeImpl] = {}


def impl_take_range(range_type: type, *buffer_types: type) -> Callable[[C], C]:
    """
    Class decorator registering ``take_range`` / ``remove_range`` for
    ``range_type`` on each of ``buffer_types``.

    The decorated class must define a ``take_range(buffer, rng)`` static
    method and may define ``remove_range(buffer, rng)``. Without the latter,
    removal calls take_range and drops the result; define it whenever the
    buffer has a cheaper in-place primitive.

    Raises:
        TypeError: If no buffer type is given or take_range is missing
        ValueError: If a pair is already registered
    """
    if not buffer_types:
        raise TypeError("impl_take_range needs at least one buffer type")

    def decorator(cls: C) -> C:
        take = getattr(cls, "take_range", None)
        if take is None:
            raise TypeError(f"{cls.__name__} does not define take_range")
        impl = RangeImpl(take=take, remove=getattr(cls, "remove_range", None))

        for buffer_type in buffer_types:
            key = (range_type, buffer_type)
            if key in _REGISTRY:
                raise ValueError(
                    f"take_range for {range_type.__name__} on "
                    f"{buffer_type.__name__} is already registered"
                )
            _REGISTRY[key] = impl
        return cls

    return decorator


def _lookup(buffer_type: Type[Any], range_type: Type[Any]) -> Optional[RangeImpl]:
    for b in buffer_type.__mro__:
        for r in range_type.__mro__:
            impl = _REGISTRY.get((r, b))
            if impl is not None:
                return impl
    return None


def _resolve(buffer: Any, rng: Any) -> RangeImpl:
    impl = _lookup(type(buffer), type(rng))
    if impl is None:
        raise TypeError(
            f"{type(buffer).__name__} does not support take_range "
            f"with {type(rng).__name__}"
        )
    return impl


def supports(buffer_type: type, range_type: type) -> bool:
    """Check whether a take_range implementation exists for the pair."""
    return _lookup(buffer_type, range_type) is not None


def take_range(buffer: Any, rng: RangeLike) -> Any:
    """
    Split off and return the part of ``buffer`` designated by ``rng``.

    ``buffer`` is mutated to hold only the remainder, reindexed from zero.
    Python slices are accepted in place of range objects (``slice(None, 5)``
    behaves as ``RangeTo(5)``).

    Raises:
        RangeBoundsError: If a bound exceeds the buffer length
        IndexOverflowError: If an inclusive end cannot be made exclusive
        TypeError: If the buffer does not support the range shape
    """
    rng = as_range(rng)
    return _resolve(buffer, rng).take(buffer, rng)


def remove_range(buffer: Any, rng: RangeLike) -> None:
    """
    Discard the part of ``buffer`` designated by ``rng``.

    Raises the same errors as take_range.
    """
    rng = as_range(rng)
    impl = _resolve(buffer, rng)
    if impl.remove is None:
        impl.take(buffer, rng)
    else:
        impl.remove(buffer, rng)
