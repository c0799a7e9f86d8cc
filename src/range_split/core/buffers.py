"""Contiguous byte buffers that can be split in place."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterator, Union

from range_split.core.errors import RangeBoundsError
from range_split.core.ranges import RangeLike, check_index
from range_split.core.take_range import remove_range, take_range
from range_split.utils.logging import get_logger

__all__ = ["SplittableBuffer", "SharedBytes", "MutableBytes", "BytesLike"]

BytesLike = Union[bytes, bytearray, memoryview]


class SplittableBuffer(ABC):
    """
    Abstract base class for buffers that support in-place splitting.

    Implementations provide the primitives below; range-based splitting
    (take_range / remove_range) is built on top of them. Every primitive
    leaves the remaining bytes indexed from zero.
    """

    __slots__ = ()

    @abstractmethod
    def __len__(self) -> int:
        pass

    @abstractmethod
    def __bytes__(self) -> bytes:
        pass

    @abstractmethod
    def split_off(self, at: int) -> "SplittableBuffer":
        """
        Split into two at ``at``.

        Afterwards self holds ``[0, at)`` and the returned buffer holds
        ``[at, len)``.

        Raises:
            RangeBoundsError: If at > len(self)
        """
        pass

    @abstractmethod
    def split_to(self, at: int) -> "SplittableBuffer":
        """
        Split into two at ``at``.

        Afterwards self holds ``[at, len)`` and the returned buffer holds
        ``[0, at)``.

        Raises:
            RangeBoundsError: If at > len(self)
        """
        pass

    @abstractmethod
    def truncate(self, length: int) -> None:
        """Keep the first ``length`` bytes; no-op if already shorter."""
        pass

    @abstractmethod
    def advance(self, count: int) -> None:
        """
        Drop the first ``count`` bytes.

        Raises:
            RangeBoundsError: If count > len(self)
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        """Drop all bytes."""
        pass

    def is_empty(self) -> bool:
        return len(self) == 0

    def take_range(self, rng: RangeLike) -> "SplittableBuffer":
        """Split off and return the region designated by ``rng``."""
        return take_range(self, rng)

    def remove_range(self, rng: RangeLike) -> None:
        """Discard the region designated by ``rng``."""
        remove_range(self, rng)

    def decode(self, encoding: str = "utf-8", errors: str = "strict") -> str:
        return bytes(self).decode(encoding, errors)

    def _check_split(self, op: str, at: Any) -> int:
        at = check_index(at, "at")
        length = len(self)
        if at > length:
            get_logger(__name__).debug(
                "buffer_bounds_violation", op=op, index=at, length=length
            )
            raise RangeBoundsError(
                f"{op} out of bounds: {at} > {length}", index=at, length=length
            )
        return at

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (SplittableBuffer, bytes, bytearray, memoryview)):
            return bytes(self) == bytes(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"{type(self).__name__}({bytes(self)!r})"


class SharedBytes(SplittableBuffer):
    """
    Immutable, cheaply splittable byte buffer.

    Pieces produced by split_off/split_to are zero-copy views into the same
    underlying ``bytes`` object, which stays alive for as long as any piece
    references it. Each piece only ever sees its own disjoint region, so
    pieces may be handed to unrelated readers without coordination.
    """

    __slots__ = ("_view",)

    def __init__(self, data: Union[BytesLike, SplittableBuffer] = b"") -> None:
        if not isinstance(data, bytes):
            data = bytes(data)
        self._view = memoryview(data)

    @classmethod
    def _wrap(cls, view: memoryview) -> "SharedBytes":
        piece = cls.__new__(cls)
        piece._view = view
        return piece

    @property
    def view(self) -> memoryview:
        """Read-only view of the current region."""
        return self._view

    def __len__(self) -> int:
        return len(self._view)

    def __bytes__(self) -> bytes:
        return self._view.tobytes()

    def __getitem__(self, key: Union[int, slice]) -> Union[int, bytes]:
        if isinstance(key, slice):
            return self._view[key].tobytes()
        return self._view[key]

    def __iter__(self) -> Iterator[int]:
        return iter(self._view)

    def __hash__(self) -> int:
        return hash(bytes(self))

    def split_off(self, at: int) -> "SharedBytes":
        at = self._check_split("split_off", at)
        piece = self._wrap(self._view[at:])
        self._view = self._view[:at]
        return piece

    def split_to(self, at: int) -> "SharedBytes":
        at = self._check_split("split_to", at)
        piece = self._wrap(self._view[:at])
        self._view = self._view[at:]
        return piece

    def truncate(self, length: int) -> None:
        length = check_index(length, "length")
        if length < len(self._view):
            self._view = self._view[:length]

    def advance(self, count: int) -> None:
        count = self._check_split("advance", count)
        self._view = self._view[count:]

    def clear(self) -> None:
        self.truncate(0)


class MutableBytes(SplittableBuffer):
    """
    Growable byte buffer owned by a single holder.

    Split pieces receive their own storage; the remainder stays in this
    buffer. ``take()`` swaps the storage out wholesale.
    """

    __slots__ = ("_buf",)

    def __init__(self, data: Union[BytesLike, SplittableBuffer] = b"") -> None:
        if isinstance(data, SplittableBuffer):
            data = bytes(data)
        self._buf = bytearray(data)

    @classmethod
    def _wrap(cls, buf: bytearray) -> "MutableBytes":
        piece = cls.__new__(cls)
        piece._buf = buf
        return piece

    def __len__(self) -> int:
        return len(self._buf)

    def __bytes__(self) -> bytes:
        return bytes(self._buf)

    def __getitem__(self, key: Union[int, slice]) -> Union[int, bytes]:
        if isinstance(key, slice):
            return bytes(self._buf[key])
        return self._buf[key]

    def __iter__(self) -> Iterator[int]:
        return iter(self._buf)

    def split_off(self, at: int) -> "MutableBytes":
        at = self._check_split("split_off", at)
        piece = self._wrap(self._buf[at:])
        del self._buf[at:]
        return piece

    def split_to(self, at: int) -> "MutableBytes":
        at = self._check_split("split_to", at)
        piece = self._wrap(self._buf[:at])
        del self._buf[:at]
        return piece

    def truncate(self, length: int) -> None:
        length = check_index(length, "length")
        if length < len(self._buf):
            del self._buf[length:]

    def advance(self, count: int) -> None:
        count = self._check_split("advance", count)
        del self._buf[:count]

    def clear(self) -> None:
        self._buf.clear()

    def take(self) -> "MutableBytes":
        """Return the whole contents, leaving this buffer empty."""
        piece = self._wrap(self._buf)
        self._buf = bytearray()
        return piece

    def extend(self, data: Union[BytesLike, SplittableBuffer]) -> None:
        if isinstance(data, SplittableBuffer):
            data = bytes(data)
        self._buf.extend(data)

    def append(self, byte: int) -> None:
        self._buf.append(byte)

    def freeze(self) -> SharedBytes:
        """Move the contents into a SharedBytes, leaving this buffer empty."""
        return SharedBytes(bytes(self.take()._buf))
