"""take_range implementations for SharedBytes and MutableBytes."""

from __future__ import annotations

from range_split.core.buffers import MutableBytes, SharedBytes, SplittableBuffer
from range_split.core.mem import convert_inclusive_range
from range_split.core.ranges import RangeFrom, RangeFull, RangeTo, RangeToInclusive
from range_split.core.take_range import impl_take_range, remove_range, take_range


@impl_take_range(RangeFull, SharedBytes)
class _FullShared:
    @staticmethod
    def take_range(buffer: SharedBytes, _rng: RangeFull) -> SharedBytes:
        return buffer.split_off(0)

    @staticmethod
    def remove_range(buffer: SharedBytes, _rng: RangeFull) -> None:
        buffer.clear()


@impl_take_range(RangeFull, MutableBytes)
class _FullMutable:
    # swap with an empty buffer, no split arithmetic
    @staticmethod
    def take_range(buffer: MutableBytes, _rng: RangeFull) -> MutableBytes:
        return buffer.take()

    @staticmethod
    def remove_range(buffer: MutableBytes, _rng: RangeFull) -> None:
        buffer.clear()


@impl_take_range(RangeFrom, SharedBytes, MutableBytes)
class _From:
    @staticmethod
    def take_range(buffer: SplittableBuffer, rng: RangeFrom) -> SplittableBuffer:
        return buffer.split_off(rng.start)

    @staticmethod
    def remove_range(buffer: SplittableBuffer, rng: RangeFrom) -> None:
        buffer.truncate(rng.start)


@impl_take_range(RangeTo, SharedBytes, MutableBytes)
class _To:
    @staticmethod
    def take_range(buffer: SplittableBuffer, rng: RangeTo) -> SplittableBuffer:
        return buffer.split_to(rng.end)

    @staticmethod
    def remove_range(buffer: SplittableBuffer, rng: RangeTo) -> None:
        buffer.advance(rng.end)


@impl_take_range(RangeToInclusive, SharedBytes, MutableBytes)
class _ToInclusive:
    @staticmethod
    def take_range(
        buffer: SplittableBuffer, rng: RangeToInclusive
    ) -> SplittableBuffer:
        return take_range(buffer, convert_inclusive_range(rng))

    @staticmethod
    def remove_range(buffer: SplittableBuffer, rng: RangeToInclusive) -> None:
        remove_range(buffer, convert_inclusive_range(rng))
