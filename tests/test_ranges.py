"""Tests for range shapes and slice conversion."""

import pytest

from range_split.core.constants import MAX_INDEX
from range_split.core.ranges import (
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
    check_index,
    span,
)


@pytest.mark.unit
def test_shape_bounds():
    """Each shape reports the bounds of its range syntax."""
    assert RangeFull().start_bound() == Bound.unbounded()
    assert RangeFull().end_bound() == Bound.unbounded()

    assert RangeFrom(2).start_bound() == Bound.included(2)
    assert RangeFrom(2).end_bound().is_unbounded

    assert RangeTo(5).start_bound().is_unbounded
    assert RangeTo(5).end_bound() == Bound.excluded(5)

    assert RangeToInclusive(5).end_bound() == Bound.included(5)

    assert Range(1, 4).start_bound() == Bound.included(1)
    assert Range(1, 4).end_bound() == Bound.excluded(4)

    assert RangeInclusive(1, 4).end_bound() == Bound.included(4)


@pytest.mark.unit
def test_shape_repr_uses_range_syntax():
    assert repr(RangeFull()) == ".."
    assert repr(RangeFrom(2)) == "2.."
    assert repr(RangeTo(6)) == "..6"
    assert repr(RangeToInclusive(3)) == "..=3"
    assert repr(Range(1, 4)) == "1..4"
    assert repr(RangeInclusive(1, 4)) == "1..=4"
    assert (
        repr(BoundRange(Bound.excluded(1), Bound.unbounded()))
        == "(Excluded(1), Unbounded)"
    )


@pytest.mark.unit
def test_shapes_are_values():
    """Shapes compare and hash by their bounds."""
    assert RangeTo(5) == RangeTo(5)
    assert RangeTo(5) != RangeToInclusive(5)
    assert len({RangeFrom(1), RangeFrom(1), RangeFrom(2)}) == 2


@pytest.mark.unit
def test_shapes_satisfy_range_bounds_protocol():
    for rng in (RangeFull(), RangeFrom(0), RangeTo(0), RangeToInclusive(0)):
        assert isinstance(rng, RangeBounds)
    assert not isinstance(slice(None, 3), RangeBounds)


@pytest.mark.unit
@pytest.mark.parametrize("bad", [-1, MAX_INDEX + 1])
def test_index_out_of_domain_rejected(bad):
    with pytest.raises(ValueError):
        RangeTo(bad)
    with pytest.raises(ValueError):
        Bound.included(bad)


@pytest.mark.unit
@pytest.mark.parametrize("bad", [True, 1.5, "3", None])
def test_index_must_be_integer(bad):
    with pytest.raises(TypeError):
        RangeFrom(bad)


@pytest.mark.unit
def test_check_index_accepts_index_protocol():
    class Five:
        def __index__(self):
            return 5

    assert check_index(Five()) == 5
    assert check_index(MAX_INDEX) == MAX_INDEX


@pytest.mark.unit
def test_unbounded_bound_rejects_index():
    with pytest.raises(ValueError):
        Bound(BoundKind.UNBOUNDED, 3)


@pytest.mark.unit
def test_as_range_from_slices():
    assert as_range(slice(None)) == RangeFull()
    assert as_range(slice(2, None)) == RangeFrom(2)
    assert as_range(slice(None, 5)) == RangeTo(5)
    assert as_range(slice(1, 4)) == Range(1, 4)
    assert as_range(slice(None, 5, 1)) == RangeTo(5)


@pytest.mark.unit
def test_as_range_passes_range_objects_through():
    rng = RangeToInclusive(3)
    assert as_range(rng) is rng


@pytest.mark.unit
def test_as_range_rejects_steps_and_negative_bounds():
    with pytest.raises(ValueError, match="stepped"):
        as_range(slice(None, None, 2))
    with pytest.raises(ValueError):
        as_range(slice(-3, None))


@pytest.mark.unit
def test_as_range_rejects_other_types():
    with pytest.raises(TypeError):
        as_range(5)
    with pytest.raises(TypeError):
        as_range(range(3))


@pytest.mark.unit
def test_span_builds_shapes_from_slice_syntax():
    assert span[:] == RangeFull()
    assert span[7:] == RangeFrom(7)
    assert span[:5] == RangeTo(5)
    assert span[1:3] == Range(1, 3)
    with pytest.raises(TypeError):
        span[3]
