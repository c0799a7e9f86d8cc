"""Tests for inclusive-to-exclusive range conversion."""

import pytest
from structlog.testing import capture_logs

from range_split.core.constants import MAX_INDEX
from range_split.core.errors import IndexOverflowError, RangeSplitError
from range_split.core.mem import convert_inclusive_range
from range_split.core.ranges import RangeTo, RangeToInclusive


@pytest.mark.unit
@pytest.mark.parametrize("end", [0, 1, 4, 1024])
def test_convert_inclusive_range(end):
    assert convert_inclusive_range(RangeToInclusive(end)) == RangeTo(end + 1)


@pytest.mark.unit
def test_convert_just_below_max_index():
    assert convert_inclusive_range(RangeToInclusive(MAX_INDEX - 1)) == RangeTo(
        MAX_INDEX
    )


@pytest.mark.unit
def test_convert_max_index_overflows():
    """The conversion must fail loudly instead of wrapping to 0."""
    with pytest.raises(IndexOverflowError, match="integer overflow"):
        convert_inclusive_range(RangeToInclusive(MAX_INDEX))


@pytest.mark.unit
def test_overflow_error_hierarchy():
    with pytest.raises(OverflowError):
        convert_inclusive_range(RangeToInclusive(MAX_INDEX))
    assert issubclass(IndexOverflowError, RangeSplitError)


@pytest.mark.unit
def test_overflow_is_logged(restore_service_name):
    with capture_logs() as logs:
        with pytest.raises(IndexOverflowError):
            convert_inclusive_range(RangeToInclusive(MAX_INDEX))

    assert len(logs) == 1
    assert logs[0]["event"] == "inclusive_range_overflow"
    assert logs[0]["end"] == MAX_INDEX
    assert logs[0]["service_name"] == "range-split"
