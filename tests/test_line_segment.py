# Copyright 2025 Berkan Tali
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Tests for LineSegment construction and accessors"""

import copy
import math
import pickle

import pytest
from hypothesis import assume, given, strategies as st

from segment_intersection.exceptions import DegenerateSegmentError
from segment_intersection.line_segment import LineSegment
from segment_intersection.point import Point

points = st.builds(Point, *(3 * [st.floats(allow_nan=False)]))


@given(points)
def test_segment__with_same_start_and_end__is_degenerate(p):
    with pytest.raises(DegenerateSegmentError) as err_ctx:
        LineSegment(p, p)
    assert str(err_ctx.value) == "Start and end points are the same"


@given(points, points)
def test_segment__with_distinct_points__keeps_them(p, q):
    assume(p != q)
    segment = LineSegment(p, q)
    assert segment.start == p
    assert segment.end == q


def test_segment__degenerate_check_is_exact_not_tolerant():
    segment = LineSegment(Point(0, 0, 0), Point(0, 0, 1e-300))
    assert segment.end == Point(0, 0, 1e-300)


def test_segment__degenerate_error_is_value_error():
    with pytest.raises(ValueError):
        LineSegment([1, 2, 3], [1, 2, 3])


def test_segment__with_nan_endpoints_is_not_degenerate():
    # NaN never compares equal, so exact equality cannot detect it
    LineSegment(Point(math.nan, 0, 0), Point(math.nan, 0, 0))


def test_segment__accepts_coordinate_sequences():
    segment = LineSegment([0, 0, 0], (1, 2, 3))
    assert segment.start == Point(0, 0, 0)
    assert segment.end == Point(1, 2, 3)


@pytest.mark.parametrize(["start", "end"], [
    ([0, 0], [1, 1, 1]),
    ([0, 0, 0], [1, 1, 1, 1]),
    ])
def test_segment__rejects_non_3d_points(start, end):
    with pytest.raises(ValueError) as err_ctx:
        LineSegment(start, end)
    assert str(err_ctx.value) == "Start and end must be 3D points [x, y, z]"


def test_segment__accessors_return_independent_copies():
    start = Point(0, 0, 0)
    segment = LineSegment(start, Point(1, 1, 1))
    assert segment.start == start
    assert segment.start is not segment.start
    assert segment.end is not segment.end


def test_segment__is_immutable():
    segment = LineSegment(Point(0, 0, 0), Point(1, 1, 1))
    with pytest.raises(AttributeError):
        segment.start = Point(5, 5, 5)
    with pytest.raises(AttributeError):
        del segment._start
    assert segment.start == Point(0, 0, 0)


def test_segment__dict_round_trip():
    segment = LineSegment.from_dict({'start': [0, 1, 2], 'end': [3, 4, 5]})
    assert segment.to_dict() == {'start': [0.0, 1.0, 2.0], 'end': [3.0, 4.0, 5.0]}


def test_segment__from_dict_requires_both_points():
    with pytest.raises(ValueError):
        LineSegment.from_dict({'start': [0, 1, 2]})


@pytest.mark.parametrize("duplicate", [
    copy.copy,
    copy.deepcopy,
    lambda s: pickle.loads(pickle.dumps(s)),
    ])
def test_segment__survives_copy_and_pickle(duplicate):
    segment = LineSegment(Point(0, 0, 0), Point(1, 2, 3))
    duplicated = duplicate(segment)
    assert duplicated == segment
    assert duplicated.start == Point(0, 0, 0)
    assert duplicated.end == Point(1, 2, 3)


def test_segment__non_numeric_points_keep_conversion_error():
    with pytest.raises(ValueError) as err_ctx:
        LineSegment(['a', 'b', 'c'], [1, 2, 3])
    assert str(err_ctx.value) != "Start and end must be 3D points [x, y, z]"


def test_segment__ragged_points_are_not_3d():
    with pytest.raises(ValueError) as err_ctx:
        LineSegment([[0, 0], [0]], [1, 2, 3])
    assert str(err_ctx.value) == "Start and end must be 3D points [x, y, z]"
