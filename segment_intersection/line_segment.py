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

"""LineSegment - Pure geometry primitive for 3D line segments."""

import numpy as np

from .exceptions import DegenerateSegmentError
from .point import Point


def _as_point(value):
    """Convert a Point or [x, y, z] to a Point, rejecting non-3D shapes."""
    if isinstance(value, Point):
        return Point.from_array(value)

    try:
        shape = np.shape(value)
    except ValueError:
        shape = None
    if shape != (3,):
        raise ValueError("Start and end must be 3D points [x, y, z]")
    return Point.from_array(value)


class LineSegment:
    """
    Represent a 3D line segment defined by start and end points.

    The segment is immutable and owns copies of its points.
    """

    __slots__ = ('_start', '_end')

    def __init__(self, start, end):
        """
        Initialize line segment from start and end points.

        Args:
            start: Start point, a Point or [x, y, z]
            end: End point, a Point or [x, y, z]

        Raises
        ------
        ValueError
            If points are not 3D
        DegenerateSegmentError
            If start and end are exactly equal

        """
        start = _as_point(start)
        end = _as_point(end)

        # Exact comparison, no tolerance
        if start == end:
            raise DegenerateSegmentError()

        object.__setattr__(self, '_start', start)
        object.__setattr__(self, '_end', end)

    @classmethod
    def from_dict(cls, segment_dict):
        """
        Build a segment from a dictionary.

        Args:
            segment_dict : dict
                Dictionary with 'start' and 'end' keys

        Raises
        ------
        ValueError
            If a key is missing

        """
        if 'start' not in segment_dict or 'end' not in segment_dict:
            raise ValueError("Segment missing 'start' or 'end'")
        return cls(segment_dict['start'], segment_dict['end'])

    @property
    def start(self):
        """Copy of the start point."""
        return Point.from_array(self._start)

    @property
    def end(self):
        """Copy of the end point."""
        return Point.from_array(self._end)

    def to_dict(self):
        """Convert segment to dictionary for JSON export."""
        return {
            'start': self._start.tolist(),
            'end': self._end.tolist(),
        }

    def __setattr__(self, name, value):
        raise AttributeError(f"LineSegment is immutable, cannot set '{name}'")

    def __delattr__(self, name):
        raise AttributeError(f"LineSegment is immutable, cannot delete '{name}'")

    def __reduce__(self):
        return (LineSegment, (self._start, self._end))

    def __eq__(self, other):
        if not isinstance(other, LineSegment):
            return NotImplemented
        return self._start == other._start and self._end == other._end

    def __hash__(self):
        return hash((self._start, self._end))

    def __repr__(self):
        """Return string representation of line segment."""
        return f"LineSegment(start={self._start.tolist()}, end={self._end.tolist()})"
