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

"""Crossing - A single intersection job with its segments and outcome."""

from .exceptions import NoIntersectionError
from .intersection import DEFAULT_TOLERANCE, intersect
from .line_segment import LineSegment


class Crossing:
    """
    Represent one intersection query between two segments.

    Wraps two LineSegments and a tolerance, and holds the outcome once
    solved.
    """

    def __init__(self, crossing_dict):
        """
        Initialize crossing from YAML dictionary.

        Args:
            crossing_dict : dict
                Dictionary with 'segment_a' and 'segment_b' keys, each
                holding 'start' and 'end', and an optional 'tolerance'

        Raises
        ------
        ValueError
            If a segment is missing or malformed, or the tolerance is
            not a number

        """
        for key in ('segment_a', 'segment_b'):
            if key not in crossing_dict or not isinstance(crossing_dict[key], dict):
                raise ValueError(f"Missing required segment: '{key}'")

        self.segment_a = LineSegment.from_dict(crossing_dict['segment_a'])
        self.segment_b = LineSegment.from_dict(crossing_dict['segment_b'])
        tolerance = crossing_dict.get('tolerance', DEFAULT_TOLERANCE)
        if isinstance(tolerance, bool) or not isinstance(tolerance, (int, float, str)):
            raise ValueError("Tolerance must be a number")
        try:
            self.tolerance = float(tolerance)
        except ValueError:
            raise ValueError("Tolerance must be a number") from None
        self.point = None
        self.intersects = False
        self.is_solved = False

    def solve(self):
        """
        Intersect segment_a with segment_b.

        Modifies the crossing in-place by setting point, intersects and
        is_solved.

        Returns
        -------
        bool
            True if the segments intersect

        """
        try:
            self.point = intersect(self.segment_a, self.segment_b, self.tolerance)
            self.intersects = True
        except NoIntersectionError:
            self.point = None
            self.intersects = False

        self.is_solved = True
        return self.intersects

    def to_dict(self):
        """
        Convert crossing to dictionary for JSON export.

        Returns
        -------
        dict
            Dictionary with segments, tolerance and outcome

        Raises
        ------
        RuntimeError
            If crossing not solved yet

        """
        if not self.is_solved:
            raise RuntimeError("Cannot export crossing - not solved yet")

        return {
            'segment_a': self.segment_a.to_dict(),
            'segment_b': self.segment_b.to_dict(),
            'tolerance': self.tolerance,
            'intersects': self.intersects,
            'point': self.point.tolist() if self.point is not None else None,
        }

    def __repr__(self):
        """Return string representation of crossing."""
        if not self.is_solved:
            status = "not solved"
        elif self.intersects:
            status = f"at {self.point.tolist()}"
        else:
            status = "no intersection"
        return f"Crossing(tolerance={self.tolerance:g}, {status})"
