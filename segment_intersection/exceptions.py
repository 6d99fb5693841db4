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

"""Exceptions raised by segment construction and intersection."""


class SegmentIntersectionError(ValueError):
    """Base class for all segment_intersection errors."""


class DegenerateSegmentError(SegmentIntersectionError):
    """Raised when a segment's start and end points coincide exactly."""

    def __init__(self, message="Start and end points are the same"):
        super().__init__(message)


class NoIntersectionError(SegmentIntersectionError):
    """
    Raised when two segments do not intersect within tolerance.

    Also raised when the linear system is degenerate (parallel segments,
    or a first segment with no extent along x), since the non-finite
    intermediate values fail the tolerance check the same way.
    """

    def __init__(self, message="Segments do not intersect"):
        super().__init__(message)
