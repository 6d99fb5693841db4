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

"""Segment intersection - parametric solution of two 3D line equations."""

import numpy as np

from .exceptions import NoIntersectionError
from .point import Point

DEFAULT_TOLERANCE = 1e-6


def _line_coefficients(segment):
    """
    Build parametric coefficients of the line through a segment.

    For each axis u the line is u(t) = slope * t + intercept with
    slope = u_end - u_start and intercept = u_start.

    Returns
    -------
    tuple
        (slope_x, intercept_x, slope_y, intercept_y, slope_z, intercept_z)
        as numpy float64 scalars

    """
    start = segment.start.as_array()
    end = segment.end.as_array()
    slopes = end - start

    return (
        slopes[0], start[0],
        slopes[1], start[1],
        slopes[2], start[2],
    )


def _within(value, reference, tolerance):
    """Check |reference - value| <= tolerance. False for any inf or NaN operand."""
    return bool(np.abs(reference - value) <= tolerance)


def intersect(segment1, segment2, tolerance=DEFAULT_TOLERANCE):
    """
    Find the intersection point of two 3D segments.

    Each segment defines a line per axis:

        a1 * t + b1 = a2 * s + b2    (x)
        c1 * t + d1 = c2 * s + d2    (y)
        e1 * t + f1 = e2 * s + f2    (z)

    The x and y equations are solved for s and t. The z equation, together
    with x and y, is then used to confirm that both lines meet within
    tolerance. The lines are unbounded, so s and t are not limited to the
    [0, 1] range of the segments.

    A zero divisor (a1 == 0, or parallel x/y directions) is not checked
    up front. It produces inf or NaN, which fails the tolerance check and
    is reported as NoIntersectionError.

    Args:
        segment1 : LineSegment
            First segment (parameter t)
        segment2 : LineSegment
            Second segment (parameter s)
        tolerance : float, optional
            Maximum absolute difference allowed per axis (default 1e-6).
            A negative tolerance is not rejected but makes every check fail.

    Returns
    -------
    Point
        Intersection point, evaluated on the second segment's line

    Raises
    ------
    NoIntersectionError
        If the lines do not meet within tolerance on every axis

    """
    tolerance = np.float64(tolerance)

    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        a1, b1, c1, d1, e1, f1 = _line_coefficients(segment1)
        a2, b2, c2, d2, e2, f2 = _line_coefficients(segment2)

        s = (d2 * a1 - c1 * b2 + c1 * b1 - d1 * a1) / (c1 * a2 - c2 * a1)
        t = (a2 * s + b2 - b1) / a1

        x = a2 * s + b2
        y = c2 * s + d2
        z = e2 * s + f2

        if (_within(x, a1 * t + b1, tolerance)
                and _within(y, c1 * t + d1, tolerance)
                and _within(z, e1 * t + f1, tolerance)):
            return Point(x, y, z)

    raise NoIntersectionError()
