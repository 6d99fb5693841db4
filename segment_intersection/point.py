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

"""Point - Immutable 3D coordinate value."""

import numpy as np


class Point:
    """
    Represent a point in 3D space.

    Coordinates are stored as floats and cannot be changed after
    construction. Equality is exact and component-wise.
    """

    __slots__ = ('_x', '_y', '_z')

    def __init__(self, x, y, z):
        """
        Initialize point from three coordinates.

        Args:
            x: X coordinate
            y: Y coordinate
            z: Z coordinate

        NaN and infinite values are accepted as given.

        """
        object.__setattr__(self, '_x', float(x))
        object.__setattr__(self, '_y', float(y))
        object.__setattr__(self, '_z', float(z))

    @classmethod
    def from_array(cls, values):
        """
        Build a point from a 3-element sequence or array.

        Args:
            values: Coordinates [x, y, z]

        Returns
        -------
        Point
            New point with the given coordinates

        Raises
        ------
        ValueError
            If values are not 3D

        """
        if isinstance(values, cls):
            return cls(values.x, values.y, values.z)

        array = np.asarray(values, dtype=float)
        if array.shape != (3,):
            raise ValueError("Point must be 3D [x, y, z]")
        return cls(array[0], array[1], array[2])

    @property
    def x(self):
        return self._x

    @property
    def y(self):
        return self._y

    @property
    def z(self):
        return self._z

    def as_array(self):
        """Return coordinates as a new numpy array of shape (3,)."""
        return np.array([self._x, self._y, self._z], dtype=float)

    def tolist(self):
        """Return coordinates as [x, y, z]."""
        return [self._x, self._y, self._z]

    def __iter__(self):
        return iter((self._x, self._y, self._z))

    def __setattr__(self, name, value):
        raise AttributeError(f"Point is immutable, cannot set '{name}'")

    def __delattr__(self, name):
        raise AttributeError(f"Point is immutable, cannot delete '{name}'")

    def __reduce__(self):
        return (Point, (self._x, self._y, self._z))

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        # NaN compares unequal, even to itself
        return self._x == other._x and self._y == other._y and self._z == other._z

    def __hash__(self):
        return hash((self._x, self._y, self._z))

    def __repr__(self):
        """Return string representation of point."""
        return f"Point({self._x!r}, {self._y!r}, {self._z!r})"
