## axis-aligned bounding boxes for cadkernel

## Copyright (c) 2024 cadkernel contributors
## All rights reserved

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
# 
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
# 
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""Axis-aligned bounding boxes.

A box is a ``min`` and a ``max`` corner.  The canonical empty box has
``min = +inf`` and ``max = -inf`` on every axis, so that expanding it
by any point yields the degenerate box at that point, and the union of
anything with an empty box leaves it unchanged.  A box is empty when
``max < min`` on any axis; zero-volume boxes (a single point, a flat
rectangle) are *not* empty.
"""

from __future__ import annotations

from math import inf, isfinite
from typing import Iterable, List, Optional, Sequence

from cadkernel.vector import Vector2, Vector3


class _Box:
    """shared behaviour of :class:`Box2` and :class:`Box3`"""

    _vector = Vector3
    _axes = ('x', 'y', 'z')

    def __init__(self, min_point=None, max_point=None):
        dims = len(self._axes)
        self.min = self._vector(*([inf] * dims)) if min_point is None else self._vector(min_point)
        self.max = self._vector(*([-inf] * dims)) if max_point is None else self._vector(max_point)

    def __repr__(self):
        return '{}({}, {})'.format(type(self).__name__, self.min, self.max)

    def __eq__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def _pairs(self, point):
        ## (min, max, point) per axis
        p = self._vector(point)
        return [(getattr(self.min, a), getattr(self.max, a), getattr(p, a)) for a in self._axes]

    def set(self, min_point, max_point):
        self.min.copy(min_point)
        self.max.copy(max_point)
        return self

    def set_from_points(self, points: Iterable) -> '_Box':
        self.make_empty()
        for p in points:
            self.expand_by_point(p)
        return self

    def set_from_center_and_size(self, center, size):
        half_size = self._vector(size).multiply_scalar(0.5)
        self.min.copy(center).sub(half_size)
        self.max.copy(center).add(half_size)
        return self

    def clone(self):
        return type(self)().copy(self)

    def copy(self, box):
        self.min.copy(box.min)
        self.max.copy(box.max)
        return self

    def make_empty(self):
        for a in self._axes:
            setattr(self.min, a, inf)
            setattr(self.max, a, -inf)
        return self

    def is_empty(self) -> bool:
        return any(getattr(self.max, a) < getattr(self.min, a) for a in self._axes)

    def get_center(self, target=None):
        if target is None:
            target = self._vector()
        if self.is_empty():
            return target.set_scalar(0.0)
        return target.add_vectors(self.min, self.max).multiply_scalar(0.5)

    def get_size(self, target=None):
        if target is None:
            target = self._vector()
        if self.is_empty():
            return target.set_scalar(0.0)
        return target.sub_vectors(self.max, self.min)

    @property
    def center(self):
        return self.get_center()

    @property
    def size(self):
        return self.get_size()

    def expand_by_point(self, point):
        self.min.min(point)
        self.max.max(point)
        return self

    def expand_by_vector(self, vector):
        self.min.sub(vector)
        self.max.add(vector)
        return self

    def expand_by_scalar(self, scalar: float):
        self.min.add_scalar(-scalar)
        self.max.add_scalar(scalar)
        return self

    def contains_point(self, point) -> bool:
        """Boundary points are inside."""
        return all(lo <= v <= hi for lo, hi, v in self._pairs(point))

    def contains_box(self, box) -> bool:
        return all(getattr(self.min, a) <= getattr(box.min, a)
                   and getattr(box.max, a) <= getattr(self.max, a)
                   for a in self._axes)

    def get_parameter(self, point, target=None):
        """Position of ``point`` relative to the box, 0 at ``min`` and 1
        at ``max`` on each axis.  Divides by zero on a flat axis."""

        if target is None:
            target = self._vector()
        return target.copy(self._vector(*[(v - lo) / (hi - lo) for lo, hi, v in self._pairs(point)]))

    def intersects_box(self, box) -> bool:
        ## separating axis test on the box faces
        return not any(getattr(box.max, a) < getattr(self.min, a)
                       or getattr(box.min, a) > getattr(self.max, a)
                       for a in self._axes)

    def clamp_point(self, point, target=None):
        if target is None:
            target = self._vector()
        return target.copy(point).clamp(self.min, self.max)

    def distance_to_point(self, point) -> float:
        return self.clamp_point(point).distance_to(point)

    def intersect(self, box):
        self.min.max(box.min)
        self.max.min(box.max)
        ## without overlap, collapse to the canonical empty box so later
        ## operations don't see stray finite corners
        if self.is_empty():
            self.make_empty()
        return self

    def union(self, box):
        self.min.min(box.min)
        self.max.max(box.max)
        return self

    def translate(self, offset):
        self.min.add(offset)
        self.max.add(offset)
        return self

    def equals(self, box) -> bool:
        return box.min.equals(self.min) and box.max.equals(self.max)


class Box2(_Box):
    """2D axis-aligned bounding box"""

    _vector = Vector2
    _axes = ('x', 'y')


class Box3(_Box):
    """3D axis-aligned bounding box"""

    _vector = Vector3
    _axes = ('x', 'y', 'z')

    def set_from_array(self, array: Sequence[float]) -> 'Box3':
        """Bound the flat coordinate run ``[x0, y0, z0, x1, ...]``."""
        self.make_empty()
        for i in range(0, len(array), 3):
            self.expand_by_point(Vector3().from_array(array, i))
        return self

    def intersects_plane(self, plane) -> bool:
        """True if the plane passes through or touches the box."""

        lo = 0.0
        hi = 0.0
        for a in self._axes:
            n = getattr(plane.normal, a)
            if n > 0:
                lo += n * getattr(self.min, a)
                hi += n * getattr(self.max, a)
            else:
                lo += n * getattr(self.max, a)
                hi += n * getattr(self.min, a)
        return lo <= -plane.constant and hi >= -plane.constant

    def corners(self) -> List[Vector3]:
        """the eight corners, ordered by the binary pattern (x, y, z)"""
        mn = self.min
        mx = self.max
        return [Vector3(x, y, z)
                for x in (mn.x, mx.x)
                for y in (mn.y, mx.y)
                for z in (mn.z, mx.z)]

    def apply_matrix4(self, matrix) -> 'Box3':
        """Replace the box with the bounds of its transformed corners.
        An empty box stays empty.  A box with a corner sent to infinity
        or nan by the projective divide becomes empty."""

        if self.is_empty():
            return self
        points = [c.apply_matrix4(matrix) for c in self.corners()]
        if not all(isfinite(v) for p in points for v in p):
            return self.make_empty()
        return self.set_from_points(points)


## the customary CAD name
AABB = Box3


__all__ = [
    'Box2',
    'Box3',
    'AABB',
]
