## two- and three-dimensional vectors for cadkernel

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

"""2D and 3D vectors for cadkernel

====================
OVERVIEW
====================

``Vector2`` and ``Vector3`` are small mutable component records with a
fluent algebra: every mutating method writes through to the receiver
and returns it, so calls can be chained, *e.g.* ::

   v = Vector3(1, 2, 3).sub(origin).normalize().multiply_scalar(5)

Because the receiver is modified in place, clone a vector before using
it as scratch space for an independent computation.  Matrix and
quaternion code relies on this write-through contract when it passes
vectors in as accumulators.

Constructors (and ``copy``) accept any point-like value: another
vector, a sequence of numbers, or any object with ``x``, ``y`` and
optional ``z`` attributes (see :mod:`cadkernel.geometry_utils`).

Degenerate input does not raise: normalizing a zero vector leaves it
zero, and ``angle_to`` returns ``pi/2`` when either vector has zero
length.  Only bad component indices and bad constructor arity are
errors.

``Point2`` and ``Point3`` are the same types under point names; they
exist so entity code can say what it means.
"""

from __future__ import annotations

import random as _random
from math import acos, atan2, ceil, copysign, cos, floor, inf, nan, pi, sin, sqrt
from typing import Any, Iterator, List, Optional, Sequence

from cadkernel.errors import IllegalParametersError, check_index
from cadkernel.geometry_utils import to_vec2, to_vec3
from cadkernel.mathutil import relative_eps


def _xy(v: Any):
    if isinstance(v, Vector2):
        return v.x, v.y
    return to_vec2(v)


def _xyz(v: Any):
    if isinstance(v, Vector3):
        return v.x, v.y, v.z
    return to_vec3(v)


def _projective_divide(value: float, w: float) -> float:
    ## a zero w sends the point to infinity; 0/0 is undefined
    if w == 0:
        return copysign(inf, value) if value else nan
    return value / w


def _round_half_up(value: float) -> float:
    ## match Math.round: halves go towards +infinity
    return float(floor(value + 0.5))


def _round_to_zero(value: float) -> float:
    return float(ceil(value)) if value < 0 else float(floor(value))


class Vector2:
    """two-component mutable vector"""

    def __init__(self, *args):
        self.x = 0.0
        self.y = 0.0
        if len(args) == 0:
            return
        if len(args) == 1:
            self.x, self.y = _xy(args[0])
            return
        if len(args) == 2:
            self.x, self.y = args
            return
        raise IllegalParametersError('Vector2 takes 0, 1 or 2 arguments, got {}'.format(len(args)))

    def __repr__(self):
        return '{}({}, {})'.format(type(self).__name__, self.x, self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __getitem__(self, index: int) -> float:
        return self.get_component(index)

    def __eq__(self, other):
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    @property
    def width(self) -> float:
        return self.x

    @width.setter
    def width(self, value: float):
        self.x = value

    @property
    def height(self) -> float:
        return self.y

    @height.setter
    def height(self, value: float):
        self.y = value

    def set(self, x: float, y: float) -> 'Vector2':
        self.x = x
        self.y = y
        return self

    def set_scalar(self, scalar: float) -> 'Vector2':
        self.x = scalar
        self.y = scalar
        return self

    def set_x(self, x: float) -> 'Vector2':
        self.x = x
        return self

    def set_y(self, y: float) -> 'Vector2':
        self.y = y
        return self

    def set_component(self, index: int, value: float) -> 'Vector2':
        check_index(index, 2)
        if index == 0:
            self.x = value
        else:
            self.y = value
        return self

    def get_component(self, index: int) -> float:
        check_index(index, 2)
        return self.x if index == 0 else self.y

    def clone(self) -> 'Vector2':
        return type(self)(self.x, self.y)

    def copy(self, v) -> 'Vector2':
        self.x, self.y = _xy(v)
        return self

    def add(self, v) -> 'Vector2':
        vx, vy = _xy(v)
        self.x += vx
        self.y += vy
        return self

    def add_scalar(self, s: float) -> 'Vector2':
        self.x += s
        self.y += s
        return self

    def add_vectors(self, a, b) -> 'Vector2':
        ax, ay = _xy(a)
        bx, by = _xy(b)
        self.x = ax + bx
        self.y = ay + by
        return self

    def add_scaled_vector(self, v, s: float) -> 'Vector2':
        vx, vy = _xy(v)
        self.x += vx * s
        self.y += vy * s
        return self

    def sub(self, v) -> 'Vector2':
        vx, vy = _xy(v)
        self.x -= vx
        self.y -= vy
        return self

    def sub_scalar(self, s: float) -> 'Vector2':
        self.x -= s
        self.y -= s
        return self

    def sub_vectors(self, a, b) -> 'Vector2':
        ax, ay = _xy(a)
        bx, by = _xy(b)
        self.x = ax - bx
        self.y = ay - by
        return self

    def multiply(self, v) -> 'Vector2':
        vx, vy = _xy(v)
        self.x *= vx
        self.y *= vy
        return self

    def multiply_scalar(self, scalar: float) -> 'Vector2':
        self.x *= scalar
        self.y *= scalar
        return self

    def divide(self, v) -> 'Vector2':
        vx, vy = _xy(v)
        self.x /= vx
        self.y /= vy
        return self

    def divide_scalar(self, scalar: float) -> 'Vector2':
        return self.multiply_scalar(1.0 / scalar)

    def apply_matrix3(self, m) -> 'Vector2':
        """Transform this vector as a point by the 2D affine matrix ``m``."""
        x, y = self.x, self.y
        e = m.elements
        self.x = e[0] * x + e[3] * y + e[6]
        self.y = e[1] * x + e[4] * y + e[7]
        return self

    def min(self, v) -> 'Vector2':
        vx, vy = _xy(v)
        self.x = min(self.x, vx)
        self.y = min(self.y, vy)
        return self

    def max(self, v) -> 'Vector2':
        vx, vy = _xy(v)
        self.x = max(self.x, vx)
        self.y = max(self.y, vy)
        return self

    def clamp(self, lo, hi) -> 'Vector2':
        ## assumes lo <= hi componentwise
        lx, ly = _xy(lo)
        hx, hy = _xy(hi)
        self.x = max(lx, min(hx, self.x))
        self.y = max(ly, min(hy, self.y))
        return self

    def clamp_scalar(self, min_val: float, max_val: float) -> 'Vector2':
        self.x = max(min_val, min(max_val, self.x))
        self.y = max(min_val, min(max_val, self.y))
        return self

    def clamp_length(self, min_len: float, max_len: float) -> 'Vector2':
        length = self.length()
        return self.divide_scalar(length or 1.0).multiply_scalar(
            max(min_len, min(max_len, length)))

    def floor(self) -> 'Vector2':
        self.x = float(floor(self.x))
        self.y = float(floor(self.y))
        return self

    def ceil(self) -> 'Vector2':
        self.x = float(ceil(self.x))
        self.y = float(ceil(self.y))
        return self

    def round(self) -> 'Vector2':
        self.x = _round_half_up(self.x)
        self.y = _round_half_up(self.y)
        return self

    def round_to_zero(self) -> 'Vector2':
        self.x = _round_to_zero(self.x)
        self.y = _round_to_zero(self.y)
        return self

    def negate(self) -> 'Vector2':
        self.x = -self.x
        self.y = -self.y
        return self

    def dot(self, v) -> float:
        vx, vy = _xy(v)
        return self.x * vx + self.y * vy

    def cross(self, v) -> float:
        """signed area of the parallelogram spanned by ``self`` and ``v``"""
        vx, vy = _xy(v)
        return self.x * vy - self.y * vx

    def length_sq(self) -> float:
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        return sqrt(self.x * self.x + self.y * self.y)

    def manhattan_length(self) -> float:
        return abs(self.x) + abs(self.y)

    def normalize(self) -> 'Vector2':
        return self.divide_scalar(self.length() or 1.0)

    def angle(self) -> float:
        """angle in radians from the positive x axis, in ``[0, 2*pi)``"""
        return atan2(-float(self.y), -float(self.x)) + pi

    def angle_to(self, v) -> float:
        vx, vy = _xy(v)
        denominator = sqrt(self.length_sq() * (vx * vx + vy * vy))
        if denominator == 0:
            return pi / 2
        theta = (self.x * vx + self.y * vy) / denominator
        return acos(max(-1.0, min(1.0, theta)))

    def distance_to(self, v) -> float:
        return sqrt(self.distance_to_squared(v))

    def distance_to_squared(self, v) -> float:
        vx, vy = _xy(v)
        dx = self.x - vx
        dy = self.y - vy
        return dx * dx + dy * dy

    def manhattan_distance_to(self, v) -> float:
        vx, vy = _xy(v)
        return abs(self.x - vx) + abs(self.y - vy)

    def set_length(self, length: float) -> 'Vector2':
        return self.normalize().multiply_scalar(length)

    def lerp(self, v, alpha: float) -> 'Vector2':
        vx, vy = _xy(v)
        self.x += (vx - self.x) * alpha
        self.y += (vy - self.y) * alpha
        return self

    def lerp_vectors(self, v1, v2, alpha: float) -> 'Vector2':
        ax, ay = _xy(v1)
        bx, by = _xy(v2)
        self.x = ax + (bx - ax) * alpha
        self.y = ay + (by - ay) * alpha
        return self

    def equals(self, v) -> bool:
        vx, vy = _xy(v)
        return vx == self.x and vy == self.y

    def from_array(self, array: Sequence[float], offset: int = 0) -> 'Vector2':
        self.x = array[offset]
        self.y = array[offset + 1]
        return self

    def to_array(self, array: Optional[List[float]] = None, offset: int = 0) -> List[float]:
        if array is None:
            array = []
        _store(array, offset, (self.x, self.y))
        return array

    def rotate_around(self, center, angle: float) -> 'Vector2':
        """rotate counter-clockwise by ``angle`` radians about ``center``"""
        c = cos(angle)
        s = sin(angle)
        cx, cy = _xy(center)
        x = self.x - cx
        y = self.y - cy
        self.x = x * c - y * s + cx
        self.y = x * s + y * c + cy
        return self

    def random(self) -> 'Vector2':
        self.x = _random.random()
        self.y = _random.random()
        return self

    def relative_eps(self, epsilon: float = 1.0e-7) -> float:
        return min(relative_eps(self.x, epsilon), relative_eps(self.y, epsilon))


class Vector3:
    """three-component mutable vector"""

    def __init__(self, *args):
        self.x = 0.0
        self.y = 0.0
        self.z = 0.0
        if len(args) == 0:
            return
        if len(args) == 1:
            self.x, self.y, self.z = _xyz(args[0])
            return
        if len(args) == 3:
            self.x, self.y, self.z = args
            return
        raise IllegalParametersError('Vector3 takes 0, 1 or 3 arguments, got {}'.format(len(args)))

    def __repr__(self):
        return '{}({}, {}, {})'.format(type(self).__name__, self.x, self.y, self.z)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index: int) -> float:
        return self.get_component(index)

    def __eq__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def set(self, x: float, y: float, z: Optional[float] = None) -> 'Vector3':
        if z is None:
            z = self.z
        self.x = x
        self.y = y
        self.z = z
        return self

    def set_scalar(self, scalar: float) -> 'Vector3':
        self.x = scalar
        self.y = scalar
        self.z = scalar
        return self

    def set_x(self, x: float) -> 'Vector3':
        self.x = x
        return self

    def set_y(self, y: float) -> 'Vector3':
        self.y = y
        return self

    def set_z(self, z: float) -> 'Vector3':
        self.z = z
        return self

    def set_component(self, index: int, value: float) -> 'Vector3':
        check_index(index, 3)
        if index == 0:
            self.x = value
        elif index == 1:
            self.y = value
        else:
            self.z = value
        return self

    def get_component(self, index: int) -> float:
        check_index(index, 3)
        return (self.x, self.y, self.z)[index]

    def clone(self) -> 'Vector3':
        return type(self)(self.x, self.y, self.z)

    def copy(self, v) -> 'Vector3':
        self.x, self.y, self.z = _xyz(v)
        return self

    def add(self, v) -> 'Vector3':
        vx, vy, vz = _xyz(v)
        self.x += vx
        self.y += vy
        self.z += vz
        return self

    def add_scalar(self, s: float) -> 'Vector3':
        self.x += s
        self.y += s
        self.z += s
        return self

    def add_vectors(self, a, b) -> 'Vector3':
        ax, ay, az = _xyz(a)
        bx, by, bz = _xyz(b)
        self.x = ax + bx
        self.y = ay + by
        self.z = az + bz
        return self

    def add_scaled_vector(self, v, s: float) -> 'Vector3':
        vx, vy, vz = _xyz(v)
        self.x += vx * s
        self.y += vy * s
        self.z += vz * s
        return self

    def sub(self, v) -> 'Vector3':
        vx, vy, vz = _xyz(v)
        self.x -= vx
        self.y -= vy
        self.z -= vz
        return self

    def sub_scalar(self, s: float) -> 'Vector3':
        self.x -= s
        self.y -= s
        self.z -= s
        return self

    def sub_vectors(self, a, b) -> 'Vector3':
        ax, ay, az = _xyz(a)
        bx, by, bz = _xyz(b)
        self.x = ax - bx
        self.y = ay - by
        self.z = az - bz
        return self

    def multiply(self, v) -> 'Vector3':
        vx, vy, vz = _xyz(v)
        self.x *= vx
        self.y *= vy
        self.z *= vz
        return self

    def multiply_scalar(self, scalar: float) -> 'Vector3':
        self.x *= scalar
        self.y *= scalar
        self.z *= scalar
        return self

    def multiply_vectors(self, a, b) -> 'Vector3':
        ax, ay, az = _xyz(a)
        bx, by, bz = _xyz(b)
        self.x = ax * bx
        self.y = ay * by
        self.z = az * bz
        return self

    def divide(self, v) -> 'Vector3':
        vx, vy, vz = _xyz(v)
        self.x /= vx
        self.y /= vy
        self.z /= vz
        return self

    def divide_scalar(self, scalar: float) -> 'Vector3':
        return self.multiply_scalar(1.0 / scalar)

    ## rotation and transformation
    ## ---------------------------

    def apply_euler(self, euler) -> 'Vector3':
        from cadkernel.quaternion import Quaternion
        return self.apply_quaternion(Quaternion().set_from_euler(euler))

    def apply_axis_angle(self, axis, angle: float) -> 'Vector3':
        """rotate by ``angle`` radians about the unit vector ``axis``"""
        from cadkernel.quaternion import Quaternion
        return self.apply_quaternion(Quaternion().set_from_axis_angle(axis, angle))

    def apply_matrix3(self, m) -> 'Vector3':
        x, y, z = self.x, self.y, self.z
        e = m.elements
        self.x = e[0] * x + e[3] * y + e[6] * z
        self.y = e[1] * x + e[4] * y + e[7] * z
        self.z = e[2] * x + e[5] * y + e[8] * z
        return self

    def apply_normal_matrix(self, m) -> 'Vector3':
        return self.apply_matrix3(m).normalize()

    def apply_matrix4(self, m) -> 'Vector3':
        """Transform this vector as a point by the homogeneous matrix ``m``,
        dividing through by the resulting ``w``.  A point mapped to
        ``w == 0`` gets infinite coordinates, or nan where the numerator
        is zero as well, instead of raising."""

        x, y, z = self.x, self.y, self.z
        e = m.elements
        w = e[3] * x + e[7] * y + e[11] * z + e[15]
        self.x = _projective_divide(e[0] * x + e[4] * y + e[8] * z + e[12], w)
        self.y = _projective_divide(e[1] * x + e[5] * y + e[9] * z + e[13], w)
        self.z = _projective_divide(e[2] * x + e[6] * y + e[10] * z + e[14], w)
        return self

    def apply_quaternion(self, q) -> 'Vector3':
        ## q is assumed to have unit length
        vx, vy, vz = self.x, self.y, self.z
        qx, qy, qz, qw = q.x, q.y, q.z, q.w

        # t = 2 * cross(q.xyz, v)
        tx = 2 * (qy * vz - qz * vy)
        ty = 2 * (qz * vx - qx * vz)
        tz = 2 * (qx * vy - qy * vx)

        # v + q.w * t + cross(q.xyz, t)
        self.x = vx + qw * tx + qy * tz - qz * ty
        self.y = vy + qw * ty + qz * tx - qx * tz
        self.z = vz + qw * tz + qx * ty - qy * tx
        return self

    def transform_direction(self, m) -> 'Vector3':
        """Transform this vector as a direction by the upper 3x3 of the
        affine matrix ``m`` and normalize the result."""

        x, y, z = self.x, self.y, self.z
        e = m.elements
        self.x = e[0] * x + e[4] * y + e[8] * z
        self.y = e[1] * x + e[5] * y + e[9] * z
        self.z = e[2] * x + e[6] * y + e[10] * z
        return self.normalize()

    def min(self, v) -> 'Vector3':
        vx, vy, vz = _xyz(v)
        self.x = min(self.x, vx)
        self.y = min(self.y, vy)
        self.z = min(self.z, vz)
        return self

    def max(self, v) -> 'Vector3':
        vx, vy, vz = _xyz(v)
        self.x = max(self.x, vx)
        self.y = max(self.y, vy)
        self.z = max(self.z, vz)
        return self

    def clamp(self, lo, hi) -> 'Vector3':
        ## assumes lo <= hi componentwise
        lx, ly, lz = _xyz(lo)
        hx, hy, hz = _xyz(hi)
        self.x = max(lx, min(hx, self.x))
        self.y = max(ly, min(hy, self.y))
        self.z = max(lz, min(hz, self.z))
        return self

    def clamp_scalar(self, min_val: float, max_val: float) -> 'Vector3':
        self.x = max(min_val, min(max_val, self.x))
        self.y = max(min_val, min(max_val, self.y))
        self.z = max(min_val, min(max_val, self.z))
        return self

    def clamp_length(self, min_len: float, max_len: float) -> 'Vector3':
        length = self.length()
        return self.divide_scalar(length or 1.0).multiply_scalar(
            max(min_len, min(max_len, length)))

    def floor(self) -> 'Vector3':
        self.x = float(floor(self.x))
        self.y = float(floor(self.y))
        self.z = float(floor(self.z))
        return self

    def ceil(self) -> 'Vector3':
        self.x = float(ceil(self.x))
        self.y = float(ceil(self.y))
        self.z = float(ceil(self.z))
        return self

    def round(self) -> 'Vector3':
        self.x = _round_half_up(self.x)
        self.y = _round_half_up(self.y)
        self.z = _round_half_up(self.z)
        return self

    def round_to_zero(self) -> 'Vector3':
        self.x = _round_to_zero(self.x)
        self.y = _round_to_zero(self.y)
        self.z = _round_to_zero(self.z)
        return self

    def negate(self) -> 'Vector3':
        self.x = -self.x
        self.y = -self.y
        self.z = -self.z
        return self

    def dot(self, v) -> float:
        vx, vy, vz = _xyz(v)
        return self.x * vx + self.y * vy + self.z * vz

    def is_parallel_to(self, v) -> bool:
        """exact test; both vectors pointing the same or opposite way"""
        other = Vector3(v)
        return abs(self.dot(other)) == self.length() * other.length()

    def length_sq(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        return sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def manhattan_length(self) -> float:
        return abs(self.x) + abs(self.y) + abs(self.z)

    def normalize(self) -> 'Vector3':
        return self.divide_scalar(self.length() or 1.0)

    def set_length(self, length: float) -> 'Vector3':
        return self.normalize().multiply_scalar(length)

    def lerp(self, v, alpha: float) -> 'Vector3':
        vx, vy, vz = _xyz(v)
        self.x += (vx - self.x) * alpha
        self.y += (vy - self.y) * alpha
        self.z += (vz - self.z) * alpha
        return self

    def lerp_vectors(self, v1, v2, alpha: float) -> 'Vector3':
        ax, ay, az = _xyz(v1)
        bx, by, bz = _xyz(v2)
        self.x = ax + (bx - ax) * alpha
        self.y = ay + (by - ay) * alpha
        self.z = az + (bz - az) * alpha
        return self

    def cross(self, v) -> 'Vector3':
        return self.cross_vectors(self, v)

    def cross_vectors(self, a, b) -> 'Vector3':
        ax, ay, az = _xyz(a)
        bx, by, bz = _xyz(b)
        self.x = ay * bz - az * by
        self.y = az * bx - ax * bz
        self.z = ax * by - ay * bx
        return self

    def project_on_vector(self, v) -> 'Vector3':
        target = Vector3(v)
        denominator = target.length_sq()
        if denominator == 0:
            return self.set(0.0, 0.0, 0.0)
        scalar = target.dot(self) / denominator
        return self.copy(target).multiply_scalar(scalar)

    def project_on_plane(self, plane_normal) -> 'Vector3':
        projected = self.clone().project_on_vector(plane_normal)
        return self.sub(projected)

    def reflect(self, normal) -> 'Vector3':
        ## reflect off the plane orthogonal to the unit vector ``normal``
        n = Vector3(normal)
        return self.sub(n.multiply_scalar(2 * self.dot(n)))

    def angle_to(self, v) -> float:
        vx, vy, vz = _xyz(v)
        denominator = sqrt(self.length_sq() * (vx * vx + vy * vy + vz * vz))
        if denominator == 0:
            return pi / 2
        theta = (self.x * vx + self.y * vy + self.z * vz) / denominator
        return acos(max(-1.0, min(1.0, theta)))

    def distance_to(self, v) -> float:
        return sqrt(self.distance_to_squared(v))

    def distance_to_squared(self, v) -> float:
        vx, vy, vz = _xyz(v)
        dx = self.x - vx
        dy = self.y - vy
        dz = self.z - vz
        return dx * dx + dy * dy + dz * dz

    def manhattan_distance_to(self, v) -> float:
        vx, vy, vz = _xyz(v)
        return abs(self.x - vx) + abs(self.y - vy) + abs(self.z - vz)

    ## matrix extraction
    ## -----------------

    def set_from_matrix_position(self, m) -> 'Vector3':
        e = m.elements
        self.x = e[12]
        self.y = e[13]
        self.z = e[14]
        return self

    def set_from_matrix_scale(self, m) -> 'Vector3':
        sx = self.set_from_matrix_column(m, 0).length()
        sy = self.set_from_matrix_column(m, 1).length()
        sz = self.set_from_matrix_column(m, 2).length()
        self.x = sx
        self.y = sy
        self.z = sz
        return self

    def set_from_matrix_column(self, m, index: int) -> 'Vector3':
        check_index(index, 4)
        return self.from_array(m.elements, index * 4)

    def set_from_matrix3_column(self, m, index: int) -> 'Vector3':
        check_index(index, 3)
        return self.from_array(m.elements, index * 3)

    def equals(self, v) -> bool:
        vx, vy, vz = _xyz(v)
        return vx == self.x and vy == self.y and vz == self.z

    def from_array(self, array: Sequence[float], offset: int = 0) -> 'Vector3':
        self.x = array[offset]
        self.y = array[offset + 1]
        self.z = array[offset + 2]
        return self

    def to_array(self, array: Optional[List[float]] = None, offset: int = 0) -> List[float]:
        if array is None:
            array = []
        _store(array, offset, (self.x, self.y, self.z))
        return array

    def random(self) -> 'Vector3':
        self.x = _random.random()
        self.y = _random.random()
        self.z = _random.random()
        return self

    def random_direction(self) -> 'Vector3':
        """set to a uniformly distributed unit vector"""
        theta = _random.random() * pi * 2
        u = _random.random() * 2 - 1
        c = sqrt(1 - u * u)
        self.x = c * cos(theta)
        self.y = u
        self.z = c * sin(theta)
        return self


def _store(array: List[float], offset: int, values) -> None:
    ## write values at offset, growing the list as needed
    end = offset + len(values)
    if len(array) < end:
        array.extend([0.0] * (end - len(array)))
    for i, value in enumerate(values):
        array[offset + i] = value


class Point2(Vector2):
    """a position in 2-space"""

    @staticmethod
    def point_array_to_number_array(points: Sequence['Vector2']) -> List[float]:
        out: List[float] = []
        for i, p in enumerate(points):
            Vector2(p).to_array(out, i * 2)
        return out


class Point3(Vector3):
    """a position in 3-space"""

    @staticmethod
    def point_array_to_number_array(points: Sequence['Vector3'],
                                    include_z: bool = True) -> List[float]:
        """Flatten points into ``[x0, y0, (z0,) x1, ...]``."""
        out: List[float] = []
        for p in points:
            x, y, z = _xyz(p)
            out.extend((x, y, z) if include_z else (x, y))
        return out


__all__ = [
    'Vector2',
    'Vector3',
    'Point2',
    'Point3',
]
