## quaternion rotations for cadkernel

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

"""Unit quaternions for 3D rotation.

A :class:`Quaternion` holds ``(x, y, z, w)`` with ``w`` the scalar part
and defaults to the identity rotation.  Every mutator writes through to
the receiver and returns it.  Assigning a component, or any mutator,
invokes the callback registered with :meth:`Quaternion.on_change`
synchronously after the new value is in place; :class:`~cadkernel.euler.Euler`
uses the same hook so that a paired rotation can be kept in sync.
"""

from __future__ import annotations

import logging
import random as _random
from math import acos, atan2, cos, pi, sin, sqrt
from typing import Callable, List, Optional, Sequence

from cadkernel.constants import MACHINE_EPSILON
from cadkernel.errors import IllegalParametersError
from cadkernel.geometry_utils import to_vec3
from cadkernel.mathutil import clamp

logger = logging.getLogger(__name__)


def _noop():
    pass


class Quaternion:
    """rotation quaternion ``(x, y, z, w)``"""

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0, w: float = 1.0):
        self._x = x
        self._y = y
        self._z = z
        self._w = w
        self._on_change_callback: Callable[[], None] = _noop

    def __repr__(self):
        return 'Quaternion({}, {}, {}, {})'.format(self._x, self._y, self._z, self._w)

    def __iter__(self):
        yield self._x
        yield self._y
        yield self._z
        yield self._w

    def __eq__(self, other):
        if not isinstance(other, Quaternion):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    @property
    def x(self) -> float:
        return self._x

    @x.setter
    def x(self, value: float):
        self._x = value
        self._on_change_callback()

    @property
    def y(self) -> float:
        return self._y

    @y.setter
    def y(self, value: float):
        self._y = value
        self._on_change_callback()

    @property
    def z(self) -> float:
        return self._z

    @z.setter
    def z(self, value: float):
        self._z = value
        self._on_change_callback()

    @property
    def w(self) -> float:
        return self._w

    @w.setter
    def w(self, value: float):
        self._w = value
        self._on_change_callback()

    ## flat array operations
    ## ---------------------

    @staticmethod
    def slerp_flat(dst: List[float], dst_offset: int,
                   src0: Sequence[float], src_offset0: int,
                   src1: Sequence[float], src_offset1: int, t: float) -> None:
        """SLERP between quaternions stored as ``[x, y, z, w]`` runs in
        flat arrays, writing the result into ``dst``."""

        x0, y0, z0, w0 = src0[src_offset0:src_offset0 + 4]
        x1, y1, z1, w1 = src1[src_offset1:src_offset1 + 4]

        if t == 0:
            dst[dst_offset:dst_offset + 4] = [x0, y0, z0, w0]
            return
        if t == 1:
            dst[dst_offset:dst_offset + 4] = [x1, y1, z1, w1]
            return

        if w0 != w1 or x0 != x1 or y0 != y1 or z0 != z1:
            s = 1 - t
            cos_ = x0 * x1 + y0 * y1 + z0 * z1 + w0 * w1
            direction = 1 if cos_ >= 0 else -1
            sqr_sin = 1 - cos_ * cos_

            lerped = True
            ## skip the slerp for tiny steps
            if sqr_sin > MACHINE_EPSILON:
                sin_ = sqrt(sqr_sin)
                length = atan2(sin_, cos_ * direction)
                s = sin(s * length) / sin_
                t = sin(t * length) / sin_
                lerped = False

            t_dir = t * direction
            x0 = x0 * s + x1 * t_dir
            y0 = y0 * s + y1 * t_dir
            z0 = z0 * s + z1 * t_dir
            w0 = w0 * s + w1 * t_dir

            if lerped:
                f = 1 / sqrt(x0 * x0 + y0 * y0 + z0 * z0 + w0 * w0)
                x0 *= f
                y0 *= f
                z0 *= f
                w0 *= f

        dst[dst_offset:dst_offset + 4] = [x0, y0, z0, w0]

    @staticmethod
    def multiply_quaternions_flat(dst: List[float], dst_offset: int,
                                  src0: Sequence[float], src_offset0: int,
                                  src1: Sequence[float], src_offset1: int) -> List[float]:
        x0, y0, z0, w0 = src0[src_offset0:src_offset0 + 4]
        x1, y1, z1, w1 = src1[src_offset1:src_offset1 + 4]

        dst[dst_offset] = x0 * w1 + w0 * x1 + y0 * z1 - z0 * y1
        dst[dst_offset + 1] = y0 * w1 + w0 * y1 + z0 * x1 - x0 * z1
        dst[dst_offset + 2] = z0 * w1 + w0 * z1 + x0 * y1 - y0 * x1
        dst[dst_offset + 3] = w0 * w1 - x0 * x1 - y0 * y1 - z0 * z1
        return dst

    ## setters
    ## -------

    def set(self, x: float, y: float, z: float, w: float) -> 'Quaternion':
        self._x = x
        self._y = y
        self._z = z
        self._w = w
        self._on_change_callback()
        return self

    def clone(self) -> 'Quaternion':
        return Quaternion(self._x, self._y, self._z, self._w)

    def copy(self, q: 'Quaternion') -> 'Quaternion':
        return self.set(q.x, q.y, q.z, q.w)

    def set_from_euler(self, euler, update: bool = True) -> 'Quaternion':
        """Set from Euler angles, honouring the Euler's rotation order.

        An unknown order raises :class:`IllegalParametersError`.
        """

        x, y, z = euler.x, euler.y, euler.z
        order = getattr(euler.order, 'value', euler.order)

        c1 = cos(x / 2)
        c2 = cos(y / 2)
        c3 = cos(z / 2)
        s1 = sin(x / 2)
        s2 = sin(y / 2)
        s3 = sin(z / 2)

        ## products shared by every order; only the signs differ
        a = s1 * c2 * c3
        b = c1 * s2 * s3
        c = c1 * s2 * c3
        d = s1 * c2 * s3
        e = c1 * c2 * s3
        f = s1 * s2 * c3
        g = c1 * c2 * c3
        h = s1 * s2 * s3

        if order == 'XYZ':
            self._x, self._y, self._z, self._w = a + b, c - d, e + f, g - h
        elif order == 'YXZ':
            self._x, self._y, self._z, self._w = a + b, c - d, e - f, g + h
        elif order == 'ZXY':
            self._x, self._y, self._z, self._w = a - b, c + d, e + f, g - h
        elif order == 'ZYX':
            self._x, self._y, self._z, self._w = a - b, c + d, e - f, g + h
        elif order == 'YZX':
            self._x, self._y, self._z, self._w = a + b, c + d, e - f, g - h
        elif order == 'XZY':
            self._x, self._y, self._z, self._w = a - b, c - d, e + f, g + h
        else:
            raise IllegalParametersError('unknown rotation order: {!r}'.format(order))

        if update:
            self._on_change_callback()
        return self

    def set_from_axis_angle(self, axis, angle: float) -> 'Quaternion':
        """``axis`` is assumed to be normalized, ``angle`` is in radians."""

        ax, ay, az = to_vec3(axis)
        half = angle / 2
        s = sin(half)
        self._x = ax * s
        self._y = ay * s
        self._z = az * s
        self._w = cos(half)
        self._on_change_callback()
        return self

    def set_from_rotation_matrix(self, m) -> 'Quaternion':
        """Set from the upper 3x3 of ``m``, assumed to be a pure
        (unscaled) rotation."""

        te = m.elements
        m11, m12, m13 = te[0], te[4], te[8]
        m21, m22, m23 = te[1], te[5], te[9]
        m31, m32, m33 = te[2], te[6], te[10]
        trace = m11 + m22 + m33

        if trace > 0:
            s = 0.5 / sqrt(trace + 1.0)
            self._w = 0.25 / s
            self._x = (m32 - m23) * s
            self._y = (m13 - m31) * s
            self._z = (m21 - m12) * s
        elif m11 > m22 and m11 > m33:
            s = 2.0 * sqrt(1.0 + m11 - m22 - m33)
            self._w = (m32 - m23) / s
            self._x = 0.25 * s
            self._y = (m12 + m21) / s
            self._z = (m13 + m31) / s
        elif m22 > m33:
            s = 2.0 * sqrt(1.0 + m22 - m11 - m33)
            self._w = (m13 - m31) / s
            self._x = (m12 + m21) / s
            self._y = 0.25 * s
            self._z = (m23 + m32) / s
        else:
            s = 2.0 * sqrt(1.0 + m33 - m11 - m22)
            self._w = (m21 - m12) / s
            self._x = (m13 + m31) / s
            self._y = (m23 + m32) / s
            self._z = 0.25 * s

        self._on_change_callback()
        return self

    def set_from_unit_vectors(self, v_from, v_to) -> 'Quaternion':
        """Set to the rotation taking unit direction ``v_from`` onto unit
        direction ``v_to``."""

        fx, fy, fz = to_vec3(v_from)
        tx, ty, tz = to_vec3(v_to)
        r = fx * tx + fy * ty + fz * tz + 1
        if r < MACHINE_EPSILON:
            ## opposite directions: rotate half a turn about any perpendicular
            logger.debug('antiparallel unit vectors, choosing a perpendicular axis')
            r = 0.0
            if abs(fx) > abs(fz):
                self._x = -fy
                self._y = fx
                self._z = 0.0
            else:
                self._x = 0.0
                self._y = -fz
                self._z = fy
            self._w = r
        else:
            self._x = fy * tz - fz * ty
            self._y = fz * tx - fx * tz
            self._z = fx * ty - fy * tx
            self._w = r

        return self.normalize()

    def angle_to(self, q: 'Quaternion') -> float:
        return 2 * acos(abs(clamp(self.dot(q), -1, 1)))

    def rotate_towards(self, q: 'Quaternion', step: float) -> 'Quaternion':
        """Rotate by at most ``step`` radians towards ``q`` without
        overshooting it."""

        angle = self.angle_to(q)
        if angle == 0:
            return self
        t = min(1.0, step / angle)
        return self.slerp(q, t)

    def identity(self) -> 'Quaternion':
        return self.set(0.0, 0.0, 0.0, 1.0)

    def invert(self) -> 'Quaternion':
        ## assumes unit length
        return self.conjugate()

    def conjugate(self) -> 'Quaternion':
        self._x *= -1
        self._y *= -1
        self._z *= -1
        self._on_change_callback()
        return self

    def dot(self, v: 'Quaternion') -> float:
        return self._x * v.x + self._y * v.y + self._z * v.z + self._w * v.w

    def length_sq(self) -> float:
        return self._x * self._x + self._y * self._y + self._z * self._z + self._w * self._w

    def length(self) -> float:
        return sqrt(self.length_sq())

    def normalize(self) -> 'Quaternion':
        length = self.length()
        if length == 0:
            self._x = 0.0
            self._y = 0.0
            self._z = 0.0
            self._w = 1.0
        else:
            inv = 1 / length
            self._x *= inv
            self._y *= inv
            self._z *= inv
            self._w *= inv
        self._on_change_callback()
        return self

    def multiply(self, q: 'Quaternion') -> 'Quaternion':
        return self.multiply_quaternions(self, q)

    def premultiply(self, q: 'Quaternion') -> 'Quaternion':
        return self.multiply_quaternions(q, self)

    def multiply_quaternions(self, a: 'Quaternion', b: 'Quaternion') -> 'Quaternion':
        qax, qay, qaz, qaw = a.x, a.y, a.z, a.w
        qbx, qby, qbz, qbw = b.x, b.y, b.z, b.w

        self._x = qax * qbw + qaw * qbx + qay * qbz - qaz * qby
        self._y = qay * qbw + qaw * qby + qaz * qbx - qax * qbz
        self._z = qaz * qbw + qaw * qbz + qax * qby - qay * qbx
        self._w = qaw * qbw - qax * qbx - qay * qby - qaz * qbz

        self._on_change_callback()
        return self

    def slerp(self, qb: 'Quaternion', t: float) -> 'Quaternion':
        """Spherical linear interpolation from ``self`` (``t == 0``) to
        ``qb`` (``t == 1``) along the shorter arc."""

        if t == 0:
            return self
        if t == 1:
            return self.copy(qb)

        x, y, z, w = self._x, self._y, self._z, self._w

        cos_half_theta = w * qb.w + x * qb.x + y * qb.y + z * qb.z
        if cos_half_theta < 0:
            self._w = -qb.w
            self._x = -qb.x
            self._y = -qb.y
            self._z = -qb.z
            cos_half_theta = -cos_half_theta
        else:
            self._x, self._y, self._z, self._w = qb.x, qb.y, qb.z, qb.w

        if cos_half_theta >= 1.0:
            self._w = w
            self._x = x
            self._y = y
            self._z = z
            return self

        sqr_sin_half_theta = 1.0 - cos_half_theta * cos_half_theta
        if sqr_sin_half_theta <= MACHINE_EPSILON:
            s = 1 - t
            self._w = s * w + t * self._w
            self._x = s * x + t * self._x
            self._y = s * y + t * self._y
            self._z = s * z + t * self._z
            return self.normalize()

        sin_half_theta = sqrt(sqr_sin_half_theta)
        half_theta = atan2(sin_half_theta, cos_half_theta)
        ratio_a = sin((1 - t) * half_theta) / sin_half_theta
        ratio_b = sin(t * half_theta) / sin_half_theta

        self._w = w * ratio_a + self._w * ratio_b
        self._x = x * ratio_a + self._x * ratio_b
        self._y = y * ratio_a + self._y * ratio_b
        self._z = z * ratio_a + self._z * ratio_b

        self._on_change_callback()
        return self

    def slerp_quaternions(self, qa: 'Quaternion', qb: 'Quaternion', t: float) -> 'Quaternion':
        return self.copy(qa).slerp(qb, t)

    def random(self) -> 'Quaternion':
        """Set to a uniformly distributed random unit quaternion
        (Shoemake, Graphics Gems III)."""

        theta1 = 2 * pi * _random.random()
        theta2 = 2 * pi * _random.random()
        x0 = _random.random()
        r1 = sqrt(1 - x0)
        r2 = sqrt(x0)
        return self.set(r1 * sin(theta1), r1 * cos(theta1),
                        r2 * sin(theta2), r2 * cos(theta2))

    def equals(self, q: 'Quaternion') -> bool:
        return q.x == self._x and q.y == self._y and q.z == self._z and q.w == self._w

    def from_array(self, array: Sequence[float], offset: int = 0) -> 'Quaternion':
        self._x = array[offset]
        self._y = array[offset + 1]
        self._z = array[offset + 2]
        self._w = array[offset + 3]
        self._on_change_callback()
        return self

    def to_array(self, array: Optional[List[float]] = None, offset: int = 0) -> List[float]:
        if array is None:
            array = []
        if len(array) < offset + 4:
            array.extend([0.0] * (offset + 4 - len(array)))
        array[offset:offset + 4] = [self._x, self._y, self._z, self._w]
        return array

    def on_change(self, callback: Optional[Callable[[], None]]) -> 'Quaternion':
        """Register ``callback`` to run after every mutation; ``None``
        clears it."""

        self._on_change_callback = callback if callback is not None else _noop
        return self


__all__ = ['Quaternion']
