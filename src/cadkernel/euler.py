## Euler angle rotations for cadkernel

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

"""Euler angle rotations with an explicit axis order.

An :class:`Euler` holds three angles in radians plus the order in which
the rotations about the (intrinsic) axes are applied.  Extracting angles
from a matrix is unique except near gimbal lock, where the middle
angle reaches +/-90 degrees and the first and third axes coincide.  In
that case one of the two free angles is pinned to zero and the whole
remaining rotation is put on the other:

=====  ===============  ===========  ===================
order  middle angle     pinned to 0  remaining angle
=====  ===============  ===========  ===================
XYZ    y = asin(m13)    z            x = atan2(m32, m22)
YXZ    x = asin(-m23)   z            y = atan2(-m31, m11)
ZXY    x = asin(m32)    y            z = atan2(m21, m11)
ZYX    y = asin(-m31)   x            z = atan2(-m12, m22)
YZX    z = asin(m21)    x            y = atan2(m13, m33)
XZY    z = asin(-m12)   y            x = atan2(-m23, m33)
=====  ===============  ===========  ===================
"""

from __future__ import annotations

import enum
import logging
from math import asin, atan2
from typing import Callable, List, Optional, Sequence, Union

from cadkernel.constants import GIMBAL_LOCK_THRESHOLD
from cadkernel.errors import IllegalParametersError
from cadkernel.mathutil import clamp

logger = logging.getLogger(__name__)


class RotationOrder(str, enum.Enum):
    XYZ = 'XYZ'
    YXZ = 'YXZ'
    ZXY = 'ZXY'
    ZYX = 'ZYX'
    YZX = 'YZX'
    XZY = 'XZY'


DEFAULT_ORDER = RotationOrder.XYZ.value


def _check_order(order: Union[str, RotationOrder]) -> str:
    try:
        return RotationOrder(order).value
    except ValueError:
        raise IllegalParametersError('unknown rotation order: {!r}'.format(order)) from None


def _noop():
    pass


class Euler:
    """three rotation angles (radians) and the order they apply in"""

    DEFAULT_ORDER = DEFAULT_ORDER

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0,
                 order: Union[str, RotationOrder] = DEFAULT_ORDER):
        self._x = x
        self._y = y
        self._z = z
        self._order = _check_order(order)
        self._on_change_callback: Callable[[], None] = _noop

    def __repr__(self):
        return 'Euler({}, {}, {}, {!r})'.format(self._x, self._y, self._z, self._order)

    def __iter__(self):
        yield self._x
        yield self._y
        yield self._z
        yield self._order

    def __eq__(self, other):
        if not isinstance(other, Euler):
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
    def order(self) -> str:
        return self._order

    @order.setter
    def order(self, value: Union[str, RotationOrder]):
        self._order = _check_order(value)
        self._on_change_callback()

    def set(self, x: float, y: float, z: float,
            order: Optional[Union[str, RotationOrder]] = None) -> 'Euler':
        self._x = x
        self._y = y
        self._z = z
        if order is not None:
            self._order = _check_order(order)
        self._on_change_callback()
        return self

    def clone(self) -> 'Euler':
        return Euler(self._x, self._y, self._z, self._order)

    def copy(self, euler: 'Euler') -> 'Euler':
        return self.set(euler.x, euler.y, euler.z, euler.order)

    def set_from_rotation_matrix(self, m, order: Optional[Union[str, RotationOrder]] = None,
                                 update: bool = True) -> 'Euler':
        """Extract angles from the upper 3x3 of ``m``, assumed to be a
        pure (unscaled) rotation."""

        order = self._order if order is None else _check_order(order)

        te = m.elements
        m11, m12, m13 = te[0], te[4], te[8]
        m21, m22, m23 = te[1], te[5], te[9]
        m31, m32, m33 = te[2], te[6], te[10]

        if order == 'XYZ':
            self._y = asin(clamp(m13, -1, 1))
            if abs(m13) < GIMBAL_LOCK_THRESHOLD:
                self._x = atan2(-m23, m33)
                self._z = atan2(-m12, m11)
            else:
                self._x = atan2(m32, m22)
                self._z = 0.0
                logger.debug('gimbal lock extracting %s angles', order)

        elif order == 'YXZ':
            self._x = asin(-clamp(m23, -1, 1))
            if abs(m23) < GIMBAL_LOCK_THRESHOLD:
                self._y = atan2(m13, m33)
                self._z = atan2(m21, m22)
            else:
                self._y = atan2(-m31, m11)
                self._z = 0.0
                logger.debug('gimbal lock extracting %s angles', order)

        elif order == 'ZXY':
            self._x = asin(clamp(m32, -1, 1))
            if abs(m32) < GIMBAL_LOCK_THRESHOLD:
                self._y = atan2(-m31, m33)
                self._z = atan2(-m12, m22)
            else:
                self._y = 0.0
                self._z = atan2(m21, m11)
                logger.debug('gimbal lock extracting %s angles', order)

        elif order == 'ZYX':
            self._y = asin(-clamp(m31, -1, 1))
            if abs(m31) < GIMBAL_LOCK_THRESHOLD:
                self._x = atan2(m32, m33)
                self._z = atan2(m21, m11)
            else:
                self._x = 0.0
                self._z = atan2(-m12, m22)
                logger.debug('gimbal lock extracting %s angles', order)

        elif order == 'YZX':
            self._z = asin(clamp(m21, -1, 1))
            if abs(m21) < GIMBAL_LOCK_THRESHOLD:
                self._x = atan2(-m23, m22)
                self._y = atan2(-m31, m11)
            else:
                self._x = 0.0
                self._y = atan2(m13, m33)
                logger.debug('gimbal lock extracting %s angles', order)

        else:  # XZY
            self._z = asin(-clamp(m12, -1, 1))
            if abs(m12) < GIMBAL_LOCK_THRESHOLD:
                self._x = atan2(m32, m22)
                self._y = atan2(m13, m11)
            else:
                self._x = atan2(-m23, m33)
                self._y = 0.0
                logger.debug('gimbal lock extracting %s angles', order)

        self._order = order
        if update:
            self._on_change_callback()
        return self

    def set_from_quaternion(self, q, order: Optional[Union[str, RotationOrder]] = None,
                            update: bool = True) -> 'Euler':
        ## q is assumed to be normalized
        from cadkernel.xform import Matrix4
        m = Matrix4().make_rotation_from_quaternion(q)
        return self.set_from_rotation_matrix(m, order, update)

    def set_from_vector3(self, v, order: Optional[Union[str, RotationOrder]] = None) -> 'Euler':
        return self.set(v.x, v.y, v.z, order)

    def reorder(self, new_order: Union[str, RotationOrder]) -> 'Euler':
        """Re-express the same rotation in ``new_order``.

        Whole revolutions are not preserved.
        """

        from cadkernel.quaternion import Quaternion
        q = Quaternion().set_from_euler(self)
        return self.set_from_quaternion(q, new_order)

    def equals(self, euler: 'Euler') -> bool:
        return (euler.x == self._x and euler.y == self._y
                and euler.z == self._z and euler.order == self._order)

    def from_array(self, array: Sequence) -> 'Euler':
        """Set from ``[x, y, z]`` or ``[x, y, z, order]``."""

        self._x = array[0]
        self._y = array[1]
        self._z = array[2]
        if len(array) > 3 and array[3] is not None:
            self._order = _check_order(array[3])
        self._on_change_callback()
        return self

    def to_array(self, array: Optional[List] = None, offset: int = 0) -> List:
        if array is None:
            array = []
        if len(array) < offset + 4:
            array.extend([None] * (offset + 4 - len(array)))
        array[offset:offset + 4] = [self._x, self._y, self._z, self._order]
        return array

    def on_change(self, callback: Optional[Callable[[], None]]) -> 'Euler':
        self._on_change_callback = callback if callback is not None else _noop
        return self


__all__ = [
    'RotationOrder',
    'DEFAULT_ORDER',
    'Euler',
]
