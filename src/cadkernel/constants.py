## numeric constants and tolerances for cadkernel

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

"""Numeric constants and tolerances for cadkernel.

These are module level "constants" in the same sense as the ``epsilon``
of older geometry code: callers may read them freely, redefine them at
their peril.  Functions that depend on a tolerance take it as a keyword
default so a single call can override it without touching module state.
"""

from __future__ import annotations

from math import pi

## floating point comparison tolerance
FLOAT_TOL = 0.000001

## full turn
TAU = 2.0 * pi

DEG2RAD = pi / 180.0
RAD2DEG = 180.0 / pi

## smallest double increment above 1.0
MACHINE_EPSILON = 2.220446049250313e-16

## knot spans at or below this width contribute nothing to a basis
## function; weight sums below it are treated as zero
KNOT_EPSILON = 1e-10

## curve parameters within this distance of a domain end evaluate to
## the corresponding end control point
PARAM_EPSILON = 1e-8

## fixed resolution of the polyline curve length estimate
CURVE_LENGTH_SEGMENTS = 1000

## |sin| of the middle Euler angle at or above which the first and
## third angles are no longer independent
GIMBAL_LOCK_THRESHOLD = 0.9999999

ORIGIN_POINT_2D = (0.0, 0.0)
ORIGIN_POINT_3D = (0.0, 0.0, 0.0)


class Tolerance:
    """Tolerance values used to compare points, vectors and scalars.

    Two points ``p1`` and ``p2`` are equal when
    ``(p1 - p2).length() < equal_point_tol``.  ``equal_vector_tol`` is
    the matching value for direction comparisons.
    """

    def __init__(self, equal_point_tol: float = FLOAT_TOL,
                 equal_vector_tol: float = FLOAT_TOL):
        self.equal_point_tol = equal_point_tol
        self.equal_vector_tol = equal_vector_tol

    def __repr__(self):
        return 'Tolerance({},{})'.format(self.equal_point_tol, self.equal_vector_tol)

    def equal_point_2d(self, p1, p2) -> bool:
        """Return ``True`` if two 2D points coincide within tolerance."""
        from cadkernel.vector import Vector2
        return Vector2(p1).sub(p2).length() < self.equal_point_tol

    def equal_point_3d(self, p1, p2) -> bool:
        """Return ``True`` if two 3D points coincide within tolerance."""
        from cadkernel.vector import Vector3
        return Vector3(p1).sub(p2).length() < self.equal_point_tol

    @staticmethod
    def equal_to_zero(x: float, tol: float = FLOAT_TOL) -> bool:
        return -tol < x < tol

    @staticmethod
    def equal(value1: float, value2: float, tol: float = FLOAT_TOL) -> bool:
        return abs(value1 - value2) < tol

    @staticmethod
    def great(value1: float, value2: float, tol: float = FLOAT_TOL) -> bool:
        """``value1`` exceeds ``value2`` by more than ``tol``."""
        return value1 - value2 > tol

    @staticmethod
    def less(value1: float, value2: float, tol: float = FLOAT_TOL) -> bool:
        return value1 - value2 < tol


## shared default; treat as read-only
DEFAULT_TOL = Tolerance()


__all__ = [
    'FLOAT_TOL',
    'TAU',
    'DEG2RAD',
    'RAD2DEG',
    'MACHINE_EPSILON',
    'KNOT_EPSILON',
    'PARAM_EPSILON',
    'CURVE_LENGTH_SEGMENTS',
    'GIMBAL_LOCK_THRESHOLD',
    'ORIGIN_POINT_2D',
    'ORIGIN_POINT_3D',
    'Tolerance',
    'DEFAULT_TOL',
]
