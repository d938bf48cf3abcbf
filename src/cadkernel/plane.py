## infinite planes in Hessian normal form for cadkernel

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

import logging

from cadkernel.vector import Vector3

logger = logging.getLogger(__name__)

## An infinite plane in Hessian normal form: the set of points p with
## normal . p + constant == 0.  The normal is assumed to be of unit
## length; distances are signed, positive on the side the normal
## points to.


class Plane:
    """infinite plane ``normal . p + constant == 0``"""

    def __init__(self, normal=None, constant=0.0):
        self.normal = Vector3(1, 0, 0) if normal is None else Vector3(normal)
        self.constant = constant

    def __repr__(self):
        return "Plane({},{})".format(self.normal, self.constant)

    def __eq__(self, other):
        if not isinstance(other, Plane):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def set(self, normal, constant):
        self.normal.copy(normal)
        self.constant = constant
        return self

    def set_components(self, x, y, z, w):
        self.normal.set(x, y, z)
        self.constant = w
        return self

    def set_from_normal_and_coplanar_point(self, normal, point):
        self.normal.copy(normal)
        self.constant = -self.normal.dot(point)
        return self

    def set_from_coplanar_points(self, a, b, c):
        """Plane through three points, wound counter-clockwise about the
        normal.  Collinear points give a zero normal."""

        normal = Vector3().sub_vectors(c, b).cross(Vector3().sub_vectors(a, b)).normalize()
        if normal.length_sq() == 0:
            logger.debug('degenerate plane from collinear points')
        return self.set_from_normal_and_coplanar_point(normal, a)

    def copy(self, plane):
        self.normal.copy(plane.normal)
        self.constant = plane.constant
        return self

    def clone(self):
        return Plane().copy(self)

    def normalize(self):
        ## rescale so that the normal has unit length; a zero normal
        ## leaves the plane unchanged
        inverse_normal_length = 1.0 / (self.normal.length() or 1.0)
        self.normal.multiply_scalar(inverse_normal_length)
        self.constant *= inverse_normal_length
        return self

    def negate(self):
        self.constant *= -1
        self.normal.negate()
        return self

    def distance_to_point(self, point):
        return self.normal.dot(point) + self.constant

    def project_point(self, point, target=None):
        """return the orthogonal projection of ``point`` onto the plane"""
        if target is None:
            target = Vector3()
        return target.copy(point).add_scaled_vector(self.normal, -self.distance_to_point(point))

    def intersects_box(self, box):
        return box.intersects_plane(self)

    def coplanar_point(self, target=None):
        if target is None:
            target = Vector3()
        return target.copy(self.normal).multiply_scalar(-self.constant)

    def apply_matrix4(self, matrix, normal_matrix=None):
        """Transform the plane by ``matrix``.  Pass ``normal_matrix`` when
        the inverse transpose is already at hand."""

        if normal_matrix is None:
            from cadkernel.xform import Matrix3
            normal_matrix = Matrix3().get_normal_matrix(matrix)
        reference_point = self.coplanar_point().apply_matrix4(matrix)
        normal = self.normal.apply_matrix3(normal_matrix).normalize()
        self.constant = -reference_point.dot(normal)
        return self

    def translate(self, offset):
        self.constant -= self.normal.dot(offset)
        return self

    def equals(self, plane):
        return plane.normal.equals(self.normal) and plane.constant == self.constant


__all__ = ['Plane']
