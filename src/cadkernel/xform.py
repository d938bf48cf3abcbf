## matrix transforms for 2D and homogeneous 3D coordinates in cadkernel

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
from math import cos, pi, sin, sqrt

import numpy as np

from cadkernel.errors import IllegalParametersError, check_index
from cadkernel.geometry_utils import _isgoodnum, _issequence
from cadkernel.vector import Vector3

logger = logging.getLogger(__name__)

## Matrices are stored as a flat list of floats in column-major
## order, so that element (row, col) lives at elements[col*n + row].
## Constructors and ``set()`` take their arguments in row-major
## (reading) order.  Vectors are treated as column vectors, so
## ``a.multiply(b)`` computes a*b and transforms by b first.

## There are two classes defined here: Matrix3, used for 2D affine
## transforms and as the normal matrix of a 3D transform, and Matrix4,
## the homogeneous 3D transform.  They are deliberately not
## interchangeable.


def _check_numbers(values, what):
    for x in values:
        if not _isgoodnum(x):
            raise IllegalParametersError('bad element in {} initialization: {}'.format(what, x))
    return [float(x) for x in values]


def _flatten_rows(a, n, what):
    ## accept n*n numbers or n rows of n numbers, row-major
    if len(a) == n * n:
        return _check_numbers(a, what)
    if len(a) == n and all(_issequence(r) and len(r) == n for r in a):
        return _check_numbers([x for r in a for x in r], what)
    raise IllegalParametersError('bad thing used in attempt to initialize {}: {}'.format(what, a))


def _det3(a, b, c, d, e, f, g, h, i):
    ## determinant of the row-major 3x3 [[a,b,c],[d,e,f],[g,h,i]]
    return a * (e * i - f * h) - b * (d * i - f * g) + c * (d * h - e * g)


class Matrix3:
    """3x3 matrix for 2D affine transforms and 3D normal matrices"""

    def __init__(self, *args):
        self.elements = [1.0, 0.0, 0.0,
                         0.0, 1.0, 0.0,
                         0.0, 0.0, 1.0]
        if len(args) == 0:
            return
        if len(args) == 1 and isinstance(args[0], Matrix3):
            self.copy(args[0])
        elif len(args) == 1 and _issequence(args[0]):
            self.set(*_flatten_rows(args[0], 3, 'Matrix3'))
        elif len(args) == 9:
            self.set(*_check_numbers(args, 'Matrix3'))
        else:
            raise IllegalParametersError('Matrix3 takes 0 or 9 values, got {}'.format(len(args)))

    def __repr__(self):
        return "Matrix3({},{},{})".format(self.get_row(0), self.get_row(1), self.get_row(2))

    def __getitem__(self, i):
        return self.element(i)

    def __eq__(self, other):
        if not isinstance(other, Matrix3):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def set(self, n11, n12, n13, n21, n22, n23, n31, n32, n33):
        te = self.elements
        te[0] = n11
        te[1] = n21
        te[2] = n31
        te[3] = n12
        te[4] = n22
        te[5] = n32
        te[6] = n13
        te[7] = n23
        te[8] = n33
        return self

    def identity(self):
        return self.set(1, 0, 0,
                        0, 1, 0,
                        0, 0, 1)

    def copy(self, m):
        self.elements[:] = m.elements
        return self

    def clone(self):
        return Matrix3().from_array(self.elements)

    #return flat element i (column-major)
    def element(self, i):
        check_index(i, 9)
        return self.elements[i]

    #return value indexed by row, col
    def get(self, row, col):
        check_index(row, 3)
        check_index(col, 3)
        return self.elements[col * 3 + row]

    def get_row(self, i):
        check_index(i, 3)
        return [self.elements[i], self.elements[i + 3], self.elements[i + 6]]

    def get_column(self, j):
        check_index(j, 3)
        return self.elements[j * 3:j * 3 + 3]

    def extract_basis(self, x_axis, y_axis, z_axis):
        x_axis.set_from_matrix3_column(self, 0)
        y_axis.set_from_matrix3_column(self, 1)
        z_axis.set_from_matrix3_column(self, 2)
        return self

    def set_from_matrix4(self, m):
        me = m.elements
        return self.set(me[0], me[4], me[8],
                        me[1], me[5], me[9],
                        me[2], me[6], me[10])

    def multiply(self, m):
        return self.multiply_matrices(self, m)

    def premultiply(self, m):
        return self.multiply_matrices(m, self)

    def multiply_matrices(self, a, b):
        ae = list(a.elements)
        be = list(b.elements)
        te = self.elements
        for row in range(3):
            for col in range(3):
                te[col * 3 + row] = sum(ae[k * 3 + row] * be[col * 3 + k] for k in range(3))
        return self

    def multiply_scalar(self, s):
        self.elements[:] = [x * s for x in self.elements]
        return self

    def determinant(self):
        te = self.elements
        return _det3(te[0], te[3], te[6],
                     te[1], te[4], te[7],
                     te[2], te[5], te[8])

    def invert(self):
        """Invert in place; a singular matrix becomes all zeros."""

        te = self.elements
        n11, n21, n31 = te[0], te[1], te[2]
        n12, n22, n32 = te[3], te[4], te[5]
        n13, n23, n33 = te[6], te[7], te[8]

        t11 = n33 * n22 - n32 * n23
        t12 = n32 * n13 - n33 * n12
        t13 = n23 * n12 - n22 * n13

        det = n11 * t11 + n21 * t12 + n31 * t13
        if det == 0:
            logger.debug('inverting singular Matrix3, result zeroed')
            return self.set(0, 0, 0, 0, 0, 0, 0, 0, 0)

        inv = 1.0 / det
        te[0] = t11 * inv
        te[1] = (n31 * n23 - n33 * n21) * inv
        te[2] = (n32 * n21 - n31 * n22) * inv
        te[3] = t12 * inv
        te[4] = (n33 * n11 - n31 * n13) * inv
        te[5] = (n31 * n12 - n32 * n11) * inv
        te[6] = t13 * inv
        te[7] = (n21 * n13 - n23 * n11) * inv
        te[8] = (n22 * n11 - n21 * n12) * inv
        return self

    def transpose(self):
        te = self.elements
        te[1], te[3] = te[3], te[1]
        te[2], te[6] = te[6], te[2]
        te[5], te[7] = te[7], te[5]
        return self

    def get_normal_matrix(self, matrix4):
        """Set to the inverse transpose of the upper 3x3 of ``matrix4``."""
        return self.set_from_matrix4(matrix4).invert().transpose()

    def transpose_into_array(self, r):
        m = self.elements
        r[0] = m[0]
        r[1] = m[3]
        r[2] = m[6]
        r[3] = m[1]
        r[4] = m[4]
        r[5] = m[7]
        r[6] = m[2]
        r[7] = m[5]
        r[8] = m[8]
        return self

    def set_uv_transform(self, tx, ty, sx, sy, rotation, cx, cy):
        c = cos(rotation)
        s = sin(rotation)
        return self.set(sx * c, sx * s, -sx * (c * cx + s * cy) + cx + tx,
                        -sy * s, sy * c, -sy * (-s * cx + c * cy) + cy + ty,
                        0, 0, 1)

    ## the following three compose onto the existing transform

    def scale(self, sx, sy):
        return self.premultiply(Matrix3().make_scale(sx, sy))

    def rotate(self, theta):
        return self.premultiply(Matrix3().make_rotation(-theta))

    def translate(self, tx, ty):
        return self.premultiply(Matrix3().make_translation(tx, ty))

    def make_translation(self, x, y=None):
        if y is None:
            x, y = x.x, x.y
        return self.set(1, 0, x,
                        0, 1, y,
                        0, 0, 1)

    def make_rotation(self, theta):
        ## counter-clockwise, radians
        c = cos(theta)
        s = sin(theta)
        return self.set(c, -s, 0,
                        s, c, 0,
                        0, 0, 1)

    def make_scale(self, x, y):
        return self.set(x, 0, 0,
                        0, y, 0,
                        0, 0, 1)

    def equals(self, matrix):
        return self.elements == list(matrix.elements)

    def from_array(self, array, offset=0):
        self.elements[:] = [array[i + offset] for i in range(9)]
        return self

    def to_array(self, array=None, offset=0):
        if array is None:
            array = []
        if len(array) < offset + 9:
            array.extend([0.0] * (offset + 9 - len(array)))
        array[offset:offset + 9] = self.elements
        return array


class Matrix4:
    """4x4 transformation matrix class for transforming homogeneous 3D coordinates"""

    def __init__(self, *args):
        self.elements = [1.0, 0.0, 0.0, 0.0,
                         0.0, 1.0, 0.0, 0.0,
                         0.0, 0.0, 1.0, 0.0,
                         0.0, 0.0, 0.0, 1.0]
        if len(args) == 0:
            return
        if len(args) == 1 and isinstance(args[0], Matrix4):
            self.copy(args[0])
        elif len(args) == 1 and _issequence(args[0]):
            self.set(*_flatten_rows(args[0], 4, 'Matrix4'))
        elif len(args) == 16:
            self.set(*_check_numbers(args, 'Matrix4'))
        else:
            raise IllegalParametersError('Matrix4 takes 0 or 16 values, got {}'.format(len(args)))

    def __repr__(self):
        return "Matrix4({},{},{},{})".format(self.get_row(0), self.get_row(1),
                                             self.get_row(2), self.get_row(3))

    def __getitem__(self, i):
        return self.element(i)

    def __eq__(self, other):
        if not isinstance(other, Matrix4):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def set(self, n11, n12, n13, n14, n21, n22, n23, n24,
            n31, n32, n33, n34, n41, n42, n43, n44):
        te = self.elements
        te[0] = n11
        te[4] = n12
        te[8] = n13
        te[12] = n14
        te[1] = n21
        te[5] = n22
        te[9] = n23
        te[13] = n24
        te[2] = n31
        te[6] = n32
        te[10] = n33
        te[14] = n34
        te[3] = n41
        te[7] = n42
        te[11] = n43
        te[15] = n44
        return self

    def identity(self):
        return self.set(1, 0, 0, 0,
                        0, 1, 0, 0,
                        0, 0, 1, 0,
                        0, 0, 0, 1)

    def clone(self):
        return Matrix4().from_array(self.elements)

    def copy(self, m):
        self.elements[:] = m.elements
        return self

    def copy_position(self, m):
        te = self.elements
        me = m.elements
        te[12] = me[12]
        te[13] = me[13]
        te[14] = me[14]
        return self

    def set_from_matrix3(self, m):
        me = m.elements
        return self.set(me[0], me[3], me[6], 0,
                        me[1], me[4], me[7], 0,
                        me[2], me[5], me[8], 0,
                        0, 0, 0, 1)

    #return flat element i (column-major)
    def element(self, i):
        check_index(i, 16)
        return self.elements[i]

    #return value indexed by row, col
    def get(self, row, col):
        check_index(row, 4)
        check_index(col, 4)
        return self.elements[col * 4 + row]

    #set value indexed by row, col
    def set_element(self, row, col, x):
        check_index(row, 4)
        check_index(col, 4)
        if not _isgoodnum(x):
            raise IllegalParametersError('bad value passed to set_element: {}'.format(x))
        self.elements[col * 4 + row] = x
        return self

    def get_row(self, i):
        check_index(i, 4)
        te = self.elements
        return [te[i], te[i + 4], te[i + 8], te[i + 12]]

    def get_column(self, j):
        check_index(j, 4)
        return self.elements[j * 4:j * 4 + 4]

    def extract_basis(self, x_axis, y_axis, z_axis):
        x_axis.set_from_matrix_column(self, 0)
        y_axis.set_from_matrix_column(self, 1)
        z_axis.set_from_matrix_column(self, 2)
        return self

    def make_basis(self, x_axis, y_axis, z_axis):
        return self.set(x_axis.x, y_axis.x, z_axis.x, 0,
                        x_axis.y, y_axis.y, z_axis.y, 0,
                        x_axis.z, y_axis.z, z_axis.z, 0,
                        0, 0, 0, 1)

    def extract_rotation(self, m):
        """Set to the rotation part of ``m``, with column scale removed."""

        te = self.elements
        me = list(m.elements)
        v = Vector3()
        lengths = [v.set_from_matrix_column(m, col).length() for col in range(3)]
        for col, length in enumerate(lengths):
            s = 1.0 / length if length != 0 else 0.0
            te[col * 4] = me[col * 4] * s
            te[col * 4 + 1] = me[col * 4 + 1] * s
            te[col * 4 + 2] = me[col * 4 + 2] * s
            te[col * 4 + 3] = 0.0
        te[12] = 0.0
        te[13] = 0.0
        te[14] = 0.0
        te[15] = 1.0
        return self

    def make_rotation_from_euler(self, euler):
        from cadkernel.quaternion import Quaternion
        return self.make_rotation_from_quaternion(Quaternion().set_from_euler(euler))

    def make_rotation_from_quaternion(self, q):
        return self.compose(Vector3(0, 0, 0), q, Vector3(1, 1, 1))

    def look_at(self, eye, target, up):
        """Set the rotation part so that local +z points from ``target``
        towards ``eye`` with ``up`` as the approximate y axis."""

        te = self.elements
        up = Vector3(up)
        z = Vector3().sub_vectors(eye, target)
        if z.length_sq() == 0:
            ## eye and target are in the same position
            z.z = 1
        z.normalize()
        x = Vector3().cross_vectors(up, z)
        if x.length_sq() == 0:
            ## up and z are parallel
            if abs(up.z) == 1:
                z.x += 0.0001
            else:
                z.z += 0.0001
            z.normalize()
            x.cross_vectors(up, z)
        x.normalize()
        y = Vector3().cross_vectors(z, x)

        te[0] = x.x
        te[4] = y.x
        te[8] = z.x
        te[1] = x.y
        te[5] = y.y
        te[9] = z.y
        te[2] = x.z
        te[6] = y.z
        te[10] = z.z
        return self

    def multiply(self, m):
        return self.multiply_matrices(self, m)

    def premultiply(self, m):
        return self.multiply_matrices(m, self)

    def multiply_matrices(self, a, b):
        ae = list(a.elements)
        be = list(b.elements)
        te = self.elements
        for row in range(4):
            for col in range(4):
                te[col * 4 + row] = sum(ae[k * 4 + row] * be[col * 4 + k] for k in range(4))
        return self

    def multiply_scalar(self, s):
        self.elements[:] = [x * s for x in self.elements]
        return self

    def _cofactor(self, row, col):
        ## signed determinant of the 3x3 minor
        rows = [r for r in range(4) if r != row]
        cols = [c for c in range(4) if c != col]
        te = self.elements
        minor = [te[c * 4 + r] for r in rows for c in cols]
        sign = -1.0 if (row + col) % 2 else 1.0
        return sign * _det3(*minor)

    def determinant(self):
        te = self.elements
        return sum(te[col * 4] * self._cofactor(0, col) for col in range(4))

    def transpose(self):
        te = self.elements
        for row in range(4):
            for col in range(row + 1, 4):
                i = col * 4 + row
                j = row * 4 + col
                te[i], te[j] = te[j], te[i]
        return self

    def set_position(self, x, y=None, z=None):
        te = self.elements
        if y is None:
            x, y, z = Vector3(x)
        te[12] = x
        te[13] = y
        te[14] = z
        return self

    def invert(self):
        """Invert in place using the adjugate; a singular matrix becomes
        all zeros."""

        cof = [[self._cofactor(r, c) for c in range(4)] for r in range(4)]
        te = self.elements
        det = sum(te[col * 4] * cof[0][col] for col in range(4))
        if det == 0:
            logger.debug('inverting singular Matrix4, result zeroed')
            self.elements[:] = [0.0] * 16
            return self

        inv = 1.0 / det
        ## inverse(row, col) = cofactor(col, row) / det
        for row in range(4):
            for col in range(4):
                te[col * 4 + row] = cof[col][row] * inv
        return self

    def scale(self, v):
        x, y, z = Vector3(v)
        te = self.elements
        for i in range(4):
            te[i] *= x
            te[i + 4] *= y
            te[i + 8] *= z
        return self

    def get_max_scale_on_axis(self):
        te = self.elements
        sx = te[0] * te[0] + te[1] * te[1] + te[2] * te[2]
        sy = te[4] * te[4] + te[5] * te[5] + te[6] * te[6]
        sz = te[8] * te[8] + te[9] * te[9] + te[10] * te[10]
        return sqrt(max(sx, sy, sz))

    def make_translation(self, x, y=None, z=None):
        if y is None:
            x, y, z = Vector3(x)
        return self.set(1, 0, 0, x,
                        0, 1, 0, y,
                        0, 0, 1, z,
                        0, 0, 0, 1)

    def make_rotation_x(self, theta):
        c = cos(theta)
        s = sin(theta)
        return self.set(1, 0, 0, 0,
                        0, c, -s, 0,
                        0, s, c, 0,
                        0, 0, 0, 1)

    def make_rotation_y(self, theta):
        c = cos(theta)
        s = sin(theta)
        return self.set(c, 0, s, 0,
                        0, 1, 0, 0,
                        -s, 0, c, 0,
                        0, 0, 0, 1)

    def make_rotation_z(self, theta):
        c = cos(theta)
        s = sin(theta)
        return self.set(c, -s, 0, 0,
                        s, c, 0, 0,
                        0, 0, 1, 0,
                        0, 0, 0, 1)

    def make_rotation_axis(self, axis, angle):
        """Rotation by ``angle`` radians about the unit vector ``axis``."""

        # see http://www.gamedev.net/reference/articles/article1199.asp
        c = cos(angle)
        s = sin(angle)
        t = 1 - c
        x, y, z = Vector3(axis)
        tx = t * x
        ty = t * y
        return self.set(tx * x + c, tx * y - s * z, tx * z + s * y, 0,
                        tx * y + s * z, ty * y + c, ty * z - s * x, 0,
                        tx * z - s * y, ty * z + s * x, t * z * z + c, 0,
                        0, 0, 0, 1)

    def make_scale(self, x, y, z):
        return self.set(x, 0, 0, 0,
                        0, y, 0, 0,
                        0, 0, z, 0,
                        0, 0, 0, 1)

    def make_shear(self, xy, xz, yx, yz, zx, zy):
        return self.set(1, yx, zx, 0,
                        xy, 1, zy, 0,
                        xz, yz, 1, 0,
                        0, 0, 0, 1)

    def compose(self, position, quaternion, scale):
        """Set to translate(position) * rotate(quaternion) * scale(scale)."""

        te = self.elements
        x, y, z, w = quaternion.x, quaternion.y, quaternion.z, quaternion.w
        x2 = x + x
        y2 = y + y
        z2 = z + z
        xx = x * x2
        xy = x * y2
        xz = x * z2
        yy = y * y2
        yz = y * z2
        zz = z * z2
        wx = w * x2
        wy = w * y2
        wz = w * z2
        sx, sy, sz = Vector3(scale)
        px, py, pz = Vector3(position)

        te[0] = (1 - (yy + zz)) * sx
        te[1] = (xy + wz) * sx
        te[2] = (xz - wy) * sx
        te[3] = 0.0

        te[4] = (xy - wz) * sy
        te[5] = (1 - (xx + zz)) * sy
        te[6] = (yz + wx) * sy
        te[7] = 0.0

        te[8] = (xz + wy) * sz
        te[9] = (yz - wx) * sz
        te[10] = (1 - (xx + yy)) * sz
        te[11] = 0.0

        te[12] = px
        te[13] = py
        te[14] = pz
        te[15] = 1.0
        return self

    def decompose(self, position, quaternion, scale):
        """Split into translation, rotation and scale, writing the parts
        into ``position``, ``quaternion`` and ``scale``.

        A negative determinant is attributed to the x axis.  Axes with
        zero scale are left undivided in the rotation part.
        """

        te = self.elements
        v = Vector3()
        sx = v.set(te[0], te[1], te[2]).length()
        sy = v.set(te[4], te[5], te[6]).length()
        sz = v.set(te[8], te[9], te[10]).length()

        if self.determinant() < 0:
            sx = -sx

        position.x = te[12]
        position.y = te[13]
        position.z = te[14]

        m = self.clone()
        me = m.elements
        for col, s in enumerate((sx, sy, sz)):
            if s == 0:
                continue
            inv = 1.0 / s
            me[col * 4] *= inv
            me[col * 4 + 1] *= inv
            me[col * 4 + 2] *= inv

        quaternion.set_from_rotation_matrix(m)

        scale.x = sx
        scale.y = sy
        scale.z = sz
        return self

    def make_perspective(self, left, right, top, bottom, near, far):
        te = self.elements
        x = 2 * near / (right - left)
        y = 2 * near / (top - bottom)
        a = (right + left) / (right - left)
        b = (top + bottom) / (top - bottom)
        c = -(far + near) / (far - near)
        d = -2 * far * near / (far - near)
        return self.set(x, 0, a, 0,
                        0, y, b, 0,
                        0, 0, c, d,
                        0, 0, -1, 0)

    def make_orthographic(self, left, right, top, bottom, near, far):
        w = 1.0 / (right - left)
        h = 1.0 / (top - bottom)
        p = 1.0 / (far - near)
        x = (right + left) * w
        y = (top + bottom) * h
        z = (far + near) * p
        return self.set(2 * w, 0, 0, -x,
                        0, 2 * h, 0, -y,
                        0, 0, -2 * p, -z,
                        0, 0, 0, 1)

    def equals(self, matrix):
        return self.elements == list(matrix.elements)

    def from_array(self, array, offset=0):
        self.elements[:] = [array[i + offset] for i in range(16)]
        return self

    def to_array(self, array=None, offset=0):
        if array is None:
            array = []
        if len(array) < offset + 16:
            array.extend([0.0] * (offset + 16 - len(array)))
        array[offset:offset + 16] = self.elements
        return array

    # matrix multiply.  If x is a matrix, compute MX.  If x is a
    # Vector3, transform it as a point (with the projective divide).
    # If x is a 3- or 4-element sequence, compute Mx as a list, with
    # w = 1 assumed for 3 elements.  If x is a scalar, compute xM.
    # Returns a new value in every case.

    def mul(self, x):
        if isinstance(x, Matrix4):
            return Matrix4().multiply_matrices(self, x)
        elif isinstance(x, Vector3):
            return x.clone().apply_matrix4(self)
        elif _isgoodnum(x):
            return self.clone().multiply_scalar(x)
        elif _issequence(x) and len(x) in (3, 4):
            v = list(_check_numbers(x, 'vector'))
            if len(v) == 3:
                v.append(1.0)
            return [sum(self.get(i, k) * v[k] for k in range(4)) for i in range(4)]

        raise IllegalParametersError('bad thing passed to mul(): {}'.format(x))

    def to_numpy(self):
        """Return the matrix as a row-major 4x4 ``numpy.ndarray``."""
        return np.array(self.elements, dtype=float).reshape(4, 4).T

    @staticmethod
    def from_numpy(a):
        a = np.asarray(a, dtype=float)
        if a.shape != (4, 4):
            raise IllegalParametersError('expected a 4x4 array, got shape {}'.format(a.shape))
        return Matrix4().from_array(a.T.ravel().tolist())


# return the generalized 4x4 arbitrary axis rotation matrix; angle is
# in degrees, positive counter-clockwise looking down the axis
def rotation(axis, angle, inverse=False):
    u = Vector3(axis)
    m = u.length()
    if m < 1e-12:
        logger.debug('zero-length rotation axis, returning identity')
        return Matrix4()
    u.divide_scalar(m)

    if inverse:
        angle *= -1.0
    rad = (angle % 360.0) * 2.0 * pi / 360.0
    return Matrix4().make_rotation_axis(u, rad)


def translation(delta, inverse=False):
    d = Vector3(delta)
    if inverse:
        d.negate()
    return Matrix4().make_translation(d.x, d.y, d.z)


def scaling(x, y=None, z=None, inverse=False):
    if _isgoodnum(x):
        sx = x
        if _isgoodnum(y) and _isgoodnum(z):
            sy = y
            sz = z
        else:
            sy = sz = x
    elif _issequence(x) or hasattr(x, 'x'):
        sx, sy, sz = Vector3(x)
    else:
        raise IllegalParametersError('bad scaling values passed to scaling(): {}'.format(x))

    if inverse:
        sx = 1.0 / sx
        sy = 1.0 / sy
        sz = 1.0 / sz
    return Matrix4().make_scale(sx, sy, sz)


__all__ = [
    'Matrix3',
    'Matrix4',
    'rotation',
    'translation',
    'scaling',
]
