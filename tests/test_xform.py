import math

import numpy as np
import pytest

from cadkernel.errors import IllegalParametersError, IndexOutOfRangeError
from cadkernel.euler import Euler
from cadkernel.quaternion import Quaternion
from cadkernel.vector import Vector2, Vector3
from cadkernel.xform import Matrix3, Matrix4, rotation, scaling, translation

## unit tests for cadkernel xform.py

IDENTITY4 = Matrix4().elements


def _rows(m, n=4):
    return [m.get_row(i) for i in range(n)]


def _close(v, expected, tol=1e-9):
    assert list(v) == pytest.approx(list(expected), abs=tol)


class TestXform:
    """unit tests for cadkernel matrix operations"""

    def test_matrix(self):
        foo = Matrix4([1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15, 16])
        bar = Matrix4([[1, 0, 0, 1], [0, 1, 0, 1], [0, 0, 1, 1], [0, 0, 0, 1]])
        I = Matrix4()
        a = 10.0
        assert I.mul(bar).elements == bar.elements
        assert I.mul(foo).elements == foo.elements
        assert I.mul(I).elements == I.elements
        assert _rows(foo.mul(bar)) == [[1, 2, 3, 10], [5, 6, 7, 26], [9, 10, 11, 42], [13, 14, 15, 58]]
        assert foo.mul([1, 2, 3]) == [18, 46, 74, 102]
        assert _rows(foo.mul(a)) == [[10.0, 20.0, 30.0, 40.0],
                                     [50.0, 60.0, 70.0, 80.0],
                                     [90.0, 100.0, 110.0, 120.0],
                                     [130.0, 140.0, 150.0, 160.0]]
        assert I.mul([1, 2, 3, 1]) == [1, 2, 3, 1]
        ## homogeneous coordinates test
        _close(foo.mul(Vector3(1, 2, 3)), [18.0 / 102.0, 46.0 / 102.0, 74.0 / 102.0])

    def test_mul_rejects_junk(self):
        with pytest.raises(IllegalParametersError):
            Matrix4().mul('foo')
        with pytest.raises(IllegalParametersError):
            Matrix4().mul([1, 2])

    def test_column_major_storage(self):
        m = Matrix4(1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15, 16)
        assert m.elements[:4] == [1, 5, 9, 13]
        assert m.get(0, 1) == 2
        assert m[4] == 2
        assert m.get_column(3) == [4, 8, 12, 16]
        m.set_element(3, 3, 99)
        assert m.elements[15] == 99
        assert m.to_array() == m.elements
        assert Matrix4().from_array(m.to_array()).equals(m)

    def test_bad_indices_and_construction(self):
        m = Matrix4()
        with pytest.raises(IndexOutOfRangeError):
            m.element(16)
        with pytest.raises(IndexOutOfRangeError):
            m.get(4, 0)
        with pytest.raises(IndexOutOfRangeError):
            Matrix3().get_row(3)
        with pytest.raises(IllegalParametersError):
            Matrix4(1, 2, 3)
        with pytest.raises(IllegalParametersError):
            Matrix4(['a'] * 16)
        with pytest.raises(IllegalParametersError):
            Matrix3(1, 2, 3, 4)

    def test_multiply_order(self):
        ## a.multiply(b) applies b first
        m = Matrix4().make_translation(1, 0, 0).multiply(Matrix4().make_scale(2, 2, 2))
        _close(Vector3(1, 1, 1).apply_matrix4(m), [3, 2, 2])
        m = Matrix4().make_translation(1, 0, 0).premultiply(Matrix4().make_scale(2, 2, 2))
        _close(Vector3(1, 1, 1).apply_matrix4(m), [4, 2, 2])

    def test_determinant(self):
        assert Matrix4().make_scale(2, 3, 4).determinant() == 24
        assert Matrix4(1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15, 16).determinant() == 0
        assert Matrix3(2, 0, 0, 0, 4, 0, 0, 0, 1).determinant() == 8

    def test_invert_identity(self):
        q = Quaternion().set_from_axis_angle(Vector3(1, 2, 3).normalize(), 0.8)
        m = Matrix4().compose(Vector3(1, -2, 3), q, Vector3(2, 0.5, 3))
        m.set_element(3, 0, 0.1)
        assert abs(m.determinant()) > 1e-9
        product = m.clone().invert().multiply(m)
        assert product.elements == pytest.approx(IDENTITY4, abs=1e-6)

    def test_invert_singular_is_zero(self):
        m = Matrix4(1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15, 16).invert()
        assert m.elements == [0.0] * 16
        assert Matrix3(1, 2, 3, 2, 4, 6, 0, 0, 1).invert().elements == [0.0] * 9

    def test_matrix3_invert(self):
        m = Matrix3(2, 0, 0, 0, 4, 0, 0, 0, 1).invert()
        assert m.elements == [0.5, 0, 0, 0, 0.25, 0, 0, 0, 1]
        a = Matrix3(1, 2, 0, 0, 1, 3, 4, 0, 1)
        product = a.clone().invert().multiply(a)
        assert product.elements == pytest.approx(Matrix3().elements, abs=1e-12)

    def test_transpose(self):
        m = Matrix4(1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15, 16).transpose()
        assert m.get_row(0) == [1, 5, 9, 13]
        t = Matrix3(1, 2, 3, 4, 5, 6, 7, 8, 9).transpose()
        assert t.get_row(0) == [1, 4, 7]
        r = [0] * 9
        Matrix3(1, 2, 3, 4, 5, 6, 7, 8, 9).transpose_into_array(r)
        assert r == [1, 2, 3, 4, 5, 6, 7, 8, 9]

    def test_normal_matrix_of_rotation(self):
        r = Matrix4().make_rotation_axis(Vector3(1, 1, 0).normalize(), 0.7)
        n = Matrix3().get_normal_matrix(r)
        assert n.elements == pytest.approx(Matrix3().set_from_matrix4(r).elements, abs=1e-12)

    def test_normal_matrix_of_scale(self):
        n = Matrix3().get_normal_matrix(Matrix4().make_scale(2, 4, 1))
        assert n.elements == pytest.approx([0.5, 0, 0, 0, 0.25, 0, 0, 0, 1])

    def test_compose_decompose(self):
        pos = Vector3(1, -2, 3)
        q = Quaternion().set_from_axis_angle(Vector3(0, 1, 0), 0.5)
        scale = Vector3(2, 3, 4)
        m = Matrix4().compose(pos, q, scale)

        p2, q2, s2 = Vector3(), Quaternion(), Vector3()
        m.decompose(p2, q2, s2)
        _close(p2, pos)
        _close(q2, q)
        _close(s2, scale)

    def test_decompose_negative_determinant(self):
        q = Quaternion().set_from_axis_angle(Vector3(0, 0, 1), 0.3)
        m = Matrix4().compose(Vector3(), q, Vector3(-2, 3, 4))
        p2, q2, s2 = Vector3(), Quaternion(), Vector3()
        m.decompose(p2, q2, s2)
        _close(s2, [-2, 3, 4])
        _close(q2, q)

    def test_decompose_zero_scale(self):
        m = Matrix4().make_scale(0, 1, 1)
        s = Vector3()
        m.decompose(Vector3(), Quaternion(), s)
        assert list(s) == [0, 1, 1]

    def test_extract_rotation(self):
        q = Quaternion().set_from_axis_angle(Vector3(0, 0, 1), 0.4)
        m = Matrix4().compose(Vector3(5, 5, 5), q, Vector3(3, 3, 3))
        r = Matrix4().extract_rotation(m)
        expected = Matrix4().make_rotation_from_quaternion(q)
        assert r.elements == pytest.approx(expected.elements, abs=1e-12)

    def test_basis(self):
        m = Matrix4().make_basis(Vector3(0, 1, 0), Vector3(-1, 0, 0), Vector3(0, 0, 1))
        x, y, z = Vector3(), Vector3(), Vector3()
        m.extract_basis(x, y, z)
        assert list(x) == [0, 1, 0]
        assert list(y) == [-1, 0, 0]
        assert list(z) == [0, 0, 1]

    def test_elementary_rotations(self):
        _close(Vector3(0, 1, 0).apply_matrix4(Matrix4().make_rotation_x(math.pi / 2)), [0, 0, 1])
        _close(Vector3(0, 0, 1).apply_matrix4(Matrix4().make_rotation_y(math.pi / 2)), [1, 0, 0])
        _close(Vector3(1, 0, 0).apply_matrix4(Matrix4().make_rotation_z(math.pi / 2)), [0, 1, 0])
        _close(Vector3(1, 0, 0).apply_matrix4(Matrix4().make_rotation_from_euler(Euler(0, 0, math.pi / 2))),
               [0, 1, 0])

    def test_shear(self):
        m = Matrix4().make_shear(0, 0, 1, 0, 0, 0)
        _close(Vector3(0, 1, 0).apply_matrix4(m), [1, 1, 0])

    def test_max_scale_on_axis(self):
        assert Matrix4().make_scale(2, -5, 3).get_max_scale_on_axis() == 5

    def test_look_at(self):
        m = Matrix4().look_at(Vector3(0, 0, 5), Vector3(0, 0, 0), Vector3(0, 1, 0))
        assert m.elements == pytest.approx(IDENTITY4)
        ## eye straight above the target with up along z
        m = Matrix4().look_at(Vector3(0, 0, 5), Vector3(0, 0, 0), Vector3(0, 0, 1))
        assert all(math.isfinite(e) for e in m.elements)

    def test_projections(self):
        persp = Matrix4().make_perspective(-1, 1, 1, -1, 1, 3)
        assert Vector3(0, 0, -1).apply_matrix4(persp).z == pytest.approx(-1)
        assert Vector3(0, 0, -3).apply_matrix4(persp).z == pytest.approx(1)
        ortho = Matrix4().make_orthographic(-1, 1, 1, -1, 1, 3)
        assert Vector3(0, 0, -1).apply_matrix4(ortho).z == pytest.approx(-1)
        assert Vector3(0, 0, -3).apply_matrix4(ortho).z == pytest.approx(1)

    def test_numpy_interop(self):
        m = Matrix4(1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15, 16)
        a = m.to_numpy()
        assert a.shape == (4, 4)
        assert a[0, 1] == 2
        assert a[1, 0] == 5
        assert Matrix4.from_numpy(a).equals(m)
        v = a @ np.array([1, 2, 3, 1])
        assert v.tolist() == m.mul([1, 2, 3, 1])
        with pytest.raises(IllegalParametersError):
            Matrix4.from_numpy(np.zeros((3, 3)))


class TestMatrix3:
    """2D affine transforms"""

    def test_make_rotation_is_counterclockwise(self):
        _close(Vector2(1, 0).apply_matrix3(Matrix3().make_rotation(math.pi / 2)), [0, 1])

    def test_compose_transforms(self):
        m = Matrix3().scale(2, 3)
        _close(Vector2(1, 1).apply_matrix3(m), [2, 3])
        m = Matrix3().translate(1, 2)
        _close(Vector2(0, 0).apply_matrix3(m), [1, 2])
        m = Matrix3().make_translation(1, 0).scale(2, 2)
        _close(Vector2(0, 0).apply_matrix3(m), [2, 0])

    def test_set_from_matrix4_roundtrip(self):
        m3 = Matrix3(1, 2, 3, 4, 5, 6, 7, 8, 9)
        m4 = Matrix4().set_from_matrix3(m3)
        assert m4.get_row(3) == [0, 0, 0, 1]
        assert Matrix3().set_from_matrix4(m4).equals(m3)

    def test_uv_transform_identity(self):
        m = Matrix3().set_uv_transform(0, 0, 1, 1, 0, 0, 0)
        assert m.elements == pytest.approx(Matrix3().elements)


class TestHelpers:
    """degree-based convenience constructors"""

    def test_rotation(self):
        _close(rotation([0, 0, 1], 90).mul(Vector3(1, 0, 0)), [0, 1, 0])
        _close(rotation([0, 0, 1], 90, inverse=True).mul(Vector3(1, 0, 0)), [0, -1, 0])
        ## the axis need not be normalized
        _close(rotation([0, 0, 5], 180).mul(Vector3(1, 0, 0)), [-1, 0, 0])

    def test_zero_axis_rotation_is_identity(self):
        assert rotation([0, 0, 0], 45).equals(Matrix4())

    def test_translation(self):
        assert list(translation([1, 2, 3]).mul(Vector3(0, 0, 0))) == [1, 2, 3]
        assert list(translation(Vector3(1, 2, 3), inverse=True).mul(Vector3(1, 2, 3))) == [0, 0, 0]

    def test_scaling(self):
        assert list(scaling(2).mul(Vector3(1, 1, 1))) == [2, 2, 2]
        assert list(scaling(1, 2, 4, inverse=True).mul(Vector3(1, 1, 1))) == [1, 0.5, 0.25]
        assert list(scaling([1, 2, 3]).mul(Vector3(1, 1, 1))) == [1, 2, 3]
        with pytest.raises(IllegalParametersError):
            scaling('big')
