import math
from types import SimpleNamespace

import pytest

from cadkernel.errors import IllegalParametersError, IndexOutOfRangeError
from cadkernel.quaternion import Quaternion
from cadkernel.vector import Point2, Point3, Vector2, Vector3
from cadkernel.xform import Matrix3, Matrix4


def _close(v, expected, tol=1e-9):
    assert list(v) == pytest.approx(list(expected), abs=tol)


class TestVector3:
    """unit tests for Vector3"""

    def test_construction(self):
        assert list(Vector3()) == [0, 0, 0]
        assert list(Vector3(1, 2, 3)) == [1, 2, 3]
        assert list(Vector3([4, 5, 6])) == [4, 5, 6]
        assert list(Vector3(SimpleNamespace(x=1, y=2))) == [1, 2, 0]
        with pytest.raises(IllegalParametersError):
            Vector3(1, 2)
        with pytest.raises(IllegalParametersError):
            Vector3(1, 2, 3, 4)

    def test_components(self):
        v = Vector3(1, 2, 3)
        assert v.get_component(2) == 3
        assert v[1] == 2
        v.set_component(0, 9)
        assert v.x == 9
        with pytest.raises(IndexOutOfRangeError):
            v.get_component(3)
        with pytest.raises(IndexError):
            v.set_component(-1, 0)

    def test_fluent_mutation(self):
        v = Vector3(1, 2, 3)
        out = v.add([1, 1, 1]).multiply_scalar(2).sub(Vector3(0, 0, 8))
        assert out is v
        assert list(v) == [4, 6, 0]

    def test_clone_is_independent(self):
        a = Vector3(1, 2, 3)
        b = a.clone()
        b.x = 10
        assert a.x == 1

    def test_length_and_distance(self):
        assert Vector3(3, 4, 0).length() == 5
        assert Vector3(1, -2, 3).manhattan_length() == 6
        ## a line from (1,1,1) to (1,0,1) has length 1
        assert Vector3(1, 1, 1).distance_to([1, 0, 1]) == 1
        assert Vector3(0, 0, 0).manhattan_distance_to([1, 2, 3]) == 6

    def test_normalize_zero_vector(self):
        v = Vector3().normalize()
        assert list(v) == [0, 0, 0]
        _close(Vector3(0, 3, 4).normalize(), [0, 0.6, 0.8])

    def test_angle_to(self):
        assert Vector3(1, 0, 0).angle_to([0, 1, 0]) == pytest.approx(math.pi / 2)
        assert Vector3(1, 0, 0).angle_to([-1, 0, 0]) == pytest.approx(math.pi)
        assert Vector3().angle_to([1, 0, 0]) == math.pi / 2

    def test_cross_and_dot(self):
        assert list(Vector3(1, 0, 0).cross([0, 1, 0])) == [0, 0, 1]
        assert Vector3(1, 2, 3).dot([4, 5, 6]) == 32

    def test_is_parallel_to(self):
        v = Vector3(1, 0, 0)
        assert v.is_parallel_to([2, 0, 0])
        assert v.is_parallel_to([-3, 0, 0])
        assert not v.is_parallel_to([1, 1, 0])

    def test_projection(self):
        _close(Vector3(2, 3, 4).project_on_vector([0, 0, 5]), [0, 0, 4])
        assert list(Vector3(2, 3, 4).project_on_vector([0, 0, 0])) == [0, 0, 0]
        _close(Vector3(2, 3, 4).project_on_plane([0, 0, 1]), [2, 3, 0])
        _close(Vector3(1, -1, 0).reflect([0, 1, 0]), [1, 1, 0])

    def test_clamp_and_rounding(self):
        _close(Vector3(5, -5, 0.5).clamp([0, 0, 0], [1, 1, 1]), [1, 0, 0.5])
        _close(Vector3(3, 4, 0).clamp_length(0, 2.5), [1.5, 2.0, 0])
        assert list(Vector3(-1.5, 1.5, 2.4).round()) == [-1, 2, 2]
        assert list(Vector3(-1.7, 1.7, 0).round_to_zero()) == [-1, 1, 0]
        assert list(Vector3(-1.2, 1.2, 0).floor()) == [-2, 1, 0]
        assert list(Vector3(-1.2, 1.2, 0).ceil()) == [-1, 2, 0]

    def test_lerp(self):
        _close(Vector3(0, 0, 0).lerp([10, 20, 30], 0.5), [5, 10, 15])
        _close(Vector3().lerp_vectors([0, 0, 0], [2, 2, 2], 0.25), [0.5, 0.5, 0.5])

    def test_apply_matrix4_translates_points(self):
        m = Matrix4().make_translation(1, 2, 3)
        _close(Vector3(1, 1, 1).apply_matrix4(m), [2, 3, 4])
        ## directions ignore translation
        _close(Vector3(0, 0, 2).transform_direction(m), [0, 0, 1])

    def test_apply_matrix4_zero_w(self):
        ## the eye plane of a perspective projection maps to w = 0
        m = Matrix4().make_perspective(-1, 1, 1, -1, 1, 3)
        v = Vector3(1, 1, 0).apply_matrix4(m)
        assert list(v) == [math.inf, math.inf, -math.inf]
        ## the zero matrix returned for a singular inverse gives 0/0
        v = Vector3(1, 2, 3).apply_matrix4(Matrix4([0] * 16))
        assert all(math.isnan(c) for c in v)

    def test_apply_matrix3(self):
        m = Matrix3(0, -1, 0,
                    1, 0, 0,
                    0, 0, 1)
        _close(Vector3(1, 0, 0).apply_matrix3(m), [0, 1, 0])

    def test_apply_quaternion_and_axis_angle(self):
        q = Quaternion().set_from_axis_angle(Vector3(0, 0, 1), math.pi / 2)
        _close(Vector3(1, 0, 0).apply_quaternion(q), [0, 1, 0])
        _close(Vector3(0, 1, 0).apply_axis_angle(Vector3(1, 0, 0), math.pi / 2), [0, 0, 1])
        _close(Vector3(1, 0, 0).apply_axis_angle([0, 0, 1], math.pi / 2), [0, 1, 0])

    def test_matrix_extraction(self):
        m = Matrix4().make_scale(2, 3, 4).set_position(7, 8, 9)
        assert list(Vector3().set_from_matrix_position(m)) == [7, 8, 9]
        assert list(Vector3().set_from_matrix_scale(m)) == [2, 3, 4]
        assert list(Vector3().set_from_matrix_column(m, 1)) == [0, 3, 0]
        assert list(Vector3().set_from_matrix3_column(Matrix3(), 2)) == [0, 0, 1]
        with pytest.raises(IndexOutOfRangeError):
            Vector3().set_from_matrix_column(m, 4)

    def test_arrays(self):
        assert Vector3(1, 2, 3).to_array() == [1, 2, 3]
        assert Vector3(1, 2, 3).to_array([9, 9], 1) == [9, 1, 2, 3]
        assert list(Vector3().from_array([0, 5, 6, 7], 1)) == [5, 6, 7]

    def test_equality(self):
        assert Vector3(1, 2, 3) == Vector3(1, 2, 3)
        assert Vector3(1, 2, 3) != Vector3(1, 2, 4)
        assert Vector3(1, 2, 3).equals([1, 2, 3])

    def test_random_direction_is_unit(self):
        assert Vector3().random_direction().length() == pytest.approx(1.0)


class TestVector2:
    """unit tests for Vector2"""

    def test_construction(self):
        assert list(Vector2()) == [0, 0]
        assert list(Vector2([3, 4])) == [3, 4]
        assert list(Vector2(Vector3(1, 2, 3))) == [1, 2]
        with pytest.raises(IllegalParametersError):
            Vector2(1, 2, 3)
        with pytest.raises(IndexOutOfRangeError):
            Vector2().get_component(2)

    def test_width_height_aliases(self):
        v = Vector2(3, 4)
        assert v.width == 3 and v.height == 4
        v.width = 5
        assert v.x == 5

    def test_angle(self):
        assert Vector2(1, 0).angle() == pytest.approx(0.0)
        assert Vector2(0, 1).angle() == pytest.approx(math.pi / 2)
        assert Vector2(0, -1).angle() == pytest.approx(3 * math.pi / 2)

    def test_cross_is_scalar(self):
        assert Vector2(1, 0).cross([0, 1]) == 1
        assert Vector2(0, 1).cross([1, 0]) == -1

    def test_rotate_around(self):
        _close(Vector2(2, 1).rotate_around([1, 1], math.pi / 2), [1, 2])

    def test_apply_matrix3_is_affine(self):
        m = Matrix3().make_translation(3, 4)
        _close(Vector2(1, 1).apply_matrix3(m), [4, 5])
        _close(Vector2(1, 0).apply_matrix3(Matrix3().make_rotation(math.pi / 2)), [0, 1])

    def test_relative_eps(self):
        assert Vector2(0.5, 0.5).relative_eps() == pytest.approx(1e-7)
        assert Vector2(1234.0, 0.5).relative_eps() == pytest.approx(1e-7)
        assert Vector2(1234.0, 5678.0).relative_eps() == pytest.approx(1e-3)


def test_point_array_to_number_array():
    pts = [Point3(1, 2, 3), (4, 5, 6)]
    assert Point3.point_array_to_number_array(pts) == [1, 2, 3, 4, 5, 6]
    assert Point3.point_array_to_number_array(pts, include_z=False) == [1, 2, 4, 5]
    assert Point2.point_array_to_number_array([Point2(1, 2), Point2(3, 4)]) == [1, 2, 3, 4]


def test_points_are_vectors():
    p = Point3(1, 2, 3)
    assert isinstance(p, Vector3)
    assert isinstance(p.clone(), Point3)
