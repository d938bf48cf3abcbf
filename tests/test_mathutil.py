import math

import pytest

from cadkernel import mathutil as mu
from cadkernel.constants import DEFAULT_TOL, FLOAT_TOL, Tolerance
from cadkernel.errors import IllegalParametersError, IndexOutOfRangeError, check_index
from cadkernel.vector import Vector3


def test_clamp_and_modulo():
    assert mu.clamp(5, 0, 1) == 1
    assert mu.clamp(-5, 0, 1) == 0
    assert mu.euclidean_modulo(-1, 3) == 2
    assert mu.pingpong(1.5) == pytest.approx(0.5)


def test_interpolation_helpers():
    assert mu.map_linear(5, 0, 10, 100, 200) == 150
    assert mu.inverse_lerp(2, 4, 3) == 0.5
    assert mu.inverse_lerp(2, 2, 3) == 0
    assert mu.lerp(0, 10, 0.25) == 2.5
    assert mu.damp(0, 10, 1, 0) == 0


def test_smoothstep():
    assert mu.smoothstep(-1, 0, 1) == 0
    assert mu.smoothstep(2, 0, 1) == 1
    assert mu.smoothstep(0.5, 0, 1) == 0.5
    assert mu.smootherstep(0.5, 0, 1) == 0.5


def test_angles():
    assert mu.deg_to_rad(180) == pytest.approx(math.pi)
    assert mu.rad_to_deg(math.pi / 2) == pytest.approx(90)
    assert mu.normalize_angle(-math.pi / 2) == pytest.approx(3 * math.pi / 2)
    assert mu.normalize_angle(5 * math.pi) == pytest.approx(math.pi)


def test_is_between_angle():
    assert mu.is_between_angle(math.pi / 2, 0, math.pi)
    assert not mu.is_between_angle(3 * math.pi / 2, 0, math.pi)
    ## arc wrapping through zero
    assert mu.is_between_angle(0.1, 3 * math.pi / 2, math.pi / 2)
    assert mu.is_between_angle(3 * math.pi / 2, 0, math.pi, clockwise=True)
    assert mu.is_between(2, 3, 1)
    assert not mu.is_between(3, 3, 1)


def test_powers_of_two():
    assert mu.is_power_of_two(64)
    assert not mu.is_power_of_two(65)
    assert not mu.is_power_of_two(0)
    assert mu.ceil_power_of_two(65) == 128
    assert mu.floor_power_of_two(65) == 64


def test_relative_eps():
    assert mu.int_part_length(0.5) == 0
    assert mu.int_part_length(-999) == 3
    assert mu.int_part_length(1000) == 4
    assert mu.relative_eps(0.5) == pytest.approx(1e-7)
    assert mu.relative_eps(1234) == pytest.approx(1e-3)


class TestTolerance:

    def test_scalars(self):
        assert Tolerance.equal_to_zero(FLOAT_TOL / 2)
        assert not Tolerance.equal_to_zero(FLOAT_TOL * 2)
        assert Tolerance.equal(1.0, 1.0 + FLOAT_TOL / 2)
        assert Tolerance.great(1.0, 0.5)
        assert not Tolerance.great(1.0, 1.0)
        assert Tolerance.less(0.5, 1.0)

    def test_points(self):
        tol = Tolerance(equal_point_tol=0.01)
        assert tol.equal_point_3d(Vector3(0, 0, 0), [0.005, 0, 0])
        assert not tol.equal_point_3d([0, 0, 0], [0.02, 0, 0])
        assert DEFAULT_TOL.equal_point_2d([1, 1], (1, 1))


def test_check_index():
    assert check_index(2, 3) == 2
    for bad in (3, -1, 1.0, True):
        with pytest.raises(IndexOutOfRangeError):
            check_index(bad, 3)


def test_error_hierarchy():
    ## callers may catch the builtin bases
    assert issubclass(IndexOutOfRangeError, IndexError)
    assert issubclass(IllegalParametersError, ValueError)
    err = IndexOutOfRangeError(5, 3)
    assert err.index == 5
    assert '0..2' in str(err)
