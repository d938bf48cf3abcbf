import math
from types import SimpleNamespace

import pytest

from cadkernel.errors import IllegalParametersError
from cadkernel.quaternion import Quaternion
from cadkernel.vector import Vector3
from cadkernel.xform import Matrix4


def _about_z(angle):
    return Quaternion().set_from_axis_angle(Vector3(0, 0, 1), angle)


def _close(q, expected, tol=1e-9):
    assert list(q) == pytest.approx(list(expected), abs=tol)


class TestSlerp:

    def test_endpoints(self):
        qa = Quaternion()
        qb = _about_z(math.pi / 2)
        assert qa.clone().slerp(qb, 0).equals(qa)
        assert qa.clone().slerp(qb, 1).equals(qb)

    def test_midpoint(self):
        q = Quaternion().slerp(_about_z(math.pi / 2), 0.5)
        _close(q, _about_z(math.pi / 4))
        q = Quaternion().slerp_quaternions(Quaternion(), _about_z(math.pi / 2), 0.25)
        _close(q, _about_z(math.pi / 8))

    def test_takes_the_short_way(self):
        ## -q is the same rotation as q
        qb = _about_z(math.pi / 2)
        neg = Quaternion(-qb.x, -qb.y, -qb.z, -qb.w)
        q = Quaternion().slerp(neg, 0.5)
        v = Vector3(1, 0, 0).apply_quaternion(q)
        _close(v, [math.sqrt(0.5), math.sqrt(0.5), 0])

    def test_same_quaternion(self):
        q = _about_z(0.3)
        _close(q.clone().slerp(q, 0.7), q)

    def test_flat(self):
        dst = [0.0] * 4
        Quaternion.slerp_flat(dst, 0, [0, 0, 0, 1], 0, _about_z(math.pi / 2).to_array(), 0, 0.5)
        _close(dst, _about_z(math.pi / 4))
        Quaternion.slerp_flat(dst, 0, [0, 0, 0, 1], 0, [0, 0, 1, 0], 0, 1)
        assert dst == [0, 0, 1, 0]


class TestQuaternion:

    def test_default_is_identity(self):
        assert list(Quaternion()) == [0, 0, 0, 1]
        _close(Vector3(1, 2, 3).apply_quaternion(Quaternion()), [1, 2, 3])

    def test_unit_vectors(self):
        q = Quaternion().set_from_unit_vectors(Vector3(1, 0, 0), Vector3(0, 1, 0))
        _close(q, _about_z(math.pi / 2))

    def test_sequence_arguments(self):
        q = Quaternion().set_from_unit_vectors([1, 0, 0], (0, 1, 0))
        _close(q, _about_z(math.pi / 2))
        _close(Quaternion().set_from_axis_angle([0, 0, 1], 0.3), _about_z(0.3))
        q = Quaternion().set_from_unit_vectors([0, 0, 1], [0, 0, -1])
        assert q.length() == pytest.approx(1.0)

    def test_antiparallel_unit_vectors(self):
        for v in (Vector3(1, 0, 0), Vector3(0, 0, 1), Vector3(0, 1, 0)):
            q = Quaternion().set_from_unit_vectors(v, v.clone().negate())
            assert q.length() == pytest.approx(1.0)
            _close(v.clone().apply_quaternion(q), v.clone().negate())

    def test_normalize_zero(self):
        assert list(Quaternion(0, 0, 0, 0).normalize()) == [0, 0, 0, 1]
        assert Quaternion(1, 2, 3, 4).normalize().length() == pytest.approx(1.0)

    def test_multiply(self):
        q = _about_z(math.pi / 2).multiply(_about_z(math.pi / 2))
        _close(q, _about_z(math.pi))
        a = Quaternion().set_from_axis_angle(Vector3(1, 0, 0), math.pi / 2)
        b = _about_z(math.pi / 2)
        ## a*b rotates by b first
        v = Vector3(1, 0, 0).apply_quaternion(a.clone().multiply(b))
        _close(v, [0, 0, 1])
        v = Vector3(1, 0, 0).apply_quaternion(a.clone().premultiply(b))
        _close(v, [0, 1, 0])

    def test_multiply_flat(self):
        a = Quaternion(1, 2, 3, 4).normalize()
        b = _about_z(0.7)
        dst = Quaternion.multiply_quaternions_flat([0.0] * 4, 0, a.to_array(), 0, b.to_array(), 0)
        _close(dst, Quaternion().multiply_quaternions(a, b))

    def test_inverse(self):
        q = Quaternion(1, 2, 3, 4).normalize()
        _close(q.clone().multiply(q.clone().invert()), [0, 0, 0, 1])
        assert list(Quaternion(1, 2, 3, 4).conjugate()) == [-1, -2, -3, 4]

    def test_angle_to(self):
        assert Quaternion().angle_to(_about_z(math.pi / 2)) == pytest.approx(math.pi / 2)
        assert Quaternion().angle_to(Quaternion()) == 0

    def test_rotate_towards(self):
        target = _about_z(math.pi / 2)
        q = Quaternion().rotate_towards(target, 0.1)
        assert q.angle_to(target) == pytest.approx(math.pi / 2 - 0.1)
        q = Quaternion().rotate_towards(target, 10.0)
        assert q.equals(target)

    @pytest.mark.parametrize('axis', [(1, 0, 0), (0, 1, 0), (0, 0, 1), (1, 1, 0)])
    def test_rotation_matrix_branches(self, axis):
        ## half turns have a trace of -1 and exercise the non-trace branches
        for angle in (0.4, math.pi):
            m = Matrix4().make_rotation_axis(Vector3(axis).normalize(), angle)
            q = Quaternion().set_from_rotation_matrix(m)
            back = Matrix4().make_rotation_from_quaternion(q)
            assert back.elements == pytest.approx(m.elements, abs=1e-9)

    def test_unknown_euler_order(self):
        with pytest.raises(IllegalParametersError):
            Quaternion().set_from_euler(SimpleNamespace(x=0, y=0, z=0, order='QQQ'))

    def test_random_is_unit(self):
        assert Quaternion().random().length() == pytest.approx(1.0)

    def test_arrays(self):
        assert Quaternion(1, 2, 3, 4).to_array([7], 1) == [7, 1, 2, 3, 4]
        assert list(Quaternion().from_array([0, 1, 2, 3, 4], 1)) == [1, 2, 3, 4]
        assert Quaternion(1, 2, 3, 4) == Quaternion(1, 2, 3, 4)


def test_on_change_callback():
    calls = []
    q = Quaternion().on_change(lambda: calls.append(1))
    q.x = 0.5
    assert len(calls) == 1
    q.multiply(_about_z(0.1))
    q.normalize()
    assert len(calls) == 3
    ## set_from_euler can suppress the notification
    q.set_from_euler(SimpleNamespace(x=0, y=0, z=0, order='XYZ'), update=False)
    assert len(calls) == 3
    q.on_change(None)
    q.w = 2
    assert len(calls) == 3
