# -*- coding: utf-8 -*-
from importlib.metadata import PackageNotFoundError, version

from cadkernel.bbox import AABB, Box2, Box3
from cadkernel.errors import GeometryError, IllegalParametersError, IndexOutOfRangeError
from cadkernel.euler import Euler, RotationOrder
from cadkernel.plane import Plane
from cadkernel.quaternion import Quaternion
from cadkernel.spline import NurbsCurve
from cadkernel.vector import Point2, Point3, Vector2, Vector3
from cadkernel.xform import Matrix3, Matrix4

try:
    __version__ = version("cadkernel")
except PackageNotFoundError:  # pragma: no cover - handled when package not installed
    __version__ = "unknown"

__all__ = [
    'AABB',
    'Box2',
    'Box3',
    'Euler',
    'GeometryError',
    'IllegalParametersError',
    'IndexOutOfRangeError',
    'Matrix3',
    'Matrix4',
    'NurbsCurve',
    'Plane',
    'Point2',
    'Point3',
    'Quaternion',
    'RotationOrder',
    'Vector2',
    'Vector3',
]
