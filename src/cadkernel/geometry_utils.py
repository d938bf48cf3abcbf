## point ingestion helpers for cadkernel

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

"""Point ingestion helpers shared by the vector, box and spline modules.

The drawing layer hands geometry to the kernel in several shapes: plain
tuples and lists, numpy rows, ``Vector2``/``Vector3`` instances, and
entity-specific point records that merely carry ``x``, ``y`` and
(optionally) ``z`` attributes.  These helpers normalise all of them into
float tuples.
"""

from __future__ import annotations

import numbers
from typing import Any, Iterable, List, Optional, Protocol, Tuple, runtime_checkable

from cadkernel.errors import IllegalParametersError

Vec2 = Tuple[float, float]
Vec3 = Tuple[float, float, float]


@runtime_checkable
class Point2Like(Protocol):
    """Anything exposing numeric ``x`` and ``y`` attributes."""

    x: float
    y: float


@runtime_checkable
class Point3Like(Protocol):
    """Anything exposing numeric ``x``, ``y`` and ``z`` attributes."""

    x: float
    y: float
    z: float


def _isgoodnum(n: Any) -> bool:
    return (not isinstance(n, bool)) and isinstance(n, numbers.Real)


def _issequence(value: Any) -> bool:
    return (not isinstance(value, (str, bytes))
            and hasattr(value, '__len__') and hasattr(value, '__getitem__'))


def _attr_components(value: Any) -> Optional[Tuple[Any, Any, Any]]:
    if hasattr(value, 'x') and hasattr(value, 'y'):
        return value.x, value.y, getattr(value, 'z', 0.0)
    return None


def _components(point_like: Any) -> Tuple[Any, Any, Any]:
    comps = _attr_components(point_like)
    if comps is not None:
        return comps
    if not _issequence(point_like):
        raise IllegalParametersError('cannot read a point from {!r}'.format(point_like))
    if len(point_like) < 2:
        raise IllegalParametersError('value must have at least two components')
    z = point_like[2] if len(point_like) > 2 else 0.0
    return point_like[0], point_like[1], z


def to_vec2(point_like: Any) -> Vec2:
    """Return the XY components of a point-like value as a tuple."""

    x, y, _ = _components(point_like)
    if not (_isgoodnum(x) and _isgoodnum(y)):
        raise IllegalParametersError('bad point components: {!r}'.format(point_like))
    return float(x), float(y)


def to_vec3(point_like: Any) -> Vec3:
    """Return the XYZ components of a point-like value as a tuple.

    Objects with ``x``/``y`` attributes and no ``z`` lift to ``z = 0``,
    as do two-element sequences.
    """

    x, y, z = _components(point_like)
    if z is None:
        z = 0.0
    if not (_isgoodnum(x) and _isgoodnum(y) and _isgoodnum(z)):
        raise IllegalParametersError('bad point components: {!r}'.format(point_like))
    return float(x), float(y), float(z)


def to_vec3_list(points: Iterable[Any]) -> List[List[float]]:
    """Convert a point sequence into fresh ``[x, y, z]`` lists."""

    return [list(to_vec3(p)) for p in points]


__all__ = [
    'Vec2',
    'Vec3',
    'Point2Like',
    'Point3Like',
    'to_vec2',
    'to_vec3',
    'to_vec3_list',
]
