## scalar math helpers for cadkernel

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

"""Scalar helpers shared by the vector, rotation and curve modules."""

from __future__ import annotations

from math import ceil, exp, floor, log2, log10

from cadkernel.constants import DEG2RAD, RAD2DEG, TAU


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def euclidean_modulo(n: float, m: float) -> float:
    """Modulo whose result always has the sign of ``m``."""
    return ((n % m) + m) % m


def map_linear(x: float, a1: float, a2: float, b1: float, b2: float) -> float:
    """Map ``x`` from range ``[a1, a2]`` to range ``[b1, b2]``."""
    return b1 + (x - a1) * (b2 - b1) / (a2 - a1)


def inverse_lerp(x: float, y: float, value: float) -> float:
    """Return the fraction of ``value`` between ``x`` and ``y``, or 0 if
    the two ends coincide."""
    if x != y:
        return (value - x) / (y - x)
    return 0.0


def lerp(x: float, y: float, t: float) -> float:
    return (1.0 - t) * x + t * y


def damp(x: float, y: float, lam: float, dt: float) -> float:
    """Frame-rate independent smoothing of ``x`` towards ``y``."""
    return lerp(x, y, 1.0 - exp(-lam * dt))


def pingpong(x: float, length: float = 1.0) -> float:
    return length - abs(euclidean_modulo(x, length * 2.0) - length)


def smoothstep(x: float, lo: float, hi: float) -> float:
    if x <= lo:
        return 0.0
    if x >= hi:
        return 1.0
    x = (x - lo) / (hi - lo)
    return x * x * (3.0 - 2.0 * x)


def smootherstep(x: float, lo: float, hi: float) -> float:
    if x <= lo:
        return 0.0
    if x >= hi:
        return 1.0
    x = (x - lo) / (hi - lo)
    return x * x * x * (x * (x * 6.0 - 15.0) + 10.0)


def deg_to_rad(degrees: float) -> float:
    return degrees * DEG2RAD


def rad_to_deg(radians: float) -> float:
    return radians * RAD2DEG


def is_power_of_two(value: int) -> bool:
    return value != 0 and (value & (value - 1)) == 0


def ceil_power_of_two(value: float) -> float:
    return 2.0 ** ceil(log2(value))


def floor_power_of_two(value: float) -> float:
    return 2.0 ** floor(log2(value))


def normalize_angle(angle: float) -> float:
    """Return ``angle`` wrapped into ``[0, 2*pi)``."""
    return ((angle % TAU) + TAU) % TAU


def is_between(value: float, value1: float, value2: float) -> bool:
    """Strictly between the two bounds, in either order."""
    return value1 < value < value2 or value2 < value < value1


def is_between_angle(angle: float, start: float, end: float,
                     clockwise: bool = False) -> bool:
    """Return ``True`` if ``angle`` lies on the arc swept from ``start``
    to ``end``.  All angles are in radians and are normalized first;
    the sweep is counter-clockwise unless ``clockwise`` is set."""

    angle = normalize_angle(angle)
    start = normalize_angle(start)
    end = normalize_angle(end)
    if clockwise:
        if start > end:
            return end <= angle <= start
        return angle <= start or angle >= end
    if start < end:
        return start <= angle <= end
    return angle >= start or angle <= end


def int_part_length(num: float) -> int:
    """Number of digits in the integer part of ``num`` (0 when |num| < 1)."""
    num = abs(num)
    if num < 1.0:
        return 0
    return int(ceil(log10(num + 1.0)))


def relative_eps(num: float, epsilon: float = 1.0e-7) -> float:
    """Scale ``epsilon`` with the magnitude of ``num``."""
    count = int_part_length(num)
    return max(10.0 ** count * epsilon, epsilon)


__all__ = [
    'clamp',
    'euclidean_modulo',
    'map_linear',
    'inverse_lerp',
    'lerp',
    'damp',
    'pingpong',
    'smoothstep',
    'smootherstep',
    'deg_to_rad',
    'rad_to_deg',
    'is_power_of_two',
    'ceil_power_of_two',
    'floor_power_of_two',
    'normalize_angle',
    'is_between',
    'is_between_angle',
    'int_part_length',
    'relative_eps',
]
