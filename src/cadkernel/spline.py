## NURBS evaluation engine for cadkernel

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

"""NURBS helpers for cadkernel.

Knot vector generation, B-spline basis evaluation and rational curve
evaluation, length and sampling for the spline and ellipse entities.

All functions are stateless and work on plain data: a ``degree``, a
non-decreasing ``knots`` list of length ``len(control_points) + degree
+ 1``, ``control_points`` given as ``[x, y, z]`` sequences (or any
point-like value, see :mod:`cadkernel.geometry_utils`) and one
``weight`` per control point.  Evaluation returns fresh ``[x, y, z]``
lists.  The curve domain is ``[knots[degree], knots[-degree - 1]]``.

Numerically degenerate input is tolerated rather than rejected: knot
spans no wider than :data:`~cadkernel.constants.KNOT_EPSILON` drop out
of the basis recursion, and a parameter whose weighted basis sum
vanishes evaluates to the origin unless it sits at a domain end.
:class:`NurbsCurve` bundles a curve and validates it up front for
callers that want errors instead.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from math import sqrt
from typing import List, Optional, Sequence, Tuple

import mpmath as mpm
import numpy as np

from cadkernel.bbox import Box3
from cadkernel.constants import CURVE_LENGTH_SEGMENTS, KNOT_EPSILON, PARAM_EPSILON
from cadkernel.errors import IllegalParametersError
from cadkernel.geometry_utils import Vec3, to_vec3, to_vec3_list

logger = logging.getLogger(__name__)

KNOT_METHODS = ('uniform', 'chord', 'sqrt_chord')


## knot vectors
## ------------

def _clamped_knots(degree: int, interior: Sequence[float], end: float) -> List[float]:
    return [0.0] * (degree + 1) + list(interior) + [float(end)] * (degree + 1)


def generate_uniform_knots(degree: int, num_control_points: int) -> List[float]:
    """Clamped uniform knot vector: ``degree + 1`` zeros, the interior
    knots ``1, 2, ...``, then ``degree + 1`` copies of ``n - degree + 1``
    where ``n = num_control_points - 1``.

    >>> generate_uniform_knots(2, 5)
    [0.0, 0.0, 0.0, 1.0, 2.0, 3.0, 3.0, 3.0]
    """

    n = num_control_points - 1
    p = degree
    return _clamped_knots(p, [float(i) for i in range(1, n - p + 1)], n - p + 1)


def _cumulative_knots(degree: int, points: Sequence, measure) -> List[float]:
    ## interior knots placed at the normalised cumulative ``measure`` of
    ## the point-to-point distances, scaled onto [0, n - p + 1]
    pts = [to_vec3(p) for p in points]
    n = len(pts) - 1
    p = degree
    cumulative = [0.0]
    total = 0.0
    for i in range(1, n + 1):
        a = pts[i - 1]
        b = pts[i]
        d = sqrt((b[0] - a[0]) ** 2 + (b[1] - a[1]) ** 2 + (b[2] - a[2]) ** 2)
        total += measure(d)
        cumulative.append(total)

    span = n - p + 1
    if total == 0.0:
        logger.debug('coincident fit points, falling back to uniform knots')
        interior = [float(i) for i in range(1, n - p + 1)]
    else:
        interior = [cumulative[i] / total * span for i in range(1, n - p + 1)]
    return _clamped_knots(p, interior, span)


def generate_chord_knots(degree: int, points: Sequence) -> List[float]:
    """Clamped knot vector with interior knots spaced by chord length."""
    return _cumulative_knots(degree, points, lambda d: d)


def generate_sqrt_chord_knots(degree: int, points: Sequence) -> List[float]:
    """Clamped knot vector spaced by the square root of chord length
    (centripetal parameterisation)."""
    return _cumulative_knots(degree, points, sqrt)


## basis functions
## ---------------

def _basis_triangle(i: int, k: int, u: float, knots: Sequence[float],
                    top: Optional[int] = None, closed_end: bool = False) -> List[float]:
    """Return ``[N(i, top), N(i+1, top), ..., N(i+k-top, top)]``.

    The degree-0 row covers ``N(i..i+k, 0)``; each following row is
    built from the one below it with the Cox-de Boor recurrence.  Spans
    at or below ``KNOT_EPSILON`` contribute zero.  Degree-0 spans are
    half-open ``[u_j, u_j+1)``; with ``closed_end`` the last non-empty
    span also includes the end of the knot vector.
    """

    if top is None:
        top = k
    last = knots[-1]
    row = []
    for j in range(i, i + k + 1):
        lo = knots[j]
        hi = knots[j + 1]
        inside = lo <= u < hi
        if closed_end and not inside:
            inside = u == last and hi == last and lo < hi
        row.append(1.0 if inside else 0.0)

    for r in range(1, top + 1):
        nxt = []
        for j in range(k - r + 1):
            a = i + j
            d1 = knots[a + r] - knots[a]
            d2 = knots[a + r + 1] - knots[a + 1]
            c1 = (u - knots[a]) / d1 if d1 > KNOT_EPSILON else 0.0
            c2 = (knots[a + r + 1] - u) / d2 if d2 > KNOT_EPSILON else 0.0
            nxt.append(c1 * row[j] + c2 * row[j + 1])
        row = nxt
    return row


def basis_function(i: int, k: int, u: float, knots: Sequence[float]) -> float:
    """Value of the ``i``-th B-spline basis function of degree ``k`` at
    ``u``.

    Degree-0 functions are 1 on the half-open span ``[knots[i],
    knots[i+1])`` and 0 elsewhere.  Knot spans of width at most
    ``KNOT_EPSILON`` make the corresponding recurrence coefficient zero,
    so repeated knots never divide by zero.
    """

    return _basis_triangle(i, k, u, knots)[0]


def _basis_derivative(i: int, k: int, u: float, knots: Sequence[float]) -> float:
    ## N'(i,k) = k * (N(i,k-1)/(u_i+k - u_i) - N(i+1,k-1)/(u_i+k+1 - u_i+1))
    if k == 0:
        return 0.0
    lower = _basis_triangle(i, k, u, knots, top=k - 1, closed_end=True)
    d1 = knots[i + k] - knots[i]
    d2 = knots[i + k + 1] - knots[i + 1]
    left = lower[0] / d1 if d1 > KNOT_EPSILON else 0.0
    right = lower[1] / d2 if d2 > KNOT_EPSILON else 0.0
    return k * (left - right)


## curve evaluation
## ----------------

def _domain(degree: int, knots: Sequence[float]) -> Tuple[float, float]:
    return knots[degree], knots[len(knots) - degree - 1]


def _nurbs_point(u: float, degree: int, knots: Sequence[float],
                 ctrl: Sequence[Vec3], weights: Sequence[float]) -> List[float]:
    n = len(ctrl) - 1
    p = degree

    u = max(knots[p], min(knots[n + 1], u))

    if abs(u - knots[n + 1]) < PARAM_EPSILON:
        return list(ctrl[n])
    if abs(u - knots[p]) < PARAM_EPSILON:
        return list(ctrl[0])

    point = [0.0, 0.0, 0.0]
    weight = 0.0
    for i in range(n + 1):
        w = weights[i] * basis_function(i, p, u, knots)
        v = ctrl[i]
        point[0] += v[0] * w
        point[1] += v[1] * w
        point[2] += v[2] * w
        weight += w

    if weight < KNOT_EPSILON:
        logger.debug('vanishing weight sum at u=%s', u)
        start, end = _domain(p, knots)
        if abs(u - end) < PARAM_EPSILON:
            return list(ctrl[n])
        if abs(u - start) < PARAM_EPSILON:
            return list(ctrl[0])

    if weight > KNOT_EPSILON:
        point[0] /= weight
        point[1] /= weight
        point[2] /= weight
    return point


def evaluate_nurbs_point(u: float, degree: int, knots: Sequence[float],
                         control_points: Sequence, weights: Sequence[float]) -> List[float]:
    """Evaluate the rational curve at parameter ``u``.

    ``u`` is clamped into the curve domain.  Within ``PARAM_EPSILON``
    of either end the corresponding end control point is returned
    exactly.  If the weighted basis sum vanishes away from the ends the
    unnormalised sum is returned, which is the origin when every weight
    is zero.
    """

    return _nurbs_point(u, degree, knots, [to_vec3(p) for p in control_points], weights)


def evaluate_nurbs_derivative(u: float, degree: int, knots: Sequence[float],
                              control_points: Sequence, weights: Sequence[float]) -> List[float]:
    """First derivative ``dC/du`` of the rational curve at ``u``.

    With ``A(u) = sum(N_i w_i P_i)`` and ``W(u) = sum(N_i w_i)`` the
    derivative is ``(A' - W' C) / W``.  At the domain end the last
    non-empty knot span is used.  Returns the zero vector when the
    weight sum vanishes.
    """

    ctrl = [to_vec3(p) for p in control_points]
    n = len(ctrl) - 1
    p = degree
    start, end = _domain(p, knots)
    u = max(start, min(end, u))

    a = [0.0, 0.0, 0.0]
    da = [0.0, 0.0, 0.0]
    w_sum = 0.0
    dw_sum = 0.0
    for i in range(n + 1):
        nb = _basis_triangle(i, p, u, knots, closed_end=True)[0]
        db = _basis_derivative(i, p, u, knots)
        w = weights[i]
        v = ctrl[i]
        for c in range(3):
            a[c] += nb * w * v[c]
            da[c] += db * w * v[c]
        w_sum += nb * w
        dw_sum += db * w

    if w_sum < KNOT_EPSILON:
        logger.debug('vanishing weight sum at u=%s', u)
        return [0.0, 0.0, 0.0]
    return [(da[c] - dw_sum * a[c] / w_sum) / w_sum for c in range(3)]


def calculate_curve_length(degree: int, knots: Sequence[float], control_points: Sequence,
                           weights: Sequence[float],
                           segments: int = CURVE_LENGTH_SEGMENTS) -> float:
    """Approximate arc length as the length of a polyline through
    ``segments + 1`` evenly spaced parameter values, plus the closing
    segment to the exact domain end."""

    ctrl = [to_vec3(p) for p in control_points]
    start, end = _domain(degree, knots)
    step = (end - start) / segments

    length = 0.0
    prev = _nurbs_point(start, degree, knots, ctrl, weights)
    for i in range(1, segments + 1):
        pt = _nurbs_point(start + i * step, degree, knots, ctrl, weights)
        length += sqrt((pt[0] - prev[0]) ** 2 + (pt[1] - prev[1]) ** 2 + (pt[2] - prev[2]) ** 2)
        prev = pt

    final = _nurbs_point(end, degree, knots, ctrl, weights)
    length += sqrt((final[0] - prev[0]) ** 2 + (final[1] - prev[1]) ** 2 + (final[2] - prev[2]) ** 2)
    return length


def integrate_curve_length(degree: int, knots: Sequence[float], control_points: Sequence,
                           weights: Sequence[float], precision: int = 15) -> float:
    """Arc length by adaptive quadrature of ``|C'(u)|``.

    The integral is split at every distinct knot inside the domain,
    where the derivative may be discontinuous.  ``precision`` is the
    working precision in decimal digits.
    """

    ctrl = to_vec3_list(control_points)
    start, end = _domain(degree, knots)
    if end <= start:
        return 0.0
    breaks = sorted(set([start, end] + [k for k in knots if start < k < end]))

    def speed(t):
        d = evaluate_nurbs_derivative(float(t), degree, knots, ctrl, weights)
        return sqrt(d[0] * d[0] + d[1] * d[1] + d[2] * d[2])

    with mpm.workdps(precision):
        return float(mpm.quad(speed, breaks))


def sample_nurbs(degree: int, knots: Sequence[float], control_points: Sequence,
                 weights: Sequence[float], samples: int = 64) -> List[List[float]]:
    """Sample the curve at ``samples`` evenly spaced parameters, both
    domain ends included."""

    if samples < 2:
        raise IllegalParametersError('samples must be >= 2')

    ctrl = [to_vec3(p) for p in control_points]
    u_start, u_end = _domain(degree, knots)

    samples_out: List[List[float]] = []
    for i in range(samples):
        if i == samples - 1:
            u = u_end
        else:
            u = u_start + (u_end - u_start) * (i / (samples - 1))
        samples_out.append(_nurbs_point(u, degree, knots, ctrl, weights))
    return samples_out


## interpolation
## -------------

def interpolate_control_points(fit_points: Sequence) -> List[List[float]]:
    """Control points for a curve through ``fit_points``.

    Returns fresh copies of the fit points themselves; the curve only
    approximates them.  Use :func:`solve_interpolation_control_points`
    for a curve that passes through every fit point.
    """

    return [list(p) for p in fit_points]


def chord_parameters(points: Sequence) -> List[float]:
    """Chord-length parameters in ``[0, 1]`` for the given points,
    evenly spaced if the points all coincide."""

    pts = [to_vec3(p) for p in points]
    if len(pts) == 1:
        return [0.0]
    cumulative = [0.0]
    for a, b in zip(pts, pts[1:]):
        cumulative.append(cumulative[-1] + sqrt(sum((b[c] - a[c]) ** 2 for c in range(3))))
    total = cumulative[-1]
    if total == 0.0:
        return [i / (len(pts) - 1) for i in range(len(pts))]
    return [c / total for c in cumulative]


def averaged_knots(degree: int, parameters: Sequence[float]) -> List[float]:
    """Clamped knot vector on ``[0, 1]`` whose interior knots average
    ``degree`` consecutive parameters."""

    m = len(parameters) - 1
    p = degree
    interior = [sum(parameters[j:j + p]) / p for j in range(1, m - p + 1)]
    return _clamped_knots(p, interior, 1.0)


def solve_interpolation_control_points(fit_points: Sequence, degree: int,
                                       knots: Optional[Sequence[float]] = None,
                                       parameters: Optional[Sequence[float]] = None
                                       ) -> Tuple[List[List[float]], List[float]]:
    """Global interpolation: solve for the control points of a
    non-rational curve that passes through every fit point.

    Parameters default to chord length and knots to the averaged knot
    vector.  Returns ``(control_points, knots)``; every weight of the
    result is 1.
    """

    pts = to_vec3_list(fit_points)
    m = len(pts)
    if degree < 1:
        raise IllegalParametersError('interpolation needs degree >= 1, got {}'.format(degree))
    if m <= degree:
        raise IllegalParametersError(
            'need more than {} fit points for degree {}, got {}'.format(degree, degree, m))

    if parameters is None:
        parameters = chord_parameters(pts)
        if knots is None:
            knots = averaged_knots(degree, parameters)
        else:
            start, end = _domain(degree, knots)
            parameters = [start + t * (end - start) for t in parameters]
    elif knots is None:
        knots = averaged_knots(degree, parameters)
    knots = [float(k) for k in knots]

    if len(parameters) != m:
        raise IllegalParametersError('need one parameter per fit point')
    if len(knots) != m + degree + 1:
        raise IllegalParametersError('knot vector must have {} entries, got {}'.format(
            m + degree + 1, len(knots)))

    a = np.array([[_basis_triangle(i, degree, t, knots, closed_end=True)[0]
                   for i in range(m)] for t in parameters])
    try:
        ctrl = np.linalg.solve(a, np.array(pts))
    except np.linalg.LinAlgError as err:
        raise IllegalParametersError('interpolation system is singular: {}'.format(err)) from err
    return ctrl.tolist(), knots


## curve descriptor
## ----------------

@dataclass
class NurbsCurve:
    """A NURBS curve description bundled with its evaluators.

    Control points are normalised to ``[x, y, z]`` lists; ``weights``
    default to all ones.  The descriptor is validated on construction.
    """

    degree: int
    knots: List[float]
    control_points: List[List[float]]
    weights: Optional[List[float]] = field(default=None)

    def __post_init__(self):
        self.control_points = to_vec3_list(self.control_points)
        self.knots = [float(k) for k in self.knots]
        if self.weights is None:
            self.weights = [1.0] * len(self.control_points)
        else:
            self.weights = [float(w) for w in self.weights]
        self.validate()

    def validate(self) -> None:
        """Raise :class:`IllegalParametersError` unless the knots,
        control points and weights describe a curve."""

        count = len(self.control_points)
        if isinstance(self.degree, bool) or not isinstance(self.degree, int) or self.degree < 0:
            raise IllegalParametersError('bad degree: {}'.format(self.degree))
        if count == 0:
            raise IllegalParametersError('curve needs at least one control point')
        if len(self.knots) != count + self.degree + 1:
            raise IllegalParametersError('expected {} knots for {} control points of degree {}, got {}'.format(
                count + self.degree + 1, count, self.degree, len(self.knots)))
        if any(b < a for a, b in zip(self.knots, self.knots[1:])):
            raise IllegalParametersError('knot vector must be non-decreasing')
        if len(self.weights) != count:
            raise IllegalParametersError('expected {} weights, got {}'.format(count, len(self.weights)))

    @classmethod
    def from_control_points(cls, points: Sequence, degree: int,
                            knot_method: str = 'uniform',
                            weights: Optional[Sequence[float]] = None) -> 'NurbsCurve':
        """Build a clamped curve, generating the knots with
        ``knot_method``, one of ``'uniform'``, ``'chord'`` or
        ``'sqrt_chord'``."""

        pts = to_vec3_list(points)
        if knot_method == 'uniform':
            knots = generate_uniform_knots(degree, len(pts))
        elif knot_method == 'chord':
            knots = generate_chord_knots(degree, pts)
        elif knot_method == 'sqrt_chord':
            knots = generate_sqrt_chord_knots(degree, pts)
        else:
            raise IllegalParametersError('unknown knot method: {!r}'.format(knot_method))
        return cls(degree, knots, pts, None if weights is None else list(weights))

    @property
    def domain(self) -> Tuple[float, float]:
        return _domain(self.degree, self.knots)

    def evaluate(self, u: float) -> List[float]:
        return _nurbs_point(u, self.degree, self.knots, self.control_points, self.weights)

    def derivative(self, u: float) -> List[float]:
        return evaluate_nurbs_derivative(u, self.degree, self.knots, self.control_points, self.weights)

    def length(self, segments: int = CURVE_LENGTH_SEGMENTS) -> float:
        return calculate_curve_length(self.degree, self.knots, self.control_points,
                                      self.weights, segments)

    def sample(self, count: int = 64) -> List[List[float]]:
        return sample_nurbs(self.degree, self.knots, self.control_points, self.weights, count)

    def bounding_box(self, count: int = 64) -> Box3:
        """Bounds of ``count`` samples of the curve.  Both end points are
        included; an extreme between two samples may be clipped."""

        return Box3().set_from_points(self.sample(count))


__all__ = [
    'KNOT_METHODS',
    'generate_uniform_knots',
    'generate_chord_knots',
    'generate_sqrt_chord_knots',
    'basis_function',
    'evaluate_nurbs_point',
    'evaluate_nurbs_derivative',
    'calculate_curve_length',
    'integrate_curve_length',
    'sample_nurbs',
    'interpolate_control_points',
    'chord_parameters',
    'averaged_knots',
    'solve_interpolation_control_points',
    'NurbsCurve',
]
