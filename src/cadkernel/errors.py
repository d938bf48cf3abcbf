## exception types for cadkernel

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

"""Exceptions raised by the cadkernel geometry primitives.

Only calling-convention mistakes are exceptions: asking for a component
that does not exist, or constructing a value from the wrong number or
shape of arguments.  Numerically degenerate input (zero-length vectors,
singular matrices, repeated knots, zero weight sums) is handled with a
documented fallback value instead, so transform and curve pipelines keep
running on transient degenerate configurations.
"""


class GeometryError(Exception):
    """Base class for all cadkernel errors."""


class IndexOutOfRangeError(GeometryError, IndexError):
    """A vector component or matrix element index is out of range."""

    def __init__(self, index, limit=None):
        self.index = index
        self.limit = limit
        if limit is None:
            msg = 'index is out of range: {}'.format(index)
        else:
            msg = 'index is out of range: {} (valid 0..{})'.format(index, limit - 1)
        super().__init__(msg)


class IllegalParametersError(GeometryError, ValueError):
    """A value cannot be instantiated or updated from the given parameters."""

    def __init__(self, message='Illegal Parameters'):
        super().__init__(message)


def check_index(index, limit):
    """Raise :class:`IndexOutOfRangeError` unless ``0 <= index < limit``."""

    if isinstance(index, bool) or not isinstance(index, int) or index < 0 or index >= limit:
        raise IndexOutOfRangeError(index, limit)
    return index


__all__ = [
    'GeometryError',
    'IndexOutOfRangeError',
    'IllegalParametersError',
    'check_index',
]
