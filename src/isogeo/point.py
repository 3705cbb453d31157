## fixed-dimension point and vector algebra for isogeo
## Copyright (c) 2021 isogeo contributors

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

"""fixed-dimension point algebra for **isogeo**

====================
OVERVIEW
====================

The isogeo.point module provides the ``Point`` class, a tuple of N
scalar coordinates where N is fixed when the point is created.  Points
are the currency of every other isogeo module: Bernstein polynomials
return one-dimensional points, Bezier curves and surfaces are built
from and evaluate to three-dimensional points.

scalars
=======

Scalars are ordinary Python3 ``int`` or ``float`` numbers.  Booleans
are rejected even though Python considers them integers.  Points with
integer coordinates stay integer under addition, subtraction and
integer scaling.

dimension
=========

The dimension of a point never changes.  Binary operations (``+``,
``-``, ``==`` and their in-place forms) require both operands to have
the same dimension and raise ``DimensionError`` otherwise.

Indexed reads are lenient: ``p.value(i)`` (and ``p[i]``) return zero
for any index outside ``0 <= i < p.dim()``.  Indexed writes past the
end are silently ignored.  Non-integer indices raise ``ValueError``.
The named accessors ``x``, ``y`` and ``z`` exist for points of
dimension 1 to 3 and read through the same zero-padded storage, so a
2D point has ``z == 0``.

homogeneous coordinates
=======================

``to_homogeneous(w)`` lifts an N-dimensional point onto the plane of
weight ``w`` in N+1 dimensions: ``[x, y] -> [x*w, y*w, w]``.
``to_cartesian()`` projects back, dividing by the last coordinate and
dropping it.  Projecting from a zero weight raises
``InvalidConversionError``.  See
https://en.wikipedia.org/wiki/Homogeneous_coordinates

"""

from math import sqrt

from isogeo.errors import DimensionError, InvalidConversionError

## constants
epsilon = 0.000005


## operations on scalars
## -----------------------

def isgoodnum(n):
    """ determine if an argument is actually a scalar number, and not boolean
    """
    return (not isinstance(n, bool)) and isinstance(n, (int, float))


def close(a, b):
    """ are two scalars the same within epsilon
    """
    return abs(a - b) < epsilon


## operations on points
## ------------------------

class Point:
    """point with a fixed number of int or float coordinates"""

    __slots__ = ('_data',)

    def __init__(self, coords=()):
        if isinstance(coords, Point):
            data = list(coords._data)
        else:
            data = list(coords)
        for x in data:
            if not isgoodnum(x):
                raise ValueError('bad coordinate passed to Point: {}'.format(x))
        self._data = data

    @classmethod
    def origin(cls, dim):
        """all-zero point of dimension ``dim``"""
        if not isinstance(dim, int) or isinstance(dim, bool) or dim < 0:
            raise ValueError('bad dimension passed to origin: {}'.format(dim))
        return cls([0] * dim)

    @classmethod
    def point1d(cls, x):
        """point on a straight line"""
        return cls([x])

    @classmethod
    def point2d(cls, x, y):
        """point in the plane"""
        return cls([x, y])

    @classmethod
    def point3d(cls, x, y, z):
        """point in 3D space"""
        return cls([x, y, z])

    @classmethod
    def point4d(cls, x, y, z, w):
        return cls([x, y, z, w])

    def dim(self):
        """dimension of the space containing this point"""
        return len(self._data)

    def __len__(self):
        return len(self._data)

    def __iter__(self):
        return iter(self._data)

    def value(self, idx):
        """return the idx-th coordinate, or zero if idx is out of range"""
        if isinstance(idx, bool) or not isinstance(idx, int):
            raise ValueError('bad index passed to value: {}'.format(idx))
        if 0 <= idx < len(self._data):
            return self._data[idx]
        return 0

    __getitem__ = value

    def set_value(self, idx, val):
        """set the idx-th coordinate; writes past the end are ignored"""
        if not isgoodnum(val):
            raise ValueError('bad value passed to set_value: {}'.format(val))
        if 0 <= idx < len(self._data):
            self._data[idx] = val
        return self

    def reset(self):
        """set all coordinates to zero"""
        for i in range(len(self._data)):
            self._data[i] = 0
        return self

    def copy(self):
        return Point(self._data)

    def tolist(self):
        return list(self._data)

    ## named accessors, defined for dimensions 1 to 3
    def _named(self, name):
        if not 1 <= len(self._data) <= 3:
            raise DimensionError(
                'accessor {} undefined for dimension {}'.format(name, len(self._data)))

    @property
    def x(self):
        self._named('x')
        return self.value(0)

    @x.setter
    def x(self, val):
        self._named('x')
        self.set_value(0, val)

    @property
    def y(self):
        self._named('y')
        return self.value(1)

    @y.setter
    def y(self, val):
        self._named('y')
        self.set_value(1, val)

    @property
    def z(self):
        self._named('z')
        return self.value(2)

    @z.setter
    def z(self, val):
        self._named('z')
        self.set_value(2, val)

    def _check_dim(self, other, op):
        if len(self._data) != len(other._data):
            raise DimensionError('dimension mismatch in {}: {} vs {}'.format(
                op, len(self._data), len(other._data)))

    ## arithmetic
    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        self._check_dim(other, '==')
        return self._data == other._data

    __hash__ = None

    def __add__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        self._check_dim(other, '+')
        return Point([a + b for a, b in zip(self._data, other._data)])

    def __iadd__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        self._check_dim(other, '+=')
        for i, b in enumerate(other._data):
            self._data[i] += b
        return self

    def __sub__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        self._check_dim(other, '-')
        return Point([a - b for a, b in zip(self._data, other._data)])

    def __isub__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        self._check_dim(other, '-=')
        for i, b in enumerate(other._data):
            self._data[i] -= b
        return self

    def __mul__(self, scalar):
        if not isgoodnum(scalar):
            return NotImplemented
        return Point([a * scalar for a in self._data])

    __rmul__ = __mul__

    def __imul__(self, scalar):
        if not isgoodnum(scalar):
            return NotImplemented
        for i in range(len(self._data)):
            self._data[i] *= scalar
        return self

    def __neg__(self):
        return Point([-a for a in self._data])

    def isclose(self, other, tol=None):
        """are two same-dimension points within ``tol`` (default epsilon)
        of each other"""
        if tol is None:
            tol = epsilon
        self._check_dim(other, 'isclose')
        d = sqrt(sum((a - b) * (a - b) for a, b in zip(self._data, other._data)))
        return d <= tol

    ## homogeneous <-> cartesian
    def to_homogeneous(self, w, dim=None):
        """Convert this point to the corresponding point in homogeneous
        coordinates on the plane ``w``.  If ``dim`` is given it must be
        ``self.dim() + 1``.
        """
        n = len(self._data)
        if dim is not None and dim != n + 1:
            raise DimensionError(
                'bad homogeneous dimension {} for a point of dimension {}'.format(dim, n))
        res = Point.origin(n + 1)
        for i in range(n):
            res.set_value(i, self._data[i] * w)
        return res.set_value(n, w)

    def to_cartesian(self, dim=None):
        """Convert this point to the corresponding point in cartesian
        coordinates, dividing by the last coordinate.  If ``dim`` is given
        it must be ``self.dim() - 1``.
        """
        n = len(self._data)
        if n == 0 or (dim is not None and dim != n - 1):
            raise DimensionError(
                'bad cartesian dimension {} for a point of dimension {}'.format(dim, n))
        w = self._data[n - 1]
        if w == 0:
            raise InvalidConversionError('invalid plane: zero weight in {}'.format(self))
        return Point([self._data[i] / w for i in range(n - 1)])

    def __repr__(self):
        return 'Point({})'.format(self._data)

    def __str__(self):
        return str(self._data)


## the scalar type is not part of a Python point, these names
## document intent at call sites
RealPoint = Point
IntPoint = Point


def p1(x):
    return Point([float(x)])


def p2(x, y):
    return Point([float(x), float(y)])


def p3(x, y, z):
    return Point([float(x), float(y), float(z)])


__all__ = [
    'epsilon',
    'isgoodnum',
    'close',
    'Point',
    'RealPoint',
    'IntPoint',
    'p1',
    'p2',
    'p3',
]
