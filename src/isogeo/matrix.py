## small dense matrix storage for isogeo

## Copyright (c) 2021 isogeo contributors
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

from dataclasses import dataclass

import numpy as np

from isogeo.errors import DimensionError
from isogeo.point import Point, isgoodnum

## a matrix is represented as a list of rows, each row a list of
## floats.  Matrix2 is not a linear algebra package: it holds the
## collapsing control points of De Casteljau evaluation (one point per
## row) and the per-coordinate grids produced by range evaluation.
## Conversion to and from numpy arrays is provided for callers that
## want to plot or post-process those grids.


@dataclass(frozen=True)
class Size:
    """width (columns) and height (rows) of a matrix"""

    width: int
    height: int


class Matrix2:
    """rows x cols matrix of floats"""

    def __init__(self, rows=0, cols=0, fill=0.0):
        for n in (rows, cols):
            if isinstance(n, bool) or not isinstance(n, int) or n < 0:
                raise ValueError('bad shape passed to Matrix2: {}x{}'.format(rows, cols))
        if not isgoodnum(fill):
            raise ValueError('bad fill value passed to Matrix2: {}'.format(fill))
        self.m = [[fill] * cols for _ in range(rows)]
        self._cols = cols

    @classmethod
    def from_rows(cls, data):
        """Build a matrix from a list of equal-length rows.  The data are
        copied."""
        data = [list(r) for r in data]
        cols = len(data[0]) if data else 0
        for r in data:
            if len(r) != cols:
                raise ValueError('ragged rows passed to from_rows: {}'.format(data))
            for x in r:
                if not isgoodnum(x):
                    raise ValueError('bad element in matrix initialization: {}'.format(x))
        result = cls(len(data), cols)
        result.m = data
        return result

    @classmethod
    def from_points(cls, points):
        """one row per point; all points must share a dimension"""
        points = list(points)
        if points:
            dim = points[0].dim()
            for p in points:
                if p.dim() != dim:
                    raise DimensionError('mixed point dimensions passed to from_points')
        return cls.from_rows([p.tolist() for p in points])

    @classmethod
    def from_array(cls, array):
        """Build a matrix from a two-dimensional numpy array (or anything
        ``numpy.asarray`` accepts)."""
        arr = np.asarray(array, dtype=float)
        if arr.ndim != 2:
            raise ValueError('bad array dimension passed to from_array: {}'.format(arr.ndim))
        result = cls(arr.shape[0], arr.shape[1])
        result.m = arr.tolist()
        return result

    def to_array(self):
        return np.array(self.m, dtype=float).reshape(self.rows(), self.cols())

    def __repr__(self):
        return 'Matrix2({})'.format(self.m)

    def __eq__(self, other):
        if not isinstance(other, Matrix2):
            return NotImplemented
        return self.size() == other.size() and self.m == other.m

    __hash__ = None

    def _check(self, i, j):
        if i < 0 or i >= self.rows() or j < 0 or j >= self.cols():
            raise IndexError('bad index passed to Matrix2: {},{}'.format(i, j))

    def _check_row(self, i):
        if i < 0 or i >= self.rows():
            raise IndexError('bad row passed to Matrix2: {}'.format(i))

    def value(self, i, j):
        self._check(i, j)
        return self.m[i][j]

    def set_value(self, i, j, x):
        self._check(i, j)
        if not isgoodnum(x):
            raise ValueError('bad value passed to set_value: {}'.format(x))
        self.m[i][j] = x

    def row(self, i):
        self._check_row(i)
        return list(self.m[i])

    def set_row(self, i, x):
        self._check_row(i)
        x = list(x)
        if len(x) != self.cols():
            raise DimensionError('bad row length passed to set_row: {}'.format(len(x)))
        for v in x:
            if not isgoodnum(v):
                raise ValueError('bad value passed to set_row: {}'.format(v))
        self.m[i] = x

    def row_point(self, i):
        """row ``i`` as a point of dimension ``cols()``"""
        return Point(self.row(i))

    def set_row_point(self, i, p):
        self.set_row(i, p.tolist())

    def rows(self):
        return len(self.m)

    def cols(self):
        return self._cols

    def size(self):
        return Size(width=self.cols(), height=self.rows())

    def add(self, other):
        """in-place addition of a matrix of the same size"""
        if self.size() != other.size():
            raise DimensionError('size mismatch in add: {} vs {}'.format(self.size(), other.size()))
        for i in range(self.rows()):
            for j in range(self.cols()):
                self.m[i][j] += other.m[i][j]
        return self

    def __add__(self, other):
        if not isinstance(other, Matrix2):
            return NotImplemented
        return Matrix2.from_rows(self.m).add(other)

    def __mul__(self, x):
        if not isgoodnum(x):
            return NotImplemented
        return Matrix2.from_rows([[a * x for a in r] for r in self.m])

    __rmul__ = __mul__


__all__ = [
    'Size',
    'Matrix2',
]
