"""Bezier curves and tensor-product surfaces for isogeo.

Two evaluation algorithms are provided for both curves and surfaces:

- the direct sum over Bernstein polynomials, which is easy to read but
  numerically unstable as the degree grows (the binomial coefficients
  blow up and large terms of alternating influence cancel), and
- De Casteljau's algorithm, repeated linear interpolation of the control
  points, which is stable and is what ``evaluate`` uses.

Control points may be given in one, two or three dimensions; they are
lifted to 3D with zero padding and every evaluation returns a 3D point.
"""

from __future__ import annotations

import logging
from math import isqrt
from typing import List, Sequence, Tuple

import mpmath as mpm

from isogeo.bernstein import Bernstein
from isogeo.errors import DimensionError
from isogeo.matrix import Matrix2
from isogeo.point import Point

logger = logging.getLogger(__name__)

DEFAULT_DPS = 50


def _lift3(p: Point) -> Point:
    if not isinstance(p, Point):
        raise ValueError('bad control point: {}'.format(p))
    if p.dim() > 3:
        raise DimensionError('control points must have at most 3 coordinates, got {}'.format(p.dim()))
    return Point.point3d(p.value(0), p.value(1), p.value(2))


def _basis(n: int) -> List[Bernstein]:
    return [Bernstein.create(n, i) for i in range(n + 1)]


def _de_casteljau(points: Sequence[Point], t: float) -> Point:
    n = len(points) - 1
    q = Matrix2.from_points(points)
    for k in range(1, n + 1):
        for i in range(n - k + 1):
            q.set_row_point(i, q.row_point(i) * (1.0 - t) + q.row_point(i + 1) * t)
    return q.row_point(0)


class BezierCurve:
    """Bezier curve defined by ``n + 1`` control points in 3-space."""

    def __init__(self, p: Sequence[Point]):
        pts = [_lift3(x) for x in p]
        if not pts:
            raise ValueError('a Bezier curve needs at least one control point')
        self.p = pts

    def __repr__(self):
        return 'BezierCurve({})'.format(self.p)

    @property
    def degree(self) -> int:
        return len(self.p) - 1

    def evaluate(self, xi: Point) -> Point:
        """Evaluate the curve at the parametric point ``xi``."""

        return self.evaluate_de_casteljau(xi)

    def evaluate_direct(self, xi: Point) -> Point:
        """Compute the value of the curve in ``xi`` as the sum of the
        control points weighted by the Bernstein basis.  This technique is
        not numerically stable.
        """

        x = 0.0
        y = 0.0
        z = 0.0
        for b, p in zip(_basis(self.degree), self.p):
            w = b.evaluate(xi).x
            x += w * p.x
            y += w * p.y
            z += w * p.z
        return Point.point3d(x, y, z)

    def evaluate_de_casteljau(self, xi: Point) -> Point:
        """Compute the value of the curve in ``xi`` by De Casteljau's
        recursive linear interpolation."""

        return _de_casteljau(self.p, xi.value(0))

    def evaluate_exact(self, xi: Point, dps: int = DEFAULT_DPS) -> Point:
        """Evaluate the direct sum in arbitrary precision with mpmath, at
        ``dps`` decimal digits, and round the result back to floats."""

        n = self.degree
        with mpm.workdps(dps):
            t = mpm.mpf(xi.value(0))
            acc = [mpm.mpf(0), mpm.mpf(0), mpm.mpf(0)]
            for i, p in enumerate(self.p):
                w = mpm.binomial(n, i) * t ** i * (1 - t) ** (n - i)
                for c in range(3):
                    acc[c] += w * mpm.mpf(p.value(c))
            return Point.point3d(float(acc[0]), float(acc[1]), float(acc[2]))


class BezierSurf:
    """Tensor-product Bezier surface over a rectangular grid of control
    points.  Row index ``i`` follows the first parameter ``u``, column
    index ``j`` the second parameter ``v``."""

    def __init__(self, p: Sequence[Sequence[Point]]):
        grid = [[_lift3(x) for x in row] for row in p]
        if not grid or not grid[0]:
            raise ValueError('a Bezier surface needs at least one control point')
        cols = len(grid[0])
        for row in grid:
            if len(row) != cols:
                raise DimensionError('ragged control point grid passed to BezierSurf')
        self.p = grid

    def __repr__(self):
        return 'BezierSurf({})'.format(self.p)

    @property
    def degrees(self) -> Tuple[int, int]:
        return len(self.p) - 1, len(self.p[0]) - 1

    def evaluate(self, xi: Point) -> Point:
        return self.evaluate_de_casteljau(xi)

    def evaluate_direct(self, xi: Point) -> Point:
        """Tensor-product sum of Bernstein weights; not numerically stable."""

        n, m = self.degrees
        u = Point.point1d(xi.value(0))
        v = Point.point1d(xi.value(1))
        bu = [b.evaluate(u).x for b in _basis(n)]
        bv = [b.evaluate(v).x for b in _basis(m)]
        res = Point.origin(3)
        for i, row in enumerate(self.p):
            for j, p in enumerate(row):
                res += p * (bu[i] * bv[j])
        return res

    def evaluate_de_casteljau(self, xi: Point) -> Point:
        """Collapse every row at ``v``, then the resulting column at ``u``."""

        column = [_de_casteljau(row, xi.value(1)) for row in self.p]
        return _de_casteljau(column, xi.value(0))


class BezierFactory:
    """Builds surfaces from shared-vertex tables."""

    @staticmethod
    def from_indexed_vertices(patches: Sequence[Sequence[int]],
                              vertices: Sequence[Sequence[float]]) -> List[BezierSurf]:
        """Build one square patch per row of ``patches``.

        Each row lists one-based indices into ``vertices`` in row-major
        order, 16 of them for a bicubic 4x4 patch; index 1 refers to
        ``vertices[0]``.
        """

        surfaces = []
        for row in patches:
            side = isqrt(len(row))
            if side == 0 or side * side != len(row):
                raise DimensionError('patch needs a square number of indices, got {}'.format(len(row)))
            grid = []
            for r in range(side):
                grid_row = []
                for c in range(side):
                    idx = row[r * side + c]
                    if idx < 1 or idx > len(vertices):
                        raise IndexError('bad vertex index in patch table: {}'.format(idx))
                    v = vertices[idx - 1]
                    grid_row.append(Point.point3d(v[0], v[1], v[2]))
                grid.append(grid_row)
            surfaces.append(BezierSurf(grid))
        logger.debug('built %d patches from %d vertices', len(surfaces), len(vertices))
        return surfaces


__all__ = [
    'DEFAULT_DPS',
    'BezierCurve',
    'BezierSurf',
    'BezierFactory',
]
