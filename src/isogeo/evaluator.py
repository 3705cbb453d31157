"""Parametric range evaluation for isogeo.

Samples anything with an ``evaluate(xi)`` method (Bernstein polynomials,
Bezier curves and surfaces) over evenly spaced parameters, and splits
the sampled points into per-coordinate :class:`~isogeo.matrix.Matrix2`
grids suitable for plotting.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Protocol, Sequence, Tuple

from isogeo.matrix import Matrix2
from isogeo.point import Point, isgoodnum

logger = logging.getLogger(__name__)

DEFAULT_SAMPLES = 100


class Evaluatable(Protocol):
    """Anything that maps a parametric point to a point."""

    def evaluate(self, xi: Point) -> Point:
        ...


@dataclass(frozen=True)
class RealRange:
    """Closed real interval ``[a, b]``."""

    a: float
    b: float

    def samples(self, count: int) -> List[float]:
        """Return ``count`` evenly spaced values from ``a`` to ``b``
        inclusive."""

        if isinstance(count, bool) or not isinstance(count, int) or count < 1:
            raise ValueError('bad sample count: {}'.format(count))
        if count == 1:
            return [self.a]
        step = (self.b - self.a) / (count - 1)
        values = [self.a + step * k for k in range(count - 1)]
        values.append(self.b)
        return values


def evaluate_parametric_range1d(fn: Evaluatable, rng: RealRange, *,
                                samples: int = DEFAULT_SAMPLES
                                ) -> Tuple[List[Point], List[Point]]:
    """Evaluate ``fn`` at ``samples`` parameters spanning ``rng``.

    Returns the list of one-dimensional parameter points and the list of
    values.
    """

    xs = [Point.point1d(u) for u in rng.samples(samples)]
    logger.debug('evaluating %d samples over [%s, %s]', len(xs), rng.a, rng.b)
    return xs, [fn.evaluate(x) for x in xs]


def evaluate_parametric_range2d(fn: Evaluatable, rng_u: RealRange, rng_v: RealRange, *,
                                samples: int = DEFAULT_SAMPLES
                                ) -> Tuple[List[List[Point]], List[List[Point]]]:
    """Evaluate ``fn`` on a ``samples x samples`` grid of parameters.

    Row index follows ``u``, column index follows ``v``.
    """

    us = rng_u.samples(samples)
    vs = rng_v.samples(samples)
    logger.debug('evaluating %dx%d grid', len(us), len(vs))
    xi_grid = [[Point.point2d(u, v) for v in vs] for u in us]
    values = [[fn.evaluate(x) for x in row] for row in xi_grid]
    return xi_grid, values


def split_coords(points, indices: Sequence[int] = (0, 1, 2)) -> Tuple[Matrix2, ...]:
    """Split points into one matrix per coordinate index.

    ``points`` is either a flat list (giving ``1 x n`` matrices) or a
    nested grid of points.  Reads are zero-padded, so asking for ``z`` of
    planar points yields zeros.
    """

    points = list(points)
    if points and isinstance(points[0], Point):
        rows = [points]
    else:
        rows = [list(r) for r in points]
    for idx in indices:
        if not isgoodnum(idx) or isinstance(idx, float):
            raise ValueError('bad coordinate index passed to split_coords: {}'.format(idx))
    return tuple(
        Matrix2.from_rows([[p.value(idx) for p in row] for row in rows])
        for idx in indices
    )


__all__ = [
    'DEFAULT_SAMPLES',
    'Evaluatable',
    'RealRange',
    'evaluate_parametric_range1d',
    'evaluate_parametric_range2d',
    'split_coords',
]
