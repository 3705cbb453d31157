"""Bernstein basis polynomials for isogeo.

``B_i^n(xi) = C(n, i) * xi**i * (1 - xi)**(n - i)`` is the weight of control
point ``i`` in a degree ``n`` Bezier curve.  The binomial coefficient is
built from factorials accumulated in double precision, so for degrees
above 170 the factorials overflow and evaluation returns NaN.  That
limit is not reported; use De Casteljau evaluation for high degrees.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from isogeo.point import Point

logger = logging.getLogger(__name__)


def fact(n: int) -> float:
    """Return ``n!`` as a float (``inf`` once it exceeds the double range)."""

    result = 1.0
    for k in range(2, n + 1):
        result *= k
    return result


def _is_index(n) -> bool:
    return isinstance(n, int) and not isinstance(n, bool) and n >= 0


@dataclass(frozen=True)
class Bernstein:
    """Bernstein basis polynomial of degree ``n`` and index ``i``.

    Prefer :meth:`create`, which returns ``None`` for an invalid pair
    instead of raising.
    """

    n: int
    i: int

    def __post_init__(self) -> None:
        if not (_is_index(self.n) and _is_index(self.i)) or self.i > self.n:
            raise ValueError('bad degree/index passed to Bernstein: {}, {}'.format(self.n, self.i))

    @classmethod
    def create(cls, n: int, i: int) -> Optional["Bernstein"]:
        """Return the basis polynomial ``B_i^n`` or ``None`` if ``i > n``.

        Callers must check the result before use.
        """

        if not (_is_index(n) and _is_index(i)):
            logger.warning('Degree and index must be non-negative integers: %r, %r', n, i)
            return None
        if i > n:
            logger.warning('Index cannot be greater than degree: %d > %d', i, n)
            return None
        return cls(n, i)

    @property
    def degree(self) -> int:
        return self.n

    @property
    def index(self) -> int:
        return self.i

    def evaluate(self, xi: Point) -> Point:
        """Evaluate at the first coordinate of the parametric point ``xi``.

        The input is not clamped to ``[0, 1]``; outside that interval the
        value may be negative or exceed one.
        """

        ## float ** raises OverflowError, numpy overflows to +-inf instead
        with np.errstate(over='ignore', invalid='ignore'):
            t = np.float64(xi.value(0))
            num = fact(self.n) * t ** self.i * (1.0 - t) ** (self.n - self.i)
            den = fact(self.i) * fact(self.n - self.i)
            return Point.point1d(float(num / den))


__all__ = [
    'fact',
    'Bernstein',
]
