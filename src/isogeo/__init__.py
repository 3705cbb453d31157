# -*- coding: utf-8 -*-
import logging
from importlib.metadata import PackageNotFoundError, version

from isogeo.errors import DimensionError, GeometryError, InvalidConversionError
from isogeo.point import Point, RealPoint, IntPoint, p1, p2, p3
from isogeo.matrix import Matrix2, Size
from isogeo.bernstein import Bernstein, fact
from isogeo.bezier import BezierCurve, BezierFactory, BezierSurf
from isogeo.evaluator import (
    RealRange,
    evaluate_parametric_range1d,
    evaluate_parametric_range2d,
    split_coords,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

try:
    __version__ = version("isogeo")
except PackageNotFoundError:  # pragma: no cover - handled when package not installed
    __version__ = "unknown"
