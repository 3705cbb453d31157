import math
import random

import pytest

from isogeo.bezier import BezierCurve
from isogeo.errors import DimensionError
from isogeo.point import Point, p1, p2, p3


def _close(a, b, tol=1e-9):
    assert a.isclose(b, tol), '{} != {}'.format(a, b)


def _grid(count=21):
    return [i / (count - 1) for i in range(count)]


def _random_curve(rnd, degree):
    return BezierCurve([
        p3(rnd.uniform(-5, 5), rnd.uniform(-5, 5), rnd.uniform(-5, 5))
        for _ in range(degree + 1)
    ])


def test_degree():
    curve = BezierCurve([p3(0, 0, 0), p3(1, 1, 0), p3(2, 0, 0)])
    assert curve.degree == 2
    assert BezierCurve([p3(1, 2, 3)]).degree == 0


def test_needs_control_points():
    with pytest.raises(ValueError):
        BezierCurve([])


def test_control_points_are_copied():
    ctrl = [p3(0, 0, 0), p3(1, 1, 1)]
    curve = BezierCurve(ctrl)
    ctrl[0].set_value(0, 100.0)
    assert curve.p[0] == p3(0, 0, 0)


def test_planar_control_points_are_lifted():
    curve = BezierCurve([p2(0, 0), p2(1, 1), p1(2)])
    assert all(p.dim() == 3 for p in curve.p)
    assert curve.p[2] == p3(2, 0, 0)
    value = curve.evaluate_de_casteljau(p1(0.5))
    assert value.dim() == 3
    assert value.z == 0.0


def test_rejects_high_dimensional_points():
    with pytest.raises(DimensionError):
        BezierCurve([Point.point4d(0, 0, 0, 1)])


def test_linear_curve_is_interpolation():
    rnd = random.Random(1)
    for _ in range(20):
        a = p3(rnd.uniform(-5, 5), rnd.uniform(-5, 5), rnd.uniform(-5, 5))
        b = p3(rnd.uniform(-5, 5), rnd.uniform(-5, 5), rnd.uniform(-5, 5))
        curve = BezierCurve([a, b])
        for t in _grid():
            expected = a * (1.0 - t) + b * t
            _close(curve.evaluate_direct(p1(t)), expected)
            _close(curve.evaluate_de_casteljau(p1(t)), expected)


def test_constant_curve():
    p = p3(1.5, -2.0, 3.25)
    curve = BezierCurve([p])
    for t in (0.0, 0.3, 1.0, 1.7, -0.4):
        assert curve.evaluate_de_casteljau(p1(t)) == p
        assert curve.evaluate_direct(p1(t)) == p


def test_end_points():
    curve = BezierCurve([p3(0, 0, 0), p3(1, 1, 0), p3(2, 0.5, 0), p3(3, 0.5, 1)])
    _close(curve.evaluate(p1(0.0)), p3(0, 0, 0))
    _close(curve.evaluate(p1(1.0)), p3(3, 0.5, 1))


def test_quadratic_midpoint():
    curve = BezierCurve([p3(0, 0, 0), p3(1, 2, 0), p3(2, 0, 0)])
    _close(curve.evaluate_direct(p1(0.5)), p3(1, 1, 0))
    _close(curve.evaluate_de_casteljau(p1(0.5)), p3(1, 1, 0))


@pytest.mark.parametrize('degree', range(0, 11))
def test_direct_and_de_casteljau_agree(degree):
    rnd = random.Random(degree)
    for _ in range(5):
        curve = _random_curve(rnd, degree)
        for t in _grid():
            _close(curve.evaluate_direct(p1(t)), curve.evaluate_de_casteljau(p1(t)), tol=1e-6)


def test_evaluate_uses_de_casteljau():
    curve = _random_curve(random.Random(3), 6)
    for t in _grid(7):
        assert curve.evaluate(p1(t)) == curve.evaluate_de_casteljau(p1(t))


def test_six_point_planar_curve():
    curve = BezierCurve([
        p2(0, 0),
        p2(1, 1),
        p2(2, 0.5),
        p2(3, 0.5),
        p2(0.5, 1.5),
        p2(1.5, 0),
    ])
    for t in _grid():
        _close(curve.evaluate_direct(p1(t)), curve.evaluate_de_casteljau(p1(t)), tol=1e-9)


def test_exact_evaluation_matches_de_casteljau_at_high_degree():
    curve = _random_curve(random.Random(30), 30)
    for t in _grid(11):
        _close(curve.evaluate_de_casteljau(p1(t)), curve.evaluate_exact(p1(t)), tol=1e-9)


def test_exact_evaluation_low_degree():
    curve = BezierCurve([p3(0, 0, 0), p3(1, 2, 0), p3(2, 0, 0)])
    assert curve.evaluate_exact(p1(0.5), dps=30) == p3(1, 1, 0)


def test_evaluation_is_idempotent():
    curve = _random_curve(random.Random(11), 4)
    xi = p1(0.37)
    first = curve.evaluate_de_casteljau(xi)
    assert curve.evaluate_de_casteljau(xi) == first
    assert xi == p1(0.37)


def test_direct_evaluation_far_outside_unit_interval():
    curve = BezierCurve([p3(0, 0, 0), p3(1, 1, 0), p3(2, 0.5, 0), p3(3, 0.5, 1), p3(4, 0, 1)])
    xi = p1(1e100)
    direct = curve.evaluate_direct(xi)
    de_casteljau = curve.evaluate_de_casteljau(xi)
    assert direct.dim() == 3 and de_casteljau.dim() == 3
    assert not all(math.isfinite(v) for v in direct)
