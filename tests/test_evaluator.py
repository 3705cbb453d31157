import pytest

from isogeo.bernstein import Bernstein
from isogeo.bezier import BezierCurve, BezierSurf
from isogeo.evaluator import (
    DEFAULT_SAMPLES,
    RealRange,
    evaluate_parametric_range1d,
    evaluate_parametric_range2d,
    split_coords,
)
from isogeo.matrix import Matrix2, Size
from isogeo.point import p1, p2, p3


def test_range_samples():
    r = RealRange(0.0, 1.0)
    assert r.samples(5) == [0.0, 0.25, 0.5, 0.75, 1.0]
    assert r.samples(1) == [0.0]
    assert RealRange(-1.0, 3.0).samples(2) == [-1.0, 3.0]
    with pytest.raises(ValueError):
        r.samples(0)
    with pytest.raises(ValueError):
        r.samples(2.5)


def test_range1d_over_curve():
    curve = BezierCurve([p3(0, 0, 0), p3(1, 2, 0), p3(2, 0, 0)])
    xs, ys = evaluate_parametric_range1d(curve, RealRange(0.0, 1.0), samples=3)
    assert xs == [p1(0.0), p1(0.5), p1(1.0)]
    assert ys[1].isclose(p3(1, 1, 0), 1e-12)
    assert ys[-1].isclose(p3(2, 0, 0), 1e-12)


def test_range1d_default_samples():
    xs, ys = evaluate_parametric_range1d(Bernstein(2, 1), RealRange(0.0, 1.0))
    assert len(xs) == len(ys) == DEFAULT_SAMPLES
    assert all(y.dim() == 1 for y in ys)


def test_range2d_over_surface():
    surf = BezierSurf([[p3(0, 0, 0), p3(0, 1, 0)],
                       [p3(1, 0, 0), p3(1, 1, 1)]])
    r = RealRange(0.0, 1.0)
    xi, values = evaluate_parametric_range2d(surf, r, r, samples=3)
    assert len(xi) == 3 and all(len(row) == 3 for row in xi)
    assert xi[2][0] == p2(1.0, 0.0)
    assert values[1][1].isclose(p3(0.5, 0.5, 0.25), 1e-12)
    assert values[2][2].isclose(p3(1, 1, 1), 1e-12)


def test_split_coords_flat():
    curve = BezierCurve([p3(0, 0, 0), p3(1, 2, 3)])
    _, ys = evaluate_parametric_range1d(curve, RealRange(0.0, 1.0), samples=5)
    xm, ym, zm = split_coords(ys)
    assert xm.size() == Size(width=5, height=1)
    for k, y in enumerate(ys):
        assert xm.value(0, k) == y.x
        assert ym.value(0, k) == y.y
        assert zm.value(0, k) == y.z


def test_split_coords_grid_and_padding():
    grid = [[p2(1, 2), p2(3, 4)],
            [p2(5, 6), p2(7, 8)]]
    xm, zm = split_coords(grid, indices=(0, 2))
    assert xm == Matrix2.from_rows([[1, 3], [5, 7]])
    assert zm == Matrix2.from_rows([[0, 0], [0, 0]])


def test_split_coords_bad_index():
    with pytest.raises(ValueError):
        split_coords([p1(0.0)], indices=(0.5,))


def test_split_coords_to_numpy():
    surf = BezierSurf([[p3(0, 0, 0), p3(0, 1, 0)],
                       [p3(1, 0, 0), p3(1, 1, 1)]])
    r = RealRange(0.0, 1.0)
    _, values = evaluate_parametric_range2d(surf, r, r, samples=4)
    xm, ym, zm = split_coords(values)
    assert zm.to_array().shape == (4, 4)
    assert zm.to_array()[3, 3] == pytest.approx(1.0)
