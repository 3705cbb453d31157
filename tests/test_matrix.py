import numpy as np
import pytest
from isogeo.errors import DimensionError
from isogeo.matrix import *
from isogeo.point import Point
## unit tests for isogeo matrix.py


class TestMatrix2:
    """unit tests for isogeo matrix storage"""

    def test_get(self):
        m = Matrix2.from_rows([[1.0, 2.0],
                               [3.0, 4.0]])
        assert m.value(0, 0) == 1.0
        assert m.value(0, 1) == 2.0
        assert m.value(1, 0) == 3.0
        assert m.value(1, 1) == 4.0

    def test_set(self):
        m = Matrix2.from_rows([[1.0, 2.0],
                               [3.0, 4.0]])
        m.set_value(0, 0, 15.0)
        assert m.m == [[15.0, 2.0], [3.0, 4.0]]
        with pytest.raises(IndexError):
            m.set_value(2, 0, 1.0)
        with pytest.raises(IndexError):
            m.value(0, -1)
        with pytest.raises(ValueError):
            m.set_value(0, 0, 'x')

    def test_size(self):
        m = Matrix2.from_rows([[1.0, 2.0],
                               [3.0, 4.0],
                               [5.0, 6.0]])
        assert m.rows() == 3
        assert m.cols() == 2
        assert m.size() == Size(width=2, height=3)
        assert Matrix2(2, 5).size() == Size(5, 2)

    def test_add(self):
        m1 = Matrix2.from_rows([[1.0, 2.0, 3.0]])
        m2 = Matrix2.from_rows([[1.0, 1.0, 1.0]])
        assert m2.add(m1) is m2
        assert m2 != m1
        assert m2 == Matrix2.from_rows([[2.0, 3.0, 4.0]])
        with pytest.raises(DimensionError):
            m2.add(Matrix2(1, 2))

    def test_operators(self):
        m1 = Matrix2.from_rows([[1.0, 2.0]])
        m2 = Matrix2.from_rows([[3.0, 5.0]])
        assert (m1 + m2).m == [[4.0, 7.0]]
        assert (m1 * 2.0).m == [[2.0, 4.0]]
        assert (0.5 * m2).m == [[1.5, 2.5]]
        # operands are untouched
        assert m1.m == [[1.0, 2.0]]

    def test_bad_init(self):
        with pytest.raises(ValueError):
            Matrix2(-1, 2)
        with pytest.raises(ValueError):
            Matrix2.from_rows([[1.0, 2.0], [3.0]])
        with pytest.raises(ValueError):
            Matrix2.from_rows([[1.0, False]])

    def test_rows_and_points(self):
        m = Matrix2.from_points([Point.point3d(1, 2, 3), Point.point3d(4, 5, 6)])
        assert m.size() == Size(3, 2)
        assert m.row(1) == [4, 5, 6]
        assert m.row_point(0) == Point.point3d(1, 2, 3)
        m.set_row_point(0, Point.point3d(7, 8, 9))
        assert m.row(0) == [7, 8, 9]
        with pytest.raises(DimensionError):
            m.set_row(0, [1, 2])
        with pytest.raises(DimensionError):
            Matrix2.from_points([Point.point2d(1, 2), Point.point3d(1, 2, 3)])

    def test_set_row_rejects_non_numbers(self):
        m = Matrix2.from_rows([[1.0, 2.0, 3.0]])
        with pytest.raises(ValueError):
            m.set_row(0, ['a', 'b', 'c'])
        with pytest.raises(ValueError):
            m.set_row(0, [1.0, True, 3.0])
        assert m.row(0) == [1.0, 2.0, 3.0]

    def test_row_is_a_copy(self):
        m = Matrix2.from_rows([[1.0, 2.0]])
        r = m.row(0)
        r[0] = 10.0
        assert m.value(0, 0) == 1.0

    def test_numpy_roundtrip(self):
        arr = np.arange(6, dtype=float).reshape(2, 3)
        m = Matrix2.from_array(arr)
        assert m.size() == Size(3, 2)
        assert m.value(1, 2) == 5.0
        assert np.array_equal(m.to_array(), arr)
        assert Matrix2(0, 0).to_array().shape == (0, 0)
        with pytest.raises(ValueError):
            Matrix2.from_array(np.zeros(3))
