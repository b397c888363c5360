import math

import pytest

from labworks.convexity import Point, cross_product, is_convex, main, polynomial_value


def test_square_is_convex():
    assert is_convex(Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1)) is True


def test_crossed_quadrilateral_is_not_convex():
    assert is_convex(Point(0, 0), Point(1, 0), Point(0, 1), Point(1, 1)) is False


def test_clockwise_square_is_convex():
    assert is_convex((0, 1), (1, 1), (1, 0), (0, 0)) is True


def test_few_points_are_convex():
    assert is_convex(Point(0, 0), Point(10, 0), Point(0.001, 0.001)) is True
    assert is_convex(Point(0, 0)) is True
    assert is_convex() is True


def test_regular_polygon_is_convex():
    points = [(math.cos(2 * math.pi * k / 7), math.sin(2 * math.pi * k / 7)) for k in range(7)]
    assert is_convex(*points) is True


def test_concave_polygon():
    assert is_convex((0, 0), (2, 0), (1, 1), (2, 2), (0, 2)) is False


def test_cross_product_collinear():
    assert cross_product((0, 0), (1, 1), (2, 2)) == 0.0


@pytest.mark.parametrize("a,b,c", [((0, 0), (3, 1), (2, 5)), ((1, -2), (4, 4), (-3, 0.5))])
def test_cross_product_changes_sign_with_orientation(a, b, c):
    assert cross_product(a, b, c) == pytest.approx(-cross_product(a, c, b))


def test_polynomial_constant():
    assert polynomial_value(2.0, 3.5) == 3.5


def test_polynomial_value_at_root():
    assert polynomial_value(1.0, 2.0, -3.0, 0.0, 1.0) == pytest.approx(0.0)


def test_polynomial_overflow():
    with pytest.raises(OverflowError):
        polynomial_value(1e200, 1.0, 0.0, 0.0)


def test_polynomial_needs_coefficients():
    with pytest.raises(ValueError):
        polynomial_value(1.0)


def test_main_output(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "1\n0\n1\n1\n1\n3.500000\n0.000000\n"