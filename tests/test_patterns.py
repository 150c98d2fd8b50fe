"""Tests for the procedural patterns."""

import pytest
from core.color import BLACK, WHITE, Color
from core.matrix import Matrix
from core.transformations import scaling, translation
from core.vector import Point
from geometry.sphere import Sphere
from materials.patterns import CheckerPattern, GradientPattern, Pattern, RingPattern, StripePattern


class TestStripePattern:
    def test_defaults(self):
        p = StripePattern()
        assert p.a == WHITE
        assert p.b == BLACK
        assert p.get_transform() == Matrix.identity(4)

    @pytest.mark.parametrize("point", [Point(0, 0, 0), Point(0, 1, 0), Point(0, 2, 0),
                                       Point(0, 0, 1), Point(0, 0, 2)])
    def test_constant_in_y_and_z(self, point):
        assert StripePattern().at(point) == WHITE

    @pytest.mark.parametrize("x, expected", [
        (0, WHITE), (0.9, WHITE), (1, BLACK), (-0.1, BLACK), (-1, BLACK), (-1.1, WHITE),
    ])
    def test_alternates_in_x(self, x, expected):
        assert StripePattern().at(Point(x, 0, 0)) == expected

    def test_object_transform(self):
        shape = Sphere(scaling(2, 2, 2))
        assert StripePattern().at_shape(shape, Point(1.5, 0, 0)) == WHITE

    def test_pattern_transform(self):
        p = StripePattern(transform=scaling(2, 2, 2))
        assert p.at_shape(Sphere(), Point(1.5, 0, 0)) == WHITE

    def test_object_and_pattern_transform(self):
        p = StripePattern(transform=translation(0.5, 0, 0))
        assert p.at_shape(Sphere(scaling(2, 2, 2)), Point(2.5, 0, 0)) == WHITE

    def test_non_invertible_transforms(self):
        assert StripePattern().at_shape(Sphere(scaling(0, 1, 1)), Point(0, 0, 0)) is None
        p = StripePattern(transform=scaling(1, 0, 1))
        assert p.at_shape(Sphere(), Point(0, 0, 0)) is None


class TestGradientPattern:
    @pytest.mark.parametrize("x, expected", [
        (0, WHITE),
        (0.25, Color(0.75, 0.75, 0.75)),
        (0.5, Color(0.5, 0.5, 0.5)),
        (0.75, Color(0.25, 0.25, 0.25)),
    ])
    def test_interpolates(self, x, expected):
        assert GradientPattern().at(Point(x, 0, 0)).approx_eq(expected)

    def test_repeats_each_unit(self):
        g = GradientPattern(Color(1, 0, 0), Color(0, 0, 1))
        assert g.at(Point(1.5, 0, 0)).approx_eq(g.at(Point(0.5, 0, 0)))
        assert g.from_color == Color(1, 0, 0)
        assert g.to_color == Color(0, 0, 1)


class TestRingPattern:
    @pytest.mark.parametrize("point, expected", [
        (Point(0, 0, 0), WHITE),
        (Point(1, 0, 0), BLACK),
        (Point(0, 0, 1), BLACK),
        (Point(0.708, 0, 0.708), BLACK),
        (Point(2, 5, 0), WHITE),
    ])
    def test_rings(self, point, expected):
        assert RingPattern().at(point) == expected


class TestCheckerPattern:
    @pytest.mark.parametrize("point, expected", [
        (Point(0, 0, 0), WHITE),
        (Point(0.99, 0, 0), WHITE),
        (Point(1.01, 0, 0), BLACK),
        (Point(0, 0.99, 0), WHITE),
        (Point(0, 1.01, 0), BLACK),
        (Point(0, 0, 0.99), WHITE),
        (Point(0, 0, 1.01), BLACK),
        (Point(-1.01, 0, 0), BLACK),
    ])
    def test_checks(self, point, expected):
        assert CheckerPattern().at(point) == expected


def test_base_pattern_is_abstract():
    with pytest.raises(NotImplementedError):
        Pattern().at(Point(0, 0, 0))


def test_patterns_compare_by_value():
    assert StripePattern() == StripePattern()
    assert StripePattern() != RingPattern()
    assert StripePattern(transform=scaling(2, 2, 2)) != StripePattern()
