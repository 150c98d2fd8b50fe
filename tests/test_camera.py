"""Tests for the pinhole camera."""

import math
import pytest
from core.color import Color
from core.matrix import Matrix
from core.transformations import rotation_y, scaling, translation, view_transform
from core.vector import Point, Vector
from camera.camera import Camera

SQRT2_2 = math.sqrt(2) / 2


class TestCameraConstruction:
    def test_fields(self):
        c = Camera(160, 120, math.pi / 2)
        assert c.hsize == 160
        assert c.vsize == 120
        assert c.field_of_view == math.pi / 2
        assert c.transform == Matrix.identity(4)

    def test_pixel_size_horizontal_canvas(self):
        assert Camera(200, 125, math.pi / 2).pixel_size == pytest.approx(0.01)

    def test_pixel_size_vertical_canvas(self):
        assert Camera(125, 200, math.pi / 2).pixel_size == pytest.approx(0.01)

    def test_longer_side_spans_field_of_view(self):
        wide = Camera(200, 100, math.pi / 2)
        tall = Camera(100, 200, math.pi / 2)
        assert wide.half_width == pytest.approx(1.0)
        assert wide.half_height == pytest.approx(0.5)
        assert tall.half_width == pytest.approx(0.5)
        assert tall.half_height == pytest.approx(1.0)

    def test_rejects_empty_canvas(self):
        with pytest.raises(ValueError):
            Camera(0, 10, math.pi / 2)


class TestRayForPixel:
    def test_center_of_canvas(self):
        r = Camera(201, 101, math.pi / 2).ray_for_pixel(100, 50)
        assert r.origin.approx_eq(Point(0, 0, 0))
        assert r.direction.approx_eq(Vector(0, 0, -1))

    def test_corner_of_canvas(self):
        r = Camera(201, 101, math.pi / 2).ray_for_pixel(0, 0)
        assert r.origin.approx_eq(Point(0, 0, 0))
        assert r.direction.approx_eq(Vector(0.66519, 0.33259, -0.66851))

    def test_transformed_camera(self):
        c = Camera(201, 101, math.pi / 2, rotation_y(math.pi / 4) * translation(0, -2, 5))
        r = c.ray_for_pixel(100, 50)
        assert r.origin.approx_eq(Point(0, 2, -5))
        assert r.direction.approx_eq(Vector(SQRT2_2, 0, -SQRT2_2))

    def test_direction_is_normalized(self):
        r = Camera(11, 7, math.pi / 3).ray_for_pixel(2, 5)
        assert r.direction.magnitude() == pytest.approx(1.0)

    def test_non_invertible_transform_is_a_configuration_error(self):
        c = Camera(10, 10, math.pi / 2)
        c.set_transform(scaling(0, 1, 1))
        with pytest.raises(ValueError):
            c.ray_for_pixel(0, 0)


def test_render_default_world(default_world):
    c = Camera(11, 11, math.pi / 2,
               view_transform(Point(0, 0, -5), Point(0, 0, 0), Vector(0, 1, 0)))
    image = c.render(default_world)
    assert (image.width, image.height) == (11, 11)
    assert image.pixel_at(5, 5).approx_eq(Color(0.38066, 0.47583, 0.2855))
