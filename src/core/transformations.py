# core/transformations.py
import math
from functools import reduce
from core.matrix import Matrix
from core.vector import Point, Vector


def translation(x: float, y: float, z: float) -> Matrix:
    out = Matrix.identity(4)
    out.write_element(0, 3, x)
    out.write_element(1, 3, y)
    out.write_element(2, 3, z)
    return out


def scaling(x: float, y: float, z: float) -> Matrix:
    out = Matrix.identity(4)
    out.write_element(0, 0, x)
    out.write_element(1, 1, y)
    out.write_element(2, 2, z)
    return out


def rotation_x(rad: float) -> Matrix:
    """Rotation about the x axis, left-handed, by rad radians."""
    c, s = math.cos(rad), math.sin(rad)
    return Matrix([
        [1.0, 0.0, 0.0, 0.0],
        [0.0, c, -s, 0.0],
        [0.0, s, c, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])


def rotation_y(rad: float) -> Matrix:
    c, s = math.cos(rad), math.sin(rad)
    return Matrix([
        [c, 0.0, s, 0.0],
        [0.0, 1.0, 0.0, 0.0],
        [-s, 0.0, c, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])


def rotation_z(rad: float) -> Matrix:
    c, s = math.cos(rad), math.sin(rad)
    return Matrix([
        [c, -s, 0.0, 0.0],
        [s, c, 0.0, 0.0],
        [0.0, 0.0, 1.0, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])


def shearing(xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
    """
    Shear transform. Each coefficient moves the first named component in
    proportion to the second, e.g. xy moves x in proportion to y.
    """
    return Matrix([
        [1.0, xy, xz, 0.0],
        [yx, 1.0, yz, 0.0],
        [zx, zy, 1.0, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])


def view_transform(from_: Point, to: Point, up: Vector) -> Matrix:
    """
    Builds the world-to-camera transform for an eye at from_ looking at to.

    Args:
        from_: Eye position.
        to: Point the eye looks at.
        up: Approximate up direction, need not be normalized or orthogonal.

    Returns:
        Matrix: orientation basis composed with a translation by -from_.
    """
    forward = (to - from_).normalize()
    left = forward.cross(up.normalize())
    true_up = left.cross(forward)
    orientation = Matrix([
        [left.x, left.y, left.z, 0.0],
        [true_up.x, true_up.y, true_up.z, 0.0],
        [-forward.x, -forward.y, -forward.z, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])
    return orientation * translation(-from_.x, -from_.y, -from_.z)


def chain(*transforms: Matrix) -> Matrix:
    """
    Composes transforms in application order: chain(a, b, c) == c * b * a.
    """
    if not transforms:
        return Matrix.identity(4)
    return reduce(lambda acc, m: m * acc, transforms)
