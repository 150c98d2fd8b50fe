# core/utils.py
from core.consts import EPSILON
from core.vector import Vector


def float_eq(a: float, b: float, eps: float = EPSILON) -> bool:
    """
    Compares two floats with an absolute tolerance.
    """
    return abs(a - b) < eps


def reflect(v: Vector, n: Vector) -> Vector:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)
