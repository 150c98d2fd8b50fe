# core/matrix.py
from typing import Optional, Sequence
import numpy as np
from core.consts import EPSILON
from core.vector import Tuple

class Matrix:
    """
    A square matrix backed by a float64 numpy array.

    Determinant and inverse are computed by cofactor expansion. inverse()
    returns None for a singular matrix instead of a degenerate result. The
    inverse is cached privately and every call returns a fresh copy; any
    element write drops the cache.
    """
    def __init__(self, rows: Sequence[Sequence[float]]):
        data = np.array(rows, dtype=np.float64)
        if data.ndim != 2 or data.shape[0] != data.shape[1]:
            raise ValueError(f"Matrix must be square, got shape {data.shape}")
        self.data = data
        self._inverse = None

    @staticmethod
    def identity(size: int = 4) -> "Matrix":
        return Matrix(np.identity(size))

    @property
    def size(self) -> int:
        return self.data.shape[0]

    def __getitem__(self, index) -> float:
        row, column = index
        return float(self.data[row, column])

    def write_element(self, row: int, column: int, value: float):
        self.data[row, column] = value
        self._inverse = None

    def transpose(self) -> "Matrix":
        return Matrix(self.data.T)

    def submatrix(self, row: int, column: int) -> "Matrix":
        """
        Returns a copy with the given row and column removed.
        """
        sub = np.delete(np.delete(self.data, row, axis=0), column, axis=1)
        return Matrix(sub)

    def minor(self, row: int, column: int) -> float:
        return self.submatrix(row, column).determinant()

    def cofactor(self, row: int, column: int) -> float:
        minor = self.minor(row, column)
        return -minor if (row + column) % 2 else minor

    def determinant(self) -> float:
        if self.size == 1:
            return float(self.data[0, 0])
        if self.size == 2:
            return float(self.data[0, 0] * self.data[1, 1] - self.data[0, 1] * self.data[1, 0])
        det = 0.0
        for column in range(self.size):
            det += self.data[0, column] * self.cofactor(0, column)
        return float(det)

    def is_invertible(self) -> bool:
        return self.determinant() != 0

    def inverse(self) -> Optional["Matrix"]:
        if self._inverse is not None:
            return Matrix(self._inverse)
        det = self.determinant()
        if det == 0:
            return None
        out = np.empty_like(self.data)
        for row in range(self.size):
            for column in range(self.size):
                # Transposed write: the adjugate over the determinant.
                out[column, row] = self.cofactor(row, column) / det
        self._inverse = out
        return Matrix(out)

    def __mul__(self, other):
        if isinstance(other, Matrix):
            if other.size != self.size:
                raise ValueError(f"Cannot multiply {self.size}x{self.size} by {other.size}x{other.size}")
            return Matrix(self.data @ other.data)
        if isinstance(other, Tuple):
            if self.size != 4:
                raise ValueError("Only 4x4 matrices transform tuples")
            m = self.data
            x, y, z, w = other.x, other.y, other.z, other.w
            return Tuple.from_w(
                m[0, 0] * x + m[0, 1] * y + m[0, 2] * z + m[0, 3] * w,
                m[1, 0] * x + m[1, 1] * y + m[1, 2] * z + m[1, 3] * w,
                m[2, 0] * x + m[2, 1] * y + m[2, 2] * z + m[2, 3] * w,
                w,
            )
        return NotImplemented

    def __matmul__(self, other):
        return self.__mul__(other)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.data.shape == other.data.shape and bool(np.array_equal(self.data, other.data))

    def __hash__(self):
        return hash(self.data.tobytes())

    def approx_eq(self, other: "Matrix", eps: float = EPSILON) -> bool:
        return self.data.shape == other.data.shape and bool(np.allclose(self.data, other.data, rtol=0.0, atol=eps))

    def __repr__(self) -> str:
        return f"Matrix({self.data.tolist()})"
