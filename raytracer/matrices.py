"""Dense matrices of floats and the linear algebra the tracer needs."""

from __future__ import annotations

from typing import Iterable, Iterator

from raytracer.tuples import EPSILON, Point, Vector


class Matrix:
    """An immutable, rectangular matrix of floats.

    Equality is approximate: two matrices are equal when no pair of
    corresponding entries differs by more than ``EPSILON``.
    """

    __slots__ = ("_rows",)

    def __init__(self, rows: Iterable[Iterable[float]]) -> None:
        data = tuple(tuple(float(value) for value in row) for row in rows)
        if not data or not data[0]:
            raise ValueError("a matrix needs at least one row and one column")
        width = len(data[0])
        if any(len(row) != width for row in data):
            raise ValueError("all rows of a matrix must have the same length")
        self._rows = data

    @classmethod
    def filled(cls, rows: int, cols: int, value: float = 0.0) -> Matrix:
        """Return a ``rows`` x ``cols`` matrix with every entry set to ``value``."""
        return cls([[value] * cols for _ in range(rows)])

    @classmethod
    def identity(cls, size: int = 4) -> Matrix:
        """Return the ``size`` x ``size`` identity matrix."""
        return cls(
            [[1.0 if row == col else 0.0 for col in range(size)] for row in range(size)]
        )

    @property
    def rows(self) -> tuple[tuple[float, ...], ...]:
        return self._rows

    @property
    def shape(self) -> tuple[int, int]:
        return len(self._rows), len(self._rows[0])

    def __getitem__(self, key: tuple[int, int]) -> float:
        row, col = key
        return self._rows[row][col]

    def __iter__(self) -> Iterator[tuple[float, ...]]:
        return iter(self._rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            return False
        # Written as "not greater than" so that NaN entries compare equal.
        return not any(
            abs(a - b) > EPSILON
            for row_a, row_b in zip(self._rows, other._rows)
            for a, b in zip(row_a, row_b)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix({[list(row) for row in self._rows]!r})"

    def __mul__(self, other):
        if isinstance(other, Matrix):
            return self._multiply(other)
        if isinstance(other, (Point, Vector)):
            return self._apply(other)
        return NotImplemented

    __matmul__ = __mul__

    def _multiply(self, other: Matrix) -> Matrix:
        rows, inner = self.shape
        other_rows, cols = other.shape
        if inner != other_rows:
            raise ValueError(f"cannot multiply {self.shape} by {other.shape}")
        columns = list(zip(*other._rows))
        return Matrix(
            [[sum(a * b for a, b in zip(row, column)) for column in columns] for row in self._rows]
        )

    def _apply(self, value):
        if self.shape != (4, 4):
            raise ValueError(f"only a 4x4 matrix transforms a tuple, not {self.shape}")
        components = tuple(value)
        x, y, z = (
            sum(a * b for a, b in zip(row, components)) for row in self._rows[:3]
        )
        return type(value)(x, y, z)

    def then(self, other: Matrix) -> Matrix:
        """Compose so that ``self`` is applied first and ``other`` second."""
        return other * self


def _require_square(a: Matrix) -> int:
    rows, cols = a.shape
    if rows != cols:
        raise ValueError(f"matrix must be square, not {a.shape}")
    return rows


def transpose(a: Matrix) -> Matrix:
    """Return ``a`` with rows and columns swapped."""
    return Matrix(zip(*a.rows))


def submatrix(a: Matrix, row: int, col: int) -> Matrix:
    """Return ``a`` with the given row and column removed."""
    size = _require_square(a)
    if size < 2:
        raise ValueError("a 1x1 matrix has no submatrix")
    if not (0 <= row < size and 0 <= col < size):
        raise IndexError(f"position ({row}, {col}) outside a {size}x{size} matrix")
    return Matrix(
        [value for x, value in enumerate(values) if x != col]
        for y, values in enumerate(a.rows)
        if y != row
    )


def minor(a: Matrix, row: int, col: int) -> float:
    """Return the determinant of the submatrix at ``(row, col)``."""
    return determinant(submatrix(a, row, col))


def cofactor(a: Matrix, row: int, col: int) -> float:
    """Return the minor at ``(row, col)``, negated where ``row + col`` is odd."""
    value = minor(a, row, col)
    return value if (row + col) % 2 == 0 else -value


def determinant(a: Matrix) -> float:
    """Return the determinant of a square matrix by cofactor expansion."""
    size = _require_square(a)
    if size == 1:
        return a[0, 0]
    if size == 2:
        return a[0, 0] * a[1, 1] - a[0, 1] * a[1, 0]
    return sum(cofactor(a, 0, col) * a[0, col] for col in range(size))


def is_invertible(a: Matrix) -> bool:
    return determinant(a) != 0.0


def inverse(m: Matrix) -> Matrix | None:
    """Return the inverse of ``m``, or ``None`` if ``m`` is singular."""
    det = determinant(m)
    if det == 0.0:
        return None
    size = m.shape[0]
    return Matrix(
        [[cofactor(m, col, row) / det for col in range(size)] for row in range(size)]
    )