"""Dense matrices with arithmetic and fast exponentiation."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def _number(token: str):
    try:
        return int(token)
    except ValueError:
        return float(token)


class Matrix:
    """A rectangular matrix stored as a list of rows."""

    def __init__(self, rows: Iterable[Sequence]):
        self.data = [list(r) for r in rows]
        if not self.data:
            raise ValueError("matrix must have at least one row")
        width = len(self.data[0])
        if any(len(r) != width for r in self.data):
            raise ValueError("rows have different lengths")
        self.rows = len(self.data)
        self.cols = width

    @classmethod
    def zeros(cls, rows: int, cols: int) -> Matrix:
        return cls([[0] * cols for _ in range(rows)])

    @classmethod
    def identity(cls, n: int) -> Matrix:
        return cls([[int(i == j) for j in range(n)] for i in range(n)])

    @classmethod
    def parse(cls, text: str, rows: int, cols: int) -> Matrix:
        """Read ``rows * cols`` whitespace-separated numbers row by row."""
        tokens = text.split()
        if len(tokens) < rows * cols:
            raise ValueError("not enough numbers for the matrix")
        values = [_number(t) for t in tokens[: rows * cols]]
        return cls(values[i * cols:(i + 1) * cols] for i in range(rows))

    def __getitem__(self, index: int) -> list:
        return self.data[index]

    def _check_same_shape(self, other: Matrix) -> None:
        if (self.rows, self.cols) != (other.rows, other.cols):
            raise ValueError("matrix shapes differ")

    def __add__(self, other: Matrix) -> Matrix:
        self._check_same_shape(other)
        return Matrix([x + y for x, y in zip(r, s)] for r, s in zip(self.data, other.data))

    def __sub__(self, other: Matrix) -> Matrix:
        self._check_same_shape(other)
        return Matrix([x - y for x, y in zip(r, s)] for r, s in zip(self.data, other.data))

    def __mul__(self, other: Matrix) -> Matrix:
        if self.cols != other.rows:
            raise ValueError("incompatible shapes for multiplication")
        columns = list(zip(*other.data))
        return Matrix(
            [sum(x * y for x, y in zip(row, col)) for col in columns] for row in self.data
        )

    def __pow__(self, exponent: int) -> Matrix:
        if self.rows != self.cols:
            raise ValueError("only square matrices can be raised to a power")
        if exponent < 0:
            raise ValueError("exponent must be non-negative")
        result = Matrix.identity(self.rows)
        base = self
        while exponent:
            if exponent & 1:
                result = result * base
            base = base * base
            exponent >>= 1
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.data == other.data

    def __str__(self) -> str:
        return "\n".join(" ".join(str(x) for x in row) for row in self.data)

    def __repr__(self) -> str:
        return f"Matrix({self.data!r})"


def matrix_power(matrix: Matrix, exponent: int) -> Matrix:
    """Return ``matrix`` raised to ``exponent`` by binary exponentiation."""
    return matrix ** exponent