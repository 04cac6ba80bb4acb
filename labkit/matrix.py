"""Dense real matrices with arithmetic, determinant and inverse."""

from __future__ import annotations

import sys
from numbers import Real

_DEFAULT_EPSILON = 1e-9
_DISPLAY_EPSILON = 1e-12


def round_to_zero(value: float, epsilon: float = _DEFAULT_EPSILON) -> float:
    """Return 0.0 when ``value`` is closer to zero than ``epsilon``."""
    return 0.0 if abs(value) < epsilon else value


class Matrix:
    """A ``rows`` x ``cols`` matrix of floats, initialised to zero."""

    def __init__(self, rows: int, cols: int) -> None:
        if rows <= 0 or cols <= 0:
            raise ValueError("invalid matrix size")
        self._rows = rows
        self._cols = cols
        self._data: list[list[float]] = [[0.0] * cols for _ in range(rows)]

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._rows

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self._cols

    def __getitem__(self, row: int) -> list[float]:
        """Return the row at ``row``; elements may be assigned through it."""
        if not 0 <= row < self._rows:
            raise IndexError("row index out of range")
        return self._data[row]

    def __iter__(self):
        return (list(row) for row in self._data)

    def __repr__(self) -> str:
        return f"Matrix({self._rows}, {self._cols}, {self._data!r})"

    def _same_shape(self, other: Matrix) -> None:
        if self._rows != other._rows or self._cols != other._cols:
            raise ValueError("matrix sizes mismatch")

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._same_shape(other)
        result = Matrix(self._rows, self._cols)
        result._data = [
            [a + b for a, b in zip(left, right)]
            for left, right in zip(self._data, other._data)
        ]
        return result

    def __sub__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._same_shape(other)
        result = Matrix(self._rows, self._cols)
        result._data = [
            [a - b for a, b in zip(left, right)]
            for left, right in zip(self._data, other._data)
        ]
        return result

    def __mul__(self, other: Matrix | float) -> Matrix:
        if isinstance(other, Matrix):
            if self._cols != other._rows:
                raise ValueError("matrix sizes mismatch")
            result = Matrix(self._rows, other._cols)
            for out_row, row in zip(result._data, self._data):
                for a, other_row in zip(row, other._data):
                    for j, b in enumerate(other_row):
                        out_row[j] += a * b
            return result
        if isinstance(other, Real):
            scalar = float(other)
            result = Matrix(self._rows, self._cols)
            result._data = [[value * scalar for value in row] for row in self._data]
            return result
        return NotImplemented

    def __rmul__(self, scalar: float) -> Matrix:
        if isinstance(scalar, Real):
            return self * scalar
        return NotImplemented

    def transpose(self) -> Matrix:
        """Return the transposed matrix."""
        result = Matrix(self._cols, self._rows)
        result._data = [list(column) for column in zip(*self._data)]
        return result

    def copy(self) -> Matrix:
        """Return an independent copy."""
        result = Matrix(self._rows, self._cols)
        result._data = [list(row) for row in self._data]
        return result

    def determinant(self, epsilon: float = _DEFAULT_EPSILON) -> float:
        """Return the determinant, computed by Gaussian elimination with pivoting."""
        if self._rows != self._cols:
            raise ValueError("determinant is defined for square matrices")
        n = self._rows
        temp = [list(row) for row in self._data]
        det = 1.0
        for i in range(n):
            pivot = max(range(i, n), key=lambda r: (abs(temp[r][i]), -r))
            if abs(temp[pivot][i]) < epsilon:
                return 0.0
            if pivot != i:
                temp[i], temp[pivot] = temp[pivot], temp[i]
                det = -det
            det *= temp[i][i]
            pivot_row = temp[i]
            for row in temp[i + 1:]:
                factor = row[i] / pivot_row[i]
                for k in range(i, n):
                    row[k] -= factor * pivot_row[k]
        return round_to_zero(det, epsilon)

    def inverse(self, epsilon: float = _DEFAULT_EPSILON) -> Matrix:
        """Return the inverse, computed by Gauss-Jordan elimination."""
        if self._rows != self._cols:
            raise ValueError("inverse is defined for square matrices")
        n = self._rows
        augmented = [
            list(row) + [1.0 if i == j else 0.0 for j in range(n)]
            for i, row in enumerate(self._data)
        ]

        def clean(row: list[float]) -> list[float]:
            return [round_to_zero(value, epsilon) for value in row]

        for i in range(n):
            pivot = max(range(i, n), key=lambda r: (abs(augmented[r][i]), -r))
            if abs(augmented[pivot][i]) < epsilon:
                raise ValueError("matrix is singular")
            if pivot != i:
                augmented[i], augmented[pivot] = augmented[pivot], augmented[i]

            divisor = augmented[i][i]
            augmented[i] = clean([value / divisor for value in augmented[i]])
            pivot_row = augmented[i]

            for j, row in enumerate(augmented):
                if j != i and abs(row[i]) > epsilon:
                    factor = row[i]
                    augmented[j] = clean(
                        [value - factor * p for value, p in zip(row, pivot_row)]
                    )

        result = Matrix(n, n)
        result._data = [clean(row[n:]) for row in augmented]
        return result

    @staticmethod
    def compare(a: Matrix, b: Matrix, epsilon: float = _DEFAULT_EPSILON) -> bool:
        """Return whether two matrices have the same shape and elements within ``epsilon``."""
        if a._rows != b._rows or a._cols != b._cols:
            return False
        return all(
            abs(x - y) <= epsilon
            for row_a, row_b in zip(a._data, b._data)
            for x, y in zip(row_a, row_b)
        )

    @classmethod
    def identity(cls, size: int) -> Matrix:
        """Return the ``size`` x ``size`` identity matrix."""
        result = cls(size, size)
        for i, row in enumerate(result._data):
            row[i] = 1.0
        return result

    def format(self, epsilon: float = _DISPLAY_EPSILON) -> str:
        """Return the elements as tab-separated lines, near-zero values shown as 0."""
        return "\n".join(
            "".join(f"{round_to_zero(value, epsilon):g}\t" for value in row)
            for row in self._data
        )


_SEPARATOR = "------------------------"


def _show(matrix: Matrix) -> None:
    print(matrix.format())
    print(_SEPARATOR)


def _from_rows(rows: list[list[float]]) -> Matrix:
    matrix = Matrix(len(rows), len(rows[0]))
    for i, values in enumerate(rows):
        matrix[i][:] = [float(v) for v in values]
    return matrix


def _demo_2x2() -> None:
    m1 = _from_rows([[1, 2], [3, 4]])
    m2 = _from_rows([[5, 6], [7, 8]])
    inverse = m1.inverse()

    print("=== 2x2 matrix tests ===")
    print("Matrix 1:")
    _show(m1)
    print("Matrix 2:")
    _show(m2)
    print("Sum:")
    _show(m1 + m2)
    print("Product:")
    _show(m1 * m2)
    print("Transposed:")
    _show(m1.transpose())
    print(f"Determinant: {m1.determinant():g}")
    print("Inverse:")
    _show(inverse)

    product = m1 * inverse
    print("A * A^{-1}:")
    _show(product)
    print("OK" if Matrix.compare(product, Matrix.identity(2)) else "FAIL")


def _demo_5x5() -> None:
    identity = Matrix.identity(5)
    inv_identity = identity.inverse()
    print("Test 1: inverse of the identity matrix:")
    _show(inv_identity)
    print("OK" if Matrix.compare(identity, inv_identity) else "FAIL")
    print()

    upper = Matrix(5, 5)
    for i in range(5):
        for j in range(i, 5):
            upper[i][j] = float(i + j + 1)
    det = upper.determinant()
    print(f"Test 2: determinant = {det:g}")
    print("Expected: 1 * 3 * 5 * 7 * 9 = 945")
    print("OK" if abs(det - 945.0) < 1e-6 else "FAIL")
    print()

    sample = Matrix(5, 5)
    for i in range(5):
        for j in range(5):
            sample[i][j] = (i + 1) * 2.0 if i == j else 0.1
    product = sample * sample.inverse()
    print("Test 3: A * A^{-1}:")
    _show(product)
    print("OK" if Matrix.compare(product, Matrix.identity(5), 1e-9) else "FAIL")
    print()


def main(argv: list[str] | None = None) -> int:
    """Run the 2x2 and 5x5 demonstrations."""
    status = 0
    for demo in (_demo_2x2, _demo_5x5):
        try:
            demo()
        except (ValueError, IndexError) as exc:
            print(f"Error: {exc}", file=sys.stderr)
            status = 1
    return status


if __name__ == "__main__":
    sys.exit(main())