"""
Dense matrix: an ordered sequence of equal-length row Vectors.

Pure operations (add, subtract, scale, multiply, transpose, gauss, inverse,
map) always return a new Matrix. ``set``, ``swap`` and ``augment`` mutate
the receiver in place and return it; copy first (``copy()`` or
``Matrix.from_other``) when the operand must stay untouched.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator

import numpy as np
import numpy.typing as npt
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .core.errors import (
    DimensionMismatchError,
    IndexOutOfBoundsError,
    InvalidDimensionsError,
    InvalidSizeError,
)
from .value import LinearValue
from .vector import Vector, default_dtype


class Matrix(LinearValue, BaseModel):
    """
    Matrix (grid of row vectors) with elementary operations.

    Build instances through the named constructors (``from_rows``,
    ``from_dimensions``, ``from_other``, ``from_vector``, ``compose``) or
    the ``zeros``/``ones``/``identity`` factories.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    rows: list[Vector] = Field(default_factory=list)

    def __init__(self, rows: Iterable[Any] | np.ndarray | None = None, **kwargs: Any) -> None:
        """Initialize a Matrix from row-like values (see ``from_rows``)."""
        super().__init__(rows=[] if rows is None else rows, **kwargs)

    @staticmethod
    def _coerce_row(row: Any, dtype: npt.DTypeLike | None = None) -> Vector:
        if isinstance(row, Vector):
            return row
        if isinstance(row, dict):
            return Vector.model_validate(row)
        return Vector(row, dtype=dtype)

    @field_validator("rows", mode="before")
    @classmethod
    def _validate_rows(cls, value):
        if value is None:
            return []
        if isinstance(value, np.ndarray):
            value = list(value)
        return [cls._coerce_row(row) for row in value]

    # Named constructors

    @classmethod
    def from_vectors(cls, rows: Iterable[Vector]) -> Matrix:
        """Wrap already-built row vectors without re-validating them."""
        return cls.model_construct(rows=list(rows))

    @classmethod
    def from_rows(cls, rows: Iterable[Any] | np.ndarray, dtype: npt.DTypeLike | None = None) -> Matrix:
        """
        Build a matrix from row-like values.

        Args:
            rows: Vectors, sequences of numbers or a 2-D numpy array
            dtype: Storage dtype for rows that are not already Vectors

        Raises:
            DimensionMismatchError: If the rows have different lengths
        """
        if isinstance(rows, np.ndarray):
            rows = list(rows)
        matrix = cls.from_vectors(cls._coerce_row(row, dtype) for row in rows)
        matrix._check_rectangular()
        return matrix

    @classmethod
    def from_dimensions(cls, size: int, dtype: npt.DTypeLike | None = None) -> Matrix:
        """Square zero matrix of ``size`` rows; ``size == 0`` is the empty matrix."""
        if size < 0:
            raise InvalidSizeError(size)
        return cls.from_vectors(Vector.zeros(size, dtype) for _ in range(size))

    @classmethod
    def from_vector(cls, vector: Vector) -> Matrix:
        """One-row matrix holding ``vector``."""
        return cls.from_vectors([vector])

    @classmethod
    def from_other(cls, matrix: Matrix) -> Matrix:
        """Independent copy of ``matrix``."""
        return cls.from_vectors([]).augment(matrix)

    @classmethod
    def compose(cls, *parts: Any) -> Matrix:
        """
        Compose a matrix from several parts, left to right.

        A Matrix is augmented onto the rows built so far, a Vector is appended
        as one row, an integer ``n`` appends ``n`` zero rows of length ``n``
        and any other sequence appends its items as rows.

        Raises:
            DimensionMismatchError: If the composed rows are not rectangular
        """
        result = cls.from_vectors([])
        for part in parts:
            if isinstance(part, Matrix):
                result.augment(part)
            elif isinstance(part, Vector):
                result.rows.append(part.copy())
            elif isinstance(part, (int, np.integer)) and not isinstance(part, bool):
                result.rows.extend(cls.from_dimensions(int(part)).rows)
            else:
                result.rows.extend(row.copy() for row in cls.from_rows(part).rows)
        result._check_rectangular()
        return result

    # Factories

    @classmethod
    def zeros(cls, row_count: int, column_count: int, dtype: npt.DTypeLike | None = None) -> Matrix:
        """``row_count`` x ``column_count`` matrix of zeros."""
        if row_count <= 0 or column_count <= 0:
            raise InvalidSizeError(row_count, column_count)
        dtype = dtype if dtype is not None else default_dtype()
        return cls.from_vectors(Vector.zeros(column_count, dtype) for _ in range(row_count))

    @classmethod
    def ones(cls, row_count: int, column_count: int, dtype: npt.DTypeLike | None = None) -> Matrix:
        """``row_count`` x ``column_count`` matrix of ones."""
        if row_count <= 0 or column_count <= 0:
            raise InvalidSizeError(row_count, column_count)
        dtype = dtype if dtype is not None else default_dtype()
        return cls.from_vectors(Vector.ones(column_count, dtype) for _ in range(row_count))

    @classmethod
    def identity(cls, size: int, dtype: npt.DTypeLike | None = None) -> Matrix:
        """``size`` x ``size`` identity; ``size == 0`` is the empty matrix."""
        if size < 0:
            raise InvalidSizeError(size)
        if size == 0:
            return cls.from_vectors([])

        matrix = cls.zeros(size, size, dtype)
        for i in range(size):
            matrix.set(i, i, 1)
        return matrix

    # Dimensions and access

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def column_count(self) -> int:
        if not self.rows:
            return 0
        return len(self.rows[0])

    @property
    def shape(self) -> tuple[int, int]:
        """Matrix dimensions (rows, cols)."""
        return (self.row_count, self.column_count)

    def _check_rectangular(self) -> None:
        lengths = {len(row) for row in self.rows}
        if len(lengths) > 1:
            raise DimensionMismatchError(
                sorted(lengths)[0], sorted(lengths)[-1], "construction"
            )

    def _require_nonempty(self, operation: str) -> None:
        if self.row_count == 0 or self.column_count == 0:
            raise InvalidDimensionsError(self.shape, f"{operation} needs at least one row and column")

    def get(self, i: int, j: int) -> Any:
        """Element at row ``i``, column ``j``."""
        return self.rows[i].get(j)

    def set(self, i: int, j: int, value: Any) -> Matrix:
        """Overwrite one element in place and return self."""
        self.rows[i].set(j, value)
        return self

    def __getitem__(self, index: tuple[int, int] | int) -> Any:
        """Get element by (row, col) or the row Vector by index."""
        if isinstance(index, tuple):
            row, col = index
            return self.get(row, col)
        return self.rows[index]

    def __setitem__(self, index: tuple[int, int], value: Any) -> None:
        row, col = index
        self.set(row, col, value)

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[Vector]:
        return iter(self.rows)

    def copy(self) -> Matrix:
        """Deep copy: rows are copied, not shared."""
        return Matrix.from_vectors(row.copy() for row in self.rows)

    # Elementwise arithmetic

    def add(self, matrix: Matrix) -> Matrix:
        """Row-aligned sum as a new matrix."""
        if self.row_count != matrix.row_count:
            raise DimensionMismatchError(self.shape, matrix.shape, "add")
        return Matrix.from_vectors(a.add(b) for a, b in zip(self.rows, matrix.rows))

    def subtract(self, matrix: Matrix) -> Matrix:
        """Row-aligned difference as a new matrix."""
        if self.row_count != matrix.row_count:
            raise DimensionMismatchError(self.shape, matrix.shape, "subtract")
        return Matrix.from_vectors(a.subtract(b) for a, b in zip(self.rows, matrix.rows))

    def scale(self, scalar: float) -> Matrix:
        """Every element multiplied by ``scalar``, as a new matrix."""
        return Matrix.from_vectors(row.scale(scalar) for row in self.rows)

    # Products

    def multiply(self, matrix: Matrix) -> Matrix:
        """
        Standard matrix product ``self x matrix``, in the promoted dtype of
        both operands.

        Raises:
            DimensionMismatchError: If self's column count differs from
                ``matrix``'s row count
        """
        self._require_nonempty("multiply")
        matrix._require_nonempty("multiply")
        if self.column_count != matrix.row_count:
            raise DimensionMismatchError(self.shape, matrix.shape, "multiply")

        l = self.row_count
        m = matrix.column_count
        n = self.column_count

        result = Matrix.zeros(l, m, np.result_type(self.rows[0].dtype, matrix.rows[0].dtype))
        for i in range(l):
            for j in range(m):
                total = 0
                for k in range(n):
                    total += self.get(i, k) * matrix.get(k, j)
                result.set(i, j, total)

        return result

    def transpose(self) -> Matrix:
        """New matrix with rows and columns swapped, in the same dtype."""
        self._require_nonempty("transpose")
        l, m = self.shape

        result = Matrix.zeros(m, l, self.rows[0].dtype)
        for i in range(l):
            for j in range(m):
                result.set(j, i, self.get(i, j))

        return result

    # Elimination

    def gauss(self) -> Matrix:
        """Gauss-Jordan reduced copy of this matrix (see ``elimination.gauss_jordan``)."""
        from .elimination import gauss_jordan

        return gauss_jordan(self)

    def inverse(self) -> Matrix:
        """Inverse of a square, non-singular matrix (see ``elimination.invert``)."""
        from .elimination import invert

        return invert(self)

    # In-place structural operations

    def swap(self, i: int, j: int) -> Matrix:
        """
        Exchange rows ``i`` and ``j`` in place.

        Raises:
            IndexOutOfBoundsError: If either index is outside [0, row_count)
        """
        for index in (i, j):
            if index < 0 or index > self.row_count - 1:
                raise IndexOutOfBoundsError(index, self.row_count)

        self.rows[i], self.rows[j] = self.rows[j], self.rows[i]
        return self

    def augment(self, matrix: Matrix) -> Matrix:
        """
        Concatenate ``matrix``'s rows onto this matrix's rows, in place.

        Rows missing on the receiver start out empty, so augmenting an empty
        matrix copies ``matrix``.
        """
        rows = self.rows
        for i, row in enumerate(matrix.rows):
            if i >= len(rows):
                rows.append(Vector([], dtype=row.dtype))
            rows[i].combine(row)
        return self

    # Reductions and iteration

    def diag(self) -> Vector:
        """Elements where the row index equals the column index."""
        values = [self.get(i, i) for i in range(min(self.row_count, self.column_count))]
        return Vector.from_values(values)

    def trace(self) -> float:
        """Sum of the diagonal elements."""
        result = 0
        for value in self.diag():
            result += value
        return result

    def map(self, callback: Callable[[Vector], Vector]) -> Matrix:
        """New matrix whose rows are ``callback(row)`` over a copy of each row."""
        return Matrix.from_vectors(callback(row) for row in self.copy().rows)

    def each(self, callback: Callable[[Vector, int], Any]) -> Matrix:
        """Call ``callback(row, index)`` for every row; returns self."""
        for index, row in enumerate(self.rows):
            callback(row, index)
        return self

    # Equality

    def equals(
        self, other: Any, tolerance: float | None = None, mode: str | None = None
    ) -> bool:
        """Same row count and every pair of rows equal within tolerance."""
        if not isinstance(other, Matrix):
            return False
        if self.row_count != other.row_count:
            return False

        for a, b in zip(self.rows, other.rows):
            if not a.equals(b, tolerance, mode):
                return False
        return True

    # Output formats

    def to_string(self) -> str:
        return "[" + ", \n".join(row.to_string() for row in self.rows) + "]"

    def to_array(self) -> list[list[Any]]:
        """Convert to Python nested list."""
        return [row.to_array() for row in self.rows]

    def to_numpy(self) -> np.ndarray:
        """Convert to a 2-D NumPy array."""
        if not self.rows:
            return np.zeros((0, 0), dtype=default_dtype())
        return np.vstack([row.data for row in self.rows])

    # Arithmetic operators

    def __add__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            return self.subtract(other)
        return NotImplemented

    def __mul__(self, other: Any) -> Matrix:
        """Scalar multiplication or matrix product."""
        if isinstance(other, Matrix):
            return self.multiply(other)
        if isinstance(other, (int, float, np.number)) and not isinstance(other, bool):
            return self.scale(other)
        return NotImplemented

    def __matmul__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            return self.multiply(other)
        return NotImplemented

    def __neg__(self) -> Matrix:
        return self.scale(-1)


# Standalone functions (static forms; ``a`` is copied, never mutated)

def add(a: Any, b: Matrix) -> Matrix:
    return Matrix.compose(a).add(b)


def subtract(a: Any, b: Matrix) -> Matrix:
    return Matrix.compose(a).subtract(b)


def multiply(a: Any, b: Matrix) -> Matrix:
    return Matrix.compose(a).multiply(b)


def augment(a: Any, b: Matrix) -> Matrix:
    """``[a | b]`` as a new matrix."""
    return Matrix.compose(a).augment(b)


def equals(a: Any, b: Matrix) -> bool:
    return Matrix.compose(a).equals(b)
