"""
densematrix - small dense matrix algebra core

- Row vectors and rectangular matrices backed by numpy arrays
- Elementwise arithmetic, products and transpose
- Gauss-Jordan elimination and inversion
- Tolerance-aware equality
"""

from .core.errors import (
    DimensionMismatchError,
    IndexOutOfBoundsError,
    InvalidDimensionsError,
    InvalidSizeError,
    MatrixError,
    NotInvertibleError,
)
from .elimination import gauss_jordan, invert
from .matrix import Matrix, add, augment, equals, multiply, subtract
from .value import LinearValue, ToleranceMode, fuzzy_equal
from .vector import Vector

__version__ = "0.1.0"

__all__ = [
    "LinearValue",
    "ToleranceMode",
    "fuzzy_equal",
    "Vector",
    "Matrix",
    "add",
    "subtract",
    "multiply",
    "augment",
    "equals",
    "gauss_jordan",
    "invert",
    "MatrixError",
    "InvalidSizeError",
    "DimensionMismatchError",
    "InvalidDimensionsError",
    "NotInvertibleError",
    "IndexOutOfBoundsError",
]
