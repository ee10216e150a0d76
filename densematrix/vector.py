"""
Row vector: a fixed-length numeric sequence backed by a numpy array.

The numeric width is the array dtype. Vectors default to the configured
DEFAULT_DTYPE (float64) unless another dtype is requested.
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator

import numpy as np
import numpy.typing as npt
from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from .core.config import get_settings
from .core.errors import DimensionMismatchError, InvalidSizeError
from .value import LinearValue, fuzzy_equal


def default_dtype() -> np.dtype:
    """The configured storage dtype."""
    return np.dtype(get_settings().DEFAULT_DTYPE)


def _as_scalar(value: Any) -> Any:
    """Unwrap numpy scalars to the matching Python number."""
    return value.item() if isinstance(value, np.generic) else value


class Vector(LinearValue, BaseModel):
    """
    Fixed-length numeric row vector.

    Supports indexed get/set, elementwise add/subtract, scaling and
    in-place concatenation (``combine``).
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    data: np.ndarray = Field(default_factory=lambda: np.zeros(0, dtype=default_dtype()))

    def __init__(
        self,
        components: Iterable[Any] | np.ndarray | None = None,
        dtype: npt.DTypeLike | None = None,
        **kwargs: Any,
    ) -> None:
        """Initialize a Vector from any iterable of numbers."""
        if components is None:
            components = kwargs.pop("data", ())
        super().__init__(data=self._coerce_data(components, dtype), **kwargs)

    @staticmethod
    def _coerce_data(raw: Any, dtype: npt.DTypeLike | None = None) -> np.ndarray:
        """Copy raw components into a one-dimensional array."""
        if isinstance(raw, Vector):
            raw = raw.data
        if dtype is None:
            dtype = raw.dtype if isinstance(raw, np.ndarray) else default_dtype()
        if not isinstance(raw, (np.ndarray, list, tuple)):
            raw = list(raw)
        data = np.array(raw, dtype=dtype)
        if data.ndim != 1:
            raise ValueError(f"Vector components must be one-dimensional, got shape {data.shape}")
        return data

    @field_validator("data", mode="before")
    @classmethod
    def _validate_data(cls, value):
        if value is None:
            return np.zeros(0, dtype=default_dtype())
        if isinstance(value, np.ndarray) and value.ndim == 1:
            return value
        return cls._coerce_data(value)

    @field_serializer("data")
    def _serialize_data(self, data: np.ndarray) -> list:
        return data.tolist()

    # Factories

    @classmethod
    def from_values(cls, values: Iterable[Any], dtype: npt.DTypeLike | None = None) -> Vector:
        """Build a vector from plain values."""
        return cls(values, dtype=dtype)

    @classmethod
    def zeros(cls, length: int, dtype: npt.DTypeLike | None = None) -> Vector:
        """Zero-filled vector of the given length."""
        if length < 0:
            raise InvalidSizeError(length)
        return cls(np.zeros(length, dtype=dtype if dtype is not None else default_dtype()))

    @classmethod
    def ones(cls, length: int, dtype: npt.DTypeLike | None = None) -> Vector:
        """One-filled vector of the given length."""
        if length < 0:
            raise InvalidSizeError(length)
        return cls(np.ones(length, dtype=dtype if dtype is not None else default_dtype()))

    # Access

    @property
    def dtype(self) -> np.dtype:
        return self.data.dtype

    @property
    def length(self) -> int:
        return len(self.data)

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.data.tolist())

    def __getitem__(self, index: int) -> Any:
        return _as_scalar(self.data[index])

    def __setitem__(self, index: int, value: Any) -> None:
        self.data[index] = value

    def get(self, index: int) -> Any:
        """Component at ``index``."""
        return _as_scalar(self.data[index])

    def set(self, index: int, value: Any) -> Vector:
        """Overwrite the component at ``index`` in place and return self."""
        self.data[index] = value
        return self

    # Vector operations

    def _check_length(self, other: Vector, operation: str) -> None:
        if len(self.data) != len(other.data):
            raise DimensionMismatchError(len(self.data), len(other.data), operation)

    def add(self, other: Vector) -> Vector:
        """Elementwise sum as a new vector."""
        self._check_length(other, "add")
        return Vector(self.data + other.data)

    def subtract(self, other: Vector) -> Vector:
        """Elementwise difference as a new vector."""
        self._check_length(other, "subtract")
        return Vector(self.data - other.data)

    def scale(self, scalar: float) -> Vector:
        """Every component multiplied by ``scalar``, as a new vector."""
        return Vector(self.data * scalar)

    def combine(self, other: Vector) -> Vector:
        """
        Append ``other``'s components to this vector in place.

        Returns:
            self (for method chaining)
        """
        self.data = np.concatenate([self.data, other.data])
        return self

    def copy(self) -> Vector:
        """Independent copy with the same dtype."""
        return Vector(self.data.copy())

    def equals(
        self, other: Any, tolerance: float | None = None, mode: str | None = None
    ) -> bool:
        """Compare vectors component-wise."""
        if not isinstance(other, Vector):
            return False
        if len(self.data) != len(other.data):
            return False
        return fuzzy_equal(self.data, other.data, tolerance, mode)

    # Output formats

    def to_array(self) -> list:
        """Convert to a Python list."""
        return self.data.tolist()

    def to_numpy(self) -> np.ndarray:
        """Copy of the underlying array."""
        return self.data.copy()

    def to_string(self) -> str:
        return "[" + ", ".join(_format_number(value) for value in self.data.tolist()) + "]"

    # Arithmetic operators

    def __add__(self, other: Any) -> Vector:
        if isinstance(other, Vector):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other: Any) -> Vector:
        if isinstance(other, Vector):
            return self.subtract(other)
        return NotImplemented

    def __mul__(self, other: Any) -> Vector:
        if isinstance(other, (int, float, np.number)) and not isinstance(other, bool):
            return self.scale(other)
        return NotImplemented

    def __neg__(self) -> Vector:
        return self.scale(-1)


def _format_number(value: Any) -> str:
    """Drop the trailing ``.0`` of integral floats."""
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e10:
        return str(int(value))
    return str(value)
