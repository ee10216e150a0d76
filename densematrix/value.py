"""
Base LinearValue class shared by Vector and Matrix.

This module provides:
- Tolerance-aware equality (``equals`` and ``==``)
- String and nested-list output formats
- Elementwise fuzzy comparison of numeric arrays
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

import numpy as np

from .core.config import get_settings


class ToleranceMode:
    """Modes for fuzzy comparison."""

    RELATIVE = "relative"  # |a - b| / max(|a|, |b|) <= tol
    ABSOLUTE = "absolute"  # |a - b| <= tol


EPSILON = 1e-12


def fuzzy_equal(
    a: np.ndarray,
    b: np.ndarray,
    tolerance: float | None = None,
    mode: str | None = None,
) -> bool:
    """
    Compare two arrays of equal shape component-wise with tolerance.

    Args:
        a: First array
        b: Second array
        tolerance: Tolerance value (None = configured TOLERANCE)
        mode: Comparison mode (None = configured TOLERANCE_MODE)

    Returns:
        True if every pair of components is equal within tolerance

    Components where either side is below ZERO_LEVEL in magnitude are
    compared absolutely against ZERO_LEVEL_TOL, so rounding residue left
    by elimination still equals an exact zero.
    """
    settings = get_settings()
    if tolerance is None:
        tolerance = settings.TOLERANCE
    if mode is None:
        mode = settings.TOLERANCE_MODE

    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    if a.shape != b.shape:
        return False

    exact = a == b
    diff = np.abs(a - b)

    if mode == ToleranceMode.ABSOLUTE:
        if tolerance == 0:
            return bool(np.all(exact))
        close = diff <= tolerance + EPSILON
    elif mode == ToleranceMode.RELATIVE:
        max_abs = np.maximum(np.abs(a), np.abs(b))
        min_abs = np.minimum(np.abs(a), np.abs(b))
        near_zero = min_abs < settings.ZERO_LEVEL
        close = np.where(
            near_zero,
            diff <= settings.ZERO_LEVEL_TOL,
            diff <= (tolerance + EPSILON) * max_abs,
        )
    else:
        raise ValueError(f"Unknown tolerance mode: {mode}")

    return bool(np.all(exact | close))


class LinearValue(ABC):
    """
    Base class for the dense linear-algebra value objects.

    Subclasses must implement:
    - equals: tolerance-aware structural equality
    - to_string / to_array: output formats
    - the arithmetic operators they support

    Note: Concrete subclasses inherit from both LinearValue and BaseModel,
    in that order (``class Vector(LinearValue, BaseModel):``) so the
    equality and string dunders below take precedence over pydantic's.
    """

    @abstractmethod
    def equals(
        self, other: Any, tolerance: float | None = None, mode: str | None = None
    ) -> bool:
        """
        Fuzzy structural equality.

        Args:
            other: Value to compare against
            tolerance: Tolerance for comparison (None = configured default)
            mode: Tolerance mode (relative, absolute)

        Returns:
            True if values are equal within tolerance
        """
        pass

    # Output formats

    @abstractmethod
    def to_string(self) -> str:
        """Convert to human-readable string."""
        pass

    @abstractmethod
    def to_array(self) -> list:
        """Convert to (nested) Python lists."""
        pass

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.to_string()})"

    # Operator overloading

    @abstractmethod
    def __add__(self, other: Any) -> LinearValue:
        """Addition: self + other"""
        pass

    @abstractmethod
    def __sub__(self, other: Any) -> LinearValue:
        """Subtraction: self - other"""
        pass

    @abstractmethod
    def __mul__(self, other: Any) -> LinearValue:
        """Multiplication: self * other"""
        pass

    def __rmul__(self, other: Any) -> LinearValue:
        """Right multiplication (scalars commute)."""
        if isinstance(other, (int, float, np.number)) and not isinstance(other, bool):
            return self.__mul__(other)
        return NotImplemented

    @abstractmethod
    def __neg__(self) -> LinearValue:
        """Unary negation: -self"""
        pass

    def __eq__(self, other: Any) -> bool:
        """Equality with default tolerance."""
        if not isinstance(other, LinearValue):
            return NotImplemented
        return self.equals(other)

    def __ne__(self, other: Any) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None  # mutable containers
