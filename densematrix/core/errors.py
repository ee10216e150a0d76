"""
Library exceptions.

Every failure raised by densematrix derives from ``MatrixError`` and from the
builtin exception a Python caller would expect, so ``except ValueError``
keeps working.
"""

from typing import Any, Dict, Optional


class MatrixError(Exception):
    """Base exception for densematrix errors"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Structured representation for diagnostics"""
        return {
            "error": {
                "type": self.__class__.__name__,
                "message": self.message,
                "details": self.details,
            }
        }


class InvalidSizeError(MatrixError, ValueError):
    """Raised when a factory is asked for a non-positive dimension"""

    def __init__(self, *dimensions: int):
        super().__init__(
            message="invalid size",
            details={"dimensions": list(dimensions)}
        )


class DimensionMismatchError(MatrixError, ValueError):
    """Raised when operand shapes do not line up"""

    def __init__(self, left: Any, right: Any, operation: str):
        super().__init__(
            message=f"sizes do not match for {operation}: {left} and {right}",
            details={"left": left, "right": right, "operation": operation}
        )


class InvalidDimensionsError(MatrixError, ValueError):
    """Raised when an operation needs a different matrix shape"""

    def __init__(self, shape: tuple, reason: str):
        super().__init__(
            message=f"invalid dimensions {shape}: {reason}",
            details={"shape": list(shape), "reason": reason}
        )


class NotInvertibleError(MatrixError, ValueError):
    """Raised when elimination cannot reduce a matrix to the identity"""

    def __init__(self, size: int):
        super().__init__(
            message="matrix is not invertible",
            details={"size": size}
        )


class IndexOutOfBoundsError(MatrixError, IndexError):
    """Raised for row indices outside [0, row_count)"""

    def __init__(self, index: int, row_count: int):
        super().__init__(
            message=f"index out of bounds: {index} not in [0, {row_count})",
            details={"index": index, "row_count": row_count}
        )
