"""
Gauss-Jordan elimination and matrix inversion.

Pivots are found by scanning down the current column for the first nonzero
entry, not by magnitude. Both entry points work on copies and never mutate
their argument.
"""

from __future__ import annotations

from .core.config import get_settings
from .core.errors import InvalidDimensionsError, NotInvertibleError
from .core.logging import get_context_logger
from .matrix import Matrix
from .vector import Vector

logger = get_context_logger(__name__, component="elimination")


def _is_zero(value: float, tolerance: float) -> bool:
    if tolerance == 0:
        return value == 0
    return abs(value) <= tolerance


def gauss_jordan(matrix: Matrix) -> Matrix:
    """
    Reduce a copy of ``matrix`` with Gauss-Jordan elimination.

    For each row ``i`` the pivot is the first row at or below ``i`` with a
    nonzero entry in column ``lead``; columns without one are skipped. The
    pivot row is swapped into place, scaled so the pivot becomes 1, and the
    column is cleared in every other row (above and below).

    When the columns run out before the rows do, the partially reduced copy
    is returned as-is: rank-deficient input yields a partial reduction, not
    a canonical form.

    Args:
        matrix: Matrix with at least one row and one column

    Returns:
        The reduced copy

    Raises:
        InvalidDimensionsError: If ``matrix`` has no rows or no columns
    """
    if matrix.row_count == 0 or matrix.column_count == 0:
        raise InvalidDimensionsError(matrix.shape, "gauss needs at least one row and column")

    tolerance = get_settings().PIVOT_TOLERANCE
    l, m = matrix.shape

    copy = Matrix.from_other(matrix)
    lead = 0

    logger.debug("Starting Gauss-Jordan elimination", extra_data={"shape": [l, m]})

    for i in range(l):
        if m <= lead:
            logger.debug("Columns exhausted", extra_data={"row": i, "lead": lead})
            return copy

        j = i
        while _is_zero(copy.get(j, lead), tolerance):
            j += 1
            if j == l:
                j = i
                lead += 1
                if lead == m:
                    logger.debug("No pivot left", extra_data={"row": i, "lead": lead})
                    return copy

        copy.swap(i, j)

        pivot = copy.get(i, lead)
        if not _is_zero(pivot, tolerance):
            copy.rows[i] = copy.rows[i].scale(1 / pivot)

        for j in range(l):
            if j != i:
                copy.rows[j] = copy.rows[j].subtract(copy.rows[i].scale(copy.get(j, lead)))

        lead += 1

    # Normalize each row by its first nonzero entry, scanning left to right.
    for i in range(l):
        pivot = 0
        for j in range(m):
            if _is_zero(pivot, tolerance):
                pivot = copy.get(i, j)

        if not _is_zero(pivot, tolerance):
            copy.rows[i] = copy.rows[i].scale(1 / pivot)

    return copy


def invert(matrix: Matrix) -> Matrix:
    """
    Invert a square matrix by reducing ``[matrix | I]``.

    Returns:
        The right block of the reduced augmentation

    Raises:
        InvalidDimensionsError: If ``matrix`` is not square (or is empty)
        NotInvertibleError: If the left block did not reduce to the identity
    """
    l, m = matrix.shape
    if l != m:
        raise InvalidDimensionsError(matrix.shape, "inverse needs a square matrix")
    if l == 0:
        raise InvalidDimensionsError(matrix.shape, "inverse needs at least one row and column")

    identity = Matrix.identity(l)
    augmented = Matrix.from_other(matrix).augment(identity)
    reduced = gauss_jordan(augmented)

    left = Matrix.from_vectors(Vector(row.data[:m]) for row in reduced.rows)
    right = Matrix.from_vectors(Vector(row.data[m:]) for row in reduced.rows)

    if not left.equals(identity):
        logger.debug("Left block is not the identity", extra_data={"size": l})
        raise NotInvertibleError(l)

    return right
