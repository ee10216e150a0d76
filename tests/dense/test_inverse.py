"""Tests for matrix inversion."""

import pytest

from densematrix import (
    InvalidDimensionsError,
    Matrix,
    MatrixError,
    NotInvertibleError,
    invert,
)


class TestInverse:
    """Test the inverse of invertible matrices."""

    def test_identity_inverts_to_identity(self):
        """Test I^-1 == I."""
        assert Matrix.identity(3).inverse().equals(Matrix.identity(3))

    def test_two_by_two(self, assert_matrix_close):
        """Test inverse of [[4,7],[2,6]] (determinant 10)."""
        inverse = Matrix.from_rows([[4, 7], [2, 6]]).inverse()
        assert_matrix_close(inverse, [[0.6, -0.7], [-0.2, 0.4]])
        assert inverse.equals(Matrix.from_rows([[0.6, -0.7], [-0.2, 0.4]]))

    def test_one_by_one(self):
        """Test inverse of a single element."""
        assert Matrix.from_rows([[2]]).inverse().to_array() == [[0.5]]

    def test_three_by_three(self, assert_matrix_close):
        """Test an integer matrix with an integer inverse."""
        matrix = Matrix.from_rows([[1, 2, 3], [0, 1, 4], [5, 6, 0]])
        assert_matrix_close(matrix.inverse(), [[-24, 18, 5], [20, -15, -4], [-5, 4, 1]])

    @pytest.mark.parametrize("rows", [
        [[4, 7], [2, 6]],
        [[0, 1], [1, 0]],
        [[3, 1], [0, 2]],
        [[2, 1, -1], [-3, -1, 2], [-2, 1, 2]],
        [[1, 2, 3], [0, 1, 4], [5, 6, 0]],
        [[2, 0, 0, 1], [0, 3, 1, 0], [1, 0, 4, 0], [0, 1, 0, 5]],
    ])
    def test_product_with_inverse_is_identity(self, rows):
        """Test A x A^-1 == I within tolerance."""
        matrix = Matrix.from_rows(rows)
        assert matrix.multiply(matrix.inverse()).equals(Matrix.identity(matrix.row_count))

    def test_operand_not_mutated(self):
        """Test inversion leaves its input untouched."""
        matrix = Matrix.from_rows([[4, 7], [2, 6]])
        matrix.inverse()
        assert matrix.to_array() == [[4.0, 7.0], [2.0, 6.0]]

    def test_function_form(self):
        """Test invert() is what Matrix.inverse() runs."""
        matrix = Matrix.from_rows([[4, 7], [2, 6]])
        assert invert(matrix).equals(matrix.inverse())


class TestInverseErrors:
    """Test inversion failures."""

    def test_zero_matrix_is_not_invertible(self):
        """Test the zero matrix fails with NotInvertibleError."""
        with pytest.raises(NotInvertibleError, match="not invertible"):
            Matrix.zeros(2, 2).inverse()

    def test_singular_matrix_is_not_invertible(self):
        """Test a rank-deficient matrix fails."""
        with pytest.raises(NotInvertibleError):
            Matrix.from_rows([[1, 2], [2, 4]]).inverse()

    def test_not_invertible_is_value_error(self):
        """Test callers may catch the builtin ValueError."""
        with pytest.raises(ValueError):
            Matrix.from_rows([[1, 1], [1, 1]]).inverse()

    def test_non_square_raises(self):
        """Test inverse is only defined for square matrices."""
        with pytest.raises(InvalidDimensionsError):
            Matrix.from_rows([[1, 2, 3], [4, 5, 6]]).inverse()

    def test_empty_matrix_raises(self):
        """Test the empty matrix has no inverse."""
        with pytest.raises(InvalidDimensionsError):
            Matrix().inverse()

    def test_error_details(self):
        """Test the failure carries structured details."""
        with pytest.raises(MatrixError) as exc_info:
            Matrix.zeros(3, 3).inverse()
        assert exc_info.value.to_dict() == {
            "error": {
                "type": "NotInvertibleError",
                "message": "matrix is not invertible",
                "details": {"size": 3},
            }
        }
