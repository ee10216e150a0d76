"""
Shared pytest fixtures and utilities for the densematrix tests.

This module provides:
- Settings isolation (the cached settings are rebuilt for every test)
- Helpers for comparing matrices against nested lists
- A pydantic serialization round-trip helper
"""

from typing import Any, Type, TypeVar

import pytest
from pydantic import BaseModel

from densematrix import Matrix
from densematrix.core.config import get_settings


T = TypeVar('T', bound=BaseModel)


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop cached settings so environment overrides in a test take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def assert_matrix_close():
    """Helper to compare a Matrix element-wise against nested lists."""
    def _assert_close(matrix: Matrix, expected: list[list[float]], rel: float = 1e-9, abs: float = 1e-12) -> None:
        actual = matrix.to_array()
        assert len(actual) == len(expected), f"Row count differs:\n{actual}\n!=\n{expected}"
        for r_idx, row in enumerate(actual):
            assert len(row) == len(expected[r_idx])
            for c_idx, value in enumerate(row):
                assert value == pytest.approx(expected[r_idx][c_idx], rel=rel, abs=abs), (
                    f"Mismatch at ({r_idx}, {c_idx}):\n{actual}\n!=\n{expected}"
                )

    return _assert_close


@pytest.fixture
def assert_serializable():
    """Helper to assert that a model can be serialized and deserialized."""
    def _assert_serialization(model: BaseModel, model_class: Type[T]) -> T:
        """
        Assert that a model can be serialized to dict and reconstructed.

        Args:
            model: The model instance to test
            model_class: The model class for reconstruction

        Returns:
            The reconstructed model
        """
        serialized = model.model_dump()

        reconstructed = model_class(**serialized)

        assert reconstructed.model_dump() == serialized

        return reconstructed

    return _assert_serialization


pytestmark = [
    pytest.mark.filterwarnings("ignore::DeprecationWarning"),
]
