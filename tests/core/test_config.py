"""Tests for settings loading."""

import numpy as np

from densematrix import Matrix, Vector
from densematrix.core.config import Settings, get_settings


class TestSettings:
    """Test defaults and environment overrides."""

    def test_defaults(self):
        """Test the documented default values."""
        settings = Settings()
        assert settings.DEFAULT_DTYPE == "float64"
        assert settings.TOLERANCE == 1e-9
        assert settings.TOLERANCE_MODE == "relative"
        assert settings.PIVOT_TOLERANCE == 0.0
        assert settings.LOG_FORMAT == "text"
        assert settings.LOG_FILE is None

    def test_get_settings_is_cached(self):
        """Test get_settings() returns one shared instance."""
        assert get_settings() is get_settings()

    def test_environment_override(self, monkeypatch):
        """Test DENSEMATRIX_-prefixed variables override defaults."""
        monkeypatch.setenv("DENSEMATRIX_TOLERANCE", "0.5")
        monkeypatch.setenv("DENSEMATRIX_LOG_LEVEL", "DEBUG")
        settings = get_settings()
        assert settings.TOLERANCE == 0.5
        assert settings.LOG_LEVEL == "DEBUG"

    def test_default_dtype_drives_storage(self, monkeypatch):
        """Test DEFAULT_DTYPE sets the width of new vectors and matrices."""
        monkeypatch.setenv("DENSEMATRIX_DEFAULT_DTYPE", "float32")
        assert Vector([1, 2]).dtype == np.float32
        assert Matrix.zeros(2, 2).rows[0].dtype == np.float32
        assert Matrix.identity(2).rows[1].dtype == np.float32

    def test_tolerance_drives_equality(self, monkeypatch):
        """Test the configured tolerance is used when none is passed."""
        assert not Vector([1.0]).equals(Vector([1.01]))
        monkeypatch.setenv("DENSEMATRIX_TOLERANCE", "0.1")
        get_settings.cache_clear()
        assert Vector([1.0]).equals(Vector([1.01]))
