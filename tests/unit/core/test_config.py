"""Tests for ScanConfig validation."""

import pytest
from nmprune.core.config import DEFAULT_MAX_DEPTH, ScanConfig, SizeMode
from pydantic import ValidationError


class TestScanConfigDefaults:
    """Tests for default settings."""

    def test_defaults(self) -> None:
        """Defaults match the documented behaviour."""
        config = ScanConfig()

        assert config.target_name == "node_modules"
        assert config.max_depth == DEFAULT_MAX_DEPTH == 10
        assert config.extra_skip_names == frozenset()
        assert config.follow_symlinks is False
        assert config.size_mode == SizeMode.METADATA

    def test_size_mode_values(self) -> None:
        """SizeMode values are usable as strings."""
        assert SizeMode.METADATA == "metadata"
        assert SizeMode.RECURSIVE == "recursive"
        config = ScanConfig(size_mode="recursive")  # type: ignore[arg-type]
        assert config.size_mode == SizeMode.RECURSIVE


class TestScanConfigValidation:
    """Tests for rejected and normalised values."""

    @pytest.mark.parametrize("depth", [-1, 65])
    def test_max_depth_bounds(self, depth: int) -> None:
        """max_depth outside 0-64 is rejected."""
        with pytest.raises(ValidationError):
            ScanConfig(max_depth=depth)

    @pytest.mark.parametrize("name", ["", "a/b", ".", ".."])
    def test_invalid_target_name(self, name: str) -> None:
        """target_name must be a plain directory name."""
        with pytest.raises(ValidationError):
            ScanConfig(target_name=name)

    def test_unknown_field_rejected(self) -> None:
        """Unknown settings are rejected."""
        with pytest.raises(ValidationError):
            ScanConfig(depth=3)  # type: ignore[call-arg]

    def test_skip_names_normalised(self) -> None:
        """Skip names are stripped and empty entries dropped."""
        config = ScanConfig(extra_skip_names=[" vendor ", "", "dist"])  # type: ignore[arg-type]

        assert config.extra_skip_names == frozenset({"vendor", "dist"})

    def test_config_is_frozen(self) -> None:
        """Settings cannot change after construction."""
        config = ScanConfig()

        with pytest.raises(ValidationError):
            config.max_depth = 3  # type: ignore[misc]
