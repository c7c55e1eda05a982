"""
Unit tests for layout config dataclasses.

Test Coverage:
- LayoutConfig: cell size / wrap / column validation, wrap_count
- SpacingConfig: gap and margin validation, unit steps
"""

import pytest

from imgcat.layout import (
    ConfigurationError,
    LayoutConfig,
    LayoutMode,
    SpacingConfig,
)


class TestLayoutConfig:
    """Tests for LayoutConfig dataclass."""

    def test_init_when_valid_then_creates_config(self):
        """Positive cell size should create a valid config."""
        # Act
        config = LayoutConfig(LayoutMode.VERTICAL, 10, 20)

        # Assert
        assert config.cell_width == 10
        assert config.cell_height == 20
        assert config.wrap_count is None

    @pytest.mark.parametrize("width,height", [(0, 10), (10, 0), (-1, 10), (10, -5)])
    def test_init_when_cell_not_positive_then_raises(self, width, height):
        """Zero or negative cell size is rejected before any canvas exists."""
        with pytest.raises(ConfigurationError, match="must be positive"):
            LayoutConfig(LayoutMode.HORIZONTAL, width, height)

    def test_init_when_wrap_zero_then_raises(self):
        """wrap=0 is not a wrap count; no wrapping is expressed as None."""
        with pytest.raises(ConfigurationError, match="wrap"):
            LayoutConfig(LayoutMode.VERTICAL, 10, 10, wrap=0)

    def test_init_when_tiling_without_columns_then_raises(self):
        """Tiling needs a column count."""
        with pytest.raises(ConfigurationError, match="column count"):
            LayoutConfig(LayoutMode.TILING, 10, 10)

    def test_init_when_tiling_columns_zero_then_raises(self):
        """Tiling column count must be at least 1."""
        with pytest.raises(ConfigurationError, match="columns must be >= 1"):
            LayoutConfig(LayoutMode.TILING, 10, 10, columns=0)

    def test_init_when_tiling_single_column_then_valid(self):
        """A single tiling column is allowed."""
        config = LayoutConfig(LayoutMode.TILING, 10, 10, columns=1)

        assert config.wrap_count == 1

    def test_wrap_count_when_tiling_then_uses_columns(self):
        """Tiling wraps on columns, not wrap."""
        config = LayoutConfig(LayoutMode.TILING, 10, 10, wrap=5, columns=3)

        assert config.wrap_count == 3

    def test_wrap_count_when_horizontal_then_ignores_columns(self):
        """Non-tiling modes wrap on wrap only."""
        config = LayoutConfig(LayoutMode.HORIZONTAL, 10, 10, columns=3)

        assert config.wrap_count is None

    def test_config_is_frozen(self):
        """Config cannot be mutated after construction."""
        config = LayoutConfig(LayoutMode.VERTICAL, 10, 10)

        with pytest.raises(Exception):
            config.cell_width = 20  # type: ignore[misc]

    def test_configuration_error_is_value_error(self):
        """Callers catching ValueError also see configuration errors."""
        with pytest.raises(ValueError):
            LayoutConfig(LayoutMode.VERTICAL, 0, 10)


class TestSpacingConfig:
    """Tests for SpacingConfig dataclass."""

    def test_defaults_are_zero(self):
        spacing = SpacingConfig()

        assert spacing.gap == 0
        assert spacing.margin == 0

    def test_unit_steps_add_gap(self):
        """Unit step is cell size plus gap."""
        spacing = SpacingConfig(gap=2, margin=1)

        assert spacing.unit_width(5) == 7
        assert spacing.unit_height(8) == 10

    def test_init_when_negative_gap_then_raises(self):
        with pytest.raises(ConfigurationError, match="gap"):
            SpacingConfig(gap=-1)

    def test_init_when_negative_margin_then_raises(self):
        with pytest.raises(ConfigurationError, match="margin"):
            SpacingConfig(margin=-1)
