"""Tests for theme colours."""

import pytest
from nmprune.core.theme import ThemeColors, get_rich_theme, get_theme
from pydantic import ValidationError
from rich.theme import Theme


class TestThemeColors:
    """Tests for ThemeColors validation."""

    def test_defaults_are_valid(self) -> None:
        """The built-in colours pass validation."""
        colors = ThemeColors()
        assert colors.success.startswith("#")

    @pytest.mark.parametrize("value", ["red", "#12", "#gggggg", "123456"])
    def test_invalid_colours_rejected(self, value: str) -> None:
        """Only #RGB and #RRGGBB hex codes are accepted."""
        with pytest.raises(ValidationError):
            ThemeColors(error=value)

    def test_short_hex_accepted(self) -> None:
        """#RGB shorthand is accepted."""
        assert ThemeColors(info="#0ec").info == "#0ec"


class TestRichTheme:
    """Tests for Rich theme conversion."""

    def test_styles_present(self) -> None:
        """Every style used by the CLI is defined."""
        theme = get_rich_theme()

        for name in ("info", "warning", "error", "success", "muted", "path", "project"):
            assert name in theme.styles

    def test_get_theme_cached(self) -> None:
        """get_theme returns the same instance on every call."""
        assert isinstance(get_theme(), Theme)
        assert get_theme() is get_theme()
