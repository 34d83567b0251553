"""Unit tests for theme module.

Tests for theme loading, validation, and Rich theme generation.
"""

# pyright: reportPrivateUsage=false

from pathlib import Path

import pytest
from gatepass.core.theme import (
    ThemeColors,
    _load_toml_colors,
    get_rich_theme,
    get_theme,
    load_theme,
)


class TestThemeColors:
    """Tests for ThemeColors Pydantic model."""

    def test_default_values(self) -> None:
        """ThemeColors has status colors."""
        colors = ThemeColors()
        assert colors.removed == "#c1ff62"
        assert colors.failed == "#f53263"

    def test_invalid_hex_no_hash(self) -> None:
        """ThemeColors rejects colors without # prefix."""
        with pytest.raises(ValueError, match="must start with '#'"):
            ThemeColors(text="ffffff")

    def test_invalid_hex_wrong_length(self) -> None:
        """ThemeColors rejects colors with wrong length."""
        with pytest.raises(ValueError, match="must be #RGB or #RRGGBB"):
            ThemeColors(text="#ff")

    def test_invalid_hex_chars(self) -> None:
        """ThemeColors rejects invalid hex characters."""
        with pytest.raises(ValueError, match="invalid hex color"):
            ThemeColors(removed="#gggggg")

    def test_extra_fields_forbidden(self) -> None:
        """ThemeColors rejects unknown fields."""
        with pytest.raises(ValueError):
            ThemeColors(unknown_field="#ffffff")  # type: ignore[call-arg]


class TestLoadTomlColors:
    """Tests for _load_toml_colors internal function."""

    def test_loads_valid_toml(self, tmp_path: Path) -> None:
        """Loads colors from valid TOML file."""
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text('[colors]\nremoved = "#000000"\n')

        assert _load_toml_colors(theme_file) == {"removed": "#000000"}

    def test_missing_file(self, tmp_path: Path) -> None:
        """Returns None for missing files."""
        assert _load_toml_colors(tmp_path / "none.toml") is None

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Returns None for unparsable files."""
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text("[colors\n")

        assert _load_toml_colors(theme_file) is None


class TestLoadTheme:
    """Tests for bundled and user theme merging."""

    def test_bundled_theme_loads(self) -> None:
        """The bundled theme matches the model defaults."""
        assert load_theme() == ThemeColors()

    def test_user_override(self, isolated_config_home: Path) -> None:
        """User colors override bundled ones."""
        theme_dir = isolated_config_home / "gatepass"
        theme_dir.mkdir()
        (theme_dir / "theme.toml").write_text('[colors]\nfailed = "#ff0000"\n')

        colors = load_theme()

        assert colors.failed == "#ff0000"
        assert colors.removed == ThemeColors().removed

    def test_invalid_user_theme_falls_back(self, isolated_config_home: Path) -> None:
        """Invalid user colors fall back to defaults."""
        theme_dir = isolated_config_home / "gatepass"
        theme_dir.mkdir()
        (theme_dir / "theme.toml").write_text('[colors]\nfailed = "red"\n')

        assert load_theme() == ThemeColors()


class TestRichTheme:
    """Tests for Rich theme generation and caching."""

    def test_status_styles_present(self) -> None:
        """Every item status has a style."""
        theme = get_rich_theme(ThemeColors())

        for name in ("removed", "not_found", "failed", "quarantined", "bold_header"):
            assert name in theme.styles

    def test_cached(self) -> None:
        """get_theme returns the cached instance."""
        assert get_theme() is get_theme()

    def test_status_styles_bold(self) -> None:
        """Removed and failed statuses render in bold."""
        theme = get_rich_theme(ThemeColors())

        assert theme.styles["removed"].bold is True
        assert theme.styles["failed"].bold is True
        assert not theme.styles["not_found"].bold
