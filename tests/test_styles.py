import pytest

from components.styles import hex_to_hsl, theme_css_variables
from config import DEFAULT_THEME_COLORS


class TestHexToHsl:
    """Test the hex -> 'H S% L%' conversion used for theme CSS variables."""

    @pytest.mark.parametrize(
        "hex_color,expected",
        [
            ("#FFFFFF", "0 0% 100%"),
            ("#000000", "0 0% 0%"),
            ("#FF0000", "0 100% 50%"),
        ],
    )
    def test_reference_values(self, hex_color, expected):
        """Test white, black and pure red."""
        assert hex_to_hsl(hex_color) == expected

    def test_default_primary(self):
        """Test the default primary blue."""
        assert hex_to_hsl("#3B82F6") == "217 91% 60%"

    def test_lowercase_accepted(self):
        """Test that lowercase hex digits parse the same."""
        assert hex_to_hsl("#ff0000") == hex_to_hsl("#FF0000")

    @pytest.mark.parametrize(
        "hex_color,expected",
        [("#21B515", "116 79% 40%"), ("#052D26", "170 80% 10%"), ("#233F83", "223 58% 33%")],
    )
    def test_half_degree_hues_round_up(self, hex_color, expected):
        """Test that hues landing exactly on .5 round up, as browsers do."""
        assert hex_to_hsl(hex_color) == expected

    def test_hue_wraps_below_360(self):
        """Test that a hue just under 360 rounds to 0, not 360."""
        hue = int(hex_to_hsl("#FF0001").split()[0])
        assert 0 <= hue < 360

    @pytest.mark.parametrize("bad", ["FF0000", "#FFF", "#GGGGGG", "", "#12345678", " #FF0000", "#FF0000 ", "#FF0000\n"])
    def test_invalid_input_raises(self, bad):
        """Test that malformed colors are rejected."""
        with pytest.raises(ValueError):
            hex_to_hsl(bad)


class TestThemeCssVariables:
    """Test brand colors -> CSS custom properties."""

    def test_all_three_variables(self):
        """Test that primary, secondary and accent are all emitted."""
        out = theme_css_variables({"primary_color": "#FF0000", "secondary_color": "#000000", "accent_color": "#FFFFFF"})
        assert out["--primary"] == "0 100% 50%"
        assert out["--secondary"] == "0 0% 0%"
        assert out["--accent"] == "0 0% 100%"
        assert out["--primary-hex"] == "#FF0000"

    def test_missing_colors_use_defaults(self):
        """Test that an empty settings row falls back to the default palette."""
        out = theme_css_variables({})
        assert out["--primary"] == hex_to_hsl(DEFAULT_THEME_COLORS["primary_color"])
        assert out["--accent-hex"] == DEFAULT_THEME_COLORS["accent_color"]

    def test_invalid_color_uses_default(self):
        """Test that a corrupt stored value does not break the page."""
        out = theme_css_variables({"primary_color": "blue"})
        assert out["--primary-hex"] == DEFAULT_THEME_COLORS["primary_color"]
