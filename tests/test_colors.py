"""Tests for countinggame.ui.colors – color blending and button styles."""

from __future__ import annotations

import pytest

from countinggame.core.game import ButtonRole
from countinggame.ui.colors import GameColors, blend_hex, button_style, label_style


# ===========================================================================
# GameColors – constants exist
# ===========================================================================

class TestGameColors:
    @pytest.mark.parametrize("name", ["GOLD", "AFFIRMATIVE", "SECONDARY", "NEUTRAL_BG", "CANVAS_BG"])
    def test_is_hex(self, name: str):
        value = getattr(GameColors, name)
        assert value.startswith("#")
        assert len(value) == 7

    def test_action_colors_differ(self):
        assert GameColors.AFFIRMATIVE != GameColors.SECONDARY


# ===========================================================================
# blend_hex
# ===========================================================================

class TestBlendHex:
    def test_t_zero_returns_a(self):
        assert blend_hex("#FF0000", "#0000FF", 0.0) == "#FF0000"

    def test_t_one_returns_b(self):
        assert blend_hex("#FF0000", "#0000FF", 1.0) == "#0000FF"

    def test_midpoint(self):
        result = blend_hex("#000000", "#FFFFFF", 0.5)
        for i in (1, 3, 5):
            assert 126 <= int(result[i:i + 2], 16) <= 128

    def test_clamps_t(self):
        assert blend_hex("#FF0000", "#0000FF", -1.0) == "#FF0000"
        assert blend_hex("#FF0000", "#0000FF", 2.0) == "#0000FF"

    def test_invalid_hex_chars(self):
        assert blend_hex("#GGHHII", "#000000", 0.5) == "#GGHHII"

    def test_wrong_length(self):
        assert blend_hex("#FFF", "#000000", 0.5) == "#FFF"

    def test_whitespace_padding(self):
        assert blend_hex("  #FF0000  ", "  #0000FF  ", 0.0) == "#FF0000"


# ===========================================================================
# Stylesheets
# ===========================================================================

class TestButtonStyle:
    def test_neutral_has_no_accent(self):
        style = button_style(ButtonRole.NEUTRAL)
        assert GameColors.AFFIRMATIVE not in style
        assert GameColors.SECONDARY not in style
        assert "font-size: 16px" in style

    def test_affirmative_is_green(self):
        assert f"background: {GameColors.AFFIRMATIVE}" in button_style(ButtonRole.AFFIRMATIVE)

    def test_secondary_is_blue(self):
        assert f"background: {GameColors.SECONDARY}" in button_style(ButtonRole.SECONDARY)

    def test_hover_is_darker_shade(self):
        style = button_style(ButtonRole.AFFIRMATIVE)
        assert blend_hex(GameColors.AFFIRMATIVE, "#000000", 0.08) in style

    def test_roles_are_distinct(self):
        styles = {button_style(role) for role in ButtonRole}
        assert len(styles) == len(ButtonRole)


class TestLabelStyle:
    def test_gold_and_size(self):
        style = label_style(48)
        assert GameColors.GOLD in style
        assert "48px" in style
