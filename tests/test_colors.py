"""Tests for dessertclicker.ui.colors – theme palettes and color blending."""

from __future__ import annotations

from pathlib import Path

import pytest

from dessertclicker.ui.colors import DarkColors, LightColors, blend_hex, palette_for

_HEX_FIELDS = [
    "BACKGROUND_TOP",
    "BACKGROUND_BOTTOM",
    "PRIMARY",
    "PRIMARY_LIGHT",
    "ON_PRIMARY",
    "SECONDARY_CONTAINER",
    "ON_SECONDARY_CONTAINER",
    "TEXT_PRIMARY",
    "TEXT_MUTED",
    "PROGRESS_TRACK",
    "PROGRESS_FILL",
    "TOAST_TEXT",
]


# ===========================================================================
# Palettes
# ===========================================================================

class TestPalettes:
    @pytest.mark.parametrize("palette", [LightColors, DarkColors])
    @pytest.mark.parametrize("field", _HEX_FIELDS)
    def test_hex_fields(self, palette, field):
        value = getattr(palette, field)
        assert value.startswith("#")
        assert len(value) == 7

    @pytest.mark.parametrize("palette", [LightColors, DarkColors])
    def test_toast_bg_is_rgba(self, palette):
        assert palette.TOAST_BG.startswith("rgba(")

    def test_themes_differ(self):
        assert LightColors.BACKGROUND_TOP != DarkColors.BACKGROUND_TOP
        assert LightColors.TEXT_PRIMARY != DarkColors.TEXT_PRIMARY


class TestPaletteFor:
    def test_light(self):
        assert palette_for(False) is LightColors

    def test_dark(self):
        assert palette_for(True) is DarkColors


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
        assert 126 <= int(result[1:3], 16) <= 128

    def test_clamped(self):
        assert blend_hex("#FF0000", "#0000FF", -1.0) == "#FF0000"
        assert blend_hex("#FF0000", "#0000FF", 2.0) == "#0000FF"

    def test_invalid_returns_a(self):
        assert blend_hex("#FFF", "#000000", 0.5) == "#FFF"
        assert blend_hex("#GGHHII", "#000000", 0.5) == "#GGHHII"

    def test_palette_hover_blend(self):
        result = blend_hex(LightColors.PRIMARY, LightColors.ON_PRIMARY, 0.15)
        assert result.startswith("#")
        assert len(result) == 7


# ===========================================================================
# Palette usage
# ===========================================================================

class TestPaletteUsage:
    def test_every_field_is_read_by_the_ui(self):
        ui_dir = Path(__file__).resolve().parent.parent / "dessertclicker" / "ui"
        sources = "\n".join(
            p.read_text(encoding="utf-8") for p in ui_dir.glob("*.py") if p.name != "colors.py"
        )
        fields = [name for name in vars(LightColors) if name.isupper()]
        unused = [name for name in fields if f".{name}" not in sources]
        assert unused == []

    def test_palettes_share_fields(self):
        light = {name for name in vars(LightColors) if name.isupper()}
        dark = {name for name in vars(DarkColors) if name.isupper()}
        assert light == dark
