"""Tests for component nodes, styles and colors."""

from dataclasses import FrozenInstanceError

import pytest

from minimessage.nodes import (
    EMPTY_STYLE,
    NAMED_COLORS,
    Decoration,
    Keybind,
    Style,
    Text,
    TextColor,
    Translatable,
    color_by_name,
    inherit_style,
    named_color_of,
    text,
)

RED = NAMED_COLORS["red"]


class TestTextColor:
    def test_channels(self) -> None:
        color = TextColor(0x123456)
        assert (color.red, color.green, color.blue) == (0x12, 0x34, 0x56)
        assert color.hex_string == "#123456"

    @pytest.mark.parametrize("value", [-1, 0x1000000])
    def test_range(self, value: int) -> None:
        with pytest.raises(ValueError):
            TextColor(value)

    @pytest.mark.parametrize("value", ["#12345", "123456", "#12345g", "#1234567", "#1_2345", "# 12345", "#-12345"])
    def test_from_hex_rejects(self, value: str) -> None:
        assert TextColor.from_hex(value) is None

    def test_from_rgb_clamps(self) -> None:
        assert TextColor.from_rgb(300, -5, 127.6) == TextColor(0xFF0080)

    def test_lerp(self) -> None:
        black, white = NAMED_COLORS["black"], NAMED_COLORS["white"]
        assert black.lerp(white, 0) == black
        assert black.lerp(white, 1) == white
        assert black.lerp(white, 0.5) == TextColor(0x808080)

    def test_names(self) -> None:
        assert color_by_name("DARK_GREY") == NAMED_COLORS["dark_gray"]
        assert color_by_name("#FF5555") == RED
        assert color_by_name("pink") is None
        assert named_color_of(TextColor(0xFF5555)) == "red"
        assert named_color_of(TextColor(0xFF5556)) is None


class TestStyle:
    def test_merge_overlays(self) -> None:
        base = Style(color=RED, bold=True)
        merged = base.merge(Style(bold=False, italic=True))
        assert merged == Style(color=RED, bold=False, italic=True)

    def test_merge_empty(self) -> None:
        style = Style(bold=True)
        assert style.merge(EMPTY_STYLE) is style
        assert EMPTY_STYLE.merge(style) is style

    def test_effective(self) -> None:
        assert Style(bold=False, italic=True).effective() == Style(italic=True)
        style = Style(bold=True)
        assert style.effective() is style

    def test_decoration_access(self) -> None:
        style = Style().with_decoration(Decoration.UNDERLINED, True)
        assert style.decoration(Decoration.UNDERLINED) is True
        assert style.decoration(Decoration.BOLD) is None

    def test_is_empty(self) -> None:
        assert Style().is_empty
        assert not Style(font="uniform").is_empty


class TestComponents:
    def test_frozen(self) -> None:
        with pytest.raises(FrozenInstanceError):
            Text("a").content = "b"  # type: ignore[misc]

    def test_append(self) -> None:
        component = Text("a").append(Text("b"), Keybind("k"))
        assert component.children == (Text("b"), Keybind("k"))

    def test_text_helper(self) -> None:
        assert text("a", Style(bold=True), Text("b")) == Text(
            "a", style=Style(bold=True), children=(Text("b"),)
        )

    def test_with_style(self) -> None:
        assert Keybind("k").with_style(Style(bold=True)).style.bold is True


class TestInheritStyle:
    def test_empty_style_is_identity(self) -> None:
        component = Text("a")
        assert inherit_style(component, EMPTY_STYLE) is component

    def test_own_attributes_win(self) -> None:
        component = Text("a", style=Style(color=NAMED_COLORS["blue"]), children=(Text("b"),))
        result = inherit_style(component, Style(color=RED, bold=True))
        assert result.style == Style(color=NAMED_COLORS["blue"], bold=True)
        assert result.children[0].style == Style(color=NAMED_COLORS["blue"], bold=True)

    def test_translatable_arguments(self) -> None:
        result = inherit_style(Translatable("k", (Text("x"),)), Style(bold=True))
        assert result.args == (Text("x", style=Style(bold=True)),)
