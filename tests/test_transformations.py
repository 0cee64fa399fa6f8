"""Tests for the built-in transformations and custom transformation types."""

from dataclasses import dataclass, replace
from uuid import UUID

import pytest

from minimessage import MiniMessage, deserialize
from minimessage.errors import TransformationLoadError
from minimessage.nodes import (
    NAMED_COLORS,
    ClickAction,
    ClickEvent,
    Component,
    HoverAction,
    Style,
    Text,
    TextColor,
    Translatable,
)
from minimessage.text import Segment, flatten
from minimessage.tokens import Argument
from minimessage.transformations import Transformation, TransformationType
from minimessage.transformations.builtins import (
    GradientTransformation,
    RainbowTransformation,
)

RED = NAMED_COLORS["red"]
BLUE = NAMED_COLORS["blue"]


def args(*values: str) -> tuple[Argument, ...]:
    return tuple(Argument(v, v) for v in values)


def colors(component: Component) -> list[tuple[str, TextColor | None]]:
    return [(s.text, s.style.color) for s in flatten(component)]


# =============================================================================
# Colors
# =============================================================================


class TestColor:
    @pytest.mark.parametrize(
        ("markup", "expected"),
        [
            ("<red>x", RED),
            ("<dark_gray>x", NAMED_COLORS["dark_gray"]),
            ("<grey>x", NAMED_COLORS["gray"]),
            ("<#00ff00>x", TextColor(0x00FF00)),
            ("<color:gold>x", NAMED_COLORS["gold"]),
            ("<colour:#123456>x", TextColor(0x123456)),
            ("<c:blue>x", BLUE),
        ],
    )
    def test_forms(self, markup: str, expected: TextColor) -> None:
        assert deserialize(markup).style.color == expected

    def test_innermost_wins(self) -> None:
        result = deserialize("<red>a<blue>b</blue>c")
        assert colors(result) == [("a", RED), ("b", BLUE), ("c", RED)]

    @pytest.mark.parametrize("markup", ["<#12345>x", "<#gggggg>x"])
    def test_malformed_hex_is_unresolved(self, markup: str) -> None:
        assert deserialize(markup) == Text(markup)


class TestGradient:
    def test_two_stops(self) -> None:
        assert colors(deserialize("<gradient:red:blue>ab")) == [("a", RED), ("b", BLUE)]

    def test_midpoint_interpolated(self) -> None:
        result = colors(deserialize("<gradient:red:blue>abc</gradient>"))
        assert result[1] == ("b", TextColor(0xAA55AA))

    def test_default_white_to_black(self) -> None:
        assert colors(deserialize("<gradient>ab")) == [
            ("a", NAMED_COLORS["white"]),
            ("b", NAMED_COLORS["black"]),
        ]

    def test_nested_color_keeps_position(self) -> None:
        result = colors(deserialize("<gradient:red:blue>a<green>b</green>c"))
        assert result == [("a", RED), ("b", NAMED_COLORS["green"]), ("c", BLUE)]

    def test_recolors_inherited_color(self) -> None:
        result = colors(deserialize("<red><gradient:white:black>ab"))
        assert result == [("a", NAMED_COLORS["white"]), ("b", NAMED_COLORS["black"])]

    def test_nested_color_equal_to_inherited_is_kept(self) -> None:
        result = colors(deserialize("<red><gradient:blue:green>a<red>b</red>c</gradient></red>"))
        assert result == [("a", BLUE), ("b", RED), ("c", NAMED_COLORS["green"])]

    def test_inserted_content_keeps_inherited_color(self) -> None:
        result = colors(deserialize("<red><gradient:blue:green>ab<key:key.jump>"))
        assert result == [("a", BLUE), ("b", NAMED_COLORS["green"]), ("key.jump", RED)]

    def test_keeps_other_style(self) -> None:
        segments = flatten(deserialize("<bold><gradient:red:blue>ab"))
        assert all(s.style.bold for s in segments)

    def test_phase(self) -> None:
        result = colors(deserialize("<gradient:red:blue:0.5>ab"))
        assert result == [("a", TextColor(0xAA55AA)), ("b", TextColor(0xAA55AA))]

    def test_three_stops(self) -> None:
        gradient = GradientTransformation.load("gradient", args("red", "green", "blue"))
        assert gradient.color_at(0, 5) == RED
        assert gradient.color_at(2, 5) == NAMED_COLORS["green"]
        assert gradient.color_at(4, 5) == BLUE

    def test_single_character(self) -> None:
        assert colors(deserialize("<gradient:red:blue>a")) == [("a", RED)]

    def test_empty_content(self) -> None:
        assert deserialize("<gradient:red:blue></gradient>") == Text("")

    @pytest.mark.parametrize(
        ("arguments", "match"),
        [
            (("red",), "at least two"),
            (("red", "blue", "2"), "between -1 and 1"),
            (("red", "nope", "blue"), "Unknown color"),
            (("red", "blue", "x"), "Unknown color"),
        ],
    )
    def test_load_errors(self, arguments: tuple[str, ...], match: str) -> None:
        with pytest.raises(TransformationLoadError, match=match):
            GradientTransformation.load("gradient", args(*arguments))


class TestRainbow:
    def test_hues(self) -> None:
        assert colors(deserialize("<rainbow>ab")) == [
            ("a", TextColor(0xFF0000)),
            ("b", TextColor(0x00FFFF)),
        ]

    def test_reversed(self) -> None:
        assert colors(deserialize("<rainbow:!>ab")) == [
            ("a", TextColor(0x00FFFF)),
            ("b", TextColor(0xFF0000)),
        ]

    def test_phase(self) -> None:
        assert colors(deserialize("<rainbow:1>ab")) == [
            ("a", TextColor(0x00FFFF)),
            ("b", TextColor(0xFF0000)),
        ]

    def test_nested_color_equal_to_inherited_is_kept(self) -> None:
        result = colors(deserialize("<red><rainbow>a<red>b</red></rainbow></red>"))
        assert result == [("a", TextColor(0xFF0000)), ("b", RED)]

    def test_load(self) -> None:
        assert RainbowTransformation.load("rainbow", ()) == RainbowTransformation()
        assert RainbowTransformation.load("rainbow", args("!2")) == RainbowTransformation(True, 2)

    @pytest.mark.parametrize("arguments", [("x",), ("1", "2"), ("!x",)])
    def test_load_errors(self, arguments: tuple[str, ...]) -> None:
        with pytest.raises(TransformationLoadError):
            RainbowTransformation.load("rainbow", args(*arguments))


# =============================================================================
# Decorations
# =============================================================================


class TestDecoration:
    @pytest.mark.parametrize(
        ("name", "attribute"),
        [
            ("bold", "bold"),
            ("b", "bold"),
            ("italic", "italic"),
            ("em", "italic"),
            ("i", "italic"),
            ("underlined", "underlined"),
            ("u", "underlined"),
            ("strikethrough", "strikethrough"),
            ("st", "strikethrough"),
            ("obfuscated", "obfuscated"),
            ("obf", "obfuscated"),
        ],
    )
    def test_aliases(self, name: str, attribute: str) -> None:
        assert getattr(deserialize(f"<{name}>x").style, attribute) is True

    def test_negation_sets_false(self) -> None:
        assert deserialize("<!italic>x").style.italic is False

    def test_rejects_arguments(self) -> None:
        with pytest.raises(TransformationLoadError, match="no arguments"):
            deserialize("<bold:true>x")


# =============================================================================
# Events
# =============================================================================


class TestClick:
    @pytest.mark.parametrize(
        ("markup", "event"),
        [
            (
                "<click:open_url:https://example.com>x",
                ClickEvent(ClickAction.OPEN_URL, "https://example.com"),
            ),
            ("<click:run_command:/say hi>x", ClickEvent(ClickAction.RUN_COMMAND, "/say hi")),
            ("<click:SUGGEST_COMMAND:/msg >x", ClickEvent(ClickAction.SUGGEST_COMMAND, "/msg ")),
            ("<click:change_page:2>x", ClickEvent(ClickAction.CHANGE_PAGE, "2")),
            ("<click:copy_to_clipboard:'a:b'>x", ClickEvent(ClickAction.COPY_TO_CLIPBOARD, "a:b")),
        ],
    )
    def test_actions(self, markup: str, event: ClickEvent) -> None:
        assert deserialize(markup).style.click_event == event

    def test_unknown_action(self) -> None:
        with pytest.raises(TransformationLoadError, match="Unknown click action"):
            deserialize("<click:explode:now>x")


class TestHover:
    def test_show_text_plain(self) -> None:
        hover = deserialize("<hover:show_text:tip>x").style.hover_event
        assert hover.action is HoverAction.SHOW_TEXT
        assert hover.value == Text("tip")

    def test_show_text_with_quote(self) -> None:
        hover = deserialize(r"<hover:show_text:'it\'s'>x").style.hover_event
        assert hover.value == Text("it's")

    def test_show_item_default_count(self) -> None:
        hover = deserialize("<hover:show_item:minecraft:stone>x").style.hover_event
        assert (hover.value.item, hover.value.count) == ("minecraft:stone", 1)

    def test_show_item_count(self) -> None:
        hover = deserialize("<hover:show_item:stone:3>x").style.hover_event
        assert (hover.value.item, hover.value.count) == ("stone", 3)

    def test_show_entity_without_name(self) -> None:
        uuid = "123e4567-e89b-12d3-a456-426614174000"
        hover = deserialize(f"<hover:show_entity:pig:{uuid}>x").style.hover_event
        assert hover.value.type == "pig"
        assert hover.value.id == UUID(uuid)
        assert hover.value.name is None

    def test_show_entity_needs_type(self) -> None:
        with pytest.raises(TransformationLoadError, match="entity type"):
            deserialize("<hover:show_entity:123e4567-e89b-12d3-a456-426614174000>x")

    def test_hover_text_is_parsed_per_use(self) -> None:
        mm = MiniMessage()
        first = mm.parse("<hover:show_text:'<n>'>x", "n", "one")
        second = mm.parse("<hover:show_text:'<n>'>x", "n", "two")
        assert first.style.hover_event.value == Text("one")
        assert second.style.hover_event.value == Text("two")


class TestInsertion:
    def test_insertion(self) -> None:
        assert deserialize("<insert:a:b>x").style.insertion == "a:b"

    def test_requires_argument(self) -> None:
        with pytest.raises(TransformationLoadError):
            deserialize("<insert>x")


# =============================================================================
# Content and formatting
# =============================================================================


class TestContent:
    def test_translatable_without_arguments(self) -> None:
        assert deserialize("<lang:block.minecraft.stone>") == Translatable("block.minecraft.stone")

    def test_keybind_rejects_extra_arguments(self) -> None:
        with pytest.raises(TransformationLoadError, match="exactly one"):
            deserialize("<key:a:b>")

    def test_inserting_tags_do_not_enclose(self) -> None:
        result = deserialize("<key:key.jump>after")
        assert result.children[1] == Text("after")


class TestFont:
    @pytest.mark.parametrize(
        ("markup", "font"),
        [
            ("<font:uniform>x", "uniform"),
            ("<font:minecraft:alt>x", "minecraft:alt"),
            ("<font:my_pack:fonts/title.v2>x", "my_pack:fonts/title.v2"),
        ],
    )
    def test_keys(self, markup: str, font: str) -> None:
        assert deserialize(markup).style.font == font

    @pytest.mark.parametrize("markup", ["<font:a:b:c>x", "<font:UPPER>x", "<font>x"])
    def test_invalid(self, markup: str) -> None:
        with pytest.raises(TransformationLoadError):
            deserialize(markup)


class TestReset:
    def test_clears_events(self) -> None:
        result = deserialize("<click:run_command:/x><insert:i>a<reset>b")
        segments = flatten(result)
        assert segments[1] == Segment("b", Style())

    def test_rejects_arguments(self) -> None:
        with pytest.raises(TransformationLoadError):
            deserialize("<reset:all>x")


# =============================================================================
# Custom types
# =============================================================================


@dataclass(frozen=True, slots=True)
class Shout(Transformation):
    def apply(self, style: Style, context) -> Style:
        return replace(style, bold=True)


@dataclass(frozen=True, slots=True)
class Upper(Transformation):
    def modify(self, component: Component, inherited: Style) -> Component:
        children = tuple(self.modify(child, inherited) for child in component.children)
        if isinstance(component, Text):
            return replace(component, content=component.content.upper(), children=children)
        return replace(component, children=children)


@dataclass(frozen=True, slots=True)
class Rule(Transformation):
    width: int

    def insert(self, style: Style, context) -> Component:
        return Text("-" * self.width, style=style)


def load_rule(name: str, arguments: tuple[Argument, ...]) -> Rule:
    if len(arguments) != 1 or not arguments[0].value.isdigit():
        raise TransformationLoadError(name, "Expected a width")
    return Rule(int(arguments[0].value))


SHOUT = TransformationType.of("shout", ("shout", "yell"), lambda name, arguments: Shout())
UPPER = TransformationType.of("upper", ("upper",), lambda name, arguments: Upper())
RULE = TransformationType.of("rule", ("hr",), load_rule, inserting=True)


class TestCustomTypes:
    @pytest.fixture
    def mm(self) -> MiniMessage:
        return MiniMessage.builder().transformations(SHOUT, UPPER, RULE).build()

    def test_apply(self, mm: MiniMessage) -> None:
        assert mm.deserialize("<YELL>x") == Text("x", style=Style(bold=True))

    def test_modify(self, mm: MiniMessage) -> None:
        result = mm.deserialize("<upper>ab<red>c</red></upper>d")
        assert [s.text for s in flatten(result)] == ["AB", "C", "d"]

    def test_insert(self, mm: MiniMessage) -> None:
        assert mm.deserialize("a<hr:3>b</hr>") == Text("a---b")

    def test_load_error_located(self, mm: MiniMessage) -> None:
        with pytest.raises(TransformationLoadError) as exc_info:
            mm.deserialize("ab<hr:wide>")
        assert exc_info.value.position == 2
        assert exc_info.value.reason == "Expected a width"

    def test_defaults_still_present(self, mm: MiniMessage) -> None:
        assert mm.deserialize("<red>x").style.color == RED

    def test_first_match_wins(self) -> None:
        override = TransformationType.of("loud", ("red",), lambda name, arguments: Shout())
        mm = MiniMessage.builder().remove_default_transformations().transformation(override).build()
        assert mm.deserialize("<red>x") == Text("x", style=Style(bold=True))
