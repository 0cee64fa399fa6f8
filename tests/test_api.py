"""Tests for the public API surface."""

import minimessage
from minimessage import MiniMessage, deserialize, parse, serialize, strip_tokens
from minimessage.nodes import NAMED_COLORS, Style, Text


class TestModuleFunctions:
    def test_deserialize(self) -> None:
        assert deserialize("<green>ok").content == "ok"

    def test_parse(self) -> None:
        assert parse("Welcome, <player>!", "player", "Steve") == Text("Welcome, Steve!")

    def test_serialize(self) -> None:
        assert serialize(Text("Hi", style=Style(bold=True))) == "<bold>Hi</bold>"

    def test_strip_tokens(self) -> None:
        assert strip_tokens("<red>a</red>b") == "ab"


class TestMiniMessage:
    def test_shared_instance(self) -> None:
        mm = MiniMessage()
        assert mm.deserialize("<red>Hi").style.color == NAMED_COLORS["red"]
        assert mm.parse_mapping("<greeting>, world", {"greeting": "Hello"}).content == "Hello, world"

    def test_no_default_transformations(self) -> None:
        mm = MiniMessage.builder().remove_default_transformations().build()
        assert mm.deserialize("<red>Hi").content == "<red>Hi"
        assert mm.strip_tokens("<red>Hi") == "<red>Hi"

    def test_config_property(self) -> None:
        assert MiniMessage().config is minimessage.DEFAULT_CONFIG

    def test_repr(self) -> None:
        assert repr(MiniMessage()) == "MiniMessage(markdown=False, types=12)"

    def test_deserialize_serialize_cycle(self) -> None:
        mm = MiniMessage()
        markup = "<bold>Hello <red>world</red>!</bold>"
        assert mm.serialize(mm.deserialize(markup)) == markup


class TestExports:
    def test_version(self) -> None:
        assert minimessage.__version__ == "0.1.0"

    def test_all_resolves(self) -> None:
        for name in minimessage.__all__:
            assert hasattr(minimessage, name), name

    def test_main_names(self) -> None:
        for name in ("MiniMessage", "deserialize", "parse", "serialize", "escape_tokens", "strip_tokens"):
            assert name in minimessage.__all__
