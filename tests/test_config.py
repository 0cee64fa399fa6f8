"""Tests for MiniMessageConfig and MiniMessageBuilder."""

import pytest

from minimessage import MiniMessage
from minimessage.builder import MiniMessageBuilder
from minimessage.config import DEFAULT_CONFIG, DEFAULT_MAX_DEPTH, MiniMessageConfig
from minimessage.markdown import DISCORD_FLAVOR, GITHUB_FLAVOR, LEGACY_FLAVOR
from minimessage.nodes import Text
from minimessage.templates import no_placeholders
from minimessage.transformations.builtins import COLOR, DECORATION


class TestConfig:
    def test_defaults(self) -> None:
        assert DEFAULT_CONFIG.markdown is False
        assert DEFAULT_CONFIG.markdown_flavor is LEGACY_FLAVOR
        assert DEFAULT_CONFIG.registry is None
        assert DEFAULT_CONFIG.placeholder_resolver is no_placeholders
        assert DEFAULT_CONFIG.max_depth == DEFAULT_MAX_DEPTH == 128

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            DEFAULT_CONFIG.markdown = True  # type: ignore[misc]

    @pytest.mark.parametrize("depth", [0, -1])
    def test_max_depth_validated(self, depth: int) -> None:
        with pytest.raises(ValueError, match="max_depth"):
            MiniMessageConfig(max_depth=depth)

    def test_from_dict(self) -> None:
        config = MiniMessageConfig.from_dict(
            {"markdown": True, "markdown_flavor": "discord", "unknown_key": "ignored"}
        )
        assert config.markdown is True
        assert config.markdown_flavor is DISCORD_FLAVOR

    def test_from_dict_flavor_object(self) -> None:
        config = MiniMessageConfig.from_dict({"markdown_flavor": GITHUB_FLAVOR, "max_depth": 4})
        assert config.markdown_flavor is GITHUB_FLAVOR
        assert config.max_depth == 4

    def test_from_dict_unknown_flavor(self) -> None:
        with pytest.raises(ValueError, match="Unknown markdown flavor"):
            MiniMessageConfig.from_dict({"markdown_flavor": "nope"})

    def test_from_empty_dict(self) -> None:
        assert MiniMessageConfig.from_dict({}) == MiniMessageConfig()


class TestBuilder:
    def test_builder_starts_from_defaults(self) -> None:
        config = MiniMessage.builder().build_config()
        assert config.markdown is False
        assert len(config.registry) == 12

    def test_remove_defaults_then_add(self) -> None:
        mm = MiniMessage.builder().remove_default_transformations().transformation(COLOR).build()
        assert mm.deserialize("<red>x").style.color is not None
        assert mm.deserialize("<bold>x") == Text("<bold>x")

    def test_duplicate_registration(self) -> None:
        with pytest.raises(ValueError, match="already registered"):
            MiniMessage.builder().transformation(DECORATION)

    def test_invalid_max_depth_on_build(self) -> None:
        builder = MiniMessage.builder().max_depth(0)
        with pytest.raises(ValueError):
            builder.build()

    def test_builder_does_not_touch_built_instance(self) -> None:
        builder = MiniMessage.builder()
        mm = builder.build()
        builder.remove_default_transformations()
        assert mm.deserialize("<bold>x").style.bold is True

    def test_to_builder_copies_settings(self) -> None:
        resolver = lambda name: "R"  # noqa: E731
        mm = (
            MiniMessage.builder()
            .markdown()
            .markdown_flavor(GITHUB_FLAVOR)
            .placeholder_resolver(resolver)
            .max_depth(7)
            .build()
        )
        config = mm.to_builder().build_config()
        assert config.markdown is True
        assert config.markdown_flavor is GITHUB_FLAVOR
        assert config.placeholder_resolver is resolver
        assert config.max_depth == 7
        assert config.registry.types == mm.config.registry.types

    def test_markdown_toggle(self) -> None:
        builder = MiniMessageBuilder().markdown().markdown(False)
        assert builder.build_config().markdown is False

    def test_instance_from_config(self) -> None:
        mm = MiniMessage(MiniMessageConfig(markdown=True))
        assert mm.deserialize("*x*").style.italic is True
        assert "markdown=True" in repr(mm)
