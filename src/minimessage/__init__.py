"""
MiniMessage: tag-based rich text markup for Python.

Turns markup like ``<bold>Hello <red>world</red>!</bold>`` into a tree of
immutable, styled components, and serializes such trees back to markup.
Zero runtime dependencies.

Quick Start:
    >>> from minimessage import deserialize, serialize
    >>> component = deserialize("<bold>Hello <red>world</red>!</bold>")
    >>> component.style.bold
    True
    >>> serialize(component)
    '<bold>Hello <red>world</red>!</bold>'

Templates:
    >>> from minimessage import parse
    >>> parse("Welcome, <player>!", "player", "Steve").content
    'Welcome, Steve!'

Configured Instances:
    >>> from minimessage import MiniMessage
    >>> mm = MiniMessage.builder().markdown().build()
    >>> mm.deserialize("**loud**").style.bold
    True

"""

from collections.abc import Iterable, Mapping

from minimessage.builder import MiniMessageBuilder
from minimessage.config import DEFAULT_CONFIG, MiniMessageConfig
from minimessage.errors import (
    MiniMessageError,
    ParseError,
    PlaceholderError,
    SerializeError,
    TagSyntaxError,
    TransformationLoadError,
)
from minimessage.lexer import Lexer, escape_tokens
from minimessage.location import SourceLocation
from minimessage.markdown import (
    DISCORD_FLAVOR,
    GITHUB_FLAVOR,
    LEGACY_FLAVOR,
    MarkdownFlavor,
    parse_markdown,
    strip_markdown,
)
from minimessage.nodes import (
    EMPTY_STYLE,
    NAMED_COLORS,
    ClickAction,
    ClickEvent,
    Component,
    ComponentLike,
    Decoration,
    HoverAction,
    HoverEvent,
    Keybind,
    ShowEntity,
    ShowItem,
    Style,
    Text,
    TextColor,
    Translatable,
    text,
)
from minimessage.parser import Parser
from minimessage.serializer import MarkupSerializer
from minimessage.templates import (
    PlaceholderResolver,
    Template,
    templates_from_iterable,
    templates_from_mapping,
    templates_from_pairs,
)
from minimessage.text import Segment, flatten, plain_text
from minimessage.tokens import Token, TokenType
from minimessage.transformations import (
    EMPTY_REGISTRY,
    ParseContext,
    Transformation,
    TransformationRegistry,
    TransformationRegistryBuilder,
    TransformationType,
    create_default_registry,
)

__version__ = "0.1.0"


class MiniMessage:
    """Configured markup parser and serializer.

    Usage:
        >>> mm = MiniMessage()
        >>> mm.deserialize("<red>Hi").style.color == NAMED_COLORS["red"]
        True
        >>> mm.parse_mapping("<greeting>, world", {"greeting": "Hello"}).content
        'Hello, world'

        >>> # Custom configuration
        >>> mm = MiniMessage.builder().remove_default_transformations().build()
        >>> mm.deserialize("<red>Hi").content
        '<red>Hi'

    Thread Safety:
        Immutable. Share one instance across threads; every call builds its
        own intermediate state.

    """

    __slots__ = ("_config", "_parser", "_serializer")

    def __init__(self, config: MiniMessageConfig | None = None) -> None:
        """Initialize MiniMessage.

        Args:
            config: Configuration; defaults to the built-in transformations,
                no markdown and no placeholder resolver
        """
        self._config = DEFAULT_CONFIG if config is None else config
        self._parser = Parser(
            self._config.registry,
            self._config.placeholder_resolver,
            self._config.max_depth,
        )
        self._serializer = MarkupSerializer()

    @classmethod
    def builder(cls) -> MiniMessageBuilder:
        """Start building a configured instance from the defaults."""
        return MiniMessageBuilder()

    def to_builder(self) -> MiniMessageBuilder:
        """Start building a configured instance from this one's settings."""
        return MiniMessageBuilder(self._config)

    @property
    def config(self) -> MiniMessageConfig:
        return self._config

    def deserialize(self, text: str) -> Component:
        """Parse markup without templates.

        Raises:
            TagSyntaxError: On malformed markup
            TransformationLoadError: If a tag's arguments are rejected
        """
        return self._parse(text, {})

    def parse(self, text: str, *pairs: str | ComponentLike) -> Component:
        """Parse markup with templates given as alternating key/value arguments.

        Example:
            >>> MiniMessage().parse("<a> and <b>", "a", "one", "b", Text("two")).content
            'one and two'

        Raises:
            PlaceholderError: On an odd number of arguments, a non-str key or
                an unsupported value, before any parsing
        """
        return self._parse(text, templates_from_pairs(*pairs))

    def parse_mapping(self, text: str, mapping: Mapping[str, str | ComponentLike]) -> Component:
        """Parse markup with templates given as a name to value mapping."""
        return self._parse(text, templates_from_mapping(mapping))

    def parse_templates(self, text: str, templates: Iterable[Template]) -> Component:
        """Parse markup with an explicit template list."""
        return self._parse(text, templates_from_iterable(templates))

    def _parse(self, text: str, templates: Mapping[str, Template]) -> Component:
        if self._config.markdown:
            text = parse_markdown(text, self._config.markdown_flavor)
        return self._parser.parse_format(text, templates)

    def serialize(self, component: ComponentLike) -> str:
        """Serialize a component tree to markup.

        Raises:
            SerializeError: If the tree holds something markup cannot express
        """
        return self._serializer.serialize(component.as_component())

    def escape_tokens(self, text: str) -> str:
        """Escape text so it parses back to itself."""
        return escape_tokens(text)

    def strip_tokens(self, text: str) -> str:
        """Remove recognized tags (and markdown, if enabled), keeping text."""
        if self._config.markdown:
            text = strip_markdown(text, self._config.markdown_flavor)
        return self._parser.strip_tokens(text)

    def __repr__(self) -> str:
        return (
            f"MiniMessage(markdown={self._config.markdown}, "
            f"types={len(self._parser.registry)})"
        )


def deserialize(text: str) -> Component:
    """Parse markup with the default configuration.

    Example:
        >>> deserialize("<green>ok").content
        'ok'
    """
    return MiniMessage().deserialize(text)


def parse(text: str, *pairs: str | ComponentLike) -> Component:
    """Parse markup with alternating key/value templates and the default configuration."""
    return MiniMessage().parse(text, *pairs)


def serialize(component: ComponentLike) -> str:
    """Serialize a component tree with the default configuration."""
    return MiniMessage().serialize(component)


def strip_tokens(text: str) -> str:
    """Remove built-in tags from markup, keeping their text."""
    return MiniMessage().strip_tokens(text)


__all__ = [
    # Main API
    "MiniMessage",
    "MiniMessageBuilder",
    "deserialize",
    "escape_tokens",
    "parse",
    "serialize",
    "strip_tokens",
    # Configuration
    "DEFAULT_CONFIG",
    "MiniMessageConfig",
    # Components
    "ClickAction",
    "ClickEvent",
    "Component",
    "ComponentLike",
    "Decoration",
    "EMPTY_STYLE",
    "HoverAction",
    "HoverEvent",
    "Keybind",
    "NAMED_COLORS",
    "ShowEntity",
    "ShowItem",
    "Style",
    "Text",
    "TextColor",
    "Translatable",
    "text",
    # Templates
    "PlaceholderResolver",
    "Template",
    "templates_from_iterable",
    "templates_from_mapping",
    "templates_from_pairs",
    # Transformations
    "EMPTY_REGISTRY",
    "ParseContext",
    "Transformation",
    "TransformationRegistry",
    "TransformationRegistryBuilder",
    "TransformationType",
    "create_default_registry",
    # Markdown
    "DISCORD_FLAVOR",
    "GITHUB_FLAVOR",
    "LEGACY_FLAVOR",
    "MarkdownFlavor",
    "parse_markdown",
    "strip_markdown",
    # Lower level
    "Lexer",
    "MarkupSerializer",
    "Parser",
    "Segment",
    "SourceLocation",
    "Token",
    "TokenType",
    "flatten",
    "plain_text",
    # Errors
    "MiniMessageError",
    "ParseError",
    "PlaceholderError",
    "SerializeError",
    "TagSyntaxError",
    "TransformationLoadError",
    # Version
    "__version__",
]
