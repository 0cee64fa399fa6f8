"""Builder for configured MiniMessage instances.

    >>> mm = (
    ...     MiniMessage.builder()
    ...     .markdown()
    ...     .markdown_flavor(GITHUB_FLAVOR)
    ...     .transformation(WHISPER)
    ...     .build()
    ... )

The builder is mutable and meant to be used from one thread; the instance
it builds is immutable.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from minimessage.config import DEFAULT_CONFIG, MiniMessageConfig
from minimessage.markdown.flavor import MarkdownFlavor, flavor_by_name
from minimessage.transformations.registry import create_default_registry

if TYPE_CHECKING:
    from minimessage import MiniMessage
    from minimessage.templates import PlaceholderResolver
    from minimessage.transformations.protocol import TransformationType


class MiniMessageBuilder:
    """Mutable builder for MiniMessage.

    Starts from the given configuration (the defaults unless an existing
    instance's config is passed, see ``MiniMessage.to_builder``).

    """

    __slots__ = ("_markdown", "_markdown_flavor", "_registry", "_resolver", "_max_depth")

    def __init__(self, config: MiniMessageConfig = DEFAULT_CONFIG) -> None:
        self._markdown = config.markdown
        self._markdown_flavor = config.markdown_flavor
        registry = create_default_registry() if config.registry is None else config.registry
        self._registry = registry.to_builder()
        self._resolver = config.placeholder_resolver
        self._max_depth = config.max_depth

    def markdown(self, enabled: bool = True) -> MiniMessageBuilder:
        """Turn the markdown preprocessing pass on (or off)."""
        self._markdown = enabled
        return self

    def markdown_flavor(self, flavor: MarkdownFlavor | str) -> MiniMessageBuilder:
        """Select the markdown dialect. Has no effect unless markdown is on.

        Args:
            flavor: A MarkdownFlavor or the name of a built-in one
        """
        self._markdown_flavor = flavor_by_name(flavor) if isinstance(flavor, str) else flavor
        return self

    def remove_default_transformations(self) -> MiniMessageBuilder:
        """Drop every transformation type registered so far."""
        self._registry.clear()
        return self

    def transformation(self, transformation_type: TransformationType) -> MiniMessageBuilder:
        """Register a transformation type after the existing ones.

        Raises:
            TypeError: If the object is not a TransformationType
            ValueError: If a type with the same name is already registered
        """
        self._registry.register(transformation_type)
        return self

    def transformations(self, *transformation_types: TransformationType) -> MiniMessageBuilder:
        """Register several transformation types in order."""
        self._registry.register_all(transformation_types)
        return self

    def placeholder_resolver(self, resolver: PlaceholderResolver) -> MiniMessageBuilder:
        """Set the fallback used for tag names nothing else resolves."""
        self._resolver = resolver
        return self

    def max_depth(self, depth: int) -> MiniMessageBuilder:
        """Limit the nesting of scoped tags, recursive parses included."""
        self._max_depth = depth
        return self

    def build_config(self) -> MiniMessageConfig:
        """Snapshot the builder into an immutable configuration.

        Raises:
            ValueError: If max_depth is below 1
        """
        return MiniMessageConfig(
            markdown=self._markdown,
            markdown_flavor=self._markdown_flavor,
            registry=self._registry.build(),
            placeholder_resolver=self._resolver,
            max_depth=self._max_depth,
        )

    def build(self) -> MiniMessage:
        """Build an immutable MiniMessage instance."""
        from minimessage import MiniMessage

        return MiniMessage(self.build_config())
