"""Immutable configuration for MiniMessage instances.

A MiniMessageConfig is built once (usually by MiniMessageBuilder) and
passed explicitly to the parser. There is no ambient or global config.

Usage:
    config = MiniMessageConfig(markdown=True)
    mm = MiniMessage(config)

    # From external sources (settings files, framework config)
    config = MiniMessageConfig.from_dict({"markdown": True, "markdown_flavor": "github"})

Thread Safety:
    MiniMessageConfig is frozen. Share it freely across threads.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from minimessage.markdown.flavor import LEGACY_FLAVOR, MarkdownFlavor, flavor_by_name
from minimessage.templates import no_placeholders

if TYPE_CHECKING:
    from minimessage.templates import PlaceholderResolver
    from minimessage.transformations.registry import TransformationRegistry

DEFAULT_MAX_DEPTH = 128


@dataclass(frozen=True, slots=True)
class MiniMessageConfig:
    """Immutable MiniMessage configuration.

    Attributes:
        markdown: Rewrite markdown-style emphasis into tags before parsing
        markdown_flavor: Markdown dialect; ignored unless ``markdown`` is on
        registry: Transformation types to resolve tags with; None means the
            full built-in set
        placeholder_resolver: Fallback for tag names no type or template
            resolves
        max_depth: Maximum nesting of scoped tags, recursive parses included

    """

    markdown: bool = False
    markdown_flavor: MarkdownFlavor = LEGACY_FLAVOR
    registry: TransformationRegistry | None = None
    placeholder_resolver: PlaceholderResolver = no_placeholders
    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            msg = f"max_depth must be at least 1, got {self.max_depth}"
            raise ValueError(msg)

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> MiniMessageConfig:
        """Create MiniMessageConfig from dictionary.

        Only includes keys that are valid MiniMessageConfig fields; unknown
        keys are silently ignored. ``markdown_flavor`` may be given by name.

        Example:
            >>> config = MiniMessageConfig.from_dict({
            ...     "markdown": True,
            ...     "markdown_flavor": "discord",
            ...     "unknown_key": "ignored",
            ... })
            >>> config.markdown_flavor.name
            'discord'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        flavor = filtered.get("markdown_flavor")
        if isinstance(flavor, str):
            filtered["markdown_flavor"] = flavor_by_name(flavor)
        return cls(**filtered)


DEFAULT_CONFIG = MiniMessageConfig()

__all__ = [
    "DEFAULT_CONFIG",
    "DEFAULT_MAX_DEPTH",
    "MiniMessageConfig",
]
