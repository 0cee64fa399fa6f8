"""Markdown preprocessing for MiniMessage.

Optional pass that turns ``**bold**``-style emphasis into tags before the
markup is parsed. Enable it with ``MiniMessage.builder().markdown()``.

"""

from minimessage.markdown.flavor import (
    DEFAULT_FLAVOR,
    DISCORD_FLAVOR,
    GITHUB_FLAVOR,
    LEGACY_FLAVOR,
    MarkdownFlavor,
    flavor_by_name,
)
from minimessage.markdown.parser import parse_markdown, strip_markdown

__all__ = [
    # Flavors
    "DEFAULT_FLAVOR",
    "DISCORD_FLAVOR",
    "GITHUB_FLAVOR",
    "LEGACY_FLAVOR",
    "MarkdownFlavor",
    "flavor_by_name",
    # Processing
    "parse_markdown",
    "strip_markdown",
]
