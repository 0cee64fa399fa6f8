"""Markdown flavors: which delimiters map to which decoration tags.

Thread Safety:
Flavors are frozen. The built-in flavors are module constants shared by
every instance.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class MarkdownFlavor:
    """A markdown dialect.

    Attributes:
        name: Flavor name (e.g., "github")
        markers: ``(delimiter, tag)`` pairs; stored longest delimiter first
            so ``**`` is recognized before ``*``

    Example:
        >>> flavor = MarkdownFlavor("mine", (("*", "bold"), ("%%", "obfuscated")))
        >>> flavor.markers
        (('%%', 'obfuscated'), ('*', 'bold'))

    """

    name: str
    markers: tuple[tuple[str, str], ...]

    def __post_init__(self) -> None:
        for delimiter, _ in self.markers:
            if not delimiter or "<" in delimiter or "\\" in delimiter:
                msg = f"Invalid markdown delimiter: {delimiter!r}"
                raise ValueError(msg)
        ordered = tuple(sorted(self.markers, key=lambda marker: -len(marker[0])))
        object.__setattr__(self, "markers", ordered)

    def marker_at(self, text: str, pos: int) -> tuple[str, str] | None:
        """Return the marker starting at ``pos``, or None."""
        for marker in self.markers:
            if text.startswith(marker[0], pos):
                return marker
        return None


LEGACY_FLAVOR = MarkdownFlavor(
    "legacy",
    (
        ("**", "bold"),
        ("*", "italic"),
        ("_", "italic"),
        ("__", "underlined"),
        ("~~", "strikethrough"),
        ("||", "obfuscated"),
    ),
)

GITHUB_FLAVOR = MarkdownFlavor(
    "github",
    (
        ("**", "bold"),
        ("__", "bold"),
        ("*", "italic"),
        ("_", "italic"),
        ("~~", "strikethrough"),
    ),
)

DISCORD_FLAVOR = MarkdownFlavor(
    "discord",
    (
        ("**", "bold"),
        ("*", "italic"),
        ("_", "italic"),
        ("__", "underlined"),
        ("~~", "strikethrough"),
        ("||", "obfuscated"),
    ),
)

DEFAULT_FLAVOR = LEGACY_FLAVOR

_FLAVORS = {flavor.name: flavor for flavor in (LEGACY_FLAVOR, GITHUB_FLAVOR, DISCORD_FLAVOR)}


def flavor_by_name(name: str) -> MarkdownFlavor:
    """Look up a built-in flavor by name (case-insensitive).

    Raises:
        ValueError: If no built-in flavor has that name
    """
    try:
        return _FLAVORS[name.lower()]
    except KeyError:
        msg = f"Unknown markdown flavor: {name!r}. Expected one of {sorted(_FLAVORS)}"
        raise ValueError(msg) from None
