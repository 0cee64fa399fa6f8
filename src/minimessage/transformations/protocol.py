"""Transformation types and the transformation protocol.

A TransformationType describes a family of tags: which names it answers
to and how to load a Transformation from a tag's arguments. A
Transformation is the loaded, immutable effect of one tag occurrence.

Three hooks cover every built-in tag:
- ``apply``: merge style onto the inherited context (color, bold, click)
- ``insert``: produce content for tags that insert instead of enclosing
  (key, lang)
- ``modify``: post-process the subtree built inside the tag (gradient)

Thread Safety:
TransformationType and all built-in Transformations are frozen. Loading
is a pure function of the tag name and arguments. Multiple threads may
share the same types concurrently.

Example:
    >>> from dataclasses import dataclass
    >>> from minimessage.nodes import Decoration
    >>> @dataclass(frozen=True, slots=True)
    ... class Shout(Transformation):
    ...     def apply(self, style, context):
    ...         return style.with_decoration(Decoration.BOLD, True)
    >>> SHOUT = TransformationType.of("shout", ("shout",), lambda name, args: Shout())

"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from minimessage.errors import TransformationLoadError

if TYPE_CHECKING:
    from minimessage.nodes import Component, Style
    from minimessage.parser import Parser
    from minimessage.templates import Template
    from minimessage.tokens import Argument


class Transformation:
    """Base class for loaded tag effects.

    Every hook defaults to doing nothing, so subclasses override only what
    they need.

    Thread Safety:
        Subclasses must be immutable. The same instance may be applied from
        several threads.

    """

    __slots__ = ()

    def apply(self, style: Style, context: ParseContext) -> Style:
        """Return the style context for content inside this tag."""
        return style

    def insert(self, style: Style, context: ParseContext) -> Component | None:
        """Return content inserted in place of the tag, or None."""
        return None

    def modify(self, component: Component, inherited: Style) -> Component:
        """Post-process the component built for this tag's scope.

        Args:
            component: Component holding the tag's content
            inherited: Style context the tag was opened in
        """
        return component


TransformationLoader = Callable[[str, "tuple[Argument, ...]"], Transformation]


@dataclass(frozen=True, slots=True)
class TransformationType:
    """Descriptor for a family of tags.

    Attributes:
        name: Identifier for the type (e.g., "color")
        matches: Predicate over lower-cased tag names
        load: Factory ``(name, arguments) -> Transformation``; raises
            TransformationLoadError for unacceptable arguments
        inserting: Tags of this type insert content and never enclose any
        verbatim: Content inside tags of this type is not tokenized

    """

    name: str
    matches: Callable[[str], bool]
    load: TransformationLoader
    inserting: bool = False
    verbatim: bool = False

    @classmethod
    def of(
        cls,
        name: str,
        names: Iterable[str],
        load: TransformationLoader,
        *,
        inserting: bool = False,
        verbatim: bool = False,
    ) -> TransformationType:
        """Build a type that matches a fixed set of tag names."""
        accepted = frozenset(n.lower() for n in names)
        return cls(name, accepted.__contains__, load, inserting, verbatim)

    def __repr__(self) -> str:
        return f"TransformationType({self.name!r})"


@dataclass(frozen=True, slots=True)
class ParseContext:
    """State shared by the transformations of one parse.

    Attributes:
        parser: Parser running this parse
        source: Markup being parsed, for error positions
        templates: Caller templates in effect
        depth: Scoped tags enclosing the current position, counted across
            recursive parses (0 at the top level)

    """

    parser: Parser
    source: str
    templates: Mapping[str, Template]
    depth: int = 0

    def enter(self) -> ParseContext:
        """Return the context for the contents of a scoped tag."""
        return replace(self, depth=self.depth + 1)

    def parse(self, markup: str) -> Component:
        """Parse nested markup (hover text, translation arguments).

        Uses the same templates, resolver and depth budget as the
        enclosing parse.
        """
        return self.parser.parse_nested(markup, self.templates, self.depth + 1)


def require_no_arguments(name: str, arguments: tuple[Argument, ...]) -> None:
    """Raise TransformationLoadError if a tag that takes no arguments got some."""
    if arguments:
        msg = f"Takes no arguments, got {len(arguments)}"
        raise TransformationLoadError(name, msg)


def require_arguments(name: str, arguments: tuple[Argument, ...], minimum: int) -> None:
    """Raise TransformationLoadError if fewer than ``minimum`` arguments were given."""
    if len(arguments) < minimum:
        msg = f"Expected at least {minimum} argument(s), got {len(arguments)}"
        raise TransformationLoadError(name, msg)
