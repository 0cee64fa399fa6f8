"""MiniMessage parser.

Turns markup into a component tree:

    source -> Lexer -> tokens -> build_tree -> TagNode tree -> components

Each scoped tag is resolved once, applied to the inherited style, and its
children are built in the resulting style. Every component carries its
effective style.

Result Shape:
- The root is an empty Text holding the top-level components, or the
  single top-level component itself.
- A scoped tag becomes an empty Text carrying the merged style, or the
  lone text it wraps.
- Adjacent text runs with the same style are merged.

Policies:
- Unresolved tag: kept literally, exactly as written.
- Close tag matching nothing: TagSyntaxError if a registered type
  answers to the name, literal text otherwise. Close tags after inserted
  content (``<player>...</player>``) are dropped.
- Transformation load error: the whole parse fails.

Thread Safety:
Parser is immutable after construction. Every call builds its own tokens,
tree and transformations, so one Parser may serve many threads.

"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from minimessage.config import DEFAULT_MAX_DEPTH
from minimessage.errors import TagSyntaxError, TransformationLoadError
from minimessage.lexer import Lexer, build_tree
from minimessage.nodes import EMPTY_STYLE, Text
from minimessage.stringbuilder import StringBuilder
from minimessage.templates import no_placeholders
from minimessage.text import plain_text
from minimessage.tokens import TagNode, Token, TokenType
from minimessage.transformations.protocol import ParseContext
from minimessage.transformations.registry import create_default_registry
from minimessage.utils.logger import get_logger

if TYPE_CHECKING:
    from minimessage.nodes import Component, Style
    from minimessage.templates import PlaceholderResolver, Template
    from minimessage.transformations.protocol import Transformation
    from minimessage.transformations.registry import TransformationRegistry

logger = get_logger(__name__)

_NO_TEMPLATES: Mapping[str, Template] = {}


class Parser:
    """Markup to component parser.

    Usage:
            >>> parser = Parser()
            >>> component = parser.parse_format("<bold>Hi</bold>")
            >>> component.content, component.style.bold
            ('Hi', True)

    Thread Safety:
        Immutable after construction. Safe to share across threads.

    """

    __slots__ = ("_registry", "_resolver", "_max_depth")

    def __init__(
        self,
        registry: TransformationRegistry | None = None,
        placeholder_resolver: PlaceholderResolver = no_placeholders,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> None:
        """Initialize parser.

        Args:
            registry: Transformation types; None means the built-in set
            placeholder_resolver: Fallback for names no type or template
                resolves
            max_depth: Maximum nesting of scoped tags
        """
        self._registry = create_default_registry() if registry is None else registry
        self._resolver = placeholder_resolver
        self._max_depth = max_depth

    @property
    def registry(self) -> TransformationRegistry:
        return self._registry

    def parse_format(
        self,
        text: str,
        templates: Mapping[str, Template] | None = None,
    ) -> Component:
        """Parse markup into a component tree.

        Args:
            text: Markup to parse
            templates: Normalized templates (see minimessage.templates)

        Returns:
            Root component

        Raises:
            TagSyntaxError: On malformed markup
            TransformationLoadError: If a tag's arguments are rejected
        """
        return self._parse(text, _NO_TEMPLATES if templates is None else templates, 0)

    def parse_nested(
        self,
        markup: str,
        templates: Mapping[str, Template],
        depth: int,
    ) -> Component:
        """Parse markup embedded in a tag argument.

        Nested parses share the depth budget of the parse that started them.
        """
        if depth > self._max_depth:
            msg = f"Markup nested deeper than {self._max_depth} levels"
            raise TagSyntaxError(msg)
        return self._parse(markup, templates, depth)

    def _parse(self, text: str, templates: Mapping[str, Template], depth: int) -> Component:
        registry = self._registry
        tokens = Lexer(text, registry.is_verbatim).tokenize()
        root = build_tree(tokens, registry.opens_scope, self._max_depth - depth, text)

        context = ParseContext(self, text, templates, depth)
        children = self._build_children(root.children, EMPTY_STYLE, context, set())
        if len(children) == 1:
            return children[0]
        return Text("", children=children)

    def _build_children(
        self,
        items: list[TagNode | Token],
        style: Style,
        context: ParseContext,
        inserted: set[str],
    ) -> tuple[Component, ...]:
        """Build the components for the contents of one scope.

        Args:
            items: Child nodes and tokens of the scope
            style: Effective style of the scope
            context: Per-parse context
            inserted: Lower-cased names of tags that inserted content so
                far; their close tags are dropped
        """
        out: list[Component] = []

        for item in items:
            match item:
                case TagNode():
                    scoped = self._build_scope(item, style, context, inserted)
                    if scoped is not None:
                        _append(out, scoped)
                case Token(type=TokenType.TEXT):
                    _append(out, Text(item.value, style=style))
                case Token(type=TokenType.OPEN_TAG):
                    transformation = self._resolve(item, context)
                    if transformation is None:
                        logger.debug("Unresolved tag %r kept as text", item.value)
                        _append(out, Text(item.value, style=style))
                        continue
                    inserted.add(item.name.lower())
                    content = transformation.insert(style, context)
                    if content is not None:
                        _append(out, content)
                case Token(type=TokenType.CLOSE_TAG):
                    self._close_orphan(item, style, context, inserted, out)

        return tuple(out)

    def _build_scope(
        self,
        node: TagNode,
        style: Style,
        context: ParseContext,
        inserted: set[str],
    ) -> Component | None:
        transformation = self._resolve(node.token, context)
        if transformation is None:
            # opens_scope() only admits names a registered type matches
            msg = f"Scoped tag <{node.name}> did not resolve"
            raise TagSyntaxError(msg, node.token.start, context.source)

        inner = transformation.apply(style, context)
        children = self._build_children(node.children, inner, context.enter(), inserted)
        if not children:
            return None

        only = children[0]
        if (
            len(children) == 1
            and type(only) is Text
            and not only.children
            and only.style == inner
        ):
            component: Component = only
        else:
            component = Text("", style=inner, children=children)
        return transformation.modify(component, style)

    def _resolve(self, token: Token, context: ParseContext) -> Transformation | None:
        try:
            return self._registry.resolve(
                token.name, token.arguments, context.templates, self._resolver
            )
        except TransformationLoadError as e:
            raise e.at(token.start, context.source) from None

    def _close_orphan(
        self,
        token: Token,
        style: Style,
        context: ParseContext,
        inserted: set[str],
        out: list[Component],
    ) -> None:
        if token.name.lower() in inserted:
            return
        if self._registry.exists(token.name):
            msg = f"Closing tag </{token.name}> does not match any open tag"
            raise TagSyntaxError(msg, token.start, context.source)
        _append(out, Text(token.value, style=style))

    def strip_tokens(self, text: str) -> str:
        """Remove recognized tags, keeping the text they enclose.

        Tags no registered type matches are kept as written. Inserting tags
        are replaced by the plain text of what they insert. Escapes are
        resolved.

        Raises:
            TagSyntaxError: On malformed markup
            TransformationLoadError: If an inserting tag's arguments are rejected
        """
        registry = self._registry
        context = ParseContext(self, text, _NO_TEMPLATES)
        sb = StringBuilder()

        for token in Lexer(text, registry.is_verbatim).tokenize():
            if token.type is TokenType.TEXT:
                sb.append(token.value)
                continue

            transformation_type = registry.get_type(token.name)
            if transformation_type is None:
                sb.append(token.value)
            elif token.type is TokenType.OPEN_TAG and transformation_type.inserting:
                transformation = self._resolve(token, context)
                content = transformation.insert(EMPTY_STYLE, context)
                if content is not None:
                    sb.append(plain_text(content))

        return sb.build()


def _append(out: list[Component], component: Component) -> None:
    """Append, merging adjacent plain text runs with the same style."""
    if out and type(component) is Text and not component.children:
        last = out[-1]
        if type(last) is Text and not last.children and last.style == component.style:
            out[-1] = Text(last.content + component.content, style=last.style)
            return
    out.append(component)
