"""Transformation registry and tag resolution.

The registry is an ordered tuple of TransformationTypes. A tag name is
checked against each type's ``matches`` predicate in order; the first
match wins. Resolution then falls back to caller templates and finally to
the placeholder resolver, each consulted once per tag occurrence.

Thread Safety:
TransformationRegistry is immutable after creation. Safe to share.
Use TransformationRegistryBuilder for mutable construction.

Example:
    >>> builder = TransformationRegistryBuilder().register(COLOR).register(DECORATION)
    >>> registry = builder.build()
    >>> registry.exists("bold")
    True

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import TYPE_CHECKING

from minimessage.templates import as_content
from minimessage.transformations.builtins.content import TemplateTransformation
from minimessage.transformations.protocol import TransformationType
from minimessage.utils.logger import get_logger

if TYPE_CHECKING:
    from minimessage.templates import PlaceholderResolver, Template
    from minimessage.tokens import Argument
    from minimessage.transformations.protocol import Transformation

logger = get_logger(__name__)


class TransformationRegistry:
    """Immutable, ordered collection of transformation types.

    Thread Safety:
        Immutable after creation. Safe to share across threads.

    """

    __slots__ = ("_types",)

    def __init__(self, types: tuple[TransformationType, ...] = ()) -> None:
        """Initialize registry with types in match order.

        Use TransformationRegistryBuilder to create instances.
        """
        self._types = types

    def get_type(self, name: str) -> TransformationType | None:
        """Get the first type matching a tag name (case-insensitive).

        Args:
            name: Tag name as written (e.g., "Bold", "#ff0000")

        Returns:
            The matching type, or None
        """
        lowered = name.lower()
        for transformation_type in self._types:
            if transformation_type.matches(lowered):
                return transformation_type
        return None

    def exists(self, name: str) -> bool:
        """Check whether a registered type matches ``name``.

        Templates and the placeholder resolver are not consulted.
        """
        return self.get_type(name) is not None

    def is_verbatim(self, name: str) -> bool:
        """Check whether content after ``<name>`` is taken literally."""
        transformation_type = self.get_type(name)
        return transformation_type is not None and transformation_type.verbatim

    def opens_scope(self, name: str) -> bool:
        """Check whether ``<name>`` encloses the content that follows it."""
        transformation_type = self.get_type(name)
        return transformation_type is not None and not transformation_type.inserting

    def resolve(
        self,
        name: str,
        arguments: tuple[Argument, ...],
        templates: Mapping[str, Template],
        resolver: PlaceholderResolver,
    ) -> Transformation | None:
        """Resolve one tag occurrence to a loaded transformation.

        Precedence: registered types, then templates (exact name), then the
        placeholder resolver.

        Args:
            name: Tag name as written
            arguments: Tag arguments; template tags ignore them
            templates: Caller templates for this parse
            resolver: Placeholder resolver for this parse

        Returns:
            The loaded transformation, or None if nothing resolves the name

        Raises:
            TransformationLoadError: If the matching type rejects the arguments
        """
        transformation_type = self.get_type(name)
        if transformation_type is not None:
            return transformation_type.load(name.lower(), arguments)

        template = templates.get(name)
        if template is not None:
            return TemplateTransformation(template.value)

        content = resolver(name)
        if content is not None:
            logger.debug("Placeholder resolver supplied content for <%s>", name)
            return TemplateTransformation(as_content(content))
        return None

    def to_builder(self) -> TransformationRegistryBuilder:
        """Start a builder pre-populated with this registry's types."""
        return TransformationRegistryBuilder().register_all(self._types)

    @property
    def types(self) -> tuple[TransformationType, ...]:
        """Get all registered types in match order."""
        return self._types

    def __contains__(self, name: str) -> bool:
        """Support 'name in registry' syntax."""
        return self.exists(name)

    def __iter__(self) -> Iterator[TransformationType]:
        return iter(self._types)

    def __len__(self) -> int:
        """Number of registered types."""
        return len(self._types)

    def __repr__(self) -> str:
        names = ", ".join(t.name for t in self._types)
        return f"TransformationRegistry({names})"


class TransformationRegistryBuilder:
    """Mutable builder for TransformationRegistry.

    Use this to register types, then call build() to create an immutable
    registry.

    Example:
            >>> registry = (
            ...     TransformationRegistryBuilder()
            ...     .register_all(DEFAULT_TYPES)
            ...     .register(SHOUT)
            ...     .build()
            ... )

    """

    __slots__ = ("_types",)

    def __init__(self) -> None:
        """Initialize empty builder."""
        self._types: list[TransformationType] = []

    def register(self, transformation_type: TransformationType) -> TransformationRegistryBuilder:
        """Register a transformation type after the existing ones.

        Args:
            transformation_type: Type to register

        Returns:
            Self for chaining

        Raises:
            TypeError: If the object is not a TransformationType
            ValueError: If a type with the same name is already registered
        """
        if not isinstance(transformation_type, TransformationType):
            msg = f"Expected TransformationType, got {type(transformation_type).__name__}"
            raise TypeError(msg)

        for existing in self._types:
            if existing.name == transformation_type.name:
                msg = f"Transformation type '{existing.name}' already registered"
                raise ValueError(msg)

        self._types.append(transformation_type)
        logger.debug("Registered transformation type %r", transformation_type.name)
        return self

    def register_all(
        self, transformation_types: Iterable[TransformationType]
    ) -> TransformationRegistryBuilder:
        """Register multiple types in order.

        Returns:
            Self for chaining
        """
        for transformation_type in transformation_types:
            self.register(transformation_type)
        return self

    def clear(self) -> TransformationRegistryBuilder:
        """Remove every registered type, including the built-in ones.

        Returns:
            Self for chaining
        """
        if self._types:
            logger.debug("Cleared %d transformation types", len(self._types))
        self._types.clear()
        return self

    def build(self) -> TransformationRegistry:
        """Build immutable registry from registered types."""
        return TransformationRegistry(tuple(self._types))

    def __len__(self) -> int:
        """Number of registered types."""
        return len(self._types)


EMPTY_REGISTRY = TransformationRegistry()


def create_default_registry() -> TransformationRegistry:
    """Create registry with all built-in transformation types.

    Returns:
        Registry with color, decoration, hover, click, key, lang, insert,
        font, gradient, rainbow, reset and pre

    """
    from minimessage.transformations.builtins import DEFAULT_TYPES

    return TransformationRegistryBuilder().register_all(DEFAULT_TYPES).build()
