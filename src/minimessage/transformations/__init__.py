"""Transformation system for MiniMessage.

Every tag is resolved to a Transformation through a registry of
TransformationTypes. Register custom types to add tags of your own.

Key components:
- TransformationType: Descriptor for a family of tag names
- Transformation: Loaded, immutable effect of one tag
- TransformationRegistry: Ordered type lookup and tag resolution

Thread Safety:
All components are designed for thread-safety:
- Transformations are immutable
- Registry is immutable after creation

Example:
    >>> from minimessage.transformations import Transformation, TransformationType
    >>>
    >>> @dataclass(frozen=True, slots=True)
    ... class Whisper(Transformation):
    ...     def apply(self, style, context):
    ...         return style.with_color(NAMED_COLORS["gray"]).with_decoration(Decoration.ITALIC, True)
    >>>
    >>> WHISPER = TransformationType.of("whisper", ("whisper",), lambda name, args: Whisper())

"""

from minimessage.transformations.protocol import (
    ParseContext,
    Transformation,
    TransformationType,
)
from minimessage.transformations.registry import (
    EMPTY_REGISTRY,
    TransformationRegistry,
    TransformationRegistryBuilder,
    create_default_registry,
)

__all__ = [
    # Protocol
    "ParseContext",
    "Transformation",
    "TransformationType",
    # Registry
    "EMPTY_REGISTRY",
    "TransformationRegistry",
    "TransformationRegistryBuilder",
    "create_default_registry",
]
