"""Transformations that insert content.

Provides:
- key: <key:key.jump> inserts a Keybind
- lang: <lang:block.minecraft.stone> inserts a Translatable, with
  translation arguments given as markup: <lang:chat.type.text:'<red>Bob':hi>

Templates and placeholder resolver results are inserted through
TemplateTransformation.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from minimessage.errors import TransformationLoadError
from minimessage.nodes import Keybind, Translatable, inherit_style
from minimessage.transformations.protocol import Transformation, require_arguments

if TYPE_CHECKING:
    from minimessage.nodes import Component, Style
    from minimessage.tokens import Argument
    from minimessage.transformations.protocol import ParseContext


@dataclass(frozen=True, slots=True)
class KeybindTransformation(Transformation):
    """Inserts a key binding resolved by the client.

    Syntax:
        <key:key.jump>

    Thread Safety:
        Immutable. Safe for concurrent use.

    """

    names: ClassVar[tuple[str, ...]] = ("key",)

    keybind: str

    @classmethod
    def load(cls, name: str, arguments: tuple[Argument, ...]) -> KeybindTransformation:
        if len(arguments) != 1:
            msg = f"Expected exactly one keybind argument, got {len(arguments)}"
            raise TransformationLoadError(name, msg)
        return cls(arguments[0].value)

    def insert(self, style: Style, context: ParseContext) -> Component:
        return Keybind(self.keybind, style=style)


@dataclass(frozen=True, slots=True)
class TranslatableTransformation(Transformation):
    """Inserts a translation key with markup arguments.

    Syntax:
        <lang:translation.key>
        <lang:translation.key:'<red>arg one':arg two>

    Thread Safety:
        Immutable. Safe for concurrent use.

    """

    names: ClassVar[tuple[str, ...]] = ("lang",)

    key: str
    arguments: tuple[str, ...] = ()

    @classmethod
    def load(cls, name: str, arguments: tuple[Argument, ...]) -> TranslatableTransformation:
        require_arguments(name, arguments, 1)
        return cls(arguments[0].value, tuple(argument.raw for argument in arguments[1:]))

    def insert(self, style: Style, context: ParseContext) -> Component:
        args = tuple(inherit_style(context.parse(markup), style) for markup in self.arguments)
        return Translatable(self.key, args, style=style)


@dataclass(frozen=True, slots=True)
class TemplateTransformation(Transformation):
    """Inserts a fixed component in the style context of its tag."""

    component: Component

    def insert(self, style: Style, context: ParseContext) -> Component:
        return inherit_style(self.component, style)
