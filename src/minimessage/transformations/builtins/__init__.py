"""Built-in transformation types.

Provides the standard tag set out of the box, in default registration
order:
- color: Named and hex colors
- decoration: bold, italic, underlined, strikethrough, obfuscated
- hover / click: Interactive events
- key / lang: Inserted keybinds and translations
- insert: Shift-click insertion
- font: Resource-keyed fonts
- gradient / rainbow: Per-character colors
- reset: Clear inherited style
- pre: Verbatim content

"""

from minimessage.transformations.builtins.color import (
    ColorTransformation,
    GradientTransformation,
    RainbowTransformation,
)
from minimessage.transformations.builtins.content import (
    KeybindTransformation,
    TemplateTransformation,
    TranslatableTransformation,
)
from minimessage.transformations.builtins.decoration import (
    DECORATION_ALIASES,
    DecorationTransformation,
)
from minimessage.transformations.builtins.events import (
    ClickTransformation,
    HoverTransformation,
    InsertionTransformation,
)
from minimessage.transformations.builtins.formatting import (
    FontTransformation,
    PreTransformation,
    ResetTransformation,
)
from minimessage.transformations.protocol import TransformationType

COLOR = TransformationType("color", ColorTransformation.matches, ColorTransformation.load)
DECORATION = TransformationType(
    "decoration", DecorationTransformation.matches, DecorationTransformation.load
)
HOVER_EVENT = TransformationType.of("hover", HoverTransformation.names, HoverTransformation.load)
CLICK_EVENT = TransformationType.of("click", ClickTransformation.names, ClickTransformation.load)
KEYBIND = TransformationType.of(
    "keybind", KeybindTransformation.names, KeybindTransformation.load, inserting=True
)
TRANSLATABLE = TransformationType.of(
    "translatable",
    TranslatableTransformation.names,
    TranslatableTransformation.load,
    inserting=True,
)
INSERTION = TransformationType.of(
    "insertion", InsertionTransformation.names, InsertionTransformation.load
)
FONT = TransformationType.of("font", FontTransformation.names, FontTransformation.load)
GRADIENT = TransformationType.of(
    "gradient", GradientTransformation.names, GradientTransformation.load
)
RAINBOW = TransformationType.of("rainbow", RainbowTransformation.names, RainbowTransformation.load)
RESET = TransformationType.of("reset", ResetTransformation.names, ResetTransformation.load)
PRE = TransformationType.of("pre", PreTransformation.names, PreTransformation.load, verbatim=True)

DEFAULT_TYPES: tuple[TransformationType, ...] = (
    COLOR,
    DECORATION,
    HOVER_EVENT,
    CLICK_EVENT,
    KEYBIND,
    TRANSLATABLE,
    INSERTION,
    FONT,
    GRADIENT,
    RAINBOW,
    RESET,
    PRE,
)

__all__ = [
    # Types
    "COLOR",
    "DECORATION",
    "HOVER_EVENT",
    "CLICK_EVENT",
    "KEYBIND",
    "TRANSLATABLE",
    "INSERTION",
    "FONT",
    "GRADIENT",
    "RAINBOW",
    "RESET",
    "PRE",
    "DEFAULT_TYPES",
    # Transformations
    "ClickTransformation",
    "ColorTransformation",
    "DecorationTransformation",
    "FontTransformation",
    "GradientTransformation",
    "HoverTransformation",
    "InsertionTransformation",
    "KeybindTransformation",
    "PreTransformation",
    "RainbowTransformation",
    "ResetTransformation",
    "TemplateTransformation",
    "TranslatableTransformation",
    # Tables
    "DECORATION_ALIASES",
]
