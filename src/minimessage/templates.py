"""Templates: named, caller-supplied content substitutions.

A template tag looks like any other tag: ``<name>``. Templates are
consulted after the registered transformation types and before the
placeholder resolver, so a template named ``red`` never shadows the color.

Three ways to supply templates all normalize to ``dict[str, Template]``:

    templates_from_pairs("player", "Steve", "count", "3")
    templates_from_mapping({"player": "Steve"})
    templates_from_iterable([Template.of("player", "Steve")])

Thread Safety:
Template is frozen. The normalized dicts are built per call and never
mutated afterwards.

"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import TypeAlias

from minimessage.errors import PlaceholderError
from minimessage.nodes import Component, ComponentLike, Text

# Called with the raw tag name for tags nothing else resolved.
# Returning None leaves the tag unresolved.
PlaceholderResolver: TypeAlias = Callable[[str], ComponentLike | str | None]


def no_placeholders(name: str) -> None:
    """Default placeholder resolver: resolves nothing."""
    return None


@dataclass(frozen=True, slots=True)
class Template:
    """A named component to insert for ``<key>``.

    Attributes:
        key: Tag name the template answers to (matched exactly)
        value: Content inserted in place of the tag

    """

    key: str
    value: Component

    @classmethod
    def of(cls, key: str, value: str | ComponentLike) -> Template:
        """Build a template from plain text or anything component-like."""
        return cls(key, as_content(value))


def as_content(value: str | ComponentLike) -> Component:
    """Convert plain text or a component-like value to a Component.

    Raises:
        TypeError: If the value is neither
    """
    if isinstance(value, str):
        return Text(value)
    if isinstance(value, ComponentLike):
        return value.as_component()
    msg = f"Expected str or ComponentLike, got {type(value).__name__}"
    raise TypeError(msg)


def templates_from_pairs(*pairs: object) -> dict[str, Template]:
    """Normalize alternating key/value arguments.

    Validates everything before building anything.

    Raises:
        PlaceholderError: On an odd number of arguments, a key that is not a
            str, or a value that is neither str nor ComponentLike
    """
    if len(pairs) % 2:
        raise PlaceholderError("Each placeholder must have a key and value")

    for index in range(0, len(pairs), 2):
        key, value = pairs[index], pairs[index + 1]
        if not isinstance(key, str):
            msg = f"Argument {index} in placeholders must be str: is {type(key).__name__}"
            raise PlaceholderError(msg)
        if not isinstance(value, (str, ComponentLike)):
            msg = (
                f"Argument {index + 1} in placeholders must be Component or str: "
                f"is {type(value).__name__}"
            )
            raise PlaceholderError(msg)

    templates: dict[str, Template] = {}
    for index in range(0, len(pairs), 2):
        key = pairs[index]
        templates[key] = Template.of(key, pairs[index + 1])
    return templates


def templates_from_mapping(mapping: Mapping[str, str | ComponentLike]) -> dict[str, Template]:
    """Normalize a name to text (or component) mapping."""
    return {key: Template.of(key, value) for key, value in mapping.items()}


def templates_from_iterable(templates: Iterable[Template]) -> dict[str, Template]:
    """Normalize an explicit template list; later duplicates win.

    Raises:
        PlaceholderError: If an element is not a Template
    """
    result: dict[str, Template] = {}
    for index, template in enumerate(templates):
        if not isinstance(template, Template):
            msg = f"Element {index} in templates must be Template: is {type(template).__name__}"
            raise PlaceholderError(msg)
        result[template.key] = template
    return result
