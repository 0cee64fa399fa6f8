"""Interactive event transformations.

Provides:
- click: <click:run_command:/say hi>
- hover: <hover:show_text:'<red>tooltip'>, <hover:show_item:minecraft:stone:5>,
  <hover:show_entity:minecraft:pig:UUID:'<gold>Name'>
- insert: <insert:text inserted on shift-click>

Arguments are split on ``:``, so values that naturally contain colons
(URLs, namespaced ids) are joined back together.

"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, ClassVar
from uuid import UUID

from minimessage.errors import TransformationLoadError
from minimessage.nodes import ClickAction, ClickEvent, HoverAction, HoverEvent
from minimessage.transformations.protocol import Transformation, require_arguments

if TYPE_CHECKING:
    from minimessage.nodes import Style
    from minimessage.tokens import Argument
    from minimessage.transformations.protocol import ParseContext


def _join(arguments: tuple[Argument, ...]) -> str:
    return ":".join(argument.value for argument in arguments)


def _join_raw(arguments: tuple[Argument, ...]) -> str:
    return ":".join(argument.raw for argument in arguments)


@dataclass(frozen=True, slots=True)
class ClickTransformation(Transformation):
    """Attaches a click event.

    Syntax:
        <click:open_url:https://example.com>
        <click:run_command:/help>

    Thread Safety:
        Immutable. Safe for concurrent use.

    """

    names: ClassVar[tuple[str, ...]] = ("click",)

    event: ClickEvent

    @classmethod
    def load(cls, name: str, arguments: tuple[Argument, ...]) -> ClickTransformation:
        require_arguments(name, arguments, 2)
        action_name = arguments[0].value.lower()
        try:
            action = ClickAction(action_name)
        except ValueError:
            raise TransformationLoadError(name, f"Unknown click action: {action_name!r}") from None
        return cls(ClickEvent(action, _join(arguments[1:])))

    def apply(self, style: Style, context: ParseContext) -> Style:
        return replace(style, click_event=self.event)


@dataclass(frozen=True, slots=True)
class HoverTransformation(Transformation):
    """Attaches a hover tooltip.

    Text and entity names are markup themselves. They are kept unparsed
    here and parsed when the tag is applied, with the templates of the
    parse that applies them.

    Syntax:
        <hover:show_text:<markup>>
        <hover:show_item:<item>[:<count>]>
        <hover:show_entity:<type>:<uuid>[:<markup name>]>

    Thread Safety:
        Immutable. Safe for concurrent use.

    """

    names: ClassVar[tuple[str, ...]] = ("hover",)

    action: HoverAction
    markup: str = ""
    item: str = ""
    count: int = 1
    entity_type: str = ""
    entity_id: UUID | None = None

    @classmethod
    def load(cls, name: str, arguments: tuple[Argument, ...]) -> HoverTransformation:
        require_arguments(name, arguments, 2)
        action_name = arguments[0].value.lower()
        rest = arguments[1:]

        match action_name:
            case HoverAction.SHOW_TEXT.value:
                return cls(HoverAction.SHOW_TEXT, markup=_join_raw(rest))
            case HoverAction.SHOW_ITEM.value:
                if len(rest) > 1 and rest[-1].value.isdecimal():
                    return cls(HoverAction.SHOW_ITEM, item=_join(rest[:-1]), count=int(rest[-1].value))
                return cls(HoverAction.SHOW_ITEM, item=_join(rest))
            case HoverAction.SHOW_ENTITY.value:
                return cls._load_entity(name, rest)
            case _:
                raise TransformationLoadError(name, f"Unknown hover action: {action_name!r}")

    @classmethod
    def _load_entity(cls, name: str, arguments: tuple[Argument, ...]) -> HoverTransformation:
        for index, argument in enumerate(arguments):
            try:
                entity_id = UUID(argument.value)
            except ValueError:
                continue
            if index == 0:
                raise TransformationLoadError(name, "show_entity needs an entity type before the UUID")
            return cls(
                HoverAction.SHOW_ENTITY,
                markup=_join_raw(arguments[index + 1 :]),
                entity_type=_join(arguments[:index]),
                entity_id=entity_id,
            )
        raise TransformationLoadError(name, "show_entity needs a valid UUID")

    def apply(self, style: Style, context: ParseContext) -> Style:
        match self.action:
            case HoverAction.SHOW_TEXT:
                event = HoverEvent.show_text(context.parse(self.markup))
            case HoverAction.SHOW_ITEM:
                event = HoverEvent.show_item(self.item, self.count)
            case HoverAction.SHOW_ENTITY:
                entity_name = context.parse(self.markup) if self.markup else None
                event = HoverEvent.show_entity(self.entity_type, self.entity_id, entity_name)
        return replace(style, hover_event=event)


@dataclass(frozen=True, slots=True)
class InsertionTransformation(Transformation):
    """Sets text inserted into the chat box on shift-click.

    Syntax:
        <insert:text to insert>

    Thread Safety:
        Immutable. Safe for concurrent use.

    """

    names: ClassVar[tuple[str, ...]] = ("insert",)

    insertion: str

    @classmethod
    def load(cls, name: str, arguments: tuple[Argument, ...]) -> InsertionTransformation:
        require_arguments(name, arguments, 1)
        return cls(_join(arguments))

    def apply(self, style: Style, context: ParseContext) -> Style:
        return replace(style, insertion=self.insertion)
