from __future__ import annotations

import inspect
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, Callable, Generic, TypeAlias, TypeVar

from pydantic import BaseModel, ConfigDict, Field


PLACEHOLDER_NAME = "(no component)"

ElementT = TypeVar("ElementT")
CloseCallback = Callable[[], None]


class ItemKind(StrEnum):
    SCENE = "scene"
    COMPONENT = "component"


@dataclass(frozen=True, slots=True)
class Ready(Generic[ElementT]):
    """A ready-made element shown as-is."""

    element: ElementT

    def resolve(self, close: CloseCallback) -> ElementT:  # noqa: ARG002
        return self.element


@dataclass(frozen=True, slots=True)
class Factory(Generic[ElementT]):
    """Builds its element on display, receiving a callback that closes the overlay."""

    build: Callable[[CloseCallback], ElementT]

    def resolve(self, close: CloseCallback) -> ElementT:
        return self.build(close)


Renderable: TypeAlias = Ready[Any] | Factory[Any]


def as_renderable(value: object) -> Renderable | None:
    """Coerce registration input into a :data:`Renderable`.

    Existing variants pass through, non-class callables become factories and
    anything else is treated as a ready element. ``None`` (or a variant wrapping
    ``None``) is not renderable.
    """

    if value is None:
        return None
    if isinstance(value, Ready):
        return value if value.element is not None else None
    if isinstance(value, Factory):
        return value if value.build is not None else None
    if callable(value) and not inspect.isclass(value):
        return Factory(value)
    return Ready(value)


def _declared_name(target: object) -> str | None:
    for candidate in (target, type(target)):
        declared = getattr(candidate, "display_name", None)
        if isinstance(declared, str) and declared:
            return declared
    return None


def derive_name(renderable: Renderable | None) -> str:
    """Return the display name a renderable declares, or a placeholder."""

    if renderable is None:
        return PLACEHOLDER_NAME
    target = renderable.element if isinstance(renderable, Ready) else renderable.build
    declared = _declared_name(target)
    if declared:
        return declared
    if isinstance(renderable, Factory):
        name = getattr(target, "__name__", None)
        if isinstance(name, str) and name and name != "<lambda>":
            return name
        return PLACEHOLDER_NAME
    if inspect.isclass(target):
        return target.__name__
    return type(target).__name__ or PLACEHOLDER_NAME


class TestOptions(BaseModel):
    """Options accepted by the registration helpers."""

    __test__ = False

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str | None = None
    title: str | None = None
    wrapper_style: Any = Field(default=None, alias="wrapperStyle")


@dataclass(slots=True)
class RegisteredItem:
    """Unit stored in the registry.

    Component entries are placeholders: their own ``renderable`` is empty and
    their variants live in ``states``. Scenes and component variants carry no
    ``states``.
    """

    key: str
    name: str
    kind: ItemKind
    renderable: Renderable | None = None
    title: str | None = None
    wrapper_style: Any = None
    states: list[RegisteredItem] | None = field(default=None)

    @property
    def is_placeholder(self) -> bool:
        return self.states is not None

    @property
    def state_count(self) -> int:
        return len(self.states or [])


def summary_title(count: int) -> str:
    return f"{count} test{'' if count == 1 else 's'}"


__all__ = [
    "PLACEHOLDER_NAME",
    "CloseCallback",
    "Factory",
    "ItemKind",
    "Ready",
    "RegisteredItem",
    "Renderable",
    "TestOptions",
    "as_renderable",
    "derive_name",
    "summary_title",
]
