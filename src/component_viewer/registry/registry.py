from __future__ import annotations

from typing import Any, Callable, Iterator, Mapping

from pydantic import ValidationError

from component_viewer.utils import get_logger

from .models import (
    ItemKind,
    RegisteredItem,
    TestOptions,
    as_renderable,
    derive_name,
    summary_title,
)
from .notifier import ChangeListener, ChangeNotifier


logger = get_logger(__name__)

OptionsInput = TestOptions | Mapping[str, Any] | None


def _coerce_options(options: OptionsInput) -> TestOptions | None:
    if options is None:
        return TestOptions()
    if isinstance(options, TestOptions):
        return options
    try:
        return TestOptions.model_validate(dict(options))
    except (TypeError, ValueError, ValidationError):
        return None


def _dedupe_by_title(states: list[RegisteredItem]) -> list[RegisteredItem]:
    seen: set[str | None] = set()
    unique: list[RegisteredItem] = []
    for state in states:
        if state.title in seen:
            continue
        seen.add(state.title)
        unique.append(state)
    return unique


class ComponentRegistry:
    """Process-wide store of registered scenes and components.

    Create one per process and share it with whatever needs to read or
    subscribe; :func:`component_viewer.registry.default_registry` provides the
    conventional instance used by the module-level registration helpers.
    """

    def __init__(self, notifier: ChangeNotifier) -> None:
        self._items: dict[str, RegisteredItem] = {}
        self._notifier = notifier

    @property
    def notifier(self) -> ChangeNotifier:
        return self._notifier

    # ------------------------------------------------------------------ Writes

    def register(
        self,
        renderable: object,
        kind: ItemKind | str,
        options: OptionsInput = None,
    ) -> str | None:
        """Register ``renderable`` and return its key, or ``None`` if dropped."""

        resolved = as_renderable(renderable)
        if resolved is None:
            logger.debug("Ignoring registration without a renderable")
            return None
        try:
            item_kind = ItemKind(kind)
        except ValueError:
            logger.warning("Ignoring registration with unknown kind", kind=str(kind))
            return None
        opts = _coerce_options(options)
        if opts is None:
            logger.warning("Ignoring registration with invalid options")
            return None

        name = opts.name or derive_name(resolved)
        title = opts.title or None
        variant = RegisteredItem(
            key=name,
            name=name,
            kind=item_kind,
            renderable=resolved,
            title=title,
            wrapper_style=opts.wrapper_style,
        )

        if item_kind is ItemKind.COMPONENT:
            key = self._merge_component(variant)
        else:
            key = self._store_scene(variant)
        if key is not None:
            self._notifier.enqueue(key)
        return key

    def _merge_component(self, variant: RegisteredItem) -> str | None:
        key = variant.name
        existing = self._items.get(key)
        if existing is not None:
            if existing.states is None:
                logger.warning(
                    "Component registration conflicts with a scene; ignoring",
                    key=key,
                )
                return None
            states = _dedupe_by_title([variant, *existing.states])
        else:
            states = [variant]

        self._items[key] = RegisteredItem(
            key=key,
            name=variant.name,
            kind=ItemKind.COMPONENT,
            renderable=None,
            title=summary_title(len(states)),
            wrapper_style=None,
            states=states,
        )
        return key

    def _store_scene(self, item: RegisteredItem) -> str:
        key = f"{item.name}_{item.title}" if item.title else item.name
        item.key = key
        existing = self._items.get(key)
        if existing is not None:
            if existing.states is not None:
                logger.warning(
                    "Scene replaces a component entry",
                    key=key,
                    discarded_states=len(existing.states),
                )
            else:
                logger.info("Scene already registered; overwriting", key=key)
        self._items[key] = item
        return key

    def clear(self) -> None:
        keys = list(self._items)
        self._items.clear()
        for key in keys:
            self._notifier.enqueue(key)

    # ------------------------------------------------------------------- Reads

    def get(self, key: str) -> RegisteredItem | None:
        return self._items.get(key)

    def list(self) -> list[RegisteredItem]:
        """All entries sorted by name (then key, to break ties)."""

        return sorted(self._items.values(), key=lambda item: (item.name, item.key))

    def keys(self) -> list[str]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __iter__(self) -> Iterator[RegisteredItem]:
        return iter(self.list())

    # ----------------------------------------------------------- Subscriptions

    def subscribe(self, listener: ChangeListener) -> Callable[[], None]:
        return self._notifier.subscribe(listener)

    def unsubscribe(self, listener: ChangeListener) -> None:
        self._notifier.unsubscribe(listener)


__all__ = ["ComponentRegistry", "OptionsInput"]
