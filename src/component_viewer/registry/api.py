"""Load-time registration helpers.

Catalog modules call these at import time::

    add_scene_test(LoginScreen(), "empty form")
    add_component_test(lambda close: PrimaryButton("OK", on_click=close), "enabled")

A bare string for ``options`` is shorthand for ``{"title": options}``.
"""

from __future__ import annotations

import warnings
from typing import Any

from component_viewer.config.settings import DEFAULT_DEBOUNCE_MS

from .models import ItemKind, RegisteredItem, TestOptions
from .notifier import ChangeNotifier
from .registry import ComponentRegistry, OptionsInput
from .scheduling import QtScheduler


_default_registry: ComponentRegistry | None = None


def create_registry(*, window: float = DEFAULT_DEBOUNCE_MS / 1000) -> ComponentRegistry:
    return ComponentRegistry(ChangeNotifier(QtScheduler(), window=window))


def default_registry() -> ComponentRegistry:
    """Return the process-wide registry, creating it on first use."""

    global _default_registry
    if _default_registry is None:
        _default_registry = create_registry()
    return _default_registry


def set_default_registry(registry: ComponentRegistry | None) -> None:
    global _default_registry
    _default_registry = registry


def _normalise_options(
    options: str | OptionsInput,
    wrapper_style: Any,
) -> OptionsInput:
    if options is None or isinstance(options, str):
        return TestOptions(title=options, wrapper_style=wrapper_style)
    return options


def add_scene_test(
    component: object,
    options: str | OptionsInput = None,
    wrapper_style: Any = None,
    *,
    registry: ComponentRegistry | None = None,
) -> str | None:
    """Register a full-screen scene.

    ``wrapper_style`` is kept for older call sites; prefer the
    ``wrapper_style`` option.
    """

    target = registry or default_registry()
    return target.register(
        component, ItemKind.SCENE, _normalise_options(options, wrapper_style)
    )


def add_component_test(
    component: object,
    options: str | OptionsInput = None,
    wrapper_style: Any = None,
    *,
    registry: ComponentRegistry | None = None,
) -> str | None:
    """Register one state of a component; states sharing a name are shown together."""

    target = registry or default_registry()
    return target.register(
        component, ItemKind.COMPONENT, _normalise_options(options, wrapper_style)
    )


def get_tests(*, registry: ComponentRegistry | None = None) -> list[RegisteredItem]:
    return (registry or default_registry()).list()


def add_test_scene(*args: Any, **kwargs: Any) -> str | None:
    warnings.warn(
        "add_test_scene is deprecated; use add_scene_test",
        DeprecationWarning,
        stacklevel=2,
    )
    return add_scene_test(*args, **kwargs)


def get_test_scenes(*, registry: ComponentRegistry | None = None) -> list[RegisteredItem]:
    warnings.warn(
        "get_test_scenes is deprecated; use get_tests",
        DeprecationWarning,
        stacklevel=2,
    )
    return get_tests(registry=registry)


__all__ = [
    "add_component_test",
    "add_scene_test",
    "add_test_scene",
    "create_registry",
    "default_registry",
    "get_test_scenes",
    "get_tests",
    "set_default_registry",
]
