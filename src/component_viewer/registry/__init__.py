"""Registration and discovery of catalog items."""

from .api import (
    add_component_test,
    add_scene_test,
    add_test_scene,
    create_registry,
    default_registry,
    get_test_scenes,
    get_tests,
    set_default_registry,
)
from .models import (
    PLACEHOLDER_NAME,
    CloseCallback,
    Factory,
    ItemKind,
    Ready,
    RegisteredItem,
    Renderable,
    TestOptions,
    as_renderable,
    derive_name,
)
from .notifier import ChangeListener, ChangeNotifier, NotifierState
from .registry import ComponentRegistry
from .scheduling import AsyncioScheduler, QtScheduler, Scheduler

__all__ = [
    "PLACEHOLDER_NAME",
    "AsyncioScheduler",
    "ChangeListener",
    "ChangeNotifier",
    "CloseCallback",
    "ComponentRegistry",
    "Factory",
    "ItemKind",
    "NotifierState",
    "QtScheduler",
    "Ready",
    "RegisteredItem",
    "Renderable",
    "Scheduler",
    "TestOptions",
    "add_component_test",
    "add_scene_test",
    "add_test_scene",
    "as_renderable",
    "create_registry",
    "default_registry",
    "derive_name",
    "get_test_scenes",
    "get_tests",
    "set_default_registry",
]
