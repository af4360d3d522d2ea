from __future__ import annotations

import pytest
from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel

from component_viewer.registry import ComponentRegistry, ItemKind
from component_viewer.services import SelectionState
from component_viewer.ui import ComponentViewer
from tests.factories import LoginScreen, PrimaryButton, closing_button, make_label
from tests.stubs import WINDOW, ManualScheduler


def _open(viewer: ComponentViewer, key: str) -> None:
    viewer.list_page.item_activated.emit(key)


@pytest.mark.usefixtures("qt_app")
def test_selecting_a_scene_shows_it_in_the_overlay(qtbot, registry: ComponentRegistry) -> None:
    screen = LoginScreen()
    registry.register(screen, ItemKind.SCENE, {"title": "empty"})
    viewer = ComponentViewer(registry)
    qtbot.addWidget(viewer)
    viewer.show()

    _open(viewer, "LoginScreen_empty")

    assert viewer.is_overlay_visible()
    assert viewer.item_view.elements() == [screen]
    assert viewer.item_view.section_labels == []


@pytest.mark.usefixtures("qt_app")
def test_component_states_are_labelled(qtbot, registry: ComponentRegistry) -> None:
    registry.register(PrimaryButton("OK"), ItemKind.COMPONENT, {"title": "enabled"})
    registry.register(PrimaryButton("Nope"), ItemKind.COMPONENT, {"title": "disabled"})
    viewer = ComponentViewer(registry)
    qtbot.addWidget(viewer)

    _open(viewer, "Button")

    labels = [label.text() for label in viewer.item_view.section_labels]
    assert labels == ["disabled", "enabled"]
    assert [element.text() for element in viewer.item_view.elements()] == ["Nope", "OK"]


@pytest.mark.usefixtures("qt_app")
def test_close_button_returns_to_list(qtbot, registry: ComponentRegistry) -> None:
    label = make_label("hello")
    registry.register(label, ItemKind.SCENE, {"name": "Hello"})
    viewer = ComponentViewer(registry)
    qtbot.addWidget(viewer)
    viewer.show()
    _open(viewer, "Hello")

    qtbot.mouseClick(viewer.close_button, Qt.MouseButton.LeftButton)

    assert not viewer.is_overlay_visible()
    assert viewer.controller.state is SelectionState.CLOSED
    # ready elements survive closing and can be shown again
    _open(viewer, "Hello")
    assert viewer.item_view.elements() == [label]


@pytest.mark.usefixtures("qt_app")
def test_factory_content_can_dismiss_overlay(qtbot, registry: ComponentRegistry) -> None:
    registry.register(closing_button(), ItemKind.SCENE, {"name": "Dialog"})
    viewer = ComponentViewer(registry)
    qtbot.addWidget(viewer)
    viewer.show()
    _open(viewer, "Dialog")

    [button] = viewer.item_view.elements()
    qtbot.mouseClick(button, Qt.MouseButton.LeftButton)

    assert not viewer.is_overlay_visible()


@pytest.mark.usefixtures("qt_app")
def test_hot_reload_updates_open_item(
    qtbot, registry: ComponentRegistry, scheduler: ManualScheduler
) -> None:
    registry.register("first draft", ItemKind.COMPONENT, {"name": "Note", "title": "body"})
    viewer = ComponentViewer(registry)
    qtbot.addWidget(viewer)
    _open(viewer, "Note")

    registry.register("second draft", ItemKind.COMPONENT, {"name": "Note", "title": "body"})
    scheduler.advance(WINDOW)

    assert viewer.is_overlay_visible()
    [element] = viewer.item_view.elements()
    assert isinstance(element, QLabel)
    assert element.text() == "second draft"


@pytest.mark.usefixtures("qt_app")
def test_wrapper_style_applies_to_section(qtbot, registry: ComponentRegistry) -> None:
    registry.register(
        "styled", ItemKind.SCENE, {"name": "Styled", "wrapper_style": {"background": "red"}}
    )
    viewer = ComponentViewer(registry)
    qtbot.addWidget(viewer)
    _open(viewer, "Styled")

    [element] = viewer.item_view.elements()
    assert element.parentWidget().styleSheet() == "background: red;"


@pytest.mark.usefixtures("qt_app")
def test_reload_shortcut_calls_callback(qtbot, registry: ComponentRegistry) -> None:
    calls: list[int] = []
    viewer = ComponentViewer(registry, reload_callback=lambda: calls.append(1))
    qtbot.addWidget(viewer)

    viewer.reload_catalog()

    assert calls == [1]


@pytest.mark.usefixtures("qt_app")
def test_done_emits_closed_and_dispose_releases_subscriptions(
    qtbot, registry: ComponentRegistry
) -> None:
    viewer = ComponentViewer(registry)
    qtbot.addWidget(viewer)
    assert registry.notifier.subscriber_count == 2

    with qtbot.waitSignal(viewer.closed):
        viewer.list_page.done_button.click()

    viewer.dispose()
    assert registry.notifier.subscriber_count == 0


@pytest.mark.usefixtures("qt_app")
def test_failing_factory_still_opens_overlay_with_error(
    qtbot, registry: ComponentRegistry, scheduler: ManualScheduler
) -> None:
    def broken(close):  # noqa: ANN001, ANN202
        raise RuntimeError("no data")

    registry.register(broken, ItemKind.SCENE, {"name": "Broken"})
    viewer = ComponentViewer(registry)
    qtbot.addWidget(viewer)
    viewer.show()

    assert viewer.controller.select_item("Broken")

    assert viewer.is_overlay_visible()
    [element] = viewer.item_view.elements()
    assert element.objectName() == "RenderError"
    assert "RuntimeError: no data" in element.text()

    registry.register(make_label("fixed"), ItemKind.SCENE, {"name": "Broken"})
    scheduler.advance(WINDOW)

    assert viewer.is_overlay_visible()
    assert [e.text() for e in viewer.item_view.elements()] == ["fixed"]
