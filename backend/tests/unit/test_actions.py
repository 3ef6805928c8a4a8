"""Unit tests for the table row action menus."""

import pytest

from intered.client.actions import (
    ICON_GLYPHS,
    ActionIcon,
    ActionItem,
    Separator,
    delete_action,
    issue_card_action,
    resolve_icon,
    standard_actions,
)


def test_every_icon_has_a_glyph():
    assert set(ICON_GLYPHS) == set(ActionIcon)


def test_icon_accepts_tag_string():
    item = ActionItem("x", "Remove", "Trash2", lambda: None)
    assert item.icon is ActionIcon.TRASH
    assert item.glyph == "trash-2"


def test_unknown_icon_rejected():
    with pytest.raises(ValueError, match="Unknown action icon"):
        ActionItem("x", "Rocket", "Rocket", lambda: None)
    with pytest.raises(ValueError):
        resolve_icon("eye")


def test_presets():
    delete = delete_action(lambda: "deleted")
    assert delete.is_destructive
    assert delete.select() == "deleted"
    assert issue_card_action(lambda: None).label == "Issue InterPro Card"


def test_disabled_item_does_nothing():
    calls = []
    item = delete_action(lambda: calls.append(1), disabled=True)
    assert item.select() is None
    assert calls == []


def test_standard_actions_groups_with_separators():
    noop = lambda: None  # noqa: E731
    menu = standard_actions(view=noop, edit=noop, call_student=noop, delete=noop)

    assert [entry.id for entry in menu] == ["view", "edit", "separator", "callStudent", "separator", "delete"]
    assert isinstance(menu[2], Separator)


def test_standard_actions_skips_missing_handlers_and_marks_disabled():
    noop = lambda: None  # noqa: E731
    menu = standard_actions(view=noop, delete=None, suspend=noop, disabled={"suspend"})

    assert [entry.id for entry in menu] == ["view", "separator", "suspend"]
    assert menu[-1].disabled


def test_standard_actions_appends_custom_items():
    custom = ActionItem("export", "Export", ActionIcon.FILE_UP, lambda: None)
    menu = standard_actions(view=lambda: None, custom=[custom])
    assert [entry.id for entry in menu] == ["view", "separator", "export"]


def test_standard_actions_rejects_unknown_handler():
    with pytest.raises(TypeError):
        standard_actions(launch=lambda: None)


def test_empty_menu():
    assert standard_actions() == []
