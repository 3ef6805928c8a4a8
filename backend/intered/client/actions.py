"""Row action menus for the management tables.

An action's icon must be one of ``ActionIcon``; anything else is rejected
when the action is built, never silently rendered without an icon.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Literal

ActionVariant = Literal["default", "destructive"]


class ActionIcon(str, Enum):
    EYE = "Eye"
    PENCIL = "Pencil"
    FILE_TEXT = "FileText"
    STAR = "Star"
    PHONE = "Phone"
    MAIL = "Mail"
    CLIPBOARD_CHECK = "ClipboardCheck"
    CREDIT_CARD = "CreditCard"
    CALENDAR = "Calendar"
    POWER = "Power"
    ALERT_OCTAGON = "AlertOctagon"
    TRASH = "Trash2"
    FILE_UP = "FileUp"
    GRADUATION_CAP = "GraduationCap"
    CLOCK = "Clock"


# Icon glyph name as the renderer knows it. Must cover every ActionIcon.
ICON_GLYPHS: dict[ActionIcon, str] = {
    ActionIcon.EYE: "eye",
    ActionIcon.PENCIL: "pencil",
    ActionIcon.FILE_TEXT: "file-text",
    ActionIcon.STAR: "star",
    ActionIcon.PHONE: "phone",
    ActionIcon.MAIL: "mail",
    ActionIcon.CLIPBOARD_CHECK: "clipboard-check",
    ActionIcon.CREDIT_CARD: "credit-card",
    ActionIcon.CALENDAR: "calendar",
    ActionIcon.POWER: "power",
    ActionIcon.ALERT_OCTAGON: "alert-octagon",
    ActionIcon.TRASH: "trash-2",
    ActionIcon.FILE_UP: "file-up",
    ActionIcon.GRADUATION_CAP: "graduation-cap",
    ActionIcon.CLOCK: "clock",
}

if set(ICON_GLYPHS) != set(ActionIcon):
    raise RuntimeError(f"ICON_GLYPHS is missing {set(ActionIcon) - set(ICON_GLYPHS)}")


def resolve_icon(icon: "ActionIcon | str") -> ActionIcon:
    """Accept an ActionIcon or its tag ("Eye", "Trash2", ...)."""
    try:
        return ActionIcon(icon)
    except ValueError:
        raise ValueError(f"Unknown action icon: {icon!r}") from None


@dataclass(frozen=True)
class ActionItem:
    id: str
    label: str
    icon: ActionIcon
    on_click: Callable[[], object]
    variant: ActionVariant = "default"
    disabled: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "icon", resolve_icon(self.icon))

    @property
    def glyph(self) -> str:
        return ICON_GLYPHS[self.icon]

    @property
    def is_destructive(self) -> bool:
        return self.variant == "destructive"

    def select(self) -> object:
        if self.disabled:
            return None
        return self.on_click()


@dataclass(frozen=True)
class Separator:
    id: str = field(default="separator")


MenuEntry = ActionItem | Separator


def _preset(action_id: str, label: str, icon: ActionIcon, variant: ActionVariant = "default"):
    def build(on_click: Callable[[], object], disabled: bool = False) -> ActionItem:
        return ActionItem(action_id, label, icon, on_click, variant=variant, disabled=disabled)

    build.__name__ = f"{action_id}_action"
    return build


view_action = _preset("view", "View Details", ActionIcon.EYE)
edit_action = _preset("edit", "Edit Details", ActionIcon.PENCIL)
add_application_action = _preset("addApplication", "Add Application", ActionIcon.FILE_TEXT)
mark_as_priority_action = _preset("markAsPriority", "Mark as Priority", ActionIcon.STAR)
call_student_action = _preset("callStudent", "Call Student", ActionIcon.PHONE)
email_student_action = _preset("emailStudent", "Email Student", ActionIcon.MAIL)
assign_to_agent_action = _preset("assignToAgent", "Assign to Agent", ActionIcon.CLIPBOARD_CHECK)
issue_card_action = _preset("issueCard", "Issue InterPro Card", ActionIcon.CREDIT_CARD)
schedule_event_action = _preset("scheduleEvent", "Schedule Event", ActionIcon.CALENDAR)
activate_action = _preset("activate", "Activate", ActionIcon.POWER)
suspend_action = _preset("suspend", "Suspend", ActionIcon.ALERT_OCTAGON)
delete_action = _preset("delete", "Delete", ActionIcon.TRASH, variant="destructive")

# (handler keyword, preset) in menu order, one tuple per separated group
_GROUPS = (
    (("view", view_action), ("edit", edit_action), ("add_application", add_application_action)),
    (
        ("mark_as_priority", mark_as_priority_action),
        ("call_student", call_student_action),
        ("email_student", email_student_action),
        ("assign_to_agent", assign_to_agent_action),
    ),
    (
        ("issue_card", issue_card_action),
        ("schedule_event", schedule_event_action),
        ("activate", activate_action),
        ("suspend", suspend_action),
    ),
    (("delete", delete_action),),
)
_HANDLER_NAMES = frozenset(name for group in _GROUPS for name, _ in group)


def standard_actions(
    *,
    disabled: frozenset[str] | set[str] = frozenset(),
    custom: list[ActionItem] | None = None,
    **handlers: Callable[[], object] | None,
) -> list[MenuEntry]:
    """Build a menu from the handlers given, grouped and separated.

    ``standard_actions(view=..., delete=...)`` yields view, a separator,
    then delete. Names in ``disabled`` produce disabled items.
    """
    unknown = set(handlers) - _HANDLER_NAMES
    if unknown:
        raise TypeError(f"Unknown action handlers: {sorted(unknown)}")

    entries: list[MenuEntry] = []
    for group in _GROUPS:
        items = [
            preset(handlers[name], name in disabled)
            for name, preset in group
            if handlers.get(name) is not None
        ]
        if items and entries:
            entries.append(Separator())
        entries.extend(items)

    if custom:
        if entries:
            entries.append(Separator())
        entries.extend(custom)
    return entries
