"""Pure display helpers.

Everything here maps engine output to strings, CSS class names and tables.
Nothing imports Streamlit, so the mappings are unit-testable on their own.
"""

from __future__ import annotations

import html
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

import pandas as pd

from club_dashboard.engine import DashboardEngine
from club_dashboard.models import Layout, Member, Role, Task


EMPTY_ROSTER_TEXT = "No members to show."
NO_SELECTION_TEXT = "Select a member to view tasks."
NO_TASKS_TEXT = "No tasks yet."
INACTIVE_SELECTION_TEXT = "The selected member is inactive."
SEARCH_PLACEHOLDER = "Search members by name"

ROLE_CSS_CLASSES: Dict[Role, str] = {
    Role.LEADER: "leader",
    Role.MEMBER: "member",
    Role.GUEST: "guest",
}

LAYOUT_CSS_CLASSES: Dict[Layout, str] = {
    Layout.LIST: "list",
    Layout.GRID: "grid",
}

LAYOUT_LABELS: Dict[Layout, str] = {
    Layout.LIST: "List",
    Layout.GRID: "Grid",
}

MEMBER_FRAME_COLUMNS = ["id", "name", "initials", "role", "status", "selected"]


@dataclass(frozen=True)
class Notice:
    kind: str  # "info" | "warning"
    message: str


def initials(name: str) -> str:
    """First letter of the first two words, upper-cased ("Alex Rivera" -> "AR")."""
    parts = [p for p in (name or "").split() if p]
    return "".join(p[0].upper() for p in parts[:2])


def role_css_class(role: Role) -> str:
    return ROLE_CSS_CLASSES[role]


def layout_css_class(layout: Layout) -> str:
    return LAYOUT_CSS_CLASSES[layout]


def status_label(member: Member) -> str:
    return "Active" if member.is_active else "Inactive"


def selection_notice(engine: DashboardEngine) -> Optional[Notice]:
    if engine.is_selected_member_inactive():
        return Notice(kind="warning", message=INACTIVE_SELECTION_TEXT)
    return None


def task_label(task: Task) -> str:
    """Checkbox label for a task; done titles are struck through."""
    return f"~~{task.title}~~" if task.done else task.title


def task_progress(tasks: Iterable[Task]) -> Tuple[int, int]:
    """Return (done, total) for a task list."""
    items = list(tasks)
    return sum(1 for t in items if t.done), len(items)


def member_card_html(member: Member, *, selected: bool = False) -> str:
    role_cls = role_css_class(member.role)
    classes = ["club-member-card"]
    if selected:
        classes.append("selected")
    if not member.is_active:
        classes.append("inactive")
    return (
        f'<div class="{" ".join(classes)}">'
        f'<div class="club-avatar {role_cls}">{html.escape(initials(member.name))}</div>'
        f'<div class="club-info">'
        f'<div class="club-name">{html.escape(member.name)} <span class="club-role {role_cls}">{member.role.value}</span></div>'
        f'<div class="club-status">{status_label(member)}</div>'
        f"</div></div>"
    )


def members_frame(members: Iterable[Member], selected_id: Optional[int] = None) -> pd.DataFrame:
    rows: List[Dict[str, object]] = [
        {
            **m.to_dict(),
            "initials": initials(m.name),
            "status": status_label(m),
            "selected": m.id == selected_id,
        }
        for m in members
    ]
    if not rows:
        return pd.DataFrame(columns=MEMBER_FRAME_COLUMNS)
    return pd.DataFrame(rows, columns=MEMBER_FRAME_COLUMNS)
