"""Data models for the club dashboard.

Members and tasks are immutable value objects; the engine replaces a stored
task with an updated copy instead of mutating it. Role and layout are closed
enumerations whose values are the strings shown to (or typed by) users.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class InvalidArgument(ValueError):
    """Raised when an engine mutation receives a value outside its domain."""


class Role(str, Enum):
    LEADER = "Leader"
    MEMBER = "Member"
    GUEST = "Guest"


class Layout(str, Enum):
    LIST = "list"
    GRID = "grid"

    @classmethod
    def parse(cls, value: Any) -> "Layout":
        """Return the Layout for ``value`` or raise InvalidArgument.

        Accepts a Layout member or its exact string value ("list" / "grid").
        Other spellings are rejected rather than coerced.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for layout in cls:
                if layout.value == value:
                    return layout
        allowed = ", ".join(repr(layout.value) for layout in cls)
        raise InvalidArgument(f"layout must be one of {allowed}, got {value!r}")


@dataclass(frozen=True)
class Member:
    """A roster entry.

    Fields:
        id: Unique positive integer, stable for the member's lifetime.
        name: Display name.
        role: Leader, Member or Guest.
        is_active: Inactive members stay listed unless filtered out.
    """

    id: int
    name: str
    role: Role
    is_active: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "role": self.role.value,
            "is_active": self.is_active,
        }


@dataclass(frozen=True)
class Task:
    """A task assigned to one member.

    ``assigned_to`` is a member id with no referential check; a task pointing
    at an unknown member simply has no visible owner.
    """

    id: int
    title: str
    assigned_to: int
    done: bool = False


@dataclass(frozen=True)
class FilterState:
    """User-controlled filter and selection values.

    Selection is independent of visibility: a selected member may be hidden by
    the active-only flag or the search text without being deselected.
    """

    show_only_active: bool = False
    search_text: str = ""
    layout: Layout = Layout.LIST
    selected_member_id: Optional[int] = None
