"""Dashboard state engine.

Owns the member roster, the task list and the filter/selection record. All
writes go through the mutation methods; the query methods recompute their
result from current state on every call, so nothing derived can go stale.

The derivations themselves are plain functions over (members, tasks, filters)
and are usable without an engine.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from club_dashboard.models import FilterState, InvalidArgument, Layout, Member, Task


logger = logging.getLogger(__name__)


def filter_members(
    members: Iterable[Member],
    show_only_active: bool = False,
    search_text: str = "",
) -> List[Member]:
    """Narrow ``members`` by the active-only flag, then by name search.

    The search text is trimmed and compared case-insensitively as a substring
    of the member name. Blank search text does not filter. Input order is kept.
    """
    out = list(members)
    if show_only_active:
        out = [m for m in out if m.is_active]
    query = (search_text or "").strip().lower()
    if query:
        out = [m for m in out if query in m.name.lower()]
    return out


def find_member(members: Iterable[Member], member_id: Optional[int]) -> Optional[Member]:
    if member_id is None:
        return None
    return next((m for m in members if m.id == member_id), None)


def tasks_for_member(tasks: Iterable[Task], member: Optional[Member]) -> List[Task]:
    if member is None:
        return []
    return [t for t in tasks if t.assigned_to == member.id]


def _check_unique_ids(kind: str, ids: Sequence[int]) -> None:
    seen = set()
    dupes = []
    for i in ids:
        if i in seen:
            dupes.append(i)
        seen.add(i)
    if dupes:
        raise ValueError(f"duplicate {kind} ids: {sorted(set(dupes))}")


class DashboardEngine:
    """Single-writer state holder for one dashboard session."""

    def __init__(
        self,
        members: Iterable[Member],
        tasks: Iterable[Task],
        filters: Optional[FilterState] = None,
    ) -> None:
        self._members: Tuple[Member, ...] = tuple(members)
        self._tasks: List[Task] = list(tasks)
        _check_unique_ids("member", [m.id for m in self._members])
        _check_unique_ids("task", [t.id for t in self._tasks])
        self._filters = filters or FilterState()

    # ---- State access ----

    @property
    def members(self) -> Tuple[Member, ...]:
        return self._members

    @property
    def tasks(self) -> Tuple[Task, ...]:
        return tuple(self._tasks)

    @property
    def filters(self) -> FilterState:
        return self._filters

    # ---- Mutations ----

    def set_show_only_active(self, value: bool) -> None:
        self._filters = replace(self._filters, show_only_active=bool(value))
        logger.debug("show_only_active=%s", self._filters.show_only_active)

    def set_layout(self, value: Union[Layout, str]) -> None:
        """Switch between list and grid; unknown values raise InvalidArgument."""
        try:
            layout = Layout.parse(value)
        except InvalidArgument:
            logger.warning("Rejected layout value %r", value)
            raise
        self._filters = replace(self._filters, layout=layout)
        logger.debug("layout=%s", layout.value)

    def set_search_text(self, value: str) -> None:
        # Stored verbatim; trimming happens only when matching.
        self._filters = replace(self._filters, search_text=value)
        logger.debug("search_text=%r", value)

    def select_member(self, member_id: Optional[int]) -> None:
        self._filters = replace(self._filters, selected_member_id=member_id)
        logger.debug("selected_member_id=%s", member_id)

    def toggle_task_done(self, task_id: int) -> None:
        for idx, task in enumerate(self._tasks):
            if task.id == task_id:
                self._tasks[idx] = replace(task, done=not task.done)
                logger.debug("task %s done=%s", task_id, self._tasks[idx].done)
                return
        logger.debug("toggle_task_done: no task with id %s", task_id)

    # ---- Queries ----

    def visible_members(self) -> List[Member]:
        f = self._filters
        return filter_members(self._members, f.show_only_active, f.search_text)

    def selected_member(self) -> Optional[Member]:
        # Looked up in the full roster, not the visible subset.
        return find_member(self._members, self._filters.selected_member_id)

    def selected_member_tasks(self) -> List[Task]:
        return tasks_for_member(self._tasks, self.selected_member())

    def is_selected_member_inactive(self) -> bool:
        member = self.selected_member()
        return member is not None and not member.is_active
