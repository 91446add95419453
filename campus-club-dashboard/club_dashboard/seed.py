from __future__ import annotations

from typing import List

from club_dashboard.engine import DashboardEngine
from club_dashboard.models import Member, Role, Task


SEED_MEMBERS = (
    Member(id=1, name="Alex Rivera", role=Role.LEADER, is_active=True),
    Member(id=2, name="Casey Kim", role=Role.MEMBER, is_active=True),
    Member(id=3, name="Jordan Lee", role=Role.MEMBER, is_active=False),
    Member(id=4, name="Sam Cohen", role=Role.GUEST, is_active=True),
    Member(id=5, name="Taylor Brooks", role=Role.GUEST, is_active=False),
)

SEED_TASKS = (
    Task(id=101, title="Set up GitHub org", done=False, assigned_to=1),
    Task(id=102, title="Prepare onboarding doc", done=True, assigned_to=2),
    Task(id=103, title="Design club logo", done=False, assigned_to=2),
    Task(id=104, title="Schedule kickoff meeting", done=False, assigned_to=1),
    Task(id=105, title="Create feedback Google Form", done=False, assigned_to=4),
)


def seed_members() -> List[Member]:
    return list(SEED_MEMBERS)


def seed_tasks() -> List[Task]:
    return list(SEED_TASKS)


def create_seeded_engine() -> DashboardEngine:
    """Build an engine over the fixed roster with default filters."""
    return DashboardEngine(seed_members(), seed_tasks())
