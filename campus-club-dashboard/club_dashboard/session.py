"""Per-session engine binding.

Streamlit reruns the page script on every interaction; the engine lives in
``st.session_state`` so it survives reruns and each browser session gets its
own copy of the roster. Functions take the session mapping as a parameter
so tests can pass a plain dict.
"""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, MutableMapping, Optional

from club_dashboard.engine import DashboardEngine
from club_dashboard.models import InvalidArgument
from club_dashboard.seed import create_seeded_engine


logger = logging.getLogger(__name__)

ENGINE_KEY = "club_engine"
MESSAGES_KEY = "club_engine_messages"
# Prefix shared by all widget keys; reset_engine clears them too.
WIDGET_KEY_PREFIX = "club-"


def _query_param(params: Optional[Mapping[str, Any]], key: str) -> Optional[str]:
    if not params or key not in params:
        return None
    val = params.get(key)
    if val is None:
        return None
    if isinstance(val, (list, tuple)):
        return str(val[0]) if val else None
    return str(val)


def apply_query_params(engine: DashboardEngine, params: Optional[Mapping[str, Any]]) -> List[str]:
    """Apply ``?layout=`` and ``?member=`` deep-link parameters.

    Returns human-readable messages for parameters that were rejected; the
    engine is left unchanged for those.
    """
    messages: List[str] = []

    layout = _query_param(params, "layout")
    if layout is not None:
        try:
            engine.set_layout(layout)
        except InvalidArgument as exc:
            messages.append(f"Ignored layout link parameter: {exc}")

    member = _query_param(params, "member")
    if member is not None:
        try:
            member_id = int(member.strip())
        except ValueError:
            logger.warning("Ignoring non-integer member parameter %r", member)
            messages.append(f"Ignored member link parameter: {member!r} is not a member id")
        else:
            engine.select_member(member_id)

    return messages


def get_engine(
    session_state: MutableMapping[str, Any],
    query_params: Optional[Mapping[str, Any]] = None,
) -> DashboardEngine:
    """Return this session's engine, seeding it on first access.

    Query parameters are applied only when the engine is created, so later
    reruns never override what the user has clicked since.
    """
    engine = session_state.get(ENGINE_KEY)
    if engine is None:
        engine = create_seeded_engine()
        session_state[MESSAGES_KEY] = apply_query_params(engine, query_params)
        session_state[ENGINE_KEY] = engine
        logger.info("Seeded dashboard engine: %d members, %d tasks", len(engine.members), len(engine.tasks))
    return engine


def pop_messages(session_state: MutableMapping[str, Any]) -> List[str]:
    return list(session_state.pop(MESSAGES_KEY, None) or [])


def reset_engine(session_state: MutableMapping[str, Any]) -> None:
    session_state.pop(ENGINE_KEY, None)
    session_state.pop(MESSAGES_KEY, None)
    for key in [k for k in list(session_state.keys()) if str(k).startswith(WIDGET_KEY_PREFIX)]:
        session_state.pop(key, None)
    logger.info("Dashboard engine reset")
