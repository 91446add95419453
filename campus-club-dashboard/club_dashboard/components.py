"""Streamlit rendering for the dashboard page.

Each render function draws one region from engine queries. Widget callbacks
call exactly one engine mutation; Streamlit reruns the script afterwards, so
the next pass reads freshly derived views.
"""

from __future__ import annotations

import html
from typing import Callable, Dict, List, Optional

import streamlit as st

from club_dashboard import presentation as pres
from club_dashboard.config import DashboardConfig
from club_dashboard.engine import DashboardEngine
from club_dashboard.models import Layout, Member


ONLY_ACTIVE_KEY = "club-only-active"
SEARCH_KEY = "club-search"


# ----- Callbacks -----

def _on_only_active_change(engine: DashboardEngine) -> None:
    engine.set_show_only_active(bool(st.session_state.get(ONLY_ACTIVE_KEY, False)))


def _on_search_change(engine: DashboardEngine) -> None:
    engine.set_search_text(st.session_state.get(SEARCH_KEY, ""))


# ----- Page chrome -----

def render_header(cfg: DashboardConfig) -> None:
    st.markdown(f'<div class="club-header">{html.escape(cfg.app_title)}</div>', unsafe_allow_html=True)


def render_footer(cfg: DashboardConfig) -> None:
    st.markdown(f'<footer class="club-footer">{html.escape(cfg.footer_text)}</footer>', unsafe_allow_html=True)


def render_notice(notice: Optional[pres.Notice]) -> None:
    if notice is None:
        return
    st.markdown(
        f'<div class="club-notice {notice.kind}">{html.escape(notice.message)}</div>',
        unsafe_allow_html=True,
    )


# ----- Filter bar -----

def render_filter_bar(engine: DashboardEngine) -> None:
    f = engine.filters
    c1, c2, c3 = st.columns([1.4, 1, 2])
    with c1:
        st.checkbox(
            "Show only active members",
            value=f.show_only_active,
            key=ONLY_ACTIVE_KEY,
            on_change=_on_only_active_change,
            args=(engine,),
        )
    with c2:
        for col, layout in zip(st.columns(len(Layout)), Layout):
            with col:
                st.button(
                    pres.LAYOUT_LABELS[layout],
                    key=f"club-layout-{layout.value}",
                    type="primary" if f.layout is layout else "secondary",
                    on_click=engine.set_layout,
                    args=(layout,),
                )
    with c3:
        st.text_input(
            "Search",
            value=f.search_text,
            key=SEARCH_KEY,
            placeholder=pres.SEARCH_PLACEHOLDER,
            label_visibility="collapsed",
            on_change=_on_search_change,
            args=(engine,),
        )


# ----- Members -----

def render_member_card(
    engine: DashboardEngine,
    member: Member,
    *,
    selected: bool,
    inline_actions: bool = True,
) -> None:
    """Draw one card. Grid cells already sit two column levels deep, so they
    pass inline_actions=False and the buttons stack instead of splitting.
    """
    with st.container():
        st.markdown(pres.member_card_html(member, selected=selected), unsafe_allow_html=True)
        if inline_actions:
            b1, b2 = st.columns(2)
        else:
            b1 = b2 = st.container()
        with b1:
            st.button(
                "Selected" if selected else "Select",
                key=f"club-select-{member.id}",
                type="primary" if selected else "secondary",
                on_click=engine.select_member,
                args=(member.id,),
            )
        with b2:
            # Display only; disabled for inactive members.
            st.button(
                "Role",
                key=f"club-role-{member.id}",
                disabled=not member.is_active,
                help=member.role.value,
            )


def _render_list(engine: DashboardEngine, members: List[Member], cfg: DashboardConfig) -> None:
    selected_id = engine.filters.selected_member_id
    for member in members:
        render_member_card(engine, member, selected=member.id == selected_id)


def _render_grid(engine: DashboardEngine, members: List[Member], cfg: DashboardConfig) -> None:
    selected_id = engine.filters.selected_member_id
    n = cfg.grid_columns
    for start in range(0, len(members), n):
        cols = st.columns(n)
        for col, member in zip(cols, members[start:start + n]):
            with col:
                render_member_card(engine, member, selected=member.id == selected_id, inline_actions=False)


_LAYOUT_RENDERERS: Dict[Layout, Callable[[DashboardEngine, List[Member], DashboardConfig], None]] = {
    Layout.LIST: _render_list,
    Layout.GRID: _render_grid,
}


def render_members(engine: DashboardEngine, cfg: DashboardConfig) -> None:
    members = engine.visible_members()
    layout = engine.filters.layout
    st.markdown(
        f'<div class="club-members-heading {pres.layout_css_class(layout)}">Members ({len(members)})</div>',
        unsafe_allow_html=True,
    )
    if not members:
        st.markdown(f'<div class="club-empty">{pres.EMPTY_ROSTER_TEXT}</div>', unsafe_allow_html=True)
        return
    _LAYOUT_RENDERERS[layout](engine, members, cfg)


def render_roster_table(engine: DashboardEngine) -> None:
    with st.expander("Roster table", expanded=False):
        frame = pres.members_frame(engine.visible_members(), engine.filters.selected_member_id)
        st.dataframe(frame, hide_index=True)


# ----- Tasks -----

def render_tasks_panel(engine: DashboardEngine) -> None:
    st.markdown('<div class="club-tasks-panel"><h3>Tasks</h3></div>', unsafe_allow_html=True)
    member = engine.selected_member()
    if member is None:
        st.write(pres.NO_SELECTION_TEXT)
        return

    st.markdown(f"**{member.name}** · {member.role.value}")
    tasks = engine.selected_member_tasks()
    if not tasks:
        st.write(pres.NO_TASKS_TEXT)
    else:
        done, total = pres.task_progress(tasks)
        st.progress(done / total, text=f"{done} of {total} done")
        for task in tasks:
            st.checkbox(
                pres.task_label(task),
                value=task.done,
                key=f"club-task-{task.id}",
                on_change=engine.toggle_task_done,
                args=(task.id,),
            )

    st.button("Clear selection", key="club-clear-selection", on_click=engine.select_member, args=(None,))
