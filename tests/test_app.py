from pathlib import Path

import streamlit as st
from streamlit.errors import StreamlitAPIException
from streamlit.testing.v1 import AppTest

from club_dashboard import theme

from club_dashboard.models import Layout
from club_dashboard.session import ENGINE_KEY

APP_PATH = str(Path(__file__).resolve().parents[1] / "campus-club-dashboard" / "app.py")


def _run(query_params=None):
    at = AppTest.from_file(APP_PATH, default_timeout=30)
    for k, v in (query_params or {}).items():
        at.query_params[k] = v
    at.run()
    assert not at.exception
    return at


def _markdown_text(at):
    return "\n".join(m.value for m in at.markdown)


def _select_keys(at):
    return [b.key for b in at.button if (b.key or "").startswith("club-select-")]


def test_initial_render():
    at = _run()
    text = _markdown_text(at)
    assert "Campus Club Dashboard" in text
    assert "Select a member to view tasks." in text
    assert _select_keys(at) == [f"club-select-{i}" for i in (1, 2, 3, 4, 5)]


def test_select_member_and_toggle_task():
    at = _run()
    at.button(key="club-select-1").click().run()
    assert at.checkbox(key="club-task-101").value is False
    assert at.checkbox(key="club-task-104").value is False

    at.checkbox(key="club-task-101").check().run()
    engine = at.session_state[ENGINE_KEY]
    assert next(t for t in engine.tasks if t.id == 101).done is True
    assert "The selected member is inactive." not in _markdown_text(at)


def test_inactive_selection_shows_warning():
    at = _run()
    at.button(key="club-select-3").click().run()
    text = _markdown_text(at)
    assert "The selected member is inactive." in text
    assert "No tasks yet." in text


def test_only_active_and_search():
    at = _run()
    at.checkbox(key="club-only-active").check().run()
    assert _select_keys(at) == ["club-select-1", "club-select-2", "club-select-4"]

    at.text_input(key="club-search").input("  rivera ").run()
    assert _select_keys(at) == ["club-select-1"]


def test_empty_roster_message():
    at = _run()
    at.text_input(key="club-search").input("nobody here").run()
    assert _select_keys(at) == []
    assert "No members to show." in _markdown_text(at)


def test_grid_layout_button():
    at = _run()
    at.button(key="club-layout-grid").click().run()
    assert at.session_state[ENGINE_KEY].filters.layout is Layout.GRID
    assert len(_select_keys(at)) == 5


def test_deep_link_parameters():
    at = _run({"layout": "grid", "member": "2"})
    engine = at.session_state[ENGINE_KEY]
    assert engine.filters.layout is Layout.GRID
    assert engine.selected_member().name == "Casey Kim"


def test_bad_deep_link_shows_warning():
    at = _run({"layout": "tiles"})
    assert len(at.warning) == 1
    assert "layout" in at.warning[0].value
    assert at.session_state[ENGINE_KEY].filters.layout is Layout.LIST


def test_done_task_label_is_struck_through():
    at = _run()
    at.button(key="club-select-2").click().run()
    assert at.checkbox(key="club-task-102").label == "~~Prepare onboarding doc~~"
    assert at.checkbox(key="club-task-103").label == "Design club logo"

    at.checkbox(key="club-task-103").check().run()
    assert at.checkbox(key="club-task-103").label == "~~Design club logo~~"


def test_page_config_accepted_on_first_run(monkeypatch):
    # A cold resource cache is what a fresh server process sees.
    st.cache_resource.clear()
    calls, rejected = [], []
    real_set_page_config = st.set_page_config

    def recording_set_page_config(*args, **kwargs):
        calls.append(kwargs)
        try:
            return real_set_page_config(*args, **kwargs)
        except StreamlitAPIException as exc:
            rejected.append(exc)
            raise

    monkeypatch.setattr(st, "set_page_config", recording_set_page_config)
    _run()
    assert len(calls) == 1
    assert calls[0]["layout"] == "wide"
    assert rejected == []


def test_missing_theme_file_shows_error(monkeypatch, tmp_path):
    monkeypatch.setattr(theme, "THEME_FILE", str(tmp_path / "missing.css"))
    at = _run()
    assert len(at.error) == 1
    assert "Theme file not found" in at.error[0].value
    # the rest of the page still renders
    assert "Campus Club Dashboard" in _markdown_text(at)
