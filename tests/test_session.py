from club_dashboard import session
from club_dashboard.models import Layout


def test_get_engine_seeds_once():
    state = {}
    engine = session.get_engine(state)
    assert state[session.ENGINE_KEY] is engine
    assert [m.id for m in engine.members] == [1, 2, 3, 4, 5]

    engine.toggle_task_done(101)
    again = session.get_engine(state)
    assert again is engine
    assert next(t for t in again.tasks if t.id == 101).done is True


def test_sessions_do_not_share_state():
    a = session.get_engine({})
    b = session.get_engine({})
    a.set_show_only_active(True)
    assert b.filters.show_only_active is False


def test_query_params_applied_on_creation():
    state = {}
    engine = session.get_engine(state, {"layout": "grid", "member": "3"})
    assert engine.filters.layout is Layout.GRID
    assert engine.selected_member().name == "Jordan Lee"
    assert session.pop_messages(state) == []


def test_query_params_ignored_after_creation():
    state = {}
    engine = session.get_engine(state)
    session.get_engine(state, {"layout": "grid"})
    assert engine.filters.layout is Layout.LIST


def test_list_valued_query_params_use_first_value():
    engine = session.get_engine({}, {"layout": ["grid", "list"], "member": ["2"]})
    assert engine.filters.layout is Layout.GRID
    assert engine.filters.selected_member_id == 2


def test_bad_query_params_leave_state_unchanged():
    state = {}
    engine = session.get_engine(state, {"layout": "tiles", "member": "abc"})
    assert engine.filters.layout is Layout.LIST
    assert engine.filters.selected_member_id is None
    messages = session.pop_messages(state)
    assert len(messages) == 2
    assert "layout" in messages[0]
    assert "member" in messages[1]
    assert session.pop_messages(state) == []


def test_reset_engine_reseeds_and_clears_widgets():
    state = {"club-search": "alex", "club-task-101": True, "unrelated": 1}
    engine = session.get_engine(state)
    engine.toggle_task_done(101)

    session.reset_engine(state)
    assert state == {"unrelated": 1}

    fresh = session.get_engine(state)
    assert fresh is not engine
    assert next(t for t in fresh.tasks if t.id == 101).done is False
