import streamlit as st

from club_dashboard import components
from club_dashboard.config import get_config
from club_dashboard.logging_setup import setup_logging
from club_dashboard.presentation import selection_notice
from club_dashboard.session import get_engine, pop_messages, reset_engine
from club_dashboard.theme import set_theme


@st.cache_resource(show_spinner=False)
def _init_logging() -> bool:
    cfg = get_config()
    setup_logging(cfg.log_level, log_dir=cfg.log_dir)
    return True


# set_page_config must be the first Streamlit command of the run.
set_theme()
_init_logging()

cfg = get_config()
engine = get_engine(st.session_state, st.query_params)

components.render_header(cfg)
for message in pop_messages(st.session_state):
    st.warning(message)

components.render_filter_bar(engine)
components.render_notice(selection_notice(engine))

members_col, tasks_col = st.columns([2, 1])
with members_col:
    components.render_members(engine, cfg)
    if cfg.show_roster_table:
        components.render_roster_table(engine)
with tasks_col:
    components.render_tasks_panel(engine)

components.render_footer(cfg)

with st.sidebar:
    st.subheader("Dashboard")
    st.caption("Filters and task ticks live in this browser session only.")
    st.button("Reset dashboard", key="reset-dashboard", on_click=reset_engine, args=(st.session_state,))
