import logging
import os
from typing import Optional

import streamlit as st
from streamlit.errors import StreamlitAPIException

from club_dashboard.config import get_config

logger = logging.getLogger(__name__)

THEME_FILE = os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "assets", "club_theme.css")


def load_css(theme_file: Optional[str] = None) -> str:
    with open(theme_file or THEME_FILE, "r", encoding="utf-8") as f:
        return f.read()


def set_theme(
    page_title: Optional[str] = None,
    page_icon: Optional[str] = None,
    layout: str = "wide",
    initial_sidebar_state: str = "collapsed",
):
    """Configure the Streamlit page and inject the dashboard CSS.

    Title and icon default to the configured values. Call this before any
    other Streamlit command: once something has rendered, Streamlit rejects
    set_page_config and the page keeps its default layout, title and icon.
    """
    cfg = get_config()
    try:
        st.set_page_config(
            page_title=page_title or cfg.app_title,
            page_icon=page_icon or cfg.page_icon,
            layout=layout,
            initial_sidebar_state=initial_sidebar_state,
        )
    except StreamlitAPIException as exc:
        logger.warning("Page config not applied: %s", exc)

    try:
        css = load_css()
    except FileNotFoundError:
        st.error(f"Theme file not found at {THEME_FILE}. Please check the file path.")
        return
    st.markdown(f"<style>{css}</style>", unsafe_allow_html=True)
