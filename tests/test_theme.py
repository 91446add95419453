import pytest

from club_dashboard import theme


def test_set_theme():
    # Outside `streamlit run` calls go through Streamlit's bare mode.
    try:
        theme.set_theme(page_title="Club test")
        theme.set_theme()
    except Exception as e:
        assert False, f"set_theme raised an exception: {e}"


def test_css_covers_role_classes():
    css = theme.load_css()
    for cls in (".club-avatar.leader", ".club-avatar.member", ".club-avatar.guest", ".club-notice.warning"):
        assert cls in css


def test_missing_theme_file(tmp_path):
    missing = tmp_path / "nope.css"
    with pytest.raises(FileNotFoundError):
        theme.load_css(str(missing))
