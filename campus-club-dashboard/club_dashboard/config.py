"""Dashboard runtime configuration.

Env-first with defaults that work out of the box. Only cosmetic and
operational settings live here; the roster and task seed are fixed.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional


_ON = frozenset({"1", "true", "yes", "on"})
_OFF = frozenset({"0", "false", "no", "off"})


def _setting(name: str) -> Optional[str]:
    """Stripped value of a CLUB_* variable, or None when unset or blank."""
    value = os.environ.get(name, "").strip()
    return value or None


def setting_str(name: str, default: str) -> str:
    return _setting(name) or default


def setting_flag(name: str, default: bool) -> bool:
    value = (_setting(name) or "").lower()
    if value in _ON:
        return True
    if value in _OFF:
        return False
    return default


def setting_count(name: str, default: int, *, low: int, high: int) -> int:
    """Integer setting clamped to [low, high]; unparsable values give the default."""
    value = _setting(name)
    try:
        count = int(value) if value is not None else default
    except ValueError:
        count = default
    return max(low, min(high, count))


@dataclass(frozen=True)
class DashboardConfig:
    """Dashboard configuration.

    Environment variables:
    - CLUB_APP_TITLE: page title and header text
    - CLUB_PAGE_ICON: browser tab icon
    - CLUB_FOOTER_TEXT: footer line
    - CLUB_GRID_COLUMNS: cards per row in grid layout (1-6, default 3)
    - CLUB_SHOW_ROSTER_TABLE: show the tabular roster expander (default true)
    - CLUB_LOG_LEVEL: console log level (default INFO)
    - CLUB_LOG_DIR: when set, also write club_dashboard.log there
    """

    app_title: str
    page_icon: str
    footer_text: str
    grid_columns: int
    show_roster_table: bool
    log_level: str
    log_dir: Optional[str]

    DEFAULT_APP_TITLE: str = "Campus Club Dashboard"
    DEFAULT_PAGE_ICON: str = "🎓"
    DEFAULT_FOOTER_TEXT: str = "© 2025 Campus Coding Club"
    DEFAULT_GRID_COLUMNS: int = 3
    MAX_GRID_COLUMNS: int = 6

    @classmethod
    def from_env(cls) -> "DashboardConfig":
        return cls(
            app_title=setting_str("CLUB_APP_TITLE", cls.DEFAULT_APP_TITLE),
            page_icon=setting_str("CLUB_PAGE_ICON", cls.DEFAULT_PAGE_ICON),
            footer_text=setting_str("CLUB_FOOTER_TEXT", cls.DEFAULT_FOOTER_TEXT),
            grid_columns=setting_count(
                "CLUB_GRID_COLUMNS", cls.DEFAULT_GRID_COLUMNS, low=1, high=cls.MAX_GRID_COLUMNS
            ),
            show_roster_table=setting_flag("CLUB_SHOW_ROSTER_TABLE", True),
            log_level=setting_str("CLUB_LOG_LEVEL", "INFO").upper(),
            log_dir=_setting("CLUB_LOG_DIR"),
        )


_config: Optional[DashboardConfig] = None


def get_config() -> DashboardConfig:
    """Get the dashboard configuration (cached)."""
    global _config
    if _config is None:
        _config = DashboardConfig.from_env()
    return _config
