from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import streamlit as st

from components.i18n import t
from config import LANGUAGES, AppConfig


@dataclass(frozen=True)
class SidebarState:
    view: str
    use_mock: bool
    lang: str
    detail: Optional[dict] = None


NAV_ITEMS = [
    ("🏠", "home"),
    ("👩‍🏫", "teachers"),
    ("📚", "courses"),
    ("🗓️", "booking"),
    ("ℹ️", "about"),
    ("✉️", "contact"),
    ("🔐", "admin"),
]

LANGUAGE_LABELS = {"ar": "العربية", "en": "English"}


def navigate(view: str, detail: Optional[dict] = None) -> None:
    """Widget callback: switch page. `detail` carries e.g. {"teacher_id": ...}."""
    st.session_state["nav_view"] = view
    st.session_state["detail"] = detail


def _clear_detail() -> None:
    st.session_state["detail"] = None


def render_sidebar(cfg: AppConfig) -> SidebarState:
    if "lang" not in st.session_state:
        st.session_state["lang"] = cfg.default_language
    if "nav_view" not in st.session_state:
        st.session_state["nav_view"] = "home"
    if "use_mock" not in st.session_state:
        st.session_state["use_mock"] = cfg.default_use_mock

    with st.sidebar:
        lang = st.radio(
            "Language / اللغة",
            list(LANGUAGES),
            format_func=LANGUAGE_LABELS.get,
            horizontal=True,
            key="lang",
        )

        icons = dict((k, i) for i, k in NAV_ITEMS)
        view = st.radio(
            "Nav",
            [k for _, k in NAV_ITEMS],
            format_func=lambda k: f"{icons[k]} {t('nav.' + k, lang)}",
            key="nav_view",
            on_change=_clear_detail,
            label_visibility="collapsed",
        )

        with st.expander(f"⚙️ {t('sidebar.settings', lang)}", expanded=False):
            use_mock = st.toggle(
                t("sidebar.use_mock", lang),
                key="use_mock",
                help=t("sidebar.use_mock_help", lang),
                disabled=not cfg.has_backend,
            )
            if not cfg.has_backend:
                st.caption("Set `SUPABASE_URL` and `SUPABASE_ANON_KEY` to leave demo mode.")

    return SidebarState(
        view=view,
        use_mock=use_mock or not cfg.has_backend,
        lang=lang,
        detail=st.session_state.get("detail"),
    )
