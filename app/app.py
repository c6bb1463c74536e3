"""
Routing only.

All view logic lives in app/views/.
All env reads happen ONLY in config.py.
"""

from __future__ import annotations

import logging
import os
import sys

# Make `app/` importable as a flat module path when running:
#   streamlit run app/app.py
APP_DIR = os.path.dirname(__file__)
REPO_ROOT = os.path.abspath(os.path.join(APP_DIR, ".."))
for p in [APP_DIR, REPO_ROOT]:
    if p not in sys.path:
        sys.path.insert(0, p)

import streamlit as st  # noqa: E402

from components.header import render_header  # noqa: E402
from components.i18n import is_rtl, t  # noqa: E402
from components.sidebar import render_sidebar  # noqa: E402
from components.styles import apply_theme, configure_page  # noqa: E402
from config import AppConfig, configure_logging, get_config  # noqa: E402
from data.connection import BackendError, get_backend  # noqa: E402
from data.service import get_site_settings, get_theme_settings  # noqa: E402

from views import (  # noqa: E402
    about,
    admin,
    booking,
    contact,
    course_details,
    courses,
    home,
    teacher_profile,
    teachers,
)


log = logging.getLogger(__name__)


def _backend(cfg: AppConfig, use_mock: bool):
    """
    One backend per browser session, kept in session state so the demo store's
    edits and a Supabase auth session are never shared between visitors.
    """
    mode = "mock" if use_mock else "live"
    cached = st.session_state.get("backend")
    if cached is not None and st.session_state.get("backend_mode") == mode:
        return cached

    try:
        backend = get_backend(cfg, use_mock, store=st.session_state.get("demo_store"))
    except BackendError as e:
        log.warning("Supabase unavailable, using demo data: %s", e)
        st.warning(f"Could not connect to Supabase, showing demo data ({type(e).__name__}).")
        backend = get_backend(cfg, use_mock=True, store=st.session_state.get("demo_store"))
        mode = "mock"

    if backend.name == "mock":
        st.session_state["demo_store"] = backend
    st.session_state["backend"] = backend
    st.session_state["backend_mode"] = mode
    return backend


def main() -> None:
    configure_page()
    cfg = get_config()
    configure_logging(cfg)
    state = render_sidebar(cfg)
    lang = state.lang

    backend = _backend(cfg, state.use_mock)

    theme = get_theme_settings(backend)
    apply_theme(theme.record, rtl=is_rtl(lang))

    site = get_site_settings(backend)
    render_header(
        site_name=site.record.get("site_name") or "",
        logo_url=site.record.get("logo_url"),
        right_pill=f"{t('data.source', lang)}: {'Demo' if backend.name == 'mock' else 'Supabase'}",
    )

    detail = state.detail or {}

    # Routing only
    if state.view == "home":
        home.render(cfg, backend, lang)
    elif state.view == "teachers":
        if detail.get("teacher_id"):
            teacher_profile.render(cfg, backend, lang, detail["teacher_id"])
        else:
            teachers.render(cfg, backend, lang)
    elif state.view == "courses":
        if detail.get("course_id"):
            course_details.render(cfg, backend, lang, detail["course_id"])
        else:
            courses.render(cfg, backend, lang)
    elif state.view == "booking":
        booking.render(cfg, backend, lang, detail)
    elif state.view == "about":
        about.render(cfg, backend, lang)
    elif state.view == "contact":
        contact.render(cfg, backend, lang)
    elif state.view == "admin":
        admin.render(cfg, backend, lang)
    else:
        st.error("Unknown view")


if __name__ == "__main__":
    main()
