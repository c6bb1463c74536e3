from __future__ import annotations

import html

import pandas as pd
import streamlit as st

from components.feedback import run_write
from components.i18n import t
from components.metrics import Kpi, bar_chart, render_kpi_row
from components.narrative import render_data_notice
from config import AppConfig
from data.connection import BackendAuthError
from data.forms import ValidationError
from data.mock_data import BOOKING_STATUSES, DEMO_ADMIN_EMAIL, DEMO_ADMIN_PASSWORD
from data.refine import ALL, filter_bookings
from data.service import (
    booking_status_counts,
    get_bookings,
    get_courses_admin,
    get_teacher_names,
    get_teachers_admin,
    get_theme_settings,
    next_statuses,
    records,
    sign_in,
    sign_out,
    update_booking_status,
)
from views import admin_catalog, admin_settings


STATUS_BADGES = {"pending": "⏳", "confirmed": "✅", "cancelled": "✖️", "completed": "🎓"}


def _signed_in_as(backend) -> str | None:
    session = st.session_state.get("admin")
    # a session only counts for the backend it was opened against
    if session and session.get("backend") == backend.name:
        return session["email"]
    return None


def _render_login(backend, lang: str) -> None:
    st.title(t("admin.login", lang))
    with st.form("admin_login"):
        email = st.text_input(t("booking.email", lang))
        password = st.text_input(t("admin.password", lang), type="password")
        submitted = st.form_submit_button(t("admin.sign_in", lang), type="primary")

    if submitted:
        try:
            who = sign_in(backend, email, password)
        except (ValidationError, BackendAuthError) as e:
            st.error(str(e))
        else:
            st.session_state["admin"] = {"email": who, "backend": backend.name}
            st.rerun()

    if backend.name == "mock":
        st.info(f"{t('admin.demo_hint', lang)}: `{DEMO_ADMIN_EMAIL}` / `{DEMO_ADMIN_PASSWORD}`")


def _sign_out(backend) -> None:
    try:
        sign_out(backend)
    finally:
        st.session_state.pop("admin", None)


def overview_kpis(teachers: pd.DataFrame, courses: pd.DataFrame, bookings: pd.DataFrame, lang: str) -> list[Kpi]:
    pending = int((bookings["status"] == "pending").sum()) if not bookings.empty else 0
    return [
        Kpi(t("admin.teachers", lang), f"{len(teachers):,}", "👩‍🏫"),
        Kpi(t("admin.courses", lang), f"{len(courses):,}", "📚"),
        Kpi(t("admin.bookings", lang), f"{len(bookings):,}", "🗓️"),
        Kpi(t("admin.pending", lang), f"{pending:,}", "⏳"),
    ]


def lesson_markup(booking: dict, names: dict) -> str:
    teacher = names.get(str(booking["teacher_id"]), booking["teacher_id"])
    when = f"{booking['lesson_date']} · {booking['lesson_time']}"
    return f"{html.escape(str(teacher))}<br/>{html.escape(when)}"


def _render_overview(backend, lang: str) -> None:
    teachers = get_teachers_admin(backend)
    courses = get_courses_admin(backend)
    bookings = get_bookings(backend)

    df = bookings.df
    render_kpi_row(overview_kpis(teachers.df, courses.df, df, lang))

    counts = booking_status_counts(df)
    if counts.empty:
        st.info(t("list.none", lang))
    else:
        bar_chart(counts, x="status", y="count", colors=get_theme_settings(backend).record, title=t("admin.bookings", lang))

    for res in (teachers, courses, bookings):
        if res.warning:
            render_data_notice(res.source, res.warning)


def _render_bookings(backend, lang: str) -> None:
    res = get_bookings(backend)
    names = get_teacher_names(backend)

    status = st.selectbox(
        t("admin.status", lang),
        [ALL, *BOOKING_STATUSES],
        format_func=lambda s: t("filter.all", lang) if s == ALL else s,
        key="admin_booking_status",
    )
    shown = filter_bookings(res.df, status)
    st.caption(f"{t('list.found', lang)}: **{len(shown)}**")

    for b in records(shown):
        with st.container(border=True):
            c1, c2, c3 = st.columns([3, 2, 2])
            c1.markdown(
                f"**{html.escape(str(b['student_name']))}** · {html.escape(str(b['student_email']))}"
                f"<br/>{html.escape(str(b.get('student_phone') or ''))}",
                unsafe_allow_html=True,
            )
            c2.markdown(lesson_markup(b, names), unsafe_allow_html=True)
            c3.markdown(f"{STATUS_BADGES.get(b['status'], '')} **{b['status']}**")
            if b.get("lesson_notes"):
                st.caption(b["lesson_notes"])

            targets = next_statuses(b["status"])
            if targets:
                cols = st.columns(len(targets) + 2)
                for col, target in zip(cols, targets):
                    if col.button(target, key=f"booking_{b['id']}_{target}"):
                        run_write(
                            lambda b=b, target=target: update_booking_status(backend, b["id"], b["status"], target),
                            lang,
                        )

    render_data_notice(res.source, res.warning)


def render(cfg: AppConfig, backend, lang: str) -> None:
    email = _signed_in_as(backend)
    if email is None:
        _render_login(backend, lang)
        return

    c1, c2 = st.columns([5, 1])
    c1.title(t("nav.admin", lang))
    c1.caption(email)
    if c2.button(t("admin.sign_out", lang), use_container_width=True):
        run_write(lambda: _sign_out(backend), lang, success_key="admin.sign_out")

    tabs = st.tabs(
        [
            t("admin.overview", lang),
            t("admin.teachers", lang),
            t("admin.courses", lang),
            t("admin.bookings", lang),
            t("admin.payments", lang),
            t("admin.site", lang),
            t("admin.theme", lang),
            t("admin.admins", lang),
        ]
    )
    with tabs[0]:
        _render_overview(backend, lang)
    with tabs[1]:
        admin_catalog.render_teachers(cfg, backend, lang)
    with tabs[2]:
        admin_catalog.render_courses(cfg, backend, lang)
    with tabs[3]:
        _render_bookings(backend, lang)
    with tabs[4]:
        admin_settings.render_payment_methods(backend, lang)
    with tabs[5]:
        admin_settings.render_site_settings(cfg, backend, lang)
    with tabs[6]:
        admin_settings.render_theme(backend, lang)
    with tabs[7]:
        admin_settings.render_admins(backend, lang)
