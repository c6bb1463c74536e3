from __future__ import annotations

import logging
from datetime import date
from typing import Optional

import streamlit as st

from components.i18n import t
from components.narrative import render_data_notice, render_hero, render_section_title
from config import AppConfig
from data.connection import BackendError
from data.forms import TIME_SLOTS, ValidationError
from data.service import create_booking, get_active_payment_methods, get_online_teachers, records


log = logging.getLogger(__name__)

PAYMENT_ICONS = {"mobile_wallet": "📱", "bank_account": "🏦", "instant_payment": "⚡"}


def _render_payment_methods(backend, lang: str) -> None:
    res = get_active_payment_methods(backend)
    if res.df.empty:
        return
    render_section_title(t("booking.payment", lang))
    for m in records(res.df):
        st.markdown(f"{PAYMENT_ICONS.get(m['type'], '💳')} **{m['name']}**: `{m['details']}`")


def preselect_index(ids: list[str], wanted: str) -> Optional[int]:
    """Position of the requested teacher, or None so nobody is chosen for the student."""
    return ids.index(wanted) if wanted in ids else None


def render(cfg: AppConfig, backend, lang: str, detail: Optional[dict] = None) -> None:
    render_hero(t("booking.title", lang), t("booking.subtitle", lang))

    res = get_online_teachers(backend)
    teachers = records(res.df)
    if not teachers:
        st.info(t("booking.no_teachers", lang))
        render_data_notice(res.source, res.warning)
        return

    ids = [str(x["id"]) for x in teachers]
    names = {str(x["id"]): f"{x['name']} · {x.get('specialization') or ''}" for x in teachers}
    wanted = str((detail or {}).get("teacher_id") or "")
    index = preselect_index(ids, wanted)
    if wanted and index is None:
        st.info(t("booking.teacher_unavailable", lang))

    with st.form("booking_form"):
        teacher_id = st.selectbox(
            t("booking.teacher", lang),
            ids,
            index=index,
            format_func=names.get,
            placeholder=t("booking.choose_teacher", lang),
            key="booking_teacher",
        )
        c1, c2 = st.columns(2)
        lesson_date = c1.date_input(t("booking.date", lang), min_value=date.today())
        lesson_time = c2.selectbox(t("booking.time", lang), TIME_SLOTS)
        c3, c4 = st.columns(2)
        student_name = c3.text_input(t("booking.name", lang))
        student_email = c4.text_input(t("booking.email", lang))
        student_phone = st.text_input(t("booking.phone", lang))
        lesson_notes = st.text_area(t("booking.notes", lang))
        submitted = st.form_submit_button(t("booking.submit", lang), type="primary")

    if submitted:
        try:
            create_booking(
                backend,
                {
                    "teacher_id": teacher_id,
                    "lesson_date": lesson_date,
                    "lesson_time": lesson_time,
                    "student_name": student_name,
                    "student_email": student_email,
                    "student_phone": student_phone,
                    "lesson_notes": lesson_notes,
                },
            )
        except ValidationError as e:
            st.error(str(e))
        except BackendError as e:
            log.error("Booking failed: %s", e)
            st.error(t("booking.failed", lang))
        else:
            st.success(t("booking.success", lang))
            st.toast(t("booking.success", lang), icon="✅")

    _render_payment_methods(backend, lang)
    render_data_notice(res.source, res.warning)
