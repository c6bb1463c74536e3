from __future__ import annotations

import html
from typing import Any, Mapping

import streamlit as st

from components.i18n import t
from components.sidebar import navigate
from data.service import records


def _stars(rating: Any) -> str:
    try:
        return f"⭐ {float(rating):.1f}"
    except (TypeError, ValueError):
        return "⭐ 0.0"


def _image(url: Any) -> None:
    if url:
        st.image(url, use_container_width=True)


def teacher_card(teacher: Mapping[str, Any], lang: str, key_prefix: str = "teacher") -> None:
    """Listing card with profile / booking buttons."""
    tid = str(teacher.get("id"))
    with st.container(border=True):
        _image(teacher.get("image_url"))
        online = (
            f'<span class="badge online">{html.escape(t("filter.online", lang))}</span>'
            if teacher.get("is_online")
            else ""
        )
        languages = ", ".join(teacher.get("languages") or [])
        st.markdown(
            f"""
<div class="item-card-title">{html.escape(str(teacher.get("name") or ""))} {online}</div>
<div class="item-card-body">{html.escape(str(teacher.get("specialization") or ""))}</div>
<div class="item-card-meta">{_stars(teacher.get("rating"))} · {int(teacher.get("reviews") or 0)} {html.escape(t("teachers.reviews", lang))}</div>
<div class="item-card-meta">{int(teacher.get("experience") or 0)} {html.escape(t("teachers.years", lang))} · {html.escape(languages)}</div>
<div class="price">{float(teacher.get("hourly_rate") or 0):,.0f} {html.escape(t("teachers.per_hour", lang))}</div>
            """,
            unsafe_allow_html=True,
        )
        c1, c2 = st.columns(2)
        c1.button(
            t("teachers.profile", lang),
            key=f"{key_prefix}_profile_{tid}",
            on_click=navigate,
            args=("teachers", {"teacher_id": tid}),
            use_container_width=True,
        )
        c2.button(
            t("teachers.book", lang),
            key=f"{key_prefix}_book_{tid}",
            on_click=navigate,
            args=("booking", {"teacher_id": tid}),
            type="primary",
            use_container_width=True,
        )


def course_card(course: Mapping[str, Any], lang: str, key_prefix: str = "course") -> None:
    cid = str(course.get("id"))
    with st.container(border=True):
        _image(course.get("image_url"))
        st.markdown(
            f"""
<div class="item-card-title">{html.escape(str(course.get("title") or ""))}</div>
<div><span class="badge accent">{html.escape(str(course.get("level") or ""))}</span>
     <span class="badge">{html.escape(str(course.get("category") or ""))}</span></div>
<div class="item-card-body">{html.escape(str(course.get("description") or ""))}</div>
<div class="item-card-meta">{_stars(course.get("rating"))} · {int(course.get("students") or 0)} {html.escape(t("courses.students", lang))} · {html.escape(str(course.get("duration") or ""))}</div>
<div class="item-card-meta">{html.escape(str(course.get("instructor") or ""))}</div>
<div class="price">{float(course.get("price") or 0):,.0f} {html.escape(t("courses.currency", lang))}</div>
            """,
            unsafe_allow_html=True,
        )
        st.button(
            t("courses.details", lang),
            key=f"{key_prefix}_details_{cid}",
            on_click=navigate,
            args=("courses", {"course_id": cid}),
            use_container_width=True,
        )


def render_card_grid(df, render_card, lang: str, key_prefix: str, n_cols: int = 3) -> None:
    rows = records(df)
    for start in range(0, len(rows), n_cols):
        cols = st.columns(n_cols)
        for col, record in zip(cols, rows[start : start + n_cols]):
            with col:
                render_card(record, lang, key_prefix=key_prefix)
