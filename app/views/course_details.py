from __future__ import annotations

import html

import streamlit as st

from components.i18n import t
from components.narrative import render_section_title
from components.sidebar import navigate
from config import AppConfig
from data.service import get_course


def _bullets(items) -> None:
    st.markdown("\n".join(f"- {i}" for i in items))


def render(cfg: AppConfig, backend, lang: str, course_id: str) -> None:
    st.button(f"← {t('courses.back', lang)}", on_click=navigate, args=("courses",))

    res = get_course(backend, course_id)
    course = res.record
    if not course:
        # unknown id or backend error: back to the list
        st.error(res.warning or t("courses.not_found", lang))
        return

    left, right = st.columns([2, 1])
    with left:
        st.title(course.get("title") or "")
        st.markdown(
            f'<span class="badge accent">{html.escape(str(course.get("level") or ""))}</span> '
            f'<span class="badge">{html.escape(str(course.get("category") or ""))}</span>',
            unsafe_allow_html=True,
        )
        st.write(course.get("description") or "")
        st.caption(
            f"⭐ {float(course.get('rating') or 0):.1f} · {int(course.get('students') or 0)} {t('courses.students', lang)}"
            f" · {course.get('duration') or ''} · {course.get('instructor') or ''}"
        )

        if course.get("content_outline"):
            render_section_title(t("courses.outline", lang))
            _bullets(course["content_outline"])
        if course.get("prerequisites"):
            render_section_title(t("courses.prerequisites", lang))
            _bullets(course["prerequisites"])

    with right:
        if course.get("image_url"):
            st.image(course["image_url"], use_container_width=True)
        st.markdown(
            f'<div class="price">{float(course.get("price") or 0):,.0f} {html.escape(t("courses.currency", lang))}</div>',
            unsafe_allow_html=True,
        )
        if course.get("features"):
            render_section_title(t("courses.features", lang))
            _bullets(course["features"])
        if st.button(t("courses.register", lang), type="primary", use_container_width=True):
            st.toast(t("courses.register_soon", lang), icon="🚧")
