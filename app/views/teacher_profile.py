from __future__ import annotations

import html

import streamlit as st

from components.i18n import t
from components.narrative import render_data_notice, render_section_title
from components.sidebar import navigate
from config import AppConfig
from data.service import get_teacher


def render(cfg: AppConfig, backend, lang: str, teacher_id: str) -> None:
    st.button(f"← {t('teachers.back', lang)}", on_click=navigate, args=("teachers",))

    res = get_teacher(backend, teacher_id)
    teacher = res.record
    if not teacher:
        st.error(t("teachers.not_found", lang))
        return

    left, right = st.columns([1, 2])
    with left:
        if teacher.get("image_url"):
            st.image(teacher["image_url"], use_container_width=True)
        st.markdown(
            f'<div class="price">{float(teacher.get("hourly_rate") or 0):,.0f} {html.escape(t("teachers.per_hour", lang))}</div>',
            unsafe_allow_html=True,
        )
        st.button(
            t("teachers.book", lang),
            on_click=navigate,
            args=("booking", {"teacher_id": str(teacher["id"])}),
            type="primary",
            use_container_width=True,
        )

    with right:
        st.title(teacher.get("name") or "")
        st.markdown(f"**{teacher.get('specialization') or ''}**")
        if teacher.get("is_online"):
            st.markdown(f'<span class="badge online">{html.escape(t("filter.online", lang))}</span>', unsafe_allow_html=True)
        st.caption(
            f"⭐ {float(teacher.get('rating') or 0):.1f} · {int(teacher.get('reviews') or 0)} {t('teachers.reviews', lang)}"
            f" · {int(teacher.get('experience') or 0)} {t('teachers.years', lang)}"
        )
        if teacher.get("bio"):
            st.write(teacher["bio"])

        if teacher.get("education"):
            render_section_title(t("teachers.education", lang))
            st.write(teacher["education"])
        if teacher.get("certifications"):
            render_section_title(t("teachers.certifications", lang))
            st.markdown("\n".join(f"- {c}" for c in teacher["certifications"]))
        if teacher.get("languages"):
            render_section_title(t("teachers.languages", lang))
            st.write(", ".join(teacher["languages"]))

    render_data_notice(res.source, res.warning)
