from __future__ import annotations

import streamlit as st

from components.cards import course_card, render_card_grid, teacher_card
from components.i18n import t
from components.narrative import render_data_notice, render_hero, render_section_title, render_value_cards
from components.sidebar import navigate
from config import AppConfig
from data.refine import refine_courses, refine_teachers
from data.service import get_courses, get_teachers


def render(cfg: AppConfig, backend, lang: str) -> None:
    render_hero(t("home.hero_title", lang), t("home.hero_body", lang))

    c1, c2, _ = st.columns([1, 1, 3])
    c1.button(t("nav.teachers", lang), on_click=navigate, args=("teachers",), type="primary", use_container_width=True)
    c2.button(t("nav.booking", lang), on_click=navigate, args=("booking",), use_container_width=True)

    render_section_title(t("home.why", lang))
    render_value_cards(
        [
            (t("home.value1_title", lang), t("home.value1_body", lang)),
            (t("home.value2_title", lang), t("home.value2_body", lang)),
            (t("home.value3_title", lang), t("home.value3_body", lang)),
        ]
    )

    # --- featured ---
    teachers = get_teachers(backend)
    render_section_title(t("home.featured_teachers", lang))
    top_teachers = refine_teachers(teachers.df, sort_key="rating").head(3)
    if top_teachers.empty:
        st.info(t("list.none", lang))
    else:
        render_card_grid(top_teachers, teacher_card, lang, key_prefix="home_teacher")

    courses = get_courses(backend)
    render_section_title(t("home.featured_courses", lang))
    top_courses = refine_courses(courses.df, sort_key="students").head(3)
    if top_courses.empty:
        st.info(t("list.none", lang))
    else:
        render_card_grid(top_courses, course_card, lang, key_prefix="home_course")

    render_data_notice(teachers.source, teachers.warning or courses.warning)
