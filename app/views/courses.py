from __future__ import annotations

import streamlit as st

from components.cards import course_card, render_card_grid
from components.i18n import t
from components.narrative import render_data_notice, render_hero
from config import AppConfig
from data.forms import COURSE_CATEGORIES, COURSE_LEVELS
from data.refine import ALL, COURSE_SORTS, refine_courses
from data.service import get_courses


_DEFAULTS = {"courses_q": "", "courses_level": ALL, "courses_category": ALL, "courses_sort": "rating"}


def _reset_filters() -> None:
    for k, v in _DEFAULTS.items():
        st.session_state[k] = v


def render(cfg: AppConfig, backend, lang: str) -> None:
    render_hero(t("courses.title", lang), t("courses.subtitle", lang))

    res = get_courses(backend)

    for k, v in _DEFAULTS.items():
        st.session_state.setdefault(k, v)

    all_label = t("filter.all", lang)
    c1, c2, c3, c4 = st.columns([3, 1, 1, 1])
    query = c1.text_input(t("list.search", lang), placeholder=t("list.search_courses", lang), key="courses_q")
    level = c2.selectbox(
        t("list.level", lang),
        [ALL, *COURSE_LEVELS],
        format_func=lambda k: all_label if k == ALL else k,
        key="courses_level",
    )
    category = c3.selectbox(
        t("list.category", lang),
        [ALL, *COURSE_CATEGORIES],
        format_func=lambda k: all_label if k == ALL else k,
        key="courses_category",
    )
    sort_key = c4.selectbox(
        t("list.sort", lang),
        list(COURSE_SORTS),
        format_func=lambda k: t(f"sort.{k}", lang),
        key="courses_sort",
    )

    shown = refine_courses(res.df, query=query, level=level, category=category, sort_key=sort_key)
    st.caption(f"{t('list.found', lang)}: **{len(shown)}**")

    if shown.empty:
        st.info(f"{t('list.none', lang)}. {t('list.none_hint', lang)}")
        st.button(t("list.reset", lang), on_click=_reset_filters)
    else:
        render_card_grid(shown, course_card, lang, key_prefix="list_course")

    render_data_notice(res.source, res.warning)
