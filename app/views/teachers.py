from __future__ import annotations

import streamlit as st

from components.cards import render_card_grid, teacher_card
from components.i18n import t
from components.narrative import render_data_notice, render_hero
from config import AppConfig
from data.refine import ALL, ONLINE_FILTERS, TEACHER_SORTS, refine_teachers
from data.service import get_teachers


_DEFAULTS = {"teachers_q": "", "teachers_status": ALL, "teachers_sort": "rating"}


def _reset_filters() -> None:
    for k, v in _DEFAULTS.items():
        st.session_state[k] = v


def render(cfg: AppConfig, backend, lang: str) -> None:
    render_hero(t("teachers.title", lang), t("teachers.subtitle", lang))

    res = get_teachers(backend)

    for k, v in _DEFAULTS.items():
        st.session_state.setdefault(k, v)

    c1, c2, c3 = st.columns([3, 1, 1])
    query = c1.text_input(t("list.search", lang), placeholder=t("list.search_teachers", lang), key="teachers_q")
    status = c2.selectbox(
        t("list.filter", lang),
        [ALL, *ONLINE_FILTERS],
        format_func=lambda k: t(f"filter.{k}", lang),
        key="teachers_status",
    )
    sort_key = c3.selectbox(
        t("list.sort", lang),
        list(TEACHER_SORTS),
        format_func=lambda k: t(f"sort.{k}", lang),
        key="teachers_sort",
    )

    shown = refine_teachers(res.df, query=query, status=status, sort_key=sort_key)
    st.caption(f"{t('list.found', lang)}: **{len(shown)}**")

    if shown.empty:
        st.info(f"{t('list.none', lang)}. {t('list.none_hint', lang)}")
        st.button(t("list.reset", lang), on_click=_reset_filters)
    else:
        render_card_grid(shown, teacher_card, lang, key_prefix="list_teacher")

    render_data_notice(res.source, res.warning)
