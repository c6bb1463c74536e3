from __future__ import annotations

import streamlit as st

from components.i18n import t
from components.narrative import render_hero, render_section_title, render_value_cards
from components.sidebar import navigate
from config import AppConfig


def render(cfg: AppConfig, backend, lang: str) -> None:
    render_hero(t("about.title", lang), t("about.body", lang))

    render_section_title(t("about.mission", lang))
    st.write(t("about.mission_body", lang))

    render_value_cards(
        [
            (t("home.value1_title", lang), t("home.value1_body", lang)),
            (t("home.value2_title", lang), t("home.value2_body", lang)),
            (t("home.value3_title", lang), t("home.value3_body", lang)),
        ]
    )

    st.divider()
    st.button(t("nav.contact", lang), on_click=navigate, args=("contact",))
