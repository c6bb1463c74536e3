from __future__ import annotations

import streamlit as st

from components.i18n import t
from components.narrative import render_hero
from config import AppConfig
from data.forms import ValidationError
from data.service import submit_contact


def render(cfg: AppConfig, backend, lang: str) -> None:
    render_hero(t("contact.title", lang), t("contact.subtitle", lang))

    with st.form("contact_form", clear_on_submit=True):
        c1, c2 = st.columns(2)
        name = c1.text_input(t("booking.name", lang))
        email = c2.text_input(t("booking.email", lang))
        subject = st.text_input(t("contact.subject", lang))
        message = st.text_area(t("contact.message", lang), height=160)
        submitted = st.form_submit_button(t("contact.send", lang), type="primary")

    if submitted:
        try:
            submit_contact({"name": name, "email": email, "subject": subject, "message": message})
        except ValidationError as e:
            st.error(str(e))
        else:
            st.success(t("contact.sent", lang))
