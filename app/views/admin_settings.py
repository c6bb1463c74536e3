from __future__ import annotations

import html

import streamlit as st

from components.feedback import run_write
from components.i18n import t
from components.narrative import render_data_notice, render_section_title
from components.styles import hex_to_hsl
from config import DEFAULT_THEME_COLORS, AppConfig
from data.forms import PAYMENT_TYPES
from data.service import (
    add_admin,
    delete_record,
    get_admins,
    get_payment_methods,
    get_site_settings,
    get_theme_settings,
    records,
    save_payment_method,
    save_site_settings,
    save_theme_settings,
    toggle_payment_method,
    update_admin,
    upload_image,
)


# --- payment methods -----------------------------------------------------------------


def render_payment_methods(backend, lang: str) -> None:
    res = get_payment_methods(backend)

    for m in records(res.df):
        with st.container(border=True):
            c1, c2, c3, c4 = st.columns([3, 2, 1, 1])
            c1.markdown(f"**{html.escape(str(m['name']))}**<br/>`{html.escape(str(m['details']))}`", unsafe_allow_html=True)
            c2.write(m["type"])
            c3.write(f"{'🟢' if m['is_active'] else '⚪'} {t('admin.active', lang)}")
            if c4.button("⏯", key=f"pm_toggle_{m['id']}", help=t("admin.active", lang)):
                run_write(lambda m=m: toggle_payment_method(backend, m["id"], bool(m["is_active"])), lang)
            if st.button(t("admin.delete", lang), key=f"pm_delete_{m['id']}"):
                run_write(lambda m=m: delete_record(backend, "payment_methods", m["id"]), lang, success_key="admin.deleted")

    render_section_title(t("admin.add", lang))
    with st.form("payment_method_form", clear_on_submit=True):
        c1, c2 = st.columns(2)
        name = c1.text_input("Name")
        kind = c2.selectbox("Type", PAYMENT_TYPES)
        details = st.text_input("Details")
        is_active = st.checkbox(t("admin.active", lang), value=True)
        submitted = st.form_submit_button(t("admin.save", lang), type="primary")

    if submitted:
        form = {"name": name, "type": kind, "details": details, "is_active": is_active}
        run_write(lambda: save_payment_method(backend, form), lang)

    render_data_notice(res.source, res.warning)


# --- site settings -------------------------------------------------------------------


def render_site_settings(cfg: AppConfig, backend, lang: str) -> None:
    res = get_site_settings(backend)
    settings = res.record

    if settings.get("logo_url"):
        st.image(settings["logo_url"], width=120)

    with st.form("site_settings_form"):
        site_name = st.text_input(t("admin.site_name", lang), value=settings.get("site_name") or "")
        upload = st.file_uploader(t("admin.logo", lang), type=["png", "jpg", "jpeg", "svg", "webp"])
        submitted = st.form_submit_button(t("admin.save", lang), type="primary", disabled=not settings.get("id"))

    if submitted:

        def _save() -> None:
            logo_url = settings.get("logo_url")
            if upload is not None:
                logo_url = upload_image(backend, cfg.site_bucket, upload.name, upload.getvalue(), upload.type)
            save_site_settings(backend, settings["id"], site_name, logo_url)

        run_write(_save, lang)

    render_data_notice(res.source, res.warning)


# --- theme ---------------------------------------------------------------------------


def _swatch(label: str, hex_color: str) -> None:
    st.markdown(
        f"""
<div class="swatch" style="background:{html.escape(hex_color)}"></div>
<div class="subtle">{html.escape(label)} · {html.escape(hex_color)} · hsl({hex_to_hsl(hex_color)})</div>
        """,
        unsafe_allow_html=True,
    )


def render_theme(backend, lang: str) -> None:
    res = get_theme_settings(backend)
    theme = res.record
    settings_id = theme.get("id")

    labels = {
        "primary_color": t("admin.primary", lang),
        "secondary_color": t("admin.secondary", lang),
        "accent_color": t("admin.accent", lang),
    }

    picked = {}
    cols = st.columns(3)
    for col, (key, label) in zip(cols, labels.items()):
        with col:
            picked[key] = st.color_picker(label, value=theme.get(key) or DEFAULT_THEME_COLORS[key], key=f"theme_{key}")
            _swatch(label, picked[key])

    c1, c2, _ = st.columns([1, 1, 3])
    if c1.button(t("admin.save", lang), type="primary", use_container_width=True):
        run_write(lambda: save_theme_settings(backend, picked, settings_id), lang)
    if c2.button(t("admin.reset_theme", lang), use_container_width=True):

        def _reset() -> None:
            save_theme_settings(backend, DEFAULT_THEME_COLORS, settings_id)
            for key in labels:
                st.session_state.pop(f"theme_{key}", None)

        run_write(_reset, lang)

    render_data_notice(res.source, res.warning)


# --- admin accounts ------------------------------------------------------------------


def render_admins(backend, lang: str) -> None:
    res = get_admins(backend)
    st.dataframe(res.df[["email", "name", "created_at"]], use_container_width=True, hide_index=True)
    render_data_notice(res.source, res.warning)

    c1, c2 = st.columns(2)
    with c1:
        render_section_title(t("admin.add", lang))
        with st.form("admin_add_form", clear_on_submit=True):
            email = st.text_input(t("booking.email", lang))
            name = st.text_input(t("booking.name", lang))
            password = st.text_input(t("admin.password", lang), type="password")
            submitted = st.form_submit_button(t("admin.add", lang), type="primary")
        if submitted:
            run_write(lambda: add_admin(backend, {"email": email, "name": name, "password": password}), lang)

    rows = records(res.df)
    if not rows:
        return
    by_id = {str(r["id"]): r for r in rows}

    with c2:
        render_section_title(t("admin.edit", lang))
        admin_id = st.selectbox(t("booking.email", lang), list(by_id), format_func=lambda k: by_id[k]["email"], key="admin_pick")
        with st.form(f"admin_edit_form_{admin_id}"):
            new_name = st.text_input(t("booking.name", lang), value=by_id[admin_id].get("name") or "")
            new_password = st.text_input(t("admin.password", lang), type="password")
            saved = st.form_submit_button(t("admin.save", lang))
        if saved:
            run_write(lambda: update_admin(backend, admin_id, {"name": new_name, "password": new_password}), lang)
        if st.button(t("admin.delete", lang), key=f"admin_delete_{admin_id}"):
            run_write(lambda: delete_record(backend, "admins", admin_id), lang, success_key="admin.deleted")
