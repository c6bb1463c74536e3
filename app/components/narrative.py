from __future__ import annotations

import html

import streamlit as st


def render_hero(title: str, narrative: str | None = None) -> None:
    st.markdown(
        f"""
<div class="hero">
  <div class="hero-title">{html.escape(title)}</div>
  {f'<p class="hero-narrative">{html.escape(narrative)}</p>' if narrative else ''}
</div>
        """,
        unsafe_allow_html=True,
    )


def render_section_title(title: str) -> None:
    st.markdown(f'<div class="section-title">{html.escape(title)}</div>', unsafe_allow_html=True)


def render_value_cards(cards: list[tuple[str, str]]) -> None:
    """One column per (title, body) pair."""
    cols = st.columns(len(cards))
    for col, (title, body) in zip(cols, cards):
        with col:
            st.markdown(
                f"""
<div class="value-card">
  <div class="value-card-title">{html.escape(title)}</div>
  <div class="value-card-body">{html.escape(body)}</div>
</div>
                """,
                unsafe_allow_html=True,
            )


def render_data_notice(source: str, warning: str | None) -> None:
    """Non-fatal notice when a load fell back to sample / empty data."""
    if warning:
        st.toast(warning, icon="⚠️")
        st.warning(warning)
    st.caption(f"Data source: **{source}**")
