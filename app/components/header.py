from __future__ import annotations

import html
from typing import Optional

import streamlit as st


def render_header(site_name: str, logo_url: Optional[str], right_pill: str) -> None:
    name = html.escape(site_name or "")
    if logo_url:
        logo_html = f'<img src="{html.escape(logo_url)}" style="height:40px; width:auto; border-radius:10px;" />'
    else:
        logo_html = f'<div class="site-logo">{name[:1] or "E"}</div>'

    st.markdown(
        f"""
<div class="site-header">
  <div class="site-header-left">
    {logo_html}
    <div class="site-title">{name}</div>
  </div>
  <div class="pill"><span class="dot"></span>{html.escape(right_pill)}</div>
</div>
        """,
        unsafe_allow_html=True,
    )
