from __future__ import annotations

import html
from dataclasses import dataclass
from typing import Mapping

import pandas as pd
import plotly.express as px
import streamlit as st

from config import DEFAULT_THEME_COLORS, THEME


@dataclass(frozen=True)
class Kpi:
    label: str
    value: str
    icon: str = ""


def render_kpi_row(kpis: list[Kpi]) -> None:
    for col, kpi in zip(st.columns(len(kpis)), kpis):
        col.markdown(
            f"""
<div class="metric-card">
  <div class="metric-label">{kpi.icon} {html.escape(kpi.label)}</div>
  <div class="metric-value">{html.escape(kpi.value)}</div>
</div>
            """,
            unsafe_allow_html=True,
        )


def brand_colorway(colors: Mapping[str, str]) -> list[str]:
    """Primary / secondary / accent from theme settings, then a neutral gray."""
    keys = ("primary_color", "secondary_color", "accent_color")
    return [colors.get(k) or DEFAULT_THEME_COLORS[k] for k in keys] + ["#6B7280"]


def bar_chart(df: pd.DataFrame, x: str, y: str, colors: Mapping[str, str], title: str = "") -> None:
    fig = px.bar(df, x=x, y=y, color=x, title=title, color_discrete_sequence=brand_colorway(colors))
    fig.update_layout(
        margin=dict(l=8, r=8, t=48, b=8),
        font=dict(family="Cairo, DM Sans, sans-serif", color=THEME["text_primary"]),
        paper_bgcolor=THEME["bg_card"],
        plot_bgcolor=THEME["bg_card"],
        showlegend=False,
        bargap=0.35,
    )
    fig.update_xaxes(title_text=None, linecolor=THEME["border_color"])
    fig.update_yaxes(title_text=None, gridcolor=THEME["grid"], rangemode="tozero")
    st.plotly_chart(fig, use_container_width=True)
