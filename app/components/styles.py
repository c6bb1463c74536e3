from __future__ import annotations

import math
import re
from typing import Mapping

import streamlit as st

from config import DEFAULT_THEME_COLORS, THEME


APP_TITLE = "englishgang.pro"

_HEX_RE = re.compile(r"#([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})")


def _round(x: float) -> int:
    # half-up, so 0.5 boundaries match what browsers do
    return int(math.floor(x + 0.5))


def hex_to_hsl(hex_color: str) -> str:
    """
    "#RRGGBB" -> "H S% L%" for use inside `hsl(var(--x))`.
    Hue in [0, 360), saturation / lightness in [0, 100], all rounded.
    Achromatic colors come out with hue 0 and saturation 0.
    """
    m = _HEX_RE.fullmatch(hex_color)
    if not m:
        raise ValueError(f"Expected a #RRGGBB color, got {hex_color!r}")
    r, g, b = (int(part, 16) / 255 for part in m.groups())
    hi, lo = max(r, g, b), min(r, g, b)
    l = (hi + lo) / 2
    if hi == lo:
        h = s = 0.0
    else:
        d = hi - lo
        s = d / (2 - hi - lo) if l > 0.5 else d / (hi + lo)
        # this operation order puts exact .5 hues on the boundary, not below it
        if hi == r:
            h = (g - b) / d + (6 if g < b else 0)
        elif hi == g:
            h = (b - r) / d + 2
        else:
            h = (r - g) / d + 4
        h /= 6
    return f"{_round(h * 360) % 360} {_round(s * 100)}% {_round(l * 100)}%"


def theme_css_variables(colors: Mapping[str, str]) -> dict[str, str]:
    """Brand colors -> CSS custom properties. Missing or invalid colors use the defaults."""
    out = {}
    for var, key in (("--primary", "primary_color"), ("--secondary", "secondary_color"), ("--accent", "accent_color")):
        value = colors.get(key) or DEFAULT_THEME_COLORS[key]
        try:
            out[var] = hex_to_hsl(value)
        except ValueError:
            value = DEFAULT_THEME_COLORS[key]
            out[var] = hex_to_hsl(value)
        out[f"{var}-hex"] = value
    return out


def configure_page() -> None:
    st.set_page_config(
        page_title=APP_TITLE,
        page_icon="📘",
        layout="wide",
        initial_sidebar_state="expanded",
    )


def apply_theme(colors: Mapping[str, str], rtl: bool = False) -> None:
    # Design tokens (config.py) + brand colors (theme_settings) -> CSS variables
    css = """
<style>
@import url('https://fonts.googleapis.com/css2?family=Cairo:wght@400;600;700&family=DM+Sans:wght@400;500;700&display=swap');

:root{
__BRAND_VARS__
  --page: __BG_PRIMARY__;
  --surface: __BG_SECONDARY__;
  --card: __CARD_BG__;
  --line: __CARD_BORDER__;
  --ink: __TEXT_PRIMARY__;
  --ink-muted: __TEXT_SECONDARY__;
  --lift: __SHADOW__;
  --round: __RADIUS_PX__px;
}

#MainMenu, footer, [data-testid="stToolbar"]{ visibility: hidden; }

[data-testid="stAppViewContainer"]{
  background: var(--page);
  color: var(--ink);
  font-family: "Cairo", "DM Sans", sans-serif;
}
[data-testid="stAppViewContainer"] .block-container{
  direction: __DIRECTION__;
  text-align: start;
  padding-block: 1rem 3rem;
}

/* Sidebar navigation */
[data-testid="stSidebar"]{
  background: var(--surface);
  border-inline-end: 1px solid var(--line);
}
[data-testid="stSidebar"] div[role="radiogroup"] > label{
  border-radius: 10px;
  padding: 6px 10px;
  margin-block-end: 4px;
}
[data-testid="stSidebar"] div[role="radiogroup"] > label:has(input:checked){
  background: hsl(var(--primary) / 0.1);
  color: hsl(var(--primary));
  font-weight: 700;
}

/* Header bar */
.site-header{
  display: flex;
  flex-direction: row;
  justify-content: space-between;
  align-items: center;
  padding: 12px 16px;
  margin-block-end: 16px;
  background: var(--surface);
  border-block-end: 3px solid hsl(var(--primary));
  border-radius: var(--round);
  box-shadow: var(--lift);
}
.site-header-left{ display: flex; align-items: center; gap: 12px; }
.site-logo{
  width: 42px; height: 42px; border-radius: 50%;
  display: grid; place-items: center;
  background: hsl(var(--primary)); color: #fff; font-size: 20px; font-weight: 700;
}
.site-title{ font-size: 22px; font-weight: 700; color: hsl(var(--primary)); }
.pill{
  font-size: 13px; font-weight: 600; color: var(--ink-muted);
  border: 1px solid var(--line); border-radius: 999px; padding: 4px 12px;
}
.pill .dot{
  display: inline-block; width: 8px; height: 8px; margin-inline-end: 6px;
  border-radius: 50%; background: hsl(var(--secondary));
}

/* Hero band */
.hero{
  padding: 48px 28px;
  margin-block-end: 20px;
  text-align: center;
  color: #fff;
  border-radius: calc(var(--round) * 1.5);
  background: linear-gradient(120deg, hsl(var(--primary)) 0%, hsl(var(--primary) / 0.85) 55%, hsl(var(--secondary)) 100%);
}
.hero-title{ font-size: clamp(28px, 4vw, 44px); font-weight: 700; line-height: 1.25; }
.hero-narrative{ font-size: 18px; opacity: 0.92; max-width: 720px; margin: 10px auto 0; }
.section-title{
  font-size: 24px; font-weight: 700; margin-block: 28px 12px;
  padding-inline-start: 10px; border-inline-start: 4px solid hsl(var(--accent));
}

/* Value / teacher / course cards */
.value-card{
  height: 100%;
  padding: 20px;
  background: var(--card);
  border-radius: var(--round);
  border-block-start: 4px solid hsl(var(--secondary));
  box-shadow: var(--lift);
}
.value-card-title, .item-card-title{ font-size: 18px; font-weight: 700; margin-block-end: 4px; }
.value-card-body, .item-card-body{ font-size: 15px; line-height: 1.7; color: var(--ink-muted); }
.item-card-meta{ font-size: 13px; color: var(--ink-muted); margin-block-start: 6px; }
.badge{
  display: inline-block; padding: 1px 10px; margin-inline-end: 4px;
  font-size: 12px; font-weight: 700; border-radius: 999px;
  color: hsl(var(--primary)); background: hsl(var(--primary) / 0.1);
}
.badge.online{ color: hsl(var(--secondary)); background: hsl(var(--secondary) / 0.15); }
.badge.accent{ color: hsl(var(--accent)); background: hsl(var(--accent) / 0.15); }
.price{ margin-block: 8px; font-size: 22px; font-weight: 700; color: hsl(var(--primary)); }

/* Admin KPI tiles */
.metric-card{
  padding: 14px 16px;
  background: var(--card);
  border: 1px solid var(--line);
  border-inline-start: 4px solid hsl(var(--primary));
  border-radius: var(--round);
}
.metric-label{ font-size: 13px; color: var(--ink-muted); }
.metric-value{ font-size: 28px; font-weight: 700; color: var(--ink); }

/* Primary buttons follow the brand color */
button[kind="primary"], button[kind="primaryFormSubmit"]{
  background: hsl(var(--primary));
  border-color: hsl(var(--primary));
}
button[kind="primary"]:hover, button[kind="primaryFormSubmit"]:hover{
  background: hsl(var(--primary) / 0.88);
  border-color: hsl(var(--primary) / 0.88);
}
button[data-baseweb="tab"][aria-selected="true"]{ color: hsl(var(--primary)); }
div[data-baseweb="tab-highlight"]{ background: hsl(var(--primary)); }

.subtle{ font-size: 13px; color: var(--ink-muted); margin-block-start: 4px; }
.swatch{ height: 44px; border-radius: 10px; border: 1px solid var(--line); }
</style>
"""

    brand_vars = "\n".join(f"  {k}: {v};" for k, v in theme_css_variables(colors).items())
    tokens = {
        "__BRAND_VARS__": brand_vars,
        "__BG_PRIMARY__": THEME["bg_primary"],
        "__BG_SECONDARY__": THEME["bg_secondary"],
        "__CARD_BG__": THEME["bg_card"],
        "__CARD_BORDER__": THEME["border_color"],
        "__TEXT_PRIMARY__": THEME["text_primary"],
        "__TEXT_SECONDARY__": THEME["text_secondary"],
        "__SHADOW__": THEME["shadow"],
        "__RADIUS_PX__": str(THEME["radius_px"]),
        "__DIRECTION__": "rtl" if rtl else "ltr",
    }
    for k, v in tokens.items():
        css = css.replace(k, str(v))

    st.markdown(css, unsafe_allow_html=True)
