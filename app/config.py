from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


#
# Shared design tokens for the page chrome.
# Brand colors (primary / secondary / accent) are not here: they are editable
# from the admin Theme tab and stored in `theme_settings`.
#
THEME = {
    # Backgrounds
    "bg_primary": "#F8FAFC",     # page background
    "bg_secondary": "#FFFFFF",   # sidebar / top surfaces
    "bg_card": "#FFFFFF",        # card surface
    # Text + borders
    "text_primary": "#0F172A",
    "text_secondary": "rgba(15, 23, 42, 0.68)",
    "border_color": "#E2E8F0",
    "grid": "rgba(15, 23, 42, 0.08)",
    "shadow": "0 4px 14px rgba(15,23,42,0.06)",
    "radius_px": 14,
}

# Fallback brand colors when no `theme_settings` row exists yet.
DEFAULT_THEME_COLORS = {
    "primary_color": "#3B82F6",
    "secondary_color": "#10B981",
    "accent_color": "#F59E0B",
}

DEFAULT_SITE_NAME = "English Learning Platform"

LANGUAGES = ("ar", "en")


@dataclass(frozen=True)
class AppConfig:
    # Required for live mode (Supabase)
    supabase_url: Optional[str]
    supabase_key: Optional[str]

    # Storage buckets
    teacher_bucket: str
    course_bucket: str
    site_bucket: str

    # Defaults
    default_use_mock: bool
    default_language: str
    log_level: str

    @property
    def has_backend(self) -> bool:
        return bool(self.supabase_url and self.supabase_key)


def _getenv(name: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(name, default)
    if v is None:
        return None
    v = v.strip()
    return v if v else None


def get_config() -> AppConfig:
    """
    Centralized config: this is the ONLY place env vars are read.
    - Loads `.env` if present (local dev)
    - Demo mode is the default until Supabase credentials are provided
    """
    load_dotenv(override=False)

    url = _getenv("SUPABASE_URL")
    key = _getenv("SUPABASE_ANON_KEY")
    use_mock_default = "false" if (url and key) else "true"

    language = (_getenv("SITE_LANGUAGE", "ar") or "ar").lower()
    if language not in LANGUAGES:
        language = "ar"

    return AppConfig(
        supabase_url=url,
        supabase_key=key,
        teacher_bucket=_getenv("TEACHER_IMAGES_BUCKET", "teacher-images") or "teacher-images",
        course_bucket=_getenv("COURSE_IMAGES_BUCKET", "course-images") or "course-images",
        site_bucket=_getenv("SITE_ASSETS_BUCKET", "site-assets") or "site-assets",
        default_use_mock=(_getenv("USE_MOCK_DATA", use_mock_default) or use_mock_default).lower() == "true",
        default_language=language,
        log_level=(_getenv("LOG_LEVEL", "INFO") or "INFO").upper(),
    )


def configure_logging(cfg: AppConfig) -> None:
    logging.basicConfig(
        level=getattr(logging, cfg.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s  %(message)s",
    )
