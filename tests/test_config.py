import pytest

import config
from config import get_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Start every test with no site env vars and no .env file."""
    for name in (
        "SUPABASE_URL",
        "SUPABASE_ANON_KEY",
        "USE_MOCK_DATA",
        "SITE_LANGUAGE",
        "LOG_LEVEL",
        "TEACHER_IMAGES_BUCKET",
        "COURSE_IMAGES_BUCKET",
        "SITE_ASSETS_BUCKET",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config, "load_dotenv", lambda **kwargs: False)


class TestGetConfig:
    """Test environment parsing."""

    def test_defaults_without_credentials(self):
        cfg = get_config()
        assert cfg.has_backend is False
        assert cfg.default_use_mock is True
        assert cfg.default_language == "ar"
        assert cfg.log_level == "INFO"
        assert cfg.teacher_bucket == "teacher-images"
        assert cfg.course_bucket == "course-images"
        assert cfg.site_bucket == "site-assets"

    def test_credentials_turn_off_demo_mode(self, monkeypatch):
        monkeypatch.setenv("SUPABASE_URL", "https://x.supabase.co")
        monkeypatch.setenv("SUPABASE_ANON_KEY", "key")
        cfg = get_config()
        assert cfg.has_backend is True
        assert cfg.default_use_mock is False

    def test_explicit_mock_flag(self, monkeypatch):
        monkeypatch.setenv("SUPABASE_URL", "https://x.supabase.co")
        monkeypatch.setenv("SUPABASE_ANON_KEY", "key")
        monkeypatch.setenv("USE_MOCK_DATA", "TRUE")
        assert get_config().default_use_mock is True

    def test_blank_values_are_unset(self, monkeypatch):
        monkeypatch.setenv("SUPABASE_URL", "   ")
        monkeypatch.setenv("SUPABASE_ANON_KEY", "key")
        assert get_config().has_backend is False

    def test_language(self, monkeypatch):
        monkeypatch.setenv("SITE_LANGUAGE", "EN")
        assert get_config().default_language == "en"

    def test_unknown_language_defaults_to_arabic(self, monkeypatch):
        monkeypatch.setenv("SITE_LANGUAGE", "de")
        assert get_config().default_language == "ar"

    def test_log_level_uppercased(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert get_config().log_level == "DEBUG"
