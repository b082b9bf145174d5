"""Tests for settings defaults and environment overrides."""

from docuprint.core.config import Settings


def _settings(monkeypatch, **env) -> Settings:
    monkeypatch.delenv("SEED_DEMO_DATA", raising=False)
    for key, value in env.items():
        monkeypatch.setenv(key, value)
    return Settings(_env_file=None)


def test_demo_admins_seeded_by_default(monkeypatch):
    assert _settings(monkeypatch).seed_demo_data is True


def test_seeding_can_be_disabled(monkeypatch):
    assert _settings(monkeypatch, SEED_DEMO_DATA="false").seed_demo_data is False


def test_default_database_is_in_memory(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)

    assert _settings(monkeypatch).database_url == "sqlite+aiosqlite:///:memory:"


def test_upload_limit_in_bytes(monkeypatch):
    settings = _settings(monkeypatch, MAX_UPLOAD_SIZE_MB="2")

    assert settings.max_upload_size_bytes == 2 * 1024 * 1024
