"""
Tests for environment-driven settings
"""

from projectdesk.config import Settings


def test_env_prefix(monkeypatch):
    monkeypatch.setenv("PROJECTDESK_DATABASE_URL", "sqlite+aiosqlite:///:memory:")
    monkeypatch.setenv("PROJECTDESK_API_PORT", "9001")
    monkeypatch.setenv("PROJECTDESK_CREATE_TABLES_ON_STARTUP", "true")

    config = Settings()

    assert config.database_url == "sqlite+aiosqlite:///:memory:"
    assert config.api_port == 9001
    assert config.create_tables_on_startup is True


def test_defaults_point_at_postgres(monkeypatch):
    monkeypatch.delenv("PROJECTDESK_DATABASE_URL", raising=False)

    config = Settings(_env_file=None)

    assert config.database_url.startswith("postgresql://")
    assert config.graphiql is True
