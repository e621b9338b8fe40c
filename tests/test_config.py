"""Settings — environment parsing and URL normalization."""

from hobbies_api.config import Settings


def test_postgres_url_gets_asyncpg_driver():
    settings = Settings(database_url="postgresql://u:p@host:5432/hobbies")
    assert settings.database_url == "postgresql+asyncpg://u:p@host:5432/hobbies"


def test_other_urls_untouched():
    url = "sqlite+aiosqlite:///local.db"
    assert Settings(database_url=url).database_url == url


def test_defaults(monkeypatch):
    monkeypatch.delenv("LOG_FORMAT", raising=False)
    settings = Settings(_env_file=None)
    assert settings.database_create_tables is True
    assert settings.log_format == "json"
    assert settings.database_pool_size == 20


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("DATABASE_CREATE_TABLES", "false")
    monkeypatch.setenv("CORS_ORIGINS", '["http://localhost:5173"]')
    settings = Settings(_env_file=None)
    assert settings.database_create_tables is False
    assert settings.cors_origins == ["http://localhost:5173"]
