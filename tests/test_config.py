from food_api.config import Settings
from food_api.db import normalize_database_url


def test_postgres_scheme_is_rewritten():
    assert normalize_database_url("postgres://u:p@db:5432/foods") == "postgresql://u:p@db:5432/foods"
    settings = Settings(_env_file=None, DATABASE_URL="postgres://u:p@db/foods")
    assert settings.database_url == "postgresql://u:p@db/foods"


def test_other_urls_untouched():
    assert normalize_database_url("sqlite://") == "sqlite://"
    assert normalize_database_url("postgresql+psycopg2://h/db") == "postgresql+psycopg2://h/db"


def test_cors_origins_split_and_frontend_url_added():
    settings = Settings(_env_file=None, CORS_ORIGINS="https://a.com, https://b.com",
                        FRONTEND_URL="https://c.com")
    assert settings.cors_origins == ["https://a.com", "https://b.com", "https://c.com"]


def test_production_warnings():
    settings = Settings(_env_file=None, ENVIRONMENT="production", DATABASE_URL="sqlite:///x.db",
                        CORS_ORIGINS="*")
    warnings = settings.validate_settings()
    assert any("SQLite" in w for w in warnings)
    assert any("CORS" in w for w in warnings)


def test_development_has_no_warnings():
    settings = Settings(_env_file=None, ENVIRONMENT="development", DATABASE_URL="sqlite://")
    assert settings.validate_settings() == []


def test_bad_page_size_falls_back():
    settings = Settings(_env_file=None, DEFAULT_PAGE_SIZE=0)
    assert settings.page_size == 10
    assert settings.validate_settings()
