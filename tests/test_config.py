import pytest

from movie_api.config import (
    DEFAULT_BACKEND_PORT,
    DEFAULT_DATABASE_URL,
    ConfigError,
    get_settings,
    normalize_database_url,
    parse_port,
)


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("DATABASE_URL", "BACKEND_PORT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    settings = get_settings()

    assert settings.database_url == DEFAULT_DATABASE_URL
    assert settings.backend_port == DEFAULT_BACKEND_PORT
    assert settings.log_level == "INFO"


def test_reads_environment(clean_env):
    clean_env.setenv("DATABASE_URL", "postgresql://user:pw@db:5432/movies")
    clean_env.setenv("BACKEND_PORT", "3001")
    clean_env.setenv("LOG_LEVEL", "debug")

    settings = get_settings()

    assert settings.database_url == "postgresql://user:pw@db:5432/movies"
    assert settings.backend_port == 3001
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize(
    "url, expected",
    [
        ("postgres://u:p@db:5432/movies", "postgresql://u:p@db:5432/movies"),
        ("postgresql://u:p@db/movies", "postgresql://u:p@db/movies"),
        ("sqlite:///db.sqlite", "sqlite:///db.sqlite"),
    ],
)
def test_normalize_database_url(url, expected):
    assert normalize_database_url(url) == expected


@pytest.mark.parametrize("value", ["abc", "0", "70000", ""])
def test_invalid_port(value):
    with pytest.raises(ConfigError):
        parse_port(value)


def test_invalid_port_from_environment(clean_env):
    clean_env.setenv("BACKEND_PORT", "http")

    with pytest.raises(ConfigError):
        get_settings()
