# movie_api/config.py
"""
Runtime configuration, read from the environment.

Variables (a .env file in the working directory is honoured):
    DATABASE_URL   connection string, defaults to a local SQLite file
    BACKEND_PORT   port the API listens on
    LOG_LEVEL      root log level
"""

import logging
import os

from dotenv import load_dotenv

load_dotenv()

DEFAULT_DATABASE_URL = "sqlite:///db.sqlite"  # file in project root
DEFAULT_BACKEND_PORT = 8000

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class ConfigError(ValueError):
    pass


def normalize_database_url(url: str) -> str:
    # SQLAlchemy only accepts the long form of the postgres scheme
    if url.startswith("postgres://"):
        return "postgresql://" + url[len("postgres://"):]
    return url


def parse_port(value: str) -> int:
    try:
        port = int(value)
    except (TypeError, ValueError):
        raise ConfigError(f"BACKEND_PORT must be an integer, got {value!r}")

    if not 0 < port < 65536:
        raise ConfigError(f"BACKEND_PORT out of range: {port}")
    return port


def get_database_url() -> str:
    return normalize_database_url(os.getenv("DATABASE_URL") or DEFAULT_DATABASE_URL)


def get_log_level() -> str:
    return (os.getenv("LOG_LEVEL") or "INFO").upper()


class Settings:
    def __init__(self):
        self.database_url = get_database_url()
        self.backend_port = parse_port(
            os.getenv("BACKEND_PORT") or str(DEFAULT_BACKEND_PORT)
        )
        self.log_level = get_log_level()


def get_settings() -> Settings:
    return Settings()


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
