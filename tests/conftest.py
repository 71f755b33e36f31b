"""
Shared pytest fixtures: a throwaway SQLite database per test, wired in
through DATABASE_URL.
"""

import pytest
from fastapi.testclient import TestClient

from movie_api.db.engine import dispose_engine, get_engine
from movie_api.db.schema import metadata, movie_hero
from movie_api.main import app


@pytest.fixture
def database_url(tmp_path, monkeypatch):
    url = f"sqlite:///{tmp_path / 'movies.sqlite'}"
    monkeypatch.setenv("DATABASE_URL", url)
    dispose_engine()
    yield url
    dispose_engine()


@pytest.fixture
def engine(database_url):
    engine = get_engine()
    metadata.create_all(engine)
    return engine


@pytest.fixture
def insert_rows(engine):
    def _insert(rows):
        with engine.begin() as conn:
            conn.execute(
                movie_hero.insert(),
                [{"movie": movie, "hero": hero} for movie, hero in rows],
            )
    return _insert


@pytest.fixture
def client(database_url):
    with TestClient(app) as c:
        yield c
