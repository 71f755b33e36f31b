# scripts/init_db.py
"""
Create the movie_hero table and seed it on first start.

Safe to run on every container start: the schema is created only if
missing and the seed rows are written only into an empty table.

Usage:
    DATABASE_URL=postgresql://... python -m scripts.init_db
"""

import logging

from sqlalchemy import func, select
from sqlalchemy.engine import Engine

from movie_api.config import configure_logging, get_log_level
from movie_api.db.engine import get_engine
from movie_api.db.schema import metadata, movie_hero

logger = logging.getLogger(__name__)

SEED_ROWS = [
    ("Inception", "Cobb"),
    ("Batman", "Bruce Wayne"),
    ("Iron Man", "Tony Stark"),
    ("Spider-Man", "Peter Parker"),
    ("Wonder Woman", "Diana Prince"),
    ("The Matrix", "Neo"),
]


def init_schema(engine: Engine) -> None:
    metadata.create_all(engine)


def seed(engine: Engine, rows=SEED_ROWS) -> int:
    """
    Insert rows into movie_hero unless it already holds data.

    Returns the number of rows inserted.
    """
    with engine.begin() as conn:
        existing = conn.execute(
            select(func.count()).select_from(movie_hero)
        ).scalar_one()

        if existing:
            logger.info("movie_hero already has %s rows, skipping seed", existing)
            return 0

        rows = list(rows)
        if not rows:
            return 0

        conn.execute(
            movie_hero.insert(),
            [{"movie": movie, "hero": hero} for movie, hero in rows],
        )

    return len(rows)


def main():
    configure_logging(get_log_level())

    engine = get_engine()
    init_schema(engine)
    inserted = seed(engine)

    logger.info("DB schema ready, %s seed rows inserted.", inserted)


if __name__ == "__main__":
    main()
