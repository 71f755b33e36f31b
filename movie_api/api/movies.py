# movie_api/api/movies.py

import logging

from fastapi import APIRouter
from sqlalchemy import select

from movie_api.db.engine import get_engine
from movie_api.db.schema import movie_hero
from movie_api.errors import QueryFailure
from movie_api.models.movies import (
    ErrorResponse,
    MovieHeroOut,
    MovieHeroResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["movies"])

# Status returned on query failure; existing clients expect 405.
QUERY_FAILURE_STATUS = 405


@router.get(
    "/data",
    response_model=MovieHeroResponse,
    responses={QUERY_FAILURE_STATUS: {"model": ErrorResponse}},
)
def list_movie_heroes() -> MovieHeroResponse:
    """
    Return every (movie, hero) pair in the store's natural order.
    """
    try:
        engine = get_engine()

        with engine.connect() as conn:
            stmt = select(movie_hero.c.movie, movie_hero.c.hero)
            rows = conn.execute(stmt).mappings().all()
    except Exception as e:
        logger.exception("movie_hero query failed")
        raise QueryFailure(e) from e

    return MovieHeroResponse(
        data=[MovieHeroOut(movie=row["movie"], hero=row["hero"]) for row in rows]
    )
