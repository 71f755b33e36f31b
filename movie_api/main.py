# movie_api/main.py

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from movie_api.api.movies import QUERY_FAILURE_STATUS, router as movies_router
from movie_api.config import configure_logging, get_settings
from movie_api.db.engine import dispose_engine
from movie_api.errors import QueryFailure

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    # release pooled connections on shutdown
    dispose_engine()
    logger.info("Database engine disposed")


app = FastAPI(
    title="Movie Hero API",
    version="0.1.0",
    lifespan=lifespan,
)


@app.exception_handler(QueryFailure)
async def query_failure_handler(request: Request, exc: QueryFailure) -> JSONResponse:
    return JSONResponse(
        status_code=QUERY_FAILURE_STATUS,
        content={"error": exc.to_dict()},
    )


@app.get("/health")
def health_check():
    return {"status": "ok"}

app.include_router(movies_router)


def serve() -> None:
    """
    Run the API with uvicorn on BACKEND_PORT.
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    logger.info("Backend rest api listening on port %s", settings.backend_port)
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    serve()
