# movie_api/db/engine.py

import threading
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from movie_api.config import get_database_url

_engine: Optional[Engine] = None
_engine_lock = threading.Lock()


def get_engine() -> Engine:
    # One engine (and connection pool) per process; pool settings are SQLAlchemy defaults.
    global _engine
    if _engine is None:
        with _engine_lock:
            if _engine is None:
                _engine = create_engine(get_database_url())
    return _engine


def dispose_engine() -> None:
    """
    Close pooled connections and forget the shared engine.
    """
    global _engine
    with _engine_lock:
        if _engine is not None:
            _engine.dispose()
            _engine = None
