# movie_api/models/movies.py

from typing import Any, Dict, List, Optional

from pydantic import BaseModel


class MovieHeroOut(BaseModel):
    movie: Optional[str] = None
    hero: Optional[str] = None


class MovieHeroResponse(BaseModel):
    data: List[MovieHeroOut]


class ErrorResponse(BaseModel):
    error: Dict[str, Any]
