# movie_api/errors.py
"""
Error raised when the movie query cannot be answered, and its JSON form.

The API surfaces the raw driver error to the caller: nothing is
sanitized or classified.
"""

from typing import Any, Dict

from sqlalchemy.exc import DBAPIError


class QueryFailure(Exception):
    def __init__(self, original: BaseException):
        super().__init__(str(original))
        self.original = original

    def to_dict(self) -> Dict[str, Any]:
        err = self.original
        # unwrap the DBAPI exception SQLAlchemy wrapped around the driver's own
        if isinstance(err, DBAPIError) and err.orig is not None:
            err = err.orig

        detail: Dict[str, Any] = {
            "name": type(err).__name__,
            "message": str(err).strip() or repr(err),
        }

        code = getattr(err, "pgcode", None) or getattr(self.original, "code", None)
        if code:
            detail["code"] = code
        return detail
