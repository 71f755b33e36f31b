# movie_api/__init__.py
"""
Movie Hero API.

The ASGI app lives in movie_api.main; run it with:
    uvicorn movie_api.main:app --reload
"""
