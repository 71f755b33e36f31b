# movie_api/db/schema.py

from sqlalchemy import MetaData, Table, Column, Integer, Text

metadata = MetaData()

movie_hero = Table(
    "movie_hero",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("movie", Text),
    Column("hero", Text),
)
