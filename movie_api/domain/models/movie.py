from typing import Optional

from pydantic import BaseModel


class Movie(BaseModel):
    title: Optional[str] = None
    director: Optional[str] = None
    release_year: Optional[int] = None
    genre: Optional[str] = None
    imdb_rating: Optional[float] = None
    id: Optional[int] = None


MUTABLE_FIELDS = ("title", "director", "release_year", "genre", "imdb_rating")
