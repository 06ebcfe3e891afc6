from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from movie_api.domain.models.movie import Movie


class MovieSchema(BaseModel):
    """Request body for create and update; ``id`` is accepted but ignored"""

    model_config = ConfigDict(populate_by_name=True)

    id: Optional[int] = None
    title: Optional[str] = None
    director: Optional[str] = None
    release_year: Optional[int] = Field(default=None, alias="releaseYear")
    genre: Optional[str] = None
    imdb_rating: Optional[float] = Field(default=None, alias="imdbRating")

    def to_domain(self) -> Movie:
        # exclude_unset keeps track of which fields the caller actually sent
        return Movie(**self.model_dump(exclude_unset=True))


class MoviePublic(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    title: Optional[str] = None
    director: Optional[str] = None
    release_year: Optional[int] = Field(default=None, alias="releaseYear")
    genre: Optional[str] = None
    imdb_rating: Optional[float] = Field(default=None, alias="imdbRating")
