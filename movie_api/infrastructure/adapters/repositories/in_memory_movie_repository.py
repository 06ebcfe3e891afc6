from itertools import count
from typing import Dict, List, Optional

from movie_api.domain.models.movie import Movie
from movie_api.domain.ports.repositories.movie_repository import MovieRepository


class InMemoryMovieRepository(MovieRepository):
    """Dict-backed movie store.

    Ids come from a counter that only moves forward, so an id is never handed
    out twice even after its movie is deleted. Stored and returned movies are
    copies, callers cannot mutate what the store holds.
    """

    def __init__(self):
        self._movies: Dict[int, Movie] = {}
        self._ids = count(1)

    async def find_all(self) -> List[Movie]:
        return [movie.model_copy() for _, movie in sorted(self._movies.items())]

    async def find_by_id(self, movie_id: int) -> Optional[Movie]:
        movie = self._movies.get(movie_id)
        return movie.model_copy() if movie else None

    async def save(self, movie: Movie) -> Movie:
        if movie.id is None:
            movie = movie.model_copy(update={"id": self._next_id()})
        else:
            movie = movie.model_copy()
        self._movies[movie.id] = movie
        return movie.model_copy()

    async def delete_by_id(self, movie_id: int) -> None:
        self._movies.pop(movie_id, None)

    def _next_id(self) -> int:
        movie_id = next(self._ids)
        while movie_id in self._movies:
            movie_id = next(self._ids)
        return movie_id
