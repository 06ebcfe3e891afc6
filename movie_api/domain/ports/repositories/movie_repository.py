from abc import ABC, abstractmethod
from typing import List, Optional

from movie_api.domain.models.movie import Movie


class MovieRepository(ABC):
    @abstractmethod
    async def find_all(self) -> List[Movie]:
        pass

    @abstractmethod
    async def find_by_id(self, movie_id: int) -> Optional[Movie]:
        pass

    @abstractmethod
    async def save(self, movie: Movie) -> Movie:
        """Insert when ``movie.id`` is None, otherwise overwrite the record with that id"""
        pass

    @abstractmethod
    async def delete_by_id(self, movie_id: int) -> None:
        pass
