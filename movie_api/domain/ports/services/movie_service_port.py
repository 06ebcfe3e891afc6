from abc import ABC, abstractmethod
from typing import List, Optional

from movie_api.domain.models.movie import Movie


class MovieServicePort(ABC):
    """Port for the movie CRUD surface consumed by the HTTP layer"""

    @abstractmethod
    async def get_all(self) -> List[Movie]:
        pass

    @abstractmethod
    async def get_by_id(self, movie_id: int) -> Optional[Movie]:
        pass

    @abstractmethod
    async def create(self, movie: Movie) -> Movie:
        pass

    @abstractmethod
    async def update(self, movie_id: int, patch: Movie) -> Optional[Movie]:
        """Return the updated movie, or None when no movie has ``movie_id``"""
        pass

    @abstractmethod
    async def delete(self, movie_id: int) -> None:
        pass
