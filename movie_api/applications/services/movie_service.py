from typing import List, Optional

from movie_api.domain.models.movie import MUTABLE_FIELDS, Movie
from movie_api.domain.models.update_policy import UpdatePolicy
from movie_api.domain.ports.repositories.movie_repository import MovieRepository
from movie_api.domain.ports.services.logger import LoggerPort
from movie_api.domain.ports.services.movie_service_port import MovieServicePort


class MovieService(MovieServicePort):
    """Application service orchestrating the movie record store.

    Missing movies are reported through ``None`` return values, never raised.
    The store owns id assignment and is the only arbiter of ordering, so two
    concurrent updates to the same movie resolve as last write wins.
    """

    def __init__(
        self,
        movie_repository: MovieRepository,
        logger: LoggerPort,
        update_policy: UpdatePolicy = UpdatePolicy.FULL,
    ):
        self.movie_repository = movie_repository
        self.logger = logger
        self.update_policy = update_policy

    async def get_all(self) -> List[Movie]:
        return await self.movie_repository.find_all()

    async def get_by_id(self, movie_id: int) -> Optional[Movie]:
        return await self.movie_repository.find_by_id(movie_id)

    async def create(self, movie: Movie) -> Movie:
        new_movie = movie.model_copy(update={"id": None})
        created_movie = await self.movie_repository.save(new_movie)
        self.logger.info(f"Movie created: id={created_movie.id} title={created_movie.title!r}")
        return created_movie

    async def update(self, movie_id: int, patch: Movie) -> Optional[Movie]:
        existing_movie = await self.movie_repository.find_by_id(movie_id)
        if existing_movie is None:
            self.logger.warning(f"Movie with id {movie_id} not found for update")
            return None

        merged_movie = self._merge(existing_movie, patch)
        # save runs even when nothing changed
        saved_movie = await self.movie_repository.save(merged_movie)
        self.logger.info(f"Movie updated: id={saved_movie.id} policy={self.update_policy.value}")
        return saved_movie

    async def delete(self, movie_id: int) -> None:
        await self.movie_repository.delete_by_id(movie_id)
        self.logger.info(f"Movie deleted: id={movie_id}")

    def _merge(self, existing_movie: Movie, patch: Movie) -> Movie:
        if self.update_policy is UpdatePolicy.SPARSE:
            changes = {
                field: getattr(patch, field)
                for field in MUTABLE_FIELDS
                if field in patch.model_fields_set and getattr(patch, field) is not None
            }
        else:
            changes = {field: getattr(patch, field) for field in MUTABLE_FIELDS}

        changes["id"] = existing_movie.id
        return existing_movie.model_copy(update=changes)
