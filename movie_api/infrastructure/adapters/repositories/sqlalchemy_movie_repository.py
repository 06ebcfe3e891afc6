from typing import List, Optional

from sqlalchemy import select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from movie_api.domain.exceptions import RepositoryError
from movie_api.domain.models.movie import Movie as DomainMovie
from movie_api.domain.ports.repositories.movie_repository import MovieRepository
from movie_api.domain.ports.services.logger import LoggerPort
from movie_api.infrastructure.persistence.models import Movie as SQLMovie

# Moves the serial sequence past ids inserted explicitly so later inserts cannot collide
_SYNC_POSTGRES_ID_SEQUENCE = text(
    "SELECT setval(pg_get_serial_sequence('movies', 'id'), (SELECT MAX(id) FROM movies))"
)


class SQLAlchemyMovieRepository(MovieRepository):
    def __init__(self, session: AsyncSession, logger: LoggerPort):
        self.session = session
        self.logger = logger

    def _to_domain(self, sql_movie: SQLMovie) -> DomainMovie:
        return DomainMovie(
            id=sql_movie.id,
            title=sql_movie.title,
            director=sql_movie.director,
            release_year=sql_movie.release_year,
            genre=sql_movie.genre,
            imdb_rating=sql_movie.imdb_rating,
        )

    def _apply(self, sql_movie: SQLMovie, movie: DomainMovie) -> None:
        sql_movie.title = movie.title
        sql_movie.director = movie.director
        sql_movie.release_year = movie.release_year
        sql_movie.genre = movie.genre
        sql_movie.imdb_rating = movie.imdb_rating

    async def _fail(self, message: str, error: SQLAlchemyError) -> RepositoryError:
        await self.session.rollback()
        self.logger.error(f"{message}: {error}")
        return RepositoryError(message)

    async def find_all(self) -> List[DomainMovie]:
        try:
            sql_movies = await self.session.scalars(select(SQLMovie).order_by(SQLMovie.id))
            return [self._to_domain(sql_movie) for sql_movie in sql_movies.all()]
        except SQLAlchemyError as e:
            raise await self._fail("Failed to list movies", e) from e

    async def find_by_id(self, movie_id: int) -> Optional[DomainMovie]:
        try:
            sql_movie = await self.session.get(SQLMovie, movie_id)
        except SQLAlchemyError as e:
            raise await self._fail(f"Failed to load movie with id {movie_id}", e) from e
        return self._to_domain(sql_movie) if sql_movie else None

    async def save(self, movie: DomainMovie) -> DomainMovie:
        try:
            sql_movie = await self.session.get(SQLMovie, movie.id) if movie.id is not None else None
            inserted_with_id = sql_movie is None and movie.id is not None
            if sql_movie is None:
                sql_movie = SQLMovie()
                if movie.id is not None:
                    sql_movie.id = movie.id
                self.session.add(sql_movie)

            self._apply(sql_movie, movie)

            if inserted_with_id and self.session.get_bind().dialect.name == "postgresql":
                await self.session.flush()
                await self.session.execute(_SYNC_POSTGRES_ID_SEQUENCE)

            await self.session.commit()
            await self.session.refresh(sql_movie)
        except SQLAlchemyError as e:
            raise await self._fail(f"Failed to save movie with id {movie.id}", e) from e

        return self._to_domain(sql_movie)

    async def delete_by_id(self, movie_id: int) -> None:
        try:
            sql_movie = await self.session.get(SQLMovie, movie_id)
            if not sql_movie:
                return

            await self.session.delete(sql_movie)
            await self.session.commit()
        except SQLAlchemyError as e:
            raise await self._fail(f"Failed to delete movie with id {movie_id}", e) from e
