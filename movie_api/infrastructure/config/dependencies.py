from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from movie_api.applications.services.movie_service import MovieService
from movie_api.domain.exceptions import ConfigurationError
from movie_api.domain.ports.repositories.movie_repository import MovieRepository
from movie_api.domain.ports.services.logger import LoggerPort
from movie_api.domain.ports.services.movie_service_port import MovieServicePort
from movie_api.infrastructure.adapters.repositories.in_memory_movie_repository import InMemoryMovieRepository
from movie_api.infrastructure.adapters.repositories.sqlalchemy_movie_repository import (
    SQLAlchemyMovieRepository,
)
from movie_api.infrastructure.config.settings import Settings
from movie_api.infrastructure.logging.std_logger_adapter import StdLoggerAdapter
from movie_api.infrastructure.persistence.database import get_session


def get_settings() -> Settings:
    return Settings()


def get_logger(settings: Annotated[Settings, Depends(get_settings)]) -> LoggerPort:
    return StdLoggerAdapter("movie_api.movies", store=settings.MOVIE_STORE)


@lru_cache
def get_in_memory_movie_repository() -> InMemoryMovieRepository:
    return InMemoryMovieRepository()


def get_movie_repository(
    session: Annotated[AsyncSession, Depends(get_session)],
    settings: Annotated[Settings, Depends(get_settings)],
    logger: Annotated[LoggerPort, Depends(get_logger)],
) -> MovieRepository:
    if settings.MOVIE_STORE == "sqlalchemy":
        return SQLAlchemyMovieRepository(session, logger)
    if settings.MOVIE_STORE == "memory":
        return get_in_memory_movie_repository()
    raise ConfigurationError(f"Unknown MOVIE_STORE: {settings.MOVIE_STORE!r}")


def get_movie_service(
    movie_repository: Annotated[MovieRepository, Depends(get_movie_repository)],
    settings: Annotated[Settings, Depends(get_settings)],
    logger: Annotated[LoggerPort, Depends(get_logger)],
) -> MovieServicePort:
    return MovieService(
        movie_repository=movie_repository,
        logger=logger,
        update_policy=settings.MOVIE_UPDATE_POLICY,
    )
