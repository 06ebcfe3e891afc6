from http import HTTPStatus
from typing import Annotated, List

from fastapi import APIRouter, Depends, Response

from movie_api.applications.interfaces.dtos.movie import MoviePublic, MovieSchema
from movie_api.domain.ports.services.movie_service_port import MovieServicePort
from movie_api.infrastructure.config.dependencies import get_movie_service

router = APIRouter(prefix="/api/movies", tags=["movies"])

MovieServiceDep = Annotated[MovieServicePort, Depends(get_movie_service)]


@router.get("", response_model=List[MoviePublic])
async def read_movies(movie_service: MovieServiceDep):
    movies = await movie_service.get_all()
    return [MoviePublic.model_validate(movie) for movie in movies]


@router.get("/{movie_id}", response_model=MoviePublic, responses={404: {"description": "Movie not found"}})
async def read_movie(movie_id: int, movie_service: MovieServiceDep):
    movie = await movie_service.get_by_id(movie_id)
    if movie is None:
        return Response(status_code=HTTPStatus.NOT_FOUND)
    return MoviePublic.model_validate(movie)


@router.post("", status_code=HTTPStatus.OK, response_model=MoviePublic)
async def create_movie(movie: MovieSchema, movie_service: MovieServiceDep):
    created_movie = await movie_service.create(movie.to_domain())
    return MoviePublic.model_validate(created_movie)


@router.put("/{movie_id}", response_model=MoviePublic, responses={404: {"description": "Movie not found"}})
async def update_movie(movie_id: int, movie: MovieSchema, movie_service: MovieServiceDep):
    updated_movie = await movie_service.update(movie_id, movie.to_domain())
    if updated_movie is None:
        return Response(status_code=HTTPStatus.NOT_FOUND)
    return MoviePublic.model_validate(updated_movie)


@router.delete("/{movie_id}", status_code=HTTPStatus.NO_CONTENT, response_class=Response)
async def delete_movie(movie_id: int, movie_service: MovieServiceDep):
    await movie_service.delete(movie_id)
    return Response(status_code=HTTPStatus.NO_CONTENT)
