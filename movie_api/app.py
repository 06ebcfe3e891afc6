import logging
from contextlib import asynccontextmanager
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from movie_api.applications.interfaces.dtos.message import Message
from movie_api.domain.exceptions import RepositoryError
from movie_api.infrastructure.config.settings import Settings
from movie_api.infrastructure.logging.logger import get_logger, setup_logging
from movie_api.infrastructure.persistence.database import create_tables, dispose_engine, get_engine
from movie_api.presentation.routers import movies

settings = Settings()

setup_logging(settings.LOG_LEVEL, noisy_libs={"sqlalchemy.engine": logging.WARNING})

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    engine = get_engine()
    if settings.CREATE_TABLES:
        await create_tables(engine)
    logger.info(
        f"Movie API started with store={settings.MOVIE_STORE} update_policy={settings.MOVIE_UPDATE_POLICY.value}"
    )
    try:
        yield
    finally:
        await dispose_engine()


app = FastAPI(title="Movie API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(movies.router)


@app.exception_handler(RepositoryError)
async def repository_error_handler(request: Request, exc: RepositoryError):
    logger.error(f"Storage failure on {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=HTTPStatus.SERVICE_UNAVAILABLE, content={"detail": str(exc)})


@app.get("/", status_code=HTTPStatus.OK, response_model=Message)
def read_root():
    return {"message": "Movie API is running"}
