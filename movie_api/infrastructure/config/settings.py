from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

from movie_api.domain.models.update_policy import UpdatePolicy


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    DATABASE_URL: str = "sqlite+aiosqlite:///./movies.db"
    DATABASE_ECHO: bool = False
    CREATE_TABLES: bool = True
    CORS_ORIGINS: List[str] = ["*"]
    LOG_LEVEL: str = "INFO"

    MOVIE_UPDATE_POLICY: UpdatePolicy = UpdatePolicy.FULL
    MOVIE_STORE: str = "sqlalchemy"  # "sqlalchemy" or "memory"
