from typing import Optional

from sqlalchemy.orm import Mapped, mapped_column, registry

table_registry = registry()


@table_registry.mapped_as_dataclass
class Movie:
    __tablename__ = "movies"
    # SQLite otherwise hands the id of the newest deleted row to the next insert
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(init=False, primary_key=True, autoincrement=True)
    title: Mapped[Optional[str]] = mapped_column(default=None)
    director: Mapped[Optional[str]] = mapped_column(default=None)
    release_year: Mapped[Optional[int]] = mapped_column(default=None)
    genre: Mapped[Optional[str]] = mapped_column(default=None)
    imdb_rating: Mapped[Optional[float]] = mapped_column(default=None)
