import logging
from typing import Any, Dict, Optional

from movie_api.domain.ports.services.logger import LoggerPort


class StdLoggerAdapter(LoggerPort):
    """LoggerPort backed by a ``logging`` logger.

    Context passed at construction is attached to every record as ``extra``
    so handlers can filter on it, e.g. ``StdLoggerAdapter("movie_api.movies", store="memory")``.
    """

    def __init__(self, name: Optional[str] = None, **context: Any):
        self._logger = logging.LoggerAdapter(logging.getLogger(name), context)

    @property
    def context(self) -> Dict[str, Any]:
        return dict(self._logger.extra)

    def info(self, msg: str, *args, **kwargs) -> None:
        self._logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs) -> None:
        self._logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs) -> None:
        self._logger.error(msg, *args, **kwargs)
