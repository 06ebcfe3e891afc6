import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", noisy_libs: Optional[dict[str, int]] = None) -> None:
    """Configure the root logger once for the whole process.

    ``noisy_libs`` maps logger names to the level they are capped at, which
    keeps SQLAlchemy's statement logging out of the service log unless asked for.
    """
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logging.basicConfig(level=level.upper(), handlers=[handler], force=True)

    for lib, lib_level in (noisy_libs or {}).items():
        logging.getLogger(lib).setLevel(lib_level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    return logging.getLogger(name)
