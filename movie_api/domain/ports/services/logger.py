from abc import ABC, abstractmethod


class LoggerPort(ABC):
    """Logging seam for services and repositories that must not import infrastructure"""

    @abstractmethod
    def info(self, msg: str, *args, **kwargs) -> None:
        pass

    @abstractmethod
    def warning(self, msg: str, *args, **kwargs) -> None:
        pass

    @abstractmethod
    def error(self, msg: str, *args, **kwargs) -> None:
        pass
