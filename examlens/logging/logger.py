import logging
import sys
from typing import TextIO

_LOGGER_NAME = "examlens"


class _ContextFormatter(logging.Formatter):
    """Appends ``key=value`` context passed to Log calls after the message."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = getattr(record, "context", None)
        if context:
            pairs = " ".join(f"{key}={value}" for key, value in context.items())
            line = f"{line} | {pairs}"
        return line


class Log:
    """Application-wide logger; keyword arguments become context fields."""

    _logger: logging.Logger = logging.getLogger(_LOGGER_NAME)

    @classmethod
    def configure(cls, log_level: str, stream: TextIO | None = None) -> None:
        """Set the level and attach a stdout handler once."""
        cls._logger.setLevel(log_level.upper())
        if cls._logger.handlers:
            return
        handler = logging.StreamHandler(stream or sys.stdout)
        handler.setFormatter(
            _ContextFormatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        )
        cls._logger.addHandler(handler)

    @classmethod
    def debug(cls, message: str, **context: object) -> None:
        cls._logger.debug(message, extra={"context": context})

    @classmethod
    def info(cls, message: str, **context: object) -> None:
        cls._logger.info(message, extra={"context": context})

    @classmethod
    def warning(cls, message: str, **context: object) -> None:
        cls._logger.warning(message, extra={"context": context})

    @classmethod
    def error(cls, message: str, **context: object) -> None:
        cls._logger.error(message, extra={"context": context})

    @classmethod
    def exception(cls, message: str, **context: object) -> None:
        """Log at error level with the active exception's traceback."""
        cls._logger.exception(message, extra={"context": context})
