import sys
from typing import Optional

from loguru import logger
from clicktodrink.config import get_config

COMPONENT = "clicktodrink"

# Id of the sink this package added; sinks added by the host application are never touched.
_handler_id: Optional[int] = None
_handler_level: Optional[str] = None


def _remove_handler(handler_id: int) -> None:
    try:
        logger.remove(handler_id)
    except ValueError:
        # already removed, e.g. by a host calling logger.remove()
        pass


def _is_client_record(record) -> bool:
    return record["extra"].get("component") == COMPONENT


class AppLogger:
    """Logger configuration for the client library.

    Adds one stderr sink, at get_config().log_level, that only receives records
    emitted through get_logger(). The sink is replaced when the configured level
    changes; other loguru sinks are left alone.
    """
    def __init__(self) -> None:
        global _handler_id, _handler_level
        log_level = get_config().log_level.upper()
        if _handler_id is None or _handler_level != log_level:
            if _handler_id is not None:
                _remove_handler(_handler_id)
            _handler_id = logger.add(
                sink=sys.stderr,
                level=log_level,
                filter=_is_client_record,
                format="<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | <cyan>{extra[logger_name]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
            )
            _handler_level = log_level
        self.logger = logger.bind(component=COMPONENT, logger_name=COMPONENT)

    def get_logger(self, name: str = None):
        """Get the configured logger instance.

        Args:
            name (str, optional): Name for the logger context. Defaults to None.
        Returns:
            loguru.Logger: The configured logger instance.
        """
        if name:
            return self.logger.bind(logger_name=name)
        return self.logger


def reset_logging() -> None:
    """Remove the sink added by this package (the next get_logger() adds it again)."""
    global _handler_id, _handler_level
    if _handler_id is not None:
        _remove_handler(_handler_id)
    _handler_id = None
    _handler_level = None


def get_logger(name: str = None):
    """Get a client logger using the latest config."""
    return AppLogger().get_logger(name)
