# logging_setup.py
import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_handler: logging.Handler | None = None


def configure_logging(level: str | int = "WARNING") -> logging.Logger:
    """
    Attaches one stderr handler to the package logger and sets its level.

    Calling it again only changes the level.

    Raises:
        ValueError: unknown level name
    """
    global _handler

    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Invalid log level: {level}")
        level = resolved

    logger = logging.getLogger("text_analyzer")
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(_handler)
    logger.setLevel(level)
    return logger
