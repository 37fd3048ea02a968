import logging

from trip_client.core.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(funcName)s:%(lineno)d | %(message)s"


def setup_logging(level: str | None = None) -> logging.Logger:
    """
    Attach a single console handler to the package logger.
    Safe to call repeatedly (reloads, tests) without duplicating output.
    """
    logger = logging.getLogger("trip_client")
    logger.setLevel((level or settings.log_level).upper())

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
