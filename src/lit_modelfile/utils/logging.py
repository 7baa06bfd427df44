import logging
import os

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _level(level: int | str | None) -> int | str:
    if level is None:
        return os.environ.get("LOG_LEVEL", "DEBUG").upper()
    return level.upper() if isinstance(level, str) else level


def get_logger(name: str, level: int | str | None = None) -> logging.Logger:
    """Return a named logger writing to stderr.

    The level defaults to the ``LOG_LEVEL`` environment variable, or DEBUG when unset.
    """
    logger = logging.getLogger(name)
    logger.setLevel(_level(level))
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
    return logger


def set_level(level: int | str | None = None, package: str = "lit_modelfile") -> None:
    """Apply ``level`` to every logger of ``package`` created so far.

    Loggers are created at import time, before an entry point gets to load its ``.env``.
    """
    resolved = _level(level)
    for name, logger in logging.Logger.manager.loggerDict.items():
        if isinstance(logger, logging.Logger) and name.split(".")[0] == package:
            logger.setLevel(resolved)
