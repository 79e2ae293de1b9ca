import logging
import os
from functools import wraps

_SPY_LOGGER = logging.getLogger("fontcheck.spy")

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def spy_enabled() -> bool:
    val = os.getenv("FONTCHECK_SPY", "0")
    return str(val).lower() not in {"", "0", "false", "no"}


def configure_logging(level: int = logging.WARNING) -> None:
    """
    Ensure the fontcheck logger has a handler in case the app didn't configure logging.
    Safe to call multiple times.
    """
    logger = logging.getLogger("fontcheck")
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    if spy_enabled():
        level = min(level, logging.DEBUG)
    logger.setLevel(level)


def spy_trace(func):
    """Log entry and exit of a check invocation when FONTCHECK_SPY is set."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        if spy_enabled():
            _SPY_LOGGER.debug("Entering %s", func.__qualname__)
        result = func(*args, **kwargs)
        if spy_enabled():
            _SPY_LOGGER.debug("Exiting %s (%d diagnostics)", func.__qualname__, len(result))
        return result

    return wrapper
