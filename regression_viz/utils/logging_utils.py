# regression_viz/utils/logging_utils.py
import logging

from regression_viz.constants import DEFAULT_LOG_LEVEL

LOG_FORMAT = '%(asctime)s - %(levelname)5s | %(name)s | %(message)s'


def setup_logger(name: str = "regression_viz", level_str: str = DEFAULT_LOG_LEVEL) -> logging.Logger:
    """
    Sets up a logger with a single console stream handler.
    Safe to call repeatedly; handlers are not duplicated.
    """
    log_level = getattr(logging, str(level_str).upper(), logging.INFO)
    formatter = logging.Formatter(LOG_FORMAT)

    logger = logging.getLogger(name)
    logger.setLevel(log_level)

    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
