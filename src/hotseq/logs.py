import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s: %(message)s"


def setup_logging(level: str = "INFO", name: str = "hotseq") -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(level.upper())
    if logger.handlers:
        return logger  # avoid duplicate handlers

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
