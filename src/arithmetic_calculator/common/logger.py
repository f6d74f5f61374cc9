"""Package-wide logger."""
import logging
import sys

LOG_FORMAT: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def build_logger(name: str = "arithmetic_calculator", level: int = logging.INFO) -> logging.Logger:
    """
    Create (or return the already configured) logger writing to stderr.

    :param str name: Logger name
    :param int level: Logging level

    :return: Configured logger
    :rtype: logging.Logger
    """
    log = logging.getLogger(name)
    if not log.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        log.addHandler(handler)
    log.setLevel(level)
    return log


logger: logging.Logger = build_logger()
