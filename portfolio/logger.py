import logging
import os
import sys

FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


def setup_logger(log_file=None):
    # Named logger shared by every module of the package
    logger = logging.getLogger("Portfolio")
    logger.setLevel(logging.INFO)

    formatter = logging.Formatter(FORMAT)
    file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]

    # Console output
    if len(logger.handlers) == len(file_handlers):
        ch = logging.StreamHandler(sys.stdout)
        ch.setFormatter(formatter)
        logger.addHandler(ch)

    # File output, only when asked for
    log_file = log_file or os.getenv("PORTFOLIO_LOG_FILE")
    if log_file and not file_handlers:
        fh = logging.FileHandler(log_file)
        fh.setFormatter(formatter)
        logger.addHandler(fh)

    return logger


def get_logger(name):
    """Child logger under the package logger, e.g. ``Portfolio.resolver``."""
    return logging.getLogger(f"Portfolio.{name}")


# Global package logger
logger = setup_logger()
