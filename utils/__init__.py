"""
utils - Shared helpers for the tag cloud generator.

Provides the logger factory used by the launcher and the pipeline.
"""

import os
import logging


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name, filename=None, log_dir=None):
    """
    Build (or fetch) a named logger writing to stderr and, optionally, a file.

    Args:
        name: Logger name, shown in every record
        filename: Base name of the log file (defaults to name)
        log_dir: Directory for the log file; no file handler when empty

    Returns:
        A configured logging.Logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.INFO)

    # Handlers are attached only once per logger name
    if logger.handlers:
        return logger

    formatter = logging.Formatter(LOG_FORMAT)

    ch = logging.StreamHandler()
    ch.setLevel(logging.INFO)
    ch.setFormatter(formatter)
    logger.addHandler(ch)

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        fh = logging.FileHandler(
            os.path.join(log_dir, f"{filename if filename else name}.log"))
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(formatter)
        logger.addHandler(fh)

    return logger
