"""
Logging setup for the command-line entry point.

Library modules only create loggers; handlers are attached here.
"""
import os
import logging
from typing import Optional


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    Configure the root logger.

    Args:
        level: Console log level name (DEBUG, INFO, WARNING, ...)
        log_file: Optional path; when given, DEBUG-level logs are also written there
    """
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(logging.DEBUG)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(getattr(logging, level.upper(), logging.INFO))
    console_handler.setFormatter(logging.Formatter('%(levelname)s %(message)s'))
    root_logger.addHandler(console_handler)

    if log_file:
        workdir = os.path.dirname(log_file)
        if workdir:
            os.makedirs(workdir, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode='w')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter('%(asctime)s %(levelname)s %(name)s - %(message)s')
        )
        root_logger.addHandler(file_handler)
