from __future__ import annotations
import logging
import sys
from pythonjsonlogger.json import JsonFormatter

def setup_logging(level=logging.INFO, log_file: str | None = None):
    """
    Configures the root logger to output JSON logs to stderr and optionally to a file.

    Args:
        level: Logging level, either a number or a name such as "DEBUG".
        log_file (str, optional): Path of an additional log file.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown logging level: {level}")

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers to avoid duplicates/conflicts
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(JsonFormatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(JsonFormatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
        root_logger.addHandler(file_handler)
