"""Logging setup shared by the command-line and Streamlit shells."""
import logging
import sys
from typing import TextIO

_HANDLER_NAME = "xsl_reader"


def setup_logging(level: int | str = logging.INFO, stream: TextIO | None = None) -> None:
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    if any(handler.get_name() == _HANDLER_NAME for handler in root_logger.handlers):
        return

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.set_name(_HANDLER_NAME)

    formatter = logging.Formatter(
        "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s",
        datefmt="%H:%M:%S"
    )
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)
