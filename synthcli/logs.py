from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

_FORMAT = "%(asctime)s [%(levelname)s]: %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"

console = Console()


def setup_logging(log_file: Optional[Path] = None, debug: bool = False) -> logging.Logger:
    """Configure the ``synthcli`` logger for command-line use.

    Console output goes through rich; when *log_file* is given every record
    is also appended to it in plain text. Calling this again replaces the
    handlers rather than stacking them.
    """
    logger = logging.getLogger("synthcli")
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    rich_handler = RichHandler(console=Console(stderr=True), show_path=False, log_time_format=_DATEFMT)
    rich_handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(rich_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATEFMT))
        logger.addHandler(file_handler)

    return logger
