"""
Logging setup for callers of the point-plane engine.

Library modules only create module-level loggers and emit DEBUG records;
nothing is configured on import. Applications call setup_logger once to
route the records of both packages to one file and the console.
"""

import logging
from pathlib import Path
from typing import Iterable, List

PACKAGE_LOGGERS = ("plane_core", "plane_raster")


def setup_logger(
    log_file: Path,
    level=logging.INFO,
    names: Iterable[str] = PACKAGE_LOGGERS,
) -> List[logging.Logger]:
    """
    Attach a shared file + console handler pair to the package loggers.

    Args:
        log_file: Path to log file (parent directories are created)
        level: Level for the loggers and the file handler; the console
            stays at INFO so DEBUG traces only go to the file
        names: Loggers to configure (default: plane_core and plane_raster)

    Returns:
        The configured loggers, in the order of `names`
    """
    log_file = Path(log_file)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(
        "[%(asctime)s] %(levelname)s %(name)s: %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
    )

    file_handler = logging.FileHandler(log_file, mode="w")
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(formatter)

    loggers = []
    for name in names:
        logger = logging.getLogger(name)
        logger.setLevel(level)

        # Replace handlers from earlier calls
        for handler in logger.handlers:
            handler.close()
        logger.handlers = [file_handler, console_handler]

        loggers.append(logger)

    return loggers
