"""
Goal: Set up loguru logging: a console sink on stderr and a rolling log file
under $XDG_STATE_HOME/quickswitch/logs. Stdout stays clean for scripting.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from quickswitch.settings import LOG_DIR, LOG_LEVEL


def configure_logging(verbose: bool = False, log_dir: Optional[Path] = None) -> None:
    logger.remove()
    logger.add(
        sys.stderr,
        level="DEBUG" if verbose else LOG_LEVEL,
        colorize=True,
        backtrace=False,
        diagnose=False,
    )
    target = Path(log_dir or LOG_DIR)
    try:
        target.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        # A read-only home must not stop the user from switching windows
        logger.warning("File logging disabled, cannot create {}: {}", target, exc)
        return
    logger.add(
        str(target / "{time:YYYY-MM-DD}.log"),
        rotation="00:00",
        retention="14 days",
        level="INFO",
        backtrace=False,
        diagnose=False,
        serialize=False,
        encoding="utf-8",
    )
