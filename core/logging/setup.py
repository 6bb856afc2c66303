"""Install wt's logging handlers for one process."""

import logging
from pathlib import Path
from typing import Optional

from core.config import get_log_dir, is_dev_mode
from core.logging.handlers import ModuleDispatchHandler, ThirdPartyHandler
from core.logging.run_manager import THIRD_PARTY_LOGGERS

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_installed: list[tuple[logging.Logger, logging.Handler]] = []


def configure_logging(log_dir: Optional[Path] = None, verbose: bool = False) -> Path:
    """Route module logs to per-module files and optionally echo to stderr.

    File logging is INFO by default and DEBUG when WT_MODE=dev. With
    verbose, records are also written to stderr. Safe to call repeatedly;
    handlers from a previous call are replaced.

    Returns:
        The log directory in use.
    """
    reset_logging()
    log_dir = log_dir or get_log_dir()
    level = logging.DEBUG if is_dev_mode() else logging.INFO
    formatter = logging.Formatter(LOG_FORMAT)

    root = logging.getLogger()
    root.setLevel(level)

    dispatch = ModuleDispatchHandler(log_dir)
    dispatch.setFormatter(formatter)
    _add(root, dispatch)

    third_party = ThirdPartyHandler(log_dir)
    third_party.setFormatter(formatter)
    for name in THIRD_PARTY_LOGGERS:
        _add(logging.getLogger(name), third_party)

    if verbose:
        console = logging.StreamHandler()
        console.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
        _add(root, console)

    return log_dir


def reset_logging() -> None:
    """Remove and close handlers installed by configure_logging."""
    while _installed:
        logger, handler = _installed.pop()
        logger.removeHandler(handler)
        handler.close()


def _add(logger: logging.Logger, handler: logging.Handler) -> None:
    logger.addHandler(handler)
    _installed.append((logger, handler))
