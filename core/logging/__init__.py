"""Module-based logging with run-based rotation.

Per-module log files are rotated at run boundaries (one CLI invocation or
one test module).

Usage:
    # At run entry points (CLI, tests):
    from core.logging import configure_logging, start_run, end_run

    configure_logging()
    start_run("wt-aardvark")
    try:
        # ... do work ...
    finally:
        end_run()

    # In modules:
    import logging
    logger = logging.getLogger(__name__)
    logger.info("This goes to the appropriate module log file")

Log files are created in the log directory (WT_LOG_DIR, default
<config dir>/wt/logs):
    - translate.log, wikipedia.log, settings.log, ... (per-module)
    - run-3p.log (httpx/httpcore)
    - *.previous.log (previous run's logs)
"""

from core.logging.handlers import ModuleDispatchHandler, ThirdPartyHandler
from core.logging.run_manager import (
    MODULE_TO_LOG,
    end_run,
    get_current_run_id,
    module_to_log_name,
    start_run,
)
from core.logging.setup import configure_logging, reset_logging

__all__ = [
    "configure_logging",
    "reset_logging",
    "start_run",
    "end_run",
    "get_current_run_id",
    "module_to_log_name",
    "ModuleDispatchHandler",
    "ThirdPartyHandler",
    "MODULE_TO_LOG",
]
