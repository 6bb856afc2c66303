"""Run-based log rotation manager.

A "run" is one CLI invocation (or one test module). The first record written
to each module log file within a run rotates that file, so every log holds
the current run and the previous one.

Usage:
    from core.logging import start_run, end_run

    start_run("wt-aardvark")
    try:
        # ... do work ...
    finally:
        end_run()
"""

from dataclasses import dataclass, field


@dataclass
class _RunState:
    run_id: str | None = None
    rotated: set[str] = field(default_factory=set)


_state = _RunState()

# Cache module-to-log resolution; module names don't change between runs
_module_log_cache: dict[str, str] = {}

# Module path prefixes -> log file names, resolved by longest-prefix match.
# Unmapped modules go to "misc.log"
MODULE_TO_LOG = {
    "workflows.translate": "translate",
    "wiki_tools.wikipedia": "wikipedia",
    "core.settings": "settings",
    "core.languages": "languages",
    "core.utils": "http",
    "core.config": "config",
    "core.logging": "logging-internal",
    "scripts": "cli",
    "testing": "testing",
}

# Third-party loggers that go to run-3p.log instead
THIRD_PARTY_LOGGERS = ("httpx", "httpcore")

_SORTED_PREFIXES = sorted(MODULE_TO_LOG.keys(), key=len, reverse=True)


def start_run(run_id: str) -> None:
    """Signal start of new run.

    Calling it again replaces the current run and resets rotation tracking.
    """
    _state.run_id = run_id
    _state.rotated = set()


def end_run() -> None:
    """Signal end of run. Missing calls don't affect correctness."""
    _state.run_id = None
    _state.rotated = set()


def get_current_run_id() -> str | None:
    """Get the current run ID, if any."""
    return _state.run_id


def should_rotate(log_name: str) -> bool:
    """Check (and record) whether log_name still needs rotating this run.

    Returns True only inside a run, and only the first time per log file.
    """
    if _state.run_id is None or log_name in _state.rotated:
        return False
    _state.rotated.add(log_name)
    return True


def module_to_log_name(module_name: str) -> str:
    """Resolve a logger name (e.g. "core.settings.store") to its log file name."""
    if module_name not in _module_log_cache:
        _module_log_cache[module_name] = _compute_log_name(module_name)
    return _module_log_cache[module_name]


def _compute_log_name(module_name: str) -> str:
    for prefix in _SORTED_PREFIXES:
        if module_name == prefix or module_name.startswith(prefix + "."):
            return MODULE_TO_LOG[prefix]
    return "misc"


def is_third_party(logger_name: str) -> bool:
    """True for records from libraries listed in THIRD_PARTY_LOGGERS."""
    return any(
        logger_name == name or logger_name.startswith(name + ".")
        for name in THIRD_PARTY_LOGGERS
    )
