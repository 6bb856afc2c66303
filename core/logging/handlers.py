"""Logging handlers that write one file per module group.

ModuleDispatchHandler routes records from wt's own modules to
<log_dir>/<name>.log using MODULE_TO_LOG. ThirdPartyHandler collects
httpx/httpcore records in <log_dir>/run-3p.log. Both rotate the current
file to <name>.previous.log on the first write of each run.
"""

import logging
from pathlib import Path
from typing import TextIO

from core.logging.run_manager import is_third_party, module_to_log_name, should_rotate


def _rotate_log_file(log_dir: Path, log_name: str, stream: TextIO | None) -> TextIO:
    """Move <name>.log to <name>.previous.log and open a fresh <name>.log."""
    current = log_dir / f"{log_name}.log"
    previous = log_dir / f"{log_name}.previous.log"

    if stream:
        stream.close()

    if previous.exists():
        previous.unlink()
    if current.exists():
        current.rename(previous)

    return current.open("a", encoding="utf-8")


class ModuleDispatchHandler(logging.Handler):
    """Single handler that routes records to per-module log files.

    Files are opened lazily and cached, so the handler holds at most one
    handle per log name. Third-party records are ignored; attach a
    ThirdPartyHandler for those.

    Usage:
        handler = ModuleDispatchHandler(Path("logs"))
        handler.setFormatter(logging.Formatter("%(asctime)s - %(message)s"))
        logging.getLogger().addHandler(handler)
    """

    def __init__(self, log_dir: Path):
        super().__init__()
        self.log_dir = log_dir
        self._file_cache: dict[str, TextIO] = {}

    def emit(self, record: logging.LogRecord) -> None:
        if is_third_party(record.name):
            return
        try:
            log_name = module_to_log_name(record.name)
            if should_rotate(log_name):
                self._rotate_file(log_name)

            file = self._get_or_open_file(log_name)
            file.write(self.format(record) + "\n")
            file.flush()
        except Exception:
            self.handleError(record)

    def _rotate_file(self, log_name: str) -> None:
        self.log_dir.mkdir(parents=True, exist_ok=True)
        existing_stream = self._file_cache.pop(log_name, None)
        self._file_cache[log_name] = _rotate_log_file(self.log_dir, log_name, existing_stream)

    def _get_or_open_file(self, log_name: str) -> TextIO:
        if log_name not in self._file_cache:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            path = self.log_dir / f"{log_name}.log"
            self._file_cache[log_name] = path.open("a", encoding="utf-8")
        return self._file_cache[log_name]

    def close(self) -> None:
        """Close all cached file handles."""
        self.acquire()
        try:
            for file in self._file_cache.values():
                file.close()
            self._file_cache.clear()
        finally:
            self.release()
        super().close()


class ThirdPartyHandler(logging.FileHandler):
    """Handler for third-party library logs (run-3p.log)."""

    LOG_NAME = "run-3p"

    def __init__(self, log_dir: Path, **kwargs):
        self.log_dir = log_dir
        log_dir.mkdir(parents=True, exist_ok=True)
        super().__init__(log_dir / f"{self.LOG_NAME}.log", mode="a", encoding="utf-8", delay=True, **kwargs)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            if should_rotate(self.LOG_NAME):
                self.stream = _rotate_log_file(self.log_dir, self.LOG_NAME, self.stream)
            super().emit(record)
        except Exception:
            self.handleError(record)
