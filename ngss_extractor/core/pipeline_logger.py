"""Run logging for standards extraction.

One PipelineLogger per process (see get_logger). It writes to the
"ngss_extractor" logger, so module loggers created with
logging.getLogger(__name__) share its handlers:
- stdout: message only, INFO or DEBUG when verbose
- optional per-run file under log_dir: timestamped, always DEBUG

Output shape::

    Starting extraction: ngss_ms.pdf
    EXTRACT MS-LS (12 codes)
      [3/12] MS-LS1-3 (0.4s)
      Done: 10 complete | extracted=12, complete=10, incomplete=2 [1.2s]
"""

import logging
import sys
import time
from datetime import datetime
from pathlib import Path
from typing import Any

LOGGER_NAME = "ngss_extractor"
_CONSOLE_HANDLER = "ngss_extractor.console"

_MAX_VALUE_CHARS = 50
_MAX_LIST_ITEMS = 5


def _level(verbose: bool) -> int:
    return logging.DEBUG if verbose else logging.INFO


def _is_console(handler: logging.Handler) -> bool:
    return handler.get_name() == _CONSOLE_HANDLER


class PipelineLogger:
    """Phase-aware wrapper around the package logger."""

    def __init__(self, name: str = LOGGER_NAME, verbose: bool = False, log_dir: str | Path | None = None):
        """
        Args:
            name: Logger name; children of it inherit the handlers.
            verbose: Show DEBUG output (per-code ticks) on stdout.
            log_dir: Where start_pipeline() puts the run's log file.
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(logging.DEBUG)
        self.verbose = verbose
        self.log_dir = Path(log_dir) if log_dir else None
        self.log_file: Path | None = None

        self._run_started = 0.0
        self._phase_started = 0.0
        self._done = 0
        self._expected = 0

        if not any(_is_console(h) for h in self.logger.handlers):
            console = logging.StreamHandler(sys.stdout)
            console.set_name(_CONSOLE_HANDLER)
            console.setFormatter(logging.Formatter("%(message)s"))
            self.logger.addHandler(console)
        self.set_verbose(verbose)

    def set_verbose(self, verbose: bool):
        self.verbose = verbose
        for handler in self.logger.handlers:
            if _is_console(handler):
                handler.setLevel(_level(verbose))

    def _attach_file(self, source: str):
        self.log_dir.mkdir(parents=True, exist_ok=True)
        stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        self.log_file = self.log_dir / f"{Path(source).stem}_{stamp}.log"

        handler = logging.FileHandler(self.log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter(
            "%(asctime)s.%(msecs)03d [%(levelname).4s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
        handler.setLevel(logging.DEBUG)
        self.logger.addHandler(handler)

    def detach_files(self):
        """Close and remove any file handlers."""
        for handler in list(self.logger.handlers):
            if isinstance(handler, logging.FileHandler):
                self.logger.removeHandler(handler)
                handler.close()

    # =========================================================================
    # Run and phase markers
    # =========================================================================

    def start_pipeline(self, source: str):
        self._run_started = time.perf_counter()
        if self.log_dir and self.log_file is None:
            self._attach_file(source)
        self.logger.info(f"Starting extraction: {source}")

    def end_pipeline(self, success: bool = True, stats: dict | None = None):
        if stats:
            self.summary(stats)
        outcome = "COMPLETE" if success else "FAILED"
        self.logger.info(f"Extraction {outcome} [{_elapsed(self._run_started)}]")
        if self.log_file:
            self.logger.info(f"Log: {self.log_file}")

    def start_phase(self, phase: str, total: int = 0):
        """Announce a batch; tick() counts against total."""
        self._phase_started = time.perf_counter()
        self._done = 0
        self._expected = total
        suffix = f" ({total} codes)" if total > 0 else ""
        self.logger.info(f"{phase.upper()}{suffix}")

    def tick(self, item: str = ""):
        """One code finished: "  [3/12] MS-LS1-3 (0.4s)" at DEBUG."""
        self._done += 1
        if self._expected <= 0:
            return
        label = f" {item}" if item else ""
        self.logger.debug(f"  [{self._done}/{self._expected}]{label} ({_elapsed(self._phase_started)})")

    def phase_result(self, result: str, **metrics):
        line = f"  Done: {result}"
        if metrics:
            line += f" | {', '.join(f'{k}={v}' for k, v in metrics.items())}"
        if self._phase_started:
            line += f" [{_elapsed(self._phase_started)}]"
        self.logger.info(line)

    def summary(self, stats: dict):
        """Multi-line SUMMARY block; nested dicts are indented."""
        self.logger.info("\n".join(["SUMMARY", *_summary_lines(stats, depth=1)]))

    # =========================================================================
    # Messages with key=value data
    # =========================================================================

    def debug(self, message: str, **data):
        self.logger.debug(f"  {_with_data(message, data)}")

    def info(self, message: str, **data):
        self.logger.info(f"  {_with_data(message, data)}")

    def warning(self, message: str, **data):
        self.logger.warning(f"  WARN: {_with_data(message, data)}")

    def error(self, message: str, exc: Exception | None = None, **data):
        message = _with_data(message, data)
        if exc is not None:
            message += f" | {type(exc).__name__}: {exc}"
        self.logger.error(f"  ERROR: {message}")


def _elapsed(since: float) -> str:
    if not since:
        return "0.0s"
    minutes, seconds = divmod(time.perf_counter() - since, 60)
    return f"{int(minutes)}m {seconds:.0f}s" if minutes else f"{seconds:.1f}s"


def _shorten(value: Any) -> Any:
    if isinstance(value, str) and len(value) > _MAX_VALUE_CHARS:
        return value[:_MAX_VALUE_CHARS - 3] + "..."
    if isinstance(value, (list, tuple, set)) and len(value) > _MAX_LIST_ITEMS:
        return f"[{len(value)} items]"
    return value


def _with_data(message: str, data: dict[str, Any]) -> str:
    if not data:
        return message
    return f"{message} | " + ", ".join(f"{k}={_shorten(v)}" for k, v in data.items())


def _summary_lines(stats: dict, depth: int) -> list[str]:
    pad = "  " * depth
    lines = []
    for key, value in stats.items():
        if isinstance(value, dict):
            lines.append(f"{pad}{key}:")
            lines.extend(_summary_lines(value, depth + 1))
        else:
            lines.append(f"{pad}{key}: {value}")
    return lines


_instance: PipelineLogger | None = None


def get_logger(verbose: bool = False, log_dir: str | Path | None = None) -> PipelineLogger:
    """Return the process-wide logger, creating it on first use.

    Later calls can only turn verbose on or set a log_dir that was unset.
    """
    global _instance
    if _instance is None:
        _instance = PipelineLogger(verbose=verbose, log_dir=log_dir)
        return _instance
    if verbose and not _instance.verbose:
        _instance.set_verbose(True)
    if log_dir and _instance.log_dir is None:
        _instance.log_dir = Path(log_dir)
    return _instance


def reset_logger():
    """Drop the process-wide logger and close its log file (for tests)."""
    global _instance
    if _instance is not None:
        _instance.detach_files()
    _instance = None
