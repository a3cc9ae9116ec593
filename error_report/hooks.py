from __future__ import annotations

import logging
import sys
import threading
from types import TracebackType

from error_report.report import Report

_logger: logging.Logger = logging.getLogger()
_level: int = logging.CRITICAL


def log_uncaught_exception(
    exc_type: type[BaseException],
    exc_value: BaseException,
    exc_traceback: TracebackType | None,
) -> None:
    if issubclass(exc_type, KeyboardInterrupt):
        return
    _logger.log(
        _level,
        "Uncaught exception: %r",
        Report(exc_value),
        exc_info=(exc_type, exc_value, exc_traceback),
    )


def log_thread_exception(args: threading.ExceptHookArgs) -> None:
    if args.exc_value is None:
        return
    _logger.log(
        _level,
        "Uncaught thread exception in %s: %r",
        args.thread.name if args.thread is not None else "unknown-thread",
        Report(args.exc_value),
        exc_info=(args.exc_type, args.exc_value, args.exc_traceback),
    )


def install_excepthooks(logger: logging.Logger | None = None, level: int = logging.CRITICAL) -> None:
    """Log uncaught exceptions from the main thread and worker threads as reports."""
    global _logger, _level
    _logger = logger if logger is not None else logging.getLogger()
    _level = level
    sys.excepthook = log_uncaught_exception
    threading.excepthook = log_thread_exception
    _logger.debug("Installed report excepthooks")
