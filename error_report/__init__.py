from error_report.clean import (
    ChainEntry,
    CleanedErrorText,
    ErrorLike,
    cleaned_errors,
    error_chain,
    root_cause,
)
from error_report.hooks import install_excepthooks, log_thread_exception, log_uncaught_exception
from error_report.report import Report, report

__all__ = [
    "ChainEntry",
    "CleanedErrorText",
    "ErrorLike",
    "Report",
    "cleaned_errors",
    "error_chain",
    "install_excepthooks",
    "log_thread_exception",
    "log_uncaught_exception",
    "report",
    "root_cause",
]
