"""Init action dispatching and report formatting."""

from poslink_demo.core.dispatcher import ActionDispatcher, CancelToken, run_init_action
from poslink_demo.core.reports import (
    INIT_FAILED_REPORT,
    format_failure_report,
    format_init_report,
    format_success_report,
    is_success_report,
)

__all__ = [
    "INIT_FAILED_REPORT",
    "ActionDispatcher",
    "CancelToken",
    "format_failure_report",
    "format_init_report",
    "format_success_report",
    "is_success_report",
    "run_init_action",
]
