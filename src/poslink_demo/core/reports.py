"""Text reports shown in the result pane."""

from __future__ import annotations

from poslink_demo.sdk.models import InitResult

INIT_FAILED_REPORT = "Init Failed!"
SUCCESS_HEADER = "Init Succeeded!"

# (label, InitResult attribute) in display order
IDENTITY_FIELDS: tuple[tuple[str, str], ...] = (
    ("App Name", "app_name"),
    ("App Version", "app_version"),
    ("Serial Number", "serial_number"),
    ("Model Name", "model_name"),
    ("OS Version", "os_version"),
)


def format_success_report(result: InitResult) -> str:
    lines = [SUCCESS_HEADER]
    lines.extend(f"{label}:{getattr(result, attr)}" for label, attr in IDENTITY_FIELDS)
    return "\n".join(lines)


def format_failure_report(result: InitResult) -> str:
    return "Trans Failed!\nError Message:" + result.error_message


def format_init_report(result: InitResult | None) -> str:
    """Format an Init outcome; None means no terminal handle was obtained."""
    if result is None:
        return INIT_FAILED_REPORT
    if result.success:
        return format_success_report(result)
    return format_failure_report(result)


def is_success_report(report: str | None) -> bool:
    return report is not None and report.startswith(SUCCESS_HEADER)
