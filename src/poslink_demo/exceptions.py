"""Exception hierarchy for the POSLink demo client."""

from __future__ import annotations


class PosLinkDemoError(Exception):
    """Base exception for all POSLink demo errors."""


class SdkLoadError(PosLinkDemoError):
    """The vendor POSLink SDK module could not be imported or is incomplete."""


class TransportError(PosLinkDemoError):
    """A communication setting could not be built for the selected transport."""


class InvalidSettingError(PosLinkDemoError, ValueError):
    """A settings field could not be parsed.

    Attributes:
        field: Name of the offending form field.
        value: The raw text that failed to parse.
    """

    def __init__(self, field: str, value: str, reason: str = "") -> None:
        self.field = field
        self.value = value
        msg = f"Invalid {field}: {value!r}"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)
