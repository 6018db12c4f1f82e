"""Models for values returned by the POSLink SDK."""

from __future__ import annotations

from pydantic import BaseModel


def _sdk_attr(obj: object, *names: str) -> str:
    """Return the first present attribute of *obj* as a string."""
    for name in names:
        value = getattr(obj, name, None)
        if value is not None:
            return str(value)
    return ""


class InitResult(BaseModel):
    """Outcome of the terminal Init command."""
    model_config = {"frozen": True}

    success: bool
    app_name: str = ""
    app_version: str = ""
    serial_number: str = ""
    model_name: str = ""
    os_version: str = ""
    error_message: str = ""

    @classmethod
    def from_sdk(cls, response: object) -> InitResult:
        """Convert a vendor SDK init response into our model.

        The vendor object is read by attribute; both snake_case and the
        SDK's camelCase names are accepted.
        """
        if isinstance(response, InitResult):
            return response
        success = getattr(response, "success", None)
        if success is None:
            success = getattr(response, "is_successful", False)
        return cls(
            success=bool(success() if callable(success) else success),
            app_name=_sdk_attr(response, "app_name", "appName"),
            app_version=_sdk_attr(response, "app_version", "appVersion"),
            serial_number=_sdk_attr(response, "serial_number", "sn"),
            model_name=_sdk_attr(response, "model_name", "modelName"),
            os_version=_sdk_attr(response, "os_version", "osVersion"),
            error_message=_sdk_attr(response, "error_message", "message"),
        )
