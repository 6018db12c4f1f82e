"""Connection parameter model and the store that owns it.

A single :class:`ParameterStore` is created by whoever hosts the demo (CLI
invocation, API app, UI page) and passed explicitly to the settings editor
and the action dispatcher.
"""

from __future__ import annotations

import threading

from pydantic import BaseModel

from poslink_demo.transport import CommunicationSetting, TransportKind, build_setting
from poslink_demo.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 10009
DEFAULT_SERIAL_PORT = "COM1"
DEFAULT_BAUD_RATE = 9600
DEFAULT_TIMEOUT_MS = 60000


class ConnectionParameters(BaseModel):
    """Transport parameters for reaching a terminal.

    Both the network and the serial field groups are kept regardless of
    ``kind``; only the group matching ``kind`` is used.
    """
    model_config = {"frozen": False}

    kind: TransportKind = TransportKind.TCP
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    serial_port: str = DEFAULT_SERIAL_PORT
    baud_rate: int = DEFAULT_BAUD_RATE
    timeout_ms: int = DEFAULT_TIMEOUT_MS

    def communication_setting(self) -> CommunicationSetting:
        """Derive the transport-specific setting for the active kind."""
        return build_setting(
            self.kind,
            host=self.host,
            port=self.port,
            serial_port=self.serial_port,
            baud_rate=self.baud_rate,
            timeout_ms=self.timeout_ms,
        )


class ParameterStore:
    """Thread-safe holder of the current :class:`ConnectionParameters`."""

    def __init__(self, params: ConnectionParameters | None = None) -> None:
        self._lock = threading.Lock()
        self._params = params.model_copy() if params else ConnectionParameters()

    def snapshot(self) -> ConnectionParameters:
        """Return a copy of the current parameters."""
        with self._lock:
            return self._params.model_copy()

    @property
    def kind(self) -> TransportKind:
        with self._lock:
            return self._params.kind

    def update(self, **fields: object) -> ConnectionParameters:
        """Overwrite the given fields and return the new parameters.

        Raises:
            pydantic.ValidationError: If a value has the wrong type.
            KeyError: If a field name is unknown.
        """
        unknown = set(fields) - set(ConnectionParameters.model_fields)
        if unknown:
            raise KeyError(f"Unknown connection parameter(s): {', '.join(sorted(unknown))}")
        with self._lock:
            merged = self._params.model_dump() | fields
            self._params = ConnectionParameters.model_validate(merged)
            logger.info(
                "parameters_updated",
                kind=str(self._params.kind),
                fields=sorted(fields),
            )
            return self._params.model_copy()

    def communication_setting(self) -> CommunicationSetting:
        return self.snapshot().communication_setting()
