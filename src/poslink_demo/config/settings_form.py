"""Settings editor form state, independent of any widget toolkit.

The NiceGUI dialog binds its inputs to a :class:`SettingsForm` and calls
:meth:`SettingsForm.apply` when the user presses OK.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from poslink_demo.config.parameters import ConnectionParameters, ParameterStore
from poslink_demo.exceptions import InvalidSettingError
from poslink_demo.transport import TransportKind

NETWORK_FIELDS: tuple[str, ...] = ("host", "port", "timeout")
SERIAL_FIELDS: tuple[str, ...] = ("serial_port", "baud_rate", "timeout")

FIELD_LABELS: dict[str, str] = {
    "host": "IP Address",
    "port": "Port",
    "serial_port": "Serial Port",
    "baud_rate": "Baud Rate",
    "timeout": "Timeout (ms)",
}

BAUD_RATES: tuple[int, ...] = (1200, 2400, 4800, 9600, 19200, 38400, 57600, 115200)

# ASCII digits only; commas must group by thousands.
_DIGITS = re.compile(r"\d+", re.ASCII)
_GROUPED_DIGITS = re.compile(r"\d{1,3}(?:,\d{3})+|\d+", re.ASCII)


def parse_int(field_name: str, text: str) -> int:
    """Parse a plain non-negative integer field.

    Raises:
        InvalidSettingError: If *text* is not a run of ASCII digits.
    """
    value = str(text).strip()
    if not _DIGITS.fullmatch(value):
        raise InvalidSettingError(field_name, text, "expected an integer")
    return int(value)


def parse_timeout(text: str) -> int:
    """Parse a timeout in milliseconds, accepting thousands separators.

    ``"60,000"`` and ``"60000"`` both yield ``60000``; ``"6,0000"`` does not
    parse.

    Raises:
        InvalidSettingError: If the text is not an integer.
    """
    value = str(text).strip()
    if not _GROUPED_DIGITS.fullmatch(value):
        raise InvalidSettingError("timeout", text, "expected an integer")
    return int(value.replace(",", ""))


def visible_fields(kind: TransportKind | str) -> tuple[str, ...]:
    """Return the form fields shown for *kind*."""
    return NETWORK_FIELDS if TransportKind(kind).is_network else SERIAL_FIELDS

@dataclass
class SettingsForm:
    """Editable text values of the Comm Setting dialog."""

    kind: str = TransportKind.TCP.value
    host: str = ""
    port: str = ""
    serial_port: str = ""
    baud_rate: str = ""
    timeout: str = ""

    @classmethod
    def from_parameters(cls, params: ConnectionParameters) -> SettingsForm:
        return cls(
            kind=params.kind.value,
            host=params.host,
            port=str(params.port),
            serial_port=params.serial_port,
            baud_rate=str(params.baud_rate),
            timeout=f"{params.timeout_ms:,}",
        )

    @property
    def transport_kind(self) -> TransportKind:
        try:
            return TransportKind(self.kind)
        except ValueError as exc:
            raise InvalidSettingError("kind", self.kind, "unknown transport") from exc

    def visible_fields(self) -> tuple[str, ...]:
        return visible_fields(self.transport_kind)

    def shows_serial_fields(self) -> bool:
        """True when the serial port and baud rate fields are on screen."""
        return not self.transport_kind.is_network

    def parsed_fields(self) -> dict[str, object]:
        """Parse the fields of the active kind into store values.

        Raises:
            InvalidSettingError: If any numeric field fails to parse.
        """
        kind = self.transport_kind
        fields: dict[str, object] = {
            "kind": kind,
            "timeout_ms": parse_timeout(self.timeout),
        }
        if kind.is_network:
            fields["host"] = self.host.strip()
            fields["port"] = parse_int("port", self.port)
        else:
            fields["serial_port"] = self.serial_port.strip()
            fields["baud_rate"] = parse_int("baud_rate", self.baud_rate)
        return fields

    def apply(self, store: ParameterStore) -> ConnectionParameters:
        """Write the active kind's fields into *store*.

        Nothing is written if any field fails to parse.
        """
        return store.update(**self.parsed_fields())
