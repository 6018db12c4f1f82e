"""Transport kinds and the per-kind communication settings handed to the SDK."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import StrEnum

from poslink_demo.exceptions import TransportError


class TransportKind(StrEnum):
    """Ways of reaching a terminal."""
    TCP = "TCP"
    SSL = "SSL"
    HTTP = "HTTP"
    HTTPS = "HTTPS"
    UART = "UART"

    @property
    def is_network(self) -> bool:
        return self in NETWORK_KINDS


NETWORK_KINDS: frozenset[TransportKind] = frozenset(
    {TransportKind.TCP, TransportKind.SSL, TransportKind.HTTP, TransportKind.HTTPS}
)


@dataclass(frozen=True)
class CommunicationSetting:
    """Base communication setting."""
    kind: TransportKind
    timeout_ms: int = 60000

    def to_dict(self) -> dict:
        data = dataclasses.asdict(self)
        data["kind"] = str(self.kind)
        return data


@dataclass(frozen=True)
class NetworkSetting(CommunicationSetting):
    """Host/port based setting shared by the network transports."""
    host: str = "127.0.0.1"
    port: int = 10009


@dataclass(frozen=True)
class TcpSetting(NetworkSetting):
    kind: TransportKind = field(default=TransportKind.TCP, init=False)


@dataclass(frozen=True)
class SslSetting(NetworkSetting):
    kind: TransportKind = field(default=TransportKind.SSL, init=False)


@dataclass(frozen=True)
class HttpSetting(NetworkSetting):
    kind: TransportKind = field(default=TransportKind.HTTP, init=False)


@dataclass(frozen=True)
class HttpsSetting(NetworkSetting):
    kind: TransportKind = field(default=TransportKind.HTTPS, init=False)


@dataclass(frozen=True)
class UartSetting(CommunicationSetting):
    """Serial port setting."""
    kind: TransportKind = field(default=TransportKind.UART, init=False)
    serial_port: str = "COM1"
    baud_rate: int = 9600


_NETWORK_SETTINGS: dict[TransportKind, type[NetworkSetting]] = {
    TransportKind.TCP: TcpSetting,
    TransportKind.SSL: SslSetting,
    TransportKind.HTTP: HttpSetting,
    TransportKind.HTTPS: HttpsSetting,
}


def build_setting(
    kind: TransportKind | str,
    *,
    host: str,
    port: int,
    serial_port: str,
    baud_rate: int,
    timeout_ms: int,
) -> CommunicationSetting:
    """Map a transport kind and its fields to the matching setting object.

    Fields that do not belong to *kind* are ignored.

    Raises:
        TransportError: If *kind* is not a known transport.
    """
    try:
        kind = TransportKind(kind)
    except ValueError as exc:
        raise TransportError(f"Unknown transport kind: {kind!r}") from exc

    if kind is TransportKind.UART:
        return UartSetting(
            serial_port=serial_port,
            baud_rate=baud_rate,
            timeout_ms=timeout_ms,
        )
    return _NETWORK_SETTINGS[kind](host=host, port=port, timeout_ms=timeout_ms)
