"""Transport kinds and the communication settings derived from them."""

from poslink_demo.transport.base import (
    CommunicationSetting,
    HttpSetting,
    HttpsSetting,
    NetworkSetting,
    SslSetting,
    TcpSetting,
    TransportKind,
    UartSetting,
    build_setting,
)

__all__ = [
    "CommunicationSetting",
    "HttpSetting",
    "HttpsSetting",
    "NetworkSetting",
    "SslSetting",
    "TcpSetting",
    "TransportKind",
    "UartSetting",
    "build_setting",
]
