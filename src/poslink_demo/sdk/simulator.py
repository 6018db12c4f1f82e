"""Simulated terminal backend for running the demo without hardware."""

from __future__ import annotations

import time

from poslink_demo.sdk.models import InitResult
from poslink_demo.transport import CommunicationSetting
from poslink_demo.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_IDENTITY = InitResult(
    success=True,
    app_name="BroadPOS",
    app_version="1.08.03",
    serial_number="53012345",
    model_name="A920",
    os_version="PayDroid_8.1.0",
)


class SimulatedTerminal:
    """Terminal that answers Init from canned data after an optional delay."""

    def __init__(
        self,
        identity: InitResult = DEFAULT_IDENTITY,
        error_message: str | None = None,
        delay_s: float = 0.0,
    ) -> None:
        self._identity = identity
        self._error_message = error_message
        self._delay_s = delay_s
        self.init_calls = 0

    def init(self) -> InitResult:
        self.init_calls += 1
        if self._delay_s:
            time.sleep(self._delay_s)
        if self._error_message is not None:
            logger.info("simulated_init_failed", message=self._error_message)
            return InitResult(success=False, error_message=self._error_message)
        logger.info("simulated_init_ok", serial_number=self._identity.serial_number)
        return self._identity


class SimulatedConnector:
    """Connector handing out :class:`SimulatedTerminal` instances.

    Args:
        available: When False, ``get_terminal`` returns None.
        identity: Init response on success.
        error_message: If set, Init reports failure with this message.
        delay_s: Seconds each Init call blocks.
    """

    def __init__(
        self,
        available: bool = True,
        identity: InitResult = DEFAULT_IDENTITY,
        error_message: str | None = None,
        delay_s: float = 0.0,
    ) -> None:
        self.available = available
        self._identity = identity
        self._error_message = error_message
        self._delay_s = delay_s
        self.settings: list[CommunicationSetting] = []

    def get_terminal(self, setting: CommunicationSetting) -> SimulatedTerminal | None:
        self.settings.append(setting)
        if not self.available:
            return None
        return SimulatedTerminal(
            identity=self._identity,
            error_message=self._error_message,
            delay_s=self._delay_s,
        )
