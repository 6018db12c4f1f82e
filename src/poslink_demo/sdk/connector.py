"""Protocols for the two SDK calls the demo makes, plus the vendor adapter."""

from __future__ import annotations

from types import ModuleType
from typing import Protocol, runtime_checkable

from poslink_demo.exceptions import SdkLoadError
from poslink_demo.sdk.loader import load_sdk
from poslink_demo.sdk.models import InitResult
from poslink_demo.transport import CommunicationSetting
from poslink_demo.utils.logging import get_logger

logger = get_logger(__name__)


@runtime_checkable
class Terminal(Protocol):
    """A logical connection to a POS terminal."""

    def init(self) -> InitResult: ...


@runtime_checkable
class TerminalConnector(Protocol):
    """Obtains terminal handles for a communication setting."""

    def get_terminal(self, setting: CommunicationSetting) -> Terminal | None: ...


class _VendorTerminal:
    """Wraps a vendor terminal so ``init()`` yields an :class:`InitResult`."""

    def __init__(self, handle: object) -> None:
        self._handle = handle

    def init(self) -> InitResult:
        return InitResult.from_sdk(self._handle.init())


def _check_sdk(sdk: ModuleType) -> ModuleType:
    if not callable(getattr(sdk, "get_terminal", None)):
        raise SdkLoadError(
            f"SDK module {sdk.__name__!r} does not provide get_terminal()"
        )
    return sdk


class PosLinkConnector:
    """Terminal connector backed by the vendor POSLink SDK module.

    The module must expose ``get_terminal(setting)`` returning a terminal
    object with an ``init()`` method, or ``None`` when no terminal can be
    reached. If *sdk* is omitted it is loaded with :func:`load_sdk` on
    first use, so a missing SDK surfaces on the first Init rather than at
    startup.
    """

    def __init__(self, sdk: ModuleType | None = None) -> None:
        self._sdk = _check_sdk(sdk) if sdk is not None else None

    @property
    def sdk(self) -> ModuleType:
        if self._sdk is None:
            self._sdk = _check_sdk(load_sdk())
        return self._sdk

    def get_terminal(self, setting: CommunicationSetting) -> Terminal | None:
        logger.debug("sdk_get_terminal", kind=str(setting.kind))
        handle = self.sdk.get_terminal(setting)
        if handle is None:
            logger.warning("sdk_no_terminal", kind=str(setting.kind))
            return None
        return _VendorTerminal(handle)
