"""Unit tests for the POSLink SDK boundary (models, loader, connector, simulator)."""

from __future__ import annotations

import types
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest

from poslink_demo.exceptions import SdkLoadError
from poslink_demo.sdk import loader
from poslink_demo.sdk.connector import PosLinkConnector, Terminal, TerminalConnector
from poslink_demo.sdk.models import InitResult
from poslink_demo.sdk.simulator import SimulatedConnector, SimulatedTerminal
from poslink_demo.transport import TcpSetting, UartSetting


@pytest.fixture(autouse=True)
def _reset_sdk_cache():
    loader.reset_sdk()
    yield
    loader.reset_sdk()


def _vendor_module(get_terminal) -> types.ModuleType:
    module = types.ModuleType("fake_poslink")
    module.get_terminal = get_terminal
    return module


# ---------------------------------------------------------------------------
# InitResult.from_sdk
# ---------------------------------------------------------------------------

class TestInitResultFromSdk:
    def test_camel_case_vendor_response(self):
        response = SimpleNamespace(
            success=True,
            appName="BroadPOS",
            appVersion="1.0",
            sn="S1",
            modelName="A80",
            osVersion="PayDroid",
        )
        result = InitResult.from_sdk(response)
        assert result.success is True
        assert result.app_name == "BroadPOS"
        assert result.serial_number == "S1"
        assert result.model_name == "A80"
        assert result.os_version == "PayDroid"

    def test_callable_success_flag(self):
        response = SimpleNamespace(is_successful=lambda: False, message="TIMEOUT")
        result = InitResult.from_sdk(response)
        assert result.success is False
        assert result.error_message == "TIMEOUT"

    def test_missing_fields_default_empty(self):
        result = InitResult.from_sdk(SimpleNamespace(success=False))
        assert result.error_message == ""
        assert result.app_name == ""

    def test_passthrough(self, identity):
        assert InitResult.from_sdk(identity) is identity


# ---------------------------------------------------------------------------
# Loader
# ---------------------------------------------------------------------------

class TestLoadSdk:
    def test_missing_module_raises(self):
        with pytest.raises(SdkLoadError, match="not importable"):
            loader.load_sdk("poslink_demo_no_such_sdk")

    def test_env_var_selects_module(self, monkeypatch):
        monkeypatch.setenv(loader.SDK_MODULE_ENV, "json")
        module = loader.load_sdk()
        assert module.__name__ == "json"

    def test_default_module_name(self, monkeypatch):
        monkeypatch.delenv(loader.SDK_MODULE_ENV, raising=False)
        assert loader.sdk_module_name() == "poslink"

    def test_result_is_cached(self):
        with patch.object(loader, "importlib") as fake_importlib:
            fake_importlib.import_module.return_value = types.ModuleType("poslink")
            first = loader.load_sdk("poslink")
            second = loader.load_sdk()
        assert first is second
        fake_importlib.import_module.assert_called_once_with("poslink")


# ---------------------------------------------------------------------------
# PosLinkConnector
# ---------------------------------------------------------------------------

class TestPosLinkConnector:
    def test_rejects_module_without_get_terminal(self):
        with pytest.raises(SdkLoadError, match="get_terminal"):
            PosLinkConnector(types.ModuleType("empty"))

    def test_no_handle_returns_none(self):
        get_terminal = MagicMock(return_value=None)
        connector = PosLinkConnector(_vendor_module(get_terminal))
        setting = TcpSetting()
        assert connector.get_terminal(setting) is None
        get_terminal.assert_called_once_with(setting)

    def test_init_converts_vendor_response(self):
        handle = MagicMock()
        handle.init.return_value = SimpleNamespace(success=False, message="BUSY")
        connector = PosLinkConnector(_vendor_module(MagicMock(return_value=handle)))

        terminal = connector.get_terminal(UartSetting(serial_port="COM2"))

        assert isinstance(terminal, Terminal)
        result = terminal.init()
        assert result == InitResult(success=False, error_message="BUSY")

    def test_lazy_load_failure_surfaces_on_first_use(self, monkeypatch):
        monkeypatch.setenv(loader.SDK_MODULE_ENV, "poslink_demo_no_such_sdk")
        connector = PosLinkConnector()
        with pytest.raises(SdkLoadError):
            connector.get_terminal(TcpSetting())

    def test_satisfies_protocol(self):
        connector = PosLinkConnector(_vendor_module(lambda s: None))
        assert isinstance(connector, TerminalConnector)


# ---------------------------------------------------------------------------
# Simulator
# ---------------------------------------------------------------------------

class TestSimulator:
    def test_records_settings(self):
        connector = SimulatedConnector()
        connector.get_terminal(TcpSetting(port=1))
        assert connector.settings == [TcpSetting(port=1)]

    def test_unavailable(self):
        assert SimulatedConnector(available=False).get_terminal(TcpSetting()) is None

    def test_failure_message(self):
        result = SimulatedTerminal(error_message="NOT READY").init()
        assert result.success is False
        assert result.error_message == "NOT READY"

    def test_success_identity(self, identity):
        terminal = SimulatedTerminal(identity=identity)
        assert terminal.init() is identity
        assert terminal.init_calls == 1
