"""Unit tests for poslink_demo.core.dispatcher — single-slot Init actions."""

from __future__ import annotations

import threading
from unittest.mock import MagicMock

import pytest

from poslink_demo.core.dispatcher import ActionDispatcher, CancelToken, run_init_action
from poslink_demo.core.reports import format_init_report
from poslink_demo.sdk.models import InitResult
from poslink_demo.sdk.simulator import SimulatedConnector, SimulatedTerminal
from poslink_demo.transport import TcpSetting, TransportKind

WAIT = 5.0


class GatedTerminal:
    """Terminal whose init() blocks until released, like a slow SDK call."""

    def __init__(self, result: InitResult) -> None:
        self.result = result
        self.entered = threading.Event()
        self.release = threading.Event()

    def init(self) -> InitResult:
        self.entered.set()
        assert self.release.wait(WAIT)
        return self.result


class SequenceConnector:
    """Connector handing out a fixed sequence of terminals."""

    def __init__(self, *terminals) -> None:
        self._terminals = list(terminals)

    def get_terminal(self, setting):
        return self._terminals.pop(0)


# ---------------------------------------------------------------------------
# run_init_action
# ---------------------------------------------------------------------------

class TestRunInitAction:
    def test_success(self, connector, identity):
        assert run_init_action(connector, TcpSetting()) == format_init_report(identity)

    def test_no_terminal(self):
        assert run_init_action(SimulatedConnector(available=False), TcpSetting()) == "Init Failed!"

    def test_sdk_failure(self):
        connector = SimulatedConnector(error_message="COMM ERROR")
        report = run_init_action(connector, TcpSetting())
        assert report == "Trans Failed!\nError Message:COMM ERROR"

    def test_cancelled_before_start_skips_sdk(self):
        connector = MagicMock()
        token = CancelToken()
        token.cancel()
        assert run_init_action(connector, TcpSetting(), token) is None
        connector.get_terminal.assert_not_called()

    def test_cancelled_before_init_skips_init(self):
        token = CancelToken()
        terminal = MagicMock()

        def get_terminal(setting):
            token.cancel()
            return terminal

        connector = MagicMock()
        connector.get_terminal.side_effect = get_terminal
        assert run_init_action(connector, TcpSetting(), token) is None
        terminal.init.assert_not_called()


# ---------------------------------------------------------------------------
# ActionDispatcher
# ---------------------------------------------------------------------------

class TestActionDispatcher:
    def test_success_report(self, store, connector, identity):
        dispatcher = ActionDispatcher(store, connector)
        assert dispatcher.run_init().result(WAIT) == format_init_report(identity)
        assert not dispatcher.busy

    def test_reads_store_when_started(self, store, connector):
        store.update(kind=TransportKind.HTTPS, host="10.2.3.4", port=8443)
        ActionDispatcher(store, connector).run_init().result(WAIT)
        setting = connector.settings[0]
        assert setting.kind is TransportKind.HTTPS
        assert setting.host == "10.2.3.4"
        assert setting.port == 8443

    def test_no_terminal(self, store):
        dispatcher = ActionDispatcher(store, SimulatedConnector(available=False))
        assert dispatcher.run_init().result(WAIT) == "Init Failed!"

    def test_sdk_failure(self, store):
        dispatcher = ActionDispatcher(store, SimulatedConnector(error_message="DECLINED"))
        assert dispatcher.run_init().result(WAIT) == "Trans Failed!\nError Message:DECLINED"

    def test_sdk_exception_propagates_to_future(self, store):
        connector = MagicMock()
        connector.get_terminal.side_effect = OSError("socket closed")
        dispatcher = ActionDispatcher(store, connector)

        with pytest.raises(OSError, match="socket closed"):
            dispatcher.run_init().result(WAIT)
        assert not dispatcher.busy

    def test_second_trigger_supersedes_first(self, store, identity):
        slow = GatedTerminal(InitResult(success=False, error_message="stale"))
        fast = SimulatedTerminal(identity=identity)
        dispatcher = ActionDispatcher(store, SequenceConnector(slow, fast))
        resolved: list[str | None] = []
        first_recorded = threading.Event()

        def on_first(future):
            resolved.append(future.result())
            first_recorded.set()

        first = dispatcher.run_init()
        first.add_done_callback(on_first)
        assert slow.entered.wait(WAIT)
        second = dispatcher.run_init()
        second.add_done_callback(lambda f: resolved.append(f.result()))

        assert second.result(WAIT) == format_init_report(identity)
        slow.release.set()
        assert first_recorded.wait(WAIT)
        assert first.result() is None
        assert resolved == [format_init_report(identity), None]

    def test_superseded_action_finishing_first_resolves_none(self, store, identity):
        old = GatedTerminal(InitResult(success=False, error_message="stale"))
        new = GatedTerminal(identity)
        dispatcher = ActionDispatcher(store, SequenceConnector(old, new))

        first = dispatcher.run_init()
        assert old.entered.wait(WAIT)
        second = dispatcher.run_init()
        assert new.entered.wait(WAIT)

        old.release.set()
        assert first.result(WAIT) is None
        assert not second.done()
        assert dispatcher.busy

        new.release.set()
        assert second.result(WAIT) == format_init_report(identity)
        assert not dispatcher.busy

    def test_cancel_discards_result(self, store, identity):
        slow = GatedTerminal(identity)
        dispatcher = ActionDispatcher(store, SequenceConnector(slow))

        future = dispatcher.run_init()
        assert slow.entered.wait(WAIT)
        assert dispatcher.busy
        assert dispatcher.cancel() is True
        slow.release.set()

        assert future.result(WAIT) is None
        assert not dispatcher.busy

    def test_cancel_when_idle(self, store, connector):
        assert ActionDispatcher(store, connector).cancel() is False

    def test_rapid_triggers_do_not_crash(self, store, identity):
        connector = SimulatedConnector(identity=identity, delay_s=0.01)
        dispatcher = ActionDispatcher(store, connector)
        report = format_init_report(identity)

        futures = [dispatcher.run_init() for _ in range(10)]

        assert futures[-1].result(WAIT) == report
        for future in futures[:-1]:
            assert future.result(WAIT) in (None, report)

    def test_reports_resolve_in_trigger_order(self, store, identity):
        dispatcher = ActionDispatcher(store, SimulatedConnector(identity=identity))
        resolved: list[tuple[int, str | None]] = []
        all_recorded = threading.Event()

        def recorder(index):
            def record(future):
                resolved.append((index, future.result()))
                if len(resolved) == 50:
                    all_recorded.set()
            return record

        for index in range(50):
            dispatcher.run_init().add_done_callback(recorder(index))

        assert all_recorded.wait(WAIT)

        delivered = [index for index, report in resolved if report is not None]
        assert delivered == sorted(delivered)
        assert delivered[-1] == 49

    def test_trigger_from_done_callback(self, store, identity):
        dispatcher = ActionDispatcher(store, SimulatedConnector(identity=identity))
        report = format_init_report(identity)
        order: list[tuple[str, str | None]] = []
        finished = threading.Event()

        def on_second(future):
            order.append(("second", future.result()))
            finished.set()

        def on_first(future):
            order.append(("first", future.result()))
            dispatcher.run_init().add_done_callback(on_second)

        dispatcher.run_init().add_done_callback(on_first)

        assert finished.wait(WAIT)
        assert order == [("first", report), ("second", report)]
        assert not dispatcher.busy
