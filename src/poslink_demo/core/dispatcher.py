"""Init action dispatcher.

One action runs at a time. Starting a new action cancels the previous one
through its :class:`CancelToken` and takes over the single slot. The SDK
calls themselves cannot be interrupted, so a cancelled worker may keep
running until the SDK returns; its result is then discarded. Only the
action that still owns the slot when it finishes delivers a report.
"""

from __future__ import annotations

import threading
from concurrent.futures import Future
from dataclasses import dataclass, field

from poslink_demo.config.parameters import ParameterStore
from poslink_demo.core.reports import INIT_FAILED_REPORT, format_init_report
from poslink_demo.sdk.connector import TerminalConnector
from poslink_demo.transport import CommunicationSetting
from poslink_demo.utils.logging import get_logger

logger = get_logger(__name__)


class CancelToken:
    """Cooperative cancellation flag checked between SDK calls."""

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()


def run_init_action(
    connector: TerminalConnector,
    setting: CommunicationSetting,
    token: CancelToken | None = None,
) -> str | None:
    """Obtain a terminal, send Init and format the outcome.

    Returns:
        The report string, or None if *token* was cancelled at a checkpoint.
    """
    token = token or CancelToken()
    if token.cancelled:
        return None

    terminal = connector.get_terminal(setting)
    if terminal is None:
        return INIT_FAILED_REPORT
    if token.cancelled:
        return None

    result = terminal.init()
    if token.cancelled:
        return None
    return format_init_report(result)


@dataclass
class _Action:
    seq: int
    token: CancelToken = field(default_factory=CancelToken)
    future: Future = field(default_factory=Future)


class ActionDispatcher:
    """Runs the Init action on a background thread, newest request wins.

    Args:
        store: Source of the connection parameters, read when each action
               starts.
        connector: SDK boundary used to reach the terminal.
    """

    def __init__(self, store: ParameterStore, connector: TerminalConnector) -> None:
        self._store = store
        self._connector = connector
        # Reentrant: future done-callbacks run under it and may start a new action.
        self._lock = threading.RLock()
        self._seq = 0
        self._current: _Action | None = None

    @property
    def busy(self) -> bool:
        with self._lock:
            return self._current is not None

    def run_init(self) -> Future:
        """Cancel any in-flight action and start a new Init.

        Returns:
            Future resolving to the report string, or to None when this
            action is superseded or cancelled before it finishes.
        """
        with self._lock:
            previous = self._current
            if previous is not None:
                previous.token.cancel()
                logger.info("init_superseded", seq=previous.seq)
            self._seq += 1
            action = _Action(seq=self._seq)
            self._current = action

        action.future.set_running_or_notify_cancel()
        thread = threading.Thread(
            target=self._work,
            args=(action,),
            name=f"poslink-init-{action.seq}",
            daemon=True,
        )
        thread.start()
        return action.future

    def cancel(self) -> bool:
        """Cancel the in-flight action, if any. Its result will be discarded."""
        with self._lock:
            if self._current is None:
                return False
            self._current.token.cancel()
            logger.info("init_cancelled", seq=self._current.seq)
            return True

    def _finish(
        self,
        action: _Action,
        report: str | None = None,
        error: BaseException | None = None,
    ) -> bool:
        """Free the slot and resolve *action*'s future in one locked step.

        A superseded or cancelled action resolves to None. Resolving under
        the lock means no newer action can start, and so resolve, in between.

        Returns:
            True if the report or error was delivered.
        """
        with self._lock:
            owns_slot = self._current is action
            if owns_slot:
                self._current = None
            deliverable = owns_slot and not action.token.cancelled
            if not deliverable or (report is None and error is None):
                action.future.set_result(None)
                return False
            if error is not None:
                action.future.set_exception(error)
            else:
                action.future.set_result(report)
            return True

    def _work(self, action: _Action) -> None:
        log = logger.bind(seq=action.seq)
        try:
            setting = self._store.communication_setting()
            log.info("init_started", kind=str(setting.kind))
            report = run_init_action(self._connector, setting, action.token)
        except Exception as exc:
            log.exception("init_error")
            self._finish(action, error=exc)
            return

        if self._finish(action, report=report):
            log.info("init_finished", outcome=report.splitlines()[0])
        else:
            log.info("init_result_discarded")
