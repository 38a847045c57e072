"""Cooperative cancellation primitives.

Loaders never interrupt work that is already running; they only consult
:attr:`AbortSignal.aborted` at their documented check points.
"""

from __future__ import annotations

from typing import Callable, Optional

from ..errors import LoadAbortedError


class AbortSignal:
    def __init__(self) -> None:
        self._aborted = False
        self._reason: Optional[str] = None
        self._callbacks: list[Callable[[], None]] = []

    @property
    def aborted(self) -> bool:
        return self._aborted

    @property
    def reason(self) -> Optional[str]:
        return self._reason

    def add_listener(self, callback: Callable[[], None]) -> None:
        if self._aborted:
            callback()
        else:
            self._callbacks.append(callback)

    def throw_if_aborted(self) -> None:
        if self._aborted:
            raise LoadAbortedError()

    def _abort(self, reason: Optional[str]) -> None:
        if self._aborted:
            return
        self._aborted = True
        self._reason = reason
        callbacks, self._callbacks = self._callbacks, []
        for callback in callbacks:
            callback()


class AbortController:
    """Owner side of an :class:`AbortSignal`."""

    def __init__(self) -> None:
        self.signal = AbortSignal()

    def abort(self, reason: Optional[str] = None) -> None:
        self.signal._abort(reason)


def check_signal(signal: Optional[AbortSignal]) -> None:
    if signal is not None:
        signal.throw_if_aborted()
