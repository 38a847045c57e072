"""Pure Python signal for observer-pattern callbacks.

``Signal.connect`` returns an unsubscribe callable so listeners registered
through the catalog API can detach themselves without keeping a reference
to the signal.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

_logger = logging.getLogger(__name__)


class Signal:
    """Ordered list of handlers invoked on :meth:`emit`.

    Exceptions raised by individual handlers are caught and logged so that one
    failing handler does not prevent subsequent handlers from executing (same
    semantics as ``EventBus``).
    """

    def __init__(self, name: str = "") -> None:
        self._name = name
        self._handlers: list[Callable] = []

    def connect(self, handler: Callable) -> Callable[[], None]:
        if handler not in self._handlers:
            self._handlers.append(handler)

        def _unsubscribe() -> None:
            if handler in self._handlers:
                self._handlers.remove(handler)

        return _unsubscribe

    def disconnect(self, handler: Callable) -> None:
        self._handlers.remove(handler)

    def disconnect_all(self) -> None:
        self._handlers.clear()

    def emit(self, *args: Any, **kwargs: Any) -> None:
        for handler in list(self._handlers):
            try:
                handler(*args, **kwargs)
            except Exception as exc:
                _logger.error("Signal %s handler %r failed: %s", self._name, handler, exc)

    @property
    def handler_count(self) -> int:
        return len(self._handlers)
