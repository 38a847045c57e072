import pytest

from fxcatalog.domain.cancellation import AbortController, check_signal
from fxcatalog.errors import LoadAbortedError


def test_signal_starts_clear():
    controller = AbortController()
    assert controller.signal.aborted is False
    check_signal(controller.signal)
    check_signal(None)


def test_abort_sets_reason_and_raises():
    controller = AbortController()
    controller.abort("user cancelled")

    assert controller.signal.aborted is True
    assert controller.signal.reason == "user cancelled"
    with pytest.raises(LoadAbortedError, match="Loading was aborted"):
        check_signal(controller.signal)


def test_listeners_fire_once():
    controller = AbortController()
    calls = []
    controller.signal.add_listener(lambda: calls.append("early"))

    controller.abort()
    controller.abort()
    controller.signal.add_listener(lambda: calls.append("late"))

    assert calls == ["early", "late"]
