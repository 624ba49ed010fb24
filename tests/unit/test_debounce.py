"""
Tests for the debounce wrapper.
"""

import threading
import time

from formatkit.utils.debounce import debounce


class TestDebounce:
    """debounce"""

    def test_coalesces_calls_and_uses_latest_args(self) -> None:
        """Rapid calls run the function once with the last arguments"""
        calls = []
        done = threading.Event()

        def record(value):
            calls.append(value)
            done.set()

        wrapped = debounce(record, 0.05)
        wrapped("a")
        wrapped("b")
        wrapped("c")

        assert done.wait(2.0)
        time.sleep(0.1)
        assert calls == ["c"]

    def test_cancel_drops_pending_call(self) -> None:
        calls = []
        wrapped = debounce(calls.append, 0.05)
        wrapped("a")
        wrapped.cancel()
        time.sleep(0.15)
        assert calls == []

    def test_flush_runs_pending_call_now(self) -> None:
        calls = []
        wrapped = debounce(calls.append, 10)
        wrapped("a")
        wrapped.flush()
        assert calls == ["a"]

        # Nothing pending any more
        wrapped.flush()
        assert calls == ["a"]

    def test_keeps_function_metadata(self) -> None:
        def handler():
            """Doc."""

        wrapped = debounce(handler)
        assert wrapped.__name__ == "handler"
        assert wrapped.__doc__ == "Doc."
