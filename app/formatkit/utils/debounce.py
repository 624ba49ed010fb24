"""
Debounce wrapper built on threading.Timer.

The wrapped callable runs once, with the arguments of the latest call,
after ``delay`` seconds pass without another call.
"""

import functools
import logging
import threading
from typing import Callable, Optional

logger = logging.getLogger(__name__)


def debounce(func: Callable, delay: float = 0.0) -> Callable:
    """
    Create a debounced version of ``func``.

    Args:
        func: Callable to delay
        delay: Quiet period in seconds (default: 0)

    Returns:
        Wrapper with extra ``cancel()`` and ``flush()`` methods:
        ``cancel()`` drops the pending call, ``flush()`` runs it immediately.

    Example:
        >>> save = debounce(store.save, 0.3)
        >>> save("a"); save("b")
        # store.save("b") runs once, 0.3s after the last call
    """
    lock = threading.Lock()
    state = {"timer": None, "args": (), "kwargs": {}}

    def _take_pending() -> Optional[tuple]:
        with lock:
            timer = state["timer"]
            if timer is None:
                return None
            timer.cancel()
            state["timer"] = None
            return state["args"], state["kwargs"]

    def _fire(timer: threading.Timer) -> None:
        with lock:
            # A newer call replaced this timer
            if state["timer"] is not timer:
                return
            state["timer"] = None
            args, kwargs = state["args"], state["kwargs"]
        func(*args, **kwargs)

    @functools.wraps(func)
    def wrapper(*args, **kwargs) -> None:
        with lock:
            if state["timer"] is not None:
                state["timer"].cancel()
            timer = threading.Timer(delay, lambda: _fire(timer))
            timer.daemon = True
            state.update(timer=timer, args=args, kwargs=kwargs)
        timer.start()

    def cancel() -> None:
        if _take_pending() is not None:
            logger.debug(f"Debounced call to {getattr(func, '__name__', func)!r} cancelled")

    def flush() -> None:
        pending = _take_pending()
        if pending is not None:
            args, kwargs = pending
            func(*args, **kwargs)

    wrapper.cancel = cancel
    wrapper.flush = flush
    return wrapper
