"""
Background regeneration for interactive callers.

An input surface regenerates the password on every keystroke. Generation
is a blocking PBKDF2 run, so it is pushed onto an executor, and only the
result of the most recent request is ever delivered: older requests that
finish late are dropped on arrival.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from functools import partial
from typing import Callable, Optional

from .cli import generate

logger = logging.getLogger(__name__)


class LatestRequestRunner:
    """
    Runs generation requests off the caller's thread, latest request wins.

    ``callback`` receives the password of the newest request only.
    ``on_error`` (optional) receives the exception if the newest request
    fails; failures of superseded requests are discarded with them.
    """

    def __init__(
        self,
        callback: Callable[[str], None],
        on_error: Optional[Callable[[BaseException], None]] = None,
        executor: Optional[Executor] = None,
        func: Callable[..., str] = generate,
    ) -> None:
        self._callback = callback
        self._on_error = on_error
        self._func = func
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(
            max_workers=2, thread_name_prefix="lpgen"
        )

        self._lock = threading.Lock()
        self._ticket = 0
        self._pending: Optional[Future] = None
        self._latest: Optional[str] = None

    def submit(self, **kwargs) -> Future:
        """
        Schedule a generation with the given keyword arguments.

        A previous request that has not started yet is cancelled; one that
        is already running finishes, but its result is ignored.
        """
        with self._lock:
            self._ticket += 1
            ticket = self._ticket
            if self._pending is not None:
                self._pending.cancel()
            future = self._executor.submit(self._func, **kwargs)
            self._pending = future

        future.add_done_callback(partial(self._deliver, ticket))
        return future

    def _deliver(self, ticket: int, future: Future) -> None:
        if future.cancelled():
            return

        with self._lock:
            if ticket != self._ticket:
                logger.debug("Discarding stale result of request %d", ticket)
                return
            self._pending = None

        exc = future.exception()
        if exc is not None:
            if self._on_error is None:
                logger.warning("Password generation failed: %s", exc)
            else:
                self._on_error(exc)
            return

        password = future.result()
        with self._lock:
            self._latest = password
        self._callback(password)

    def latest(self) -> Optional[str]:
        """Last password delivered to the callback, if any."""
        with self._lock:
            return self._latest

    def shutdown(self, wait: bool = True) -> None:
        if self._owns_executor:
            self._executor.shutdown(wait=wait)

    def __enter__(self) -> "LatestRequestRunner":
        return self

    def __exit__(self, *exc_info) -> None:
        self.shutdown()
