"""Ordering of pipeline steps: each step can wait for the previous one."""

from __future__ import annotations

import threading
from collections import deque
from typing import Any

SUCCESS = True
ERROR = False


class PreviousStepFailed(Exception):
    """Raised by Waiter.wait when the previous step reported an error."""


class _Signal:
    """One-way completion signal carrying success or failure."""

    def __init__(self) -> None:
        self._cond = threading.Condition()
        self._values: deque[bool] = deque()
        self._closed = False

    def send(self, ok: bool) -> None:
        with self._cond:
            if self._closed:
                return
            self._values.append(ok)
            self._cond.notify_all()

    def close(self) -> None:
        with self._cond:
            self._closed = True
            self._cond.notify_all()

    def receive(self) -> bool:
        with self._cond:
            self._cond.wait_for(lambda: bool(self._values) or self._closed)
            return self._values.popleft() if self._values else ERROR


class Waiter:
    """A step's handle: signals its own outcome, waits for its predecessor's.

    ``messages`` is a queue-like object with a ``put`` method.
    """

    def __init__(self, messages: Any, *, previous: _Signal | None = None) -> None:
        self.messages = messages
        self._prev = previous
        self._next: _Signal | None = _Signal()

    def next(self) -> Waiter:
        """Return the waiter of the following step."""
        return Waiter(self.messages, previous=self._next)

    def wait(self) -> None:
        """Block until the previous step finishes; only the first call waits."""
        if self._prev is None:
            return
        ok = self._prev.receive()
        self._prev = None
        if not ok:
            raise PreviousStepFailed("an error occurred in previous processing")

    def close(self) -> None:
        """Report success to the following step."""
        if self._next is not None:
            self._next.send(SUCCESS)

    def error(self, err: BaseException | str) -> None:
        """Report ``err`` as a message and failure to the following step."""
        self.messages.put(str(err))
        if self._next is not None:
            self._next.send(ERROR)

    def log(self, msg: str) -> None:
        self.messages.put(msg)

    def destroy(self) -> None:
        """Finish this step; a following step that still waits sees a failure."""
        if self._next is not None:
            self._next.close()


def new_closed_waiter(messages: Any) -> Waiter:
    """Return a waiter whose step has already finished successfully."""
    waiter = Waiter(messages)
    waiter.close()
    waiter.destroy()
    return waiter