"""Cancellation token passed into a broadcast."""

import time
from typing import Optional

from telenotify.domain.errors import Cancelled, DeadlineExceeded


class CancelToken:
    """Flag-style cancellation signal with an optional monotonic deadline.

    Checking the token never blocks and never interrupts work in flight;
    callers poll it between units of work.
    """

    def __init__(self, deadline: Optional[float] = None):
        self._deadline = deadline
        self._error: Optional[Cancelled] = None

    @classmethod
    def with_timeout(cls, seconds: float) -> "CancelToken":
        return cls(deadline=time.monotonic() + seconds)

    @property
    def deadline(self) -> Optional[float]:
        return self._deadline

    def cancel(self, reason: Optional[str] = None) -> None:
        """Signal cancellation. The first reason wins."""
        if self._error is None:
            self._error = Cancelled(reason)

    @property
    def cancelled(self) -> bool:
        return self.error() is not None

    def error(self) -> Optional[Cancelled]:
        """Return the cancellation error, or None while the token is live."""
        if self._error is not None:
            return self._error
        if self._deadline is not None and time.monotonic() >= self._deadline:
            self._error = DeadlineExceeded()
            return self._error
        return None

    def raise_if_cancelled(self) -> None:
        err = self.error()
        if err is not None:
            raise err
