"""Chat resolver — map a username to a chat id by watching inbound updates.

Pure domain logic; the connection is supplied through ConnectionPort.
"""

import asyncio
import sys
from typing import Optional, Sequence

from telenotify.domain.errors import FetchFailed, ResolveTimeout
from telenotify.ports.inbound import Update
from telenotify.ports.outbound import ConnectionPort

DEFAULT_POLL_INTERVAL = 2.0
DEFAULT_FETCH_TIMEOUT = 0.5


def _log(msg: str):
    print(msg, file=sys.stderr)


def find_author_id(updates: Sequence[Update], username: str) -> Optional[int]:
    """Return the id of the first update authored by ``username``, in feed order."""
    for update in updates:
        author = update.author
        if author is not None and author.username == username:
            return author.id
    return None


class ChatResolver:
    """Polls the update feed until the target user writes or the deadline passes."""

    def __init__(
        self,
        connection: ConnectionPort,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
        fetch_timeout: float = DEFAULT_FETCH_TIMEOUT,
        max_fetch_failures: Optional[int] = None,
    ):
        if poll_interval <= 0:
            raise ValueError("poll_interval must be positive")
        if fetch_timeout <= 0:
            raise ValueError("fetch_timeout must be positive")
        if max_fetch_failures is not None and max_fetch_failures < 1:
            raise ValueError("max_fetch_failures must be at least 1")
        self._connection = connection
        self._poll_interval = poll_interval
        self._fetch_timeout = fetch_timeout
        self._max_fetch_failures = max_fetch_failures

    async def resolve(self, username: str, timeout: float) -> int:
        """Return the chat id of ``username`` once they message the bot.

        Raises:
            ValueError: empty username or non-positive timeout.
            ResolveTimeout: no matching update before ``timeout`` seconds.
            FetchFailed: only when ``max_fetch_failures`` is set and that many
                fetches fail in a row.
        """
        if not username:
            raise ValueError("username must not be empty")
        if timeout <= 0:
            raise ValueError("timeout must be positive")

        loop = asyncio.get_running_loop()
        deadline = loop.time() + timeout
        next_tick = loop.time() + self._poll_interval
        failures = 0

        while True:
            now = loop.time()
            # Deadline first: a tie between tick and deadline is a timeout.
            if now >= deadline:
                raise ResolveTimeout(username, timeout)
            if now < next_tick:
                await asyncio.sleep(min(next_tick, deadline) - now)
                continue

            # Missed ticks collapse into one.
            next_tick = max(next_tick + self._poll_interval, now)

            try:
                updates = await asyncio.wait_for(
                    self._connection.get_updates(timeout=self._fetch_timeout),
                    timeout=deadline - now,
                )
            except Exception as e:
                if loop.time() >= deadline:
                    continue
                failures += 1
                _log(f"[resolver] fetching updates failed ({failures} in a row): {e!r}")
                if self._max_fetch_failures is not None and failures >= self._max_fetch_failures:
                    raise FetchFailed(failures) from e
                continue

            failures = 0
            chat_id = find_author_id(updates, username)
            if chat_id is not None:
                return chat_id
