"""Notifier — owns the connection and the recipient list."""

from typing import Iterable, Optional, Tuple

from telenotify.domain.broadcaster import Broadcaster
from telenotify.domain.cancel import CancelToken
from telenotify.domain.message import DEFAULT_PARSE_MODE, ParseMode
from telenotify.domain.resolver import DEFAULT_FETCH_TIMEOUT, DEFAULT_POLL_INTERVAL, ChatResolver
from telenotify.ports.outbound import ConnectionPort


class Notifier:
    """Resolves usernames to chat ids and broadcasts to registered chats.

    Duplicate chat ids are kept; each occurrence receives its own copy.
    """

    def __init__(
        self,
        connection: ConnectionPort,
        chat_ids: Iterable[int] = (),
        *,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
        fetch_timeout: float = DEFAULT_FETCH_TIMEOUT,
        parse_mode: ParseMode = DEFAULT_PARSE_MODE,
        max_fetch_failures: Optional[int] = None,
    ):
        self._connection = connection
        self._chat_ids = []
        self._resolver = ChatResolver(
            connection,
            poll_interval=poll_interval,
            fetch_timeout=fetch_timeout,
            max_fetch_failures=max_fetch_failures,
        )
        self._broadcaster = Broadcaster(connection, parse_mode=parse_mode)
        self.add_receivers(*chat_ids)

    @property
    def client(self) -> ConnectionPort:
        return self._connection

    @property
    def receivers(self) -> Tuple[int, ...]:
        return tuple(self._chat_ids)

    def add_receivers(self, *chat_ids: int) -> None:
        """Append chat ids; ``send`` delivers to all of them in this order."""
        for chat_id in chat_ids:
            if isinstance(chat_id, bool) or not isinstance(chat_id, int):
                raise TypeError(f"chat id must be an int, got {chat_id!r}")
        self._chat_ids.extend(chat_ids)

    async def get_chat_id(self, username: str, timeout: float) -> int:
        """Wait for ``username`` to message the bot and return their chat id."""
        return await self._resolver.resolve(username, timeout)

    async def send(self, subject: str, message: str, token: Optional[CancelToken] = None) -> None:
        """Send a message to all registered chats. The message body supports HTML."""
        await self._broadcaster.send(self.receivers, subject, message, token=token)
