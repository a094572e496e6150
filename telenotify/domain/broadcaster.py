"""Broadcaster — fan one message out to a list of chats."""

import sys
from typing import Iterable, Optional

from telenotify.domain.cancel import CancelToken
from telenotify.domain.errors import Cancelled, SendFailure
from telenotify.domain.message import DEFAULT_PARSE_MODE, ParseMode, compose_message
from telenotify.ports.outbound import ConnectionPort


def _log(msg: str):
    print(msg, file=sys.stderr)


class Broadcaster:
    """Sends a composed message to each chat in order, stopping at the first problem."""

    def __init__(self, connection: ConnectionPort, parse_mode: ParseMode = DEFAULT_PARSE_MODE):
        self._connection = connection
        self._parse_mode = ParseMode(parse_mode)

    async def send(
        self,
        chat_ids: Iterable[int],
        subject: str,
        body: str,
        token: Optional[CancelToken] = None,
    ) -> None:
        """Send ``subject`` and ``body`` to every chat in ``chat_ids``.

        The token is checked before each send; a send already in flight is
        never interrupted. Messages delivered before a failure or
        cancellation stay delivered.

        Raises:
            Cancelled: the token fired (``DeadlineExceeded`` for its deadline).
            SendFailure: a send failed; later chats were not attempted.
        """
        message = compose_message(subject, body, self._parse_mode)
        recipients = tuple(chat_ids)

        for index, chat_id in enumerate(recipients):
            if token is not None:
                try:
                    token.raise_if_cancelled()
                except Cancelled as e:
                    _log(f"[broadcaster] {e}; stopped after {index}/{len(recipients)} chats")
                    raise
            try:
                await self._connection.send_message(chat_id, message.text, message.parse_mode)
            except Exception as e:
                _log(f"[broadcaster] send to chat {chat_id} failed, abandoning {len(recipients) - index - 1} remaining")
                raise SendFailure(chat_id) from e
