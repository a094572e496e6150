"""Outbound ports — interfaces for external system adapters."""

from typing import Protocol, Sequence, runtime_checkable

from telenotify.domain.message import ParseMode
from telenotify.ports.inbound import Update


@runtime_checkable
class ConnectionPort(Protocol):
    """Authenticated session with a chat platform.

    Implementations raise ``TransportError`` (or a subclass) on failure.
    Calls are made sequentially; concurrent use is not required.
    """

    async def get_updates(self, timeout: float) -> Sequence[Update]: ...

    async def send_message(self, chat_id: int, text: str, parse_mode: ParseMode) -> None: ...
