"""Inbound port — platform-agnostic update representation."""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Author:
    """Sender of an inbound message."""

    id: int
    username: str = ""
    is_bot: bool = False


@dataclass(frozen=True)
class Update:
    """A single item from the platform's pending-update feed."""

    update_id: int
    author: Optional[Author] = None
    chat_id: Optional[int] = None
    text: str = ""

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Update":
        """Build an Update from a Telegram ``getUpdates`` result item.

        Only ``message.from`` counts as an author. Edited messages, channel
        posts and service updates come through with ``author=None``.
        """
        message = data.get("message") or {}
        sender = message.get("from")
        author = None
        if sender and "id" in sender:
            author = Author(
                id=int(sender["id"]),
                username=sender.get("username", ""),
                is_bot=bool(sender.get("is_bot", False)),
            )
        chat = message.get("chat") or {}
        chat_id = int(chat["id"]) if "id" in chat else None
        return cls(
            update_id=int(data.get("update_id", 0)),
            author=author,
            chat_id=chat_id,
            text=message.get("text", ""),
        )
