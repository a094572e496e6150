"""Domain layer — pure Python, no framework dependencies."""

from telenotify.domain.errors import (
    INVALID_CHAT_ID,
    Cancelled,
    DeadlineExceeded,
    FetchFailed,
    NotifierError,
    ResolveTimeout,
    SendFailure,
    TelegramAPIError,
    TransportError,
)
from telenotify.domain.message import DEFAULT_PARSE_MODE, OutboundMessage, ParseMode, compose_message
from telenotify.domain.cancel import CancelToken
from telenotify.domain.resolver import ChatResolver, find_author_id
from telenotify.domain.broadcaster import Broadcaster
from telenotify.domain.notifier import Notifier

__all__ = [
    "INVALID_CHAT_ID",
    "Cancelled",
    "DeadlineExceeded",
    "FetchFailed",
    "NotifierError",
    "ResolveTimeout",
    "SendFailure",
    "TelegramAPIError",
    "TransportError",
    "DEFAULT_PARSE_MODE",
    "OutboundMessage",
    "ParseMode",
    "compose_message",
    "CancelToken",
    "ChatResolver",
    "find_author_id",
    "Broadcaster",
    "Notifier",
]
