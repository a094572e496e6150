"""telenotify — resolve Telegram chat ids and broadcast notifications."""

from telenotify.config import AppConfig, TelegramConfig, __version__
from telenotify.domain import (
    INVALID_CHAT_ID,
    Cancelled,
    CancelToken,
    DeadlineExceeded,
    FetchFailed,
    Notifier,
    NotifierError,
    ParseMode,
    ResolveTimeout,
    SendFailure,
    TelegramAPIError,
    TransportError,
)
from telenotify.adapters.telegram import TelegramBotClient
from telenotify.launcher import create_notifier

__all__ = [
    "__version__",
    "AppConfig",
    "TelegramConfig",
    "INVALID_CHAT_ID",
    "Cancelled",
    "CancelToken",
    "DeadlineExceeded",
    "FetchFailed",
    "Notifier",
    "NotifierError",
    "ParseMode",
    "ResolveTimeout",
    "SendFailure",
    "TelegramAPIError",
    "TransportError",
    "TelegramBotClient",
    "create_notifier",
]
