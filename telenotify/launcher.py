"""Builds a Notifier from configuration."""

import sys
from typing import Optional

from telenotify.adapters.telegram.client import TelegramBotClient
from telenotify.config import AppConfig
from telenotify.domain.message import ParseMode
from telenotify.domain.notifier import Notifier


def _log(msg: str):
    print(msg, file=sys.stderr)


async def create_notifier(config: Optional[AppConfig] = None) -> Notifier:
    """Connect to Telegram and return a Notifier preloaded with configured chats.

    The token is checked with ``getMe`` first, so a bad token fails here
    rather than on the first send.
    """
    config = config or AppConfig.from_env()
    tg = config.telegram
    if not tg.is_configured:
        raise ValueError("TELEGRAM_BOT_TOKEN not configured")

    client = TelegramBotClient(tg.bot_token, api_base=tg.api_base, send_timeout=tg.send_timeout)
    me = await client.get_me()
    _log(f"[launcher] connected as @{me.username} ({len(tg.chat_ids)} receivers)")

    return Notifier(
        client,
        tg.chat_ids,
        poll_interval=tg.poll_interval,
        fetch_timeout=tg.fetch_timeout,
        parse_mode=ParseMode(tg.parse_mode),
        max_fetch_failures=tg.max_fetch_failures,
    )
