"""Tests for building a Notifier from configuration."""

import pytest
from unittest.mock import AsyncMock, patch

from telenotify.adapters.telegram.client import TelegramBotClient
from telenotify.config import AppConfig, TelegramConfig
from telenotify.domain.errors import TelegramAPIError
from telenotify.domain.message import ParseMode
from telenotify.launcher import create_notifier
from telenotify.ports.inbound import Author


class TestCreateNotifier:
    @pytest.mark.asyncio
    async def test_requires_token(self):
        with pytest.raises(ValueError, match="TELEGRAM_BOT_TOKEN"):
            await create_notifier(AppConfig())

    @pytest.mark.asyncio
    async def test_builds_notifier(self):
        config = AppConfig(telegram=TelegramConfig(bot_token="tok", chat_ids=[1, 2], parse_mode="Markdown"))
        me = Author(id=9, username="alerts_bot", is_bot=True)
        with patch.object(TelegramBotClient, "get_me", AsyncMock(return_value=me)):
            notifier = await create_notifier(config)
        assert notifier.receivers == (1, 2)
        assert isinstance(notifier.client, TelegramBotClient)
        assert notifier._broadcaster._parse_mode == ParseMode.MARKDOWN

    @pytest.mark.asyncio
    async def test_bad_token_fails_early(self):
        config = AppConfig(telegram=TelegramConfig(bot_token="bad"))
        with patch.object(TelegramBotClient, "get_me", AsyncMock(side_effect=TelegramAPIError("getMe", 401, "Unauthorized"))):
            with pytest.raises(TelegramAPIError):
                await create_notifier(config)
