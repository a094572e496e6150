"""Telegram Bot API client using aiohttp — implements ConnectionPort."""

import asyncio
from typing import Any, Dict, List

import aiohttp

from telenotify.config import TELEGRAM_API_BASE
from telenotify.domain.errors import TelegramAPIError, TransportError
from telenotify.domain.message import DEFAULT_PARSE_MODE, ParseMode
from telenotify.ports.inbound import Author, Update


class TelegramBotClient:
    """Async Bot API client. One short-lived session per call."""

    def __init__(self, token: str, api_base: str = TELEGRAM_API_BASE, send_timeout: float = 10.0):
        self._token = token
        self._api_base = api_base.rstrip("/")
        self._send_timeout = send_timeout

    @property
    def is_configured(self) -> bool:
        return bool(self._token)

    def _url(self, method: str) -> str:
        return f"{self._api_base}/bot{self._token}/{method}"

    async def _call(self, method: str, payload: Dict[str, Any], timeout: float) -> Any:
        client_timeout = aiohttp.ClientTimeout(total=timeout)
        try:
            async with aiohttp.ClientSession(timeout=client_timeout) as session:
                async with session.post(self._url(method), json=payload) as resp:
                    data = await resp.json(content_type=None)
        except asyncio.TimeoutError as e:
            raise TransportError(f"{method} timed out after {timeout}s") from e
        except (aiohttp.ClientError, ValueError) as e:
            raise TransportError(f"{method} failed: {e}") from e

        if not isinstance(data, dict):
            raise TransportError(f"{method} returned an unexpected body: {data!r}")
        if not data.get("ok"):
            raise TelegramAPIError(method, data.get("error_code"), data.get("description", ""))
        return data.get("result")

    async def get_me(self) -> Author:
        """Return the bot's own identity; fails on a bad token."""
        result = await self._call("getMe", {}, self._send_timeout)
        return Author(
            id=int(result["id"]),
            username=result.get("username", ""),
            is_bot=bool(result.get("is_bot", True)),
        )

    async def get_updates(self, timeout: float, offset: int = 0) -> List[Update]:
        """Fetch pending updates without acknowledging them.

        ``timeout`` bounds the HTTP call; the API itself is short-polled.
        """
        result = await self._call("getUpdates", {"offset": offset, "timeout": 0}, timeout)
        return [Update.from_api(item) for item in result or []]

    async def send_message(
        self,
        chat_id: int,
        text: str,
        parse_mode: ParseMode = DEFAULT_PARSE_MODE,
    ) -> None:
        payload = {
            "chat_id": chat_id,
            "text": text,
            "parse_mode": ParseMode(parse_mode).value,
        }
        await self._call("sendMessage", payload, self._send_timeout)
