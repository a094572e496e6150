"""Configuration and shared state."""

__version__ = "0.1.0"

import os
import sys
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()

_stderr_print = lambda *a, **kw: print(*a, **kw, file=sys.stderr)

TELEGRAM_API_BASE = "https://api.telegram.org"
SUPPORTED_PARSE_MODES = ("HTML", "Markdown", "MarkdownV2")


def _parse_chat_ids(raw: str) -> List[int]:
    """Parse a comma-separated list of chat ids, skipping invalid entries."""
    chat_ids = []
    for item in raw.split(","):
        item = item.strip()
        if not item:
            continue
        try:
            chat_ids.append(int(item))
        except ValueError:
            _stderr_print(f"Ignoring invalid chat id in TELEGRAM_CHAT_IDS: {item!r}")
    return chat_ids


def _env_int(key: str, default: int) -> int:
    raw = os.getenv(key, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        _stderr_print(f"Invalid {key}={raw!r}, falling back to {default}")
        return default


def _env_float(key: str, default: float) -> float:
    raw = os.getenv(key, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        _stderr_print(f"Invalid {key}={raw!r}, falling back to {default}")
        return default


def _env_optional_int(key: str) -> Optional[int]:
    raw = os.getenv(key, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        _stderr_print(f"Invalid {key}={raw!r}, ignoring")
        return None


def _env_parse_mode() -> str:
    mode = os.getenv("TELEGRAM_PARSE_MODE", "HTML").strip()
    if mode not in SUPPORTED_PARSE_MODES:
        _stderr_print(f"Unsupported TELEGRAM_PARSE_MODE={mode!r}, falling back to 'HTML'")
        return "HTML"
    return mode


@dataclass
class TelegramConfig:
    bot_token: str = ""
    chat_ids: List[int] = field(default_factory=list)
    api_base: str = TELEGRAM_API_BASE
    poll_interval: float = 2.0
    fetch_timeout: float = 0.5
    send_timeout: float = 10.0
    parse_mode: str = "HTML"
    max_fetch_failures: Optional[int] = None

    @property
    def is_configured(self) -> bool:
        return bool(self.bot_token)


@dataclass
class AppConfig:
    """Typed configuration for the notifier process."""

    port: int = 3000
    telegram: TelegramConfig = field(default_factory=TelegramConfig)

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create AppConfig from environment variables."""
        return cls(
            port=_env_int("PORT", 3000),
            telegram=TelegramConfig(
                bot_token=os.getenv("TELEGRAM_BOT_TOKEN", ""),
                chat_ids=_parse_chat_ids(os.getenv("TELEGRAM_CHAT_IDS", "")),
                api_base=os.getenv("TELEGRAM_API_BASE", TELEGRAM_API_BASE).rstrip("/"),
                poll_interval=_env_float("TELEGRAM_POLL_INTERVAL", 2.0),
                fetch_timeout=_env_float("TELEGRAM_FETCH_TIMEOUT", 0.5),
                send_timeout=_env_float("TELEGRAM_SEND_TIMEOUT", 10.0),
                parse_mode=_env_parse_mode(),
                max_fetch_failures=_env_optional_int("TELEGRAM_MAX_FETCH_FAILURES"),
            ),
        )
