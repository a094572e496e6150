"""Telegram adapter."""

from telenotify.adapters.telegram.client import TelegramBotClient

__all__ = ["TelegramBotClient"]
