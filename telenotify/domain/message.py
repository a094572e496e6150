"""Outbound message composition."""

from dataclasses import dataclass
from enum import Enum


class ParseMode(str, Enum):
    HTML = "HTML"
    MARKDOWN = "Markdown"
    MARKDOWN_V2 = "MarkdownV2"


DEFAULT_PARSE_MODE = ParseMode.HTML


@dataclass(frozen=True)
class OutboundMessage:
    text: str
    parse_mode: ParseMode = DEFAULT_PARSE_MODE


def compose_message(subject: str, body: str, parse_mode: ParseMode = DEFAULT_PARSE_MODE) -> OutboundMessage:
    """Join subject and body into one message; the subject acts as a title line."""
    return OutboundMessage(text=subject + "\n" + body, parse_mode=ParseMode(parse_mode))
