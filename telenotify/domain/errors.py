"""Error taxonomy for resolving and broadcasting."""

from typing import Optional

INVALID_CHAT_ID = -1


class NotifierError(Exception):
    """Base class for notifier errors."""


class TransportError(NotifierError):
    """Raised by a connection when a fetch or send fails in transit."""


class TelegramAPIError(TransportError):
    """Raised when the Bot API answers with ``ok: false``."""

    def __init__(self, method: str, error_code: Optional[int] = None, description: str = ""):
        self.method = method
        self.error_code = error_code
        self.description = description
        super().__init__(f"{method} failed ({error_code}): {description}")


class ResolveTimeout(NotifierError):
    """No update from the target username arrived before the deadline."""

    chat_id = INVALID_CHAT_ID

    def __init__(self, username: str, timeout: float):
        self.username = username
        self.timeout = timeout
        super().__init__(f"timed out after {timeout}s waiting for a message from '{username}'")


class FetchFailed(NotifierError):
    """Too many consecutive update fetches failed."""

    def __init__(self, failures: int):
        self.failures = failures
        super().__init__(f"{failures} consecutive update fetches failed")


class SendFailure(NotifierError):
    """Sending to one chat failed; the rest of the fan-out was abandoned."""

    def __init__(self, chat_id: int):
        self.chat_id = chat_id
        super().__init__(f"failed to send message to Telegram chat '{chat_id}'")

    def __str__(self) -> str:
        base = super().__str__()
        if self.__cause__ is not None:
            return f"{base}: {self.__cause__}"
        return base


class Cancelled(NotifierError):
    """The broadcast's cancellation token fired."""

    def __init__(self, reason: Optional[str] = None):
        self.reason = reason
        super().__init__(reason or "cancelled")


class DeadlineExceeded(Cancelled):
    """The broadcast's cancellation token passed its deadline."""

    def __init__(self):
        super().__init__("deadline exceeded")
