"""NotifierError — base exception class and its subclasses."""

from __future__ import annotations


class NotifierError(Exception):
    """Base error for all activity notifier operations.

    Attributes:
        message: Human-readable error description.
        status_code: HTTP status associated with the failure.
        code: Machine-readable error code string.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int = 500,
        code: str = "notifier-error",
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code


class NotConfiguredError(NotifierError):
    """Bot token or chat id is missing."""

    def __init__(self, missing: tuple[str, ...]) -> None:
        super().__init__(
            f"Telegram credentials not configured: {', '.join(missing)}",
            status_code=500,
            code="not-configured",
        )
        self.missing = missing


class UnknownActivityKindError(NotifierError):
    """Activity kind outside the known set."""

    def __init__(self, kind: object) -> None:
        super().__init__(
            f"unknown activity kind: {kind!r}",
            status_code=400,
            code="unknown-activity-kind",
        )
        self.kind = kind


class TelegramAPIError(NotifierError):
    """Telegram rejected the request or answered with an unreadable body."""

    def __init__(self, message: str, *, status_code: int = 502, body: str = "") -> None:
        super().__init__(message, status_code=status_code, code="telegram-api-error")
        self.body = body


class TelegramTransportError(NotifierError):
    """The request never produced an HTTP response."""

    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=502, code="telegram-transport-error")
