"""Error types raised by the notifier primitives."""

from activity_notifier.errors.notifier_errors import (
    NotConfiguredError,
    NotifierError,
    TelegramAPIError,
    TelegramTransportError,
    UnknownActivityKindError,
)

__all__ = [
    "NotConfiguredError",
    "NotifierError",
    "TelegramAPIError",
    "TelegramTransportError",
    "UnknownActivityKindError",
]
