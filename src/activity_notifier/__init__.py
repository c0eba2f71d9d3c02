"""Telegram notifications for tracked user activity."""

from activity_notifier.config.settings import TelegramConfig
from activity_notifier.notifications import (
    ActivityKind,
    ActivityRecord,
    DispatchResult,
    DispatchStatus,
    Location,
    TelegramNotifier,
    render,
    send_activity_notification,
)

__version__ = "0.1.0"

__all__ = [
    "ActivityKind",
    "ActivityRecord",
    "DispatchResult",
    "DispatchStatus",
    "Location",
    "TelegramConfig",
    "TelegramNotifier",
    "render",
    "send_activity_notification",
]
