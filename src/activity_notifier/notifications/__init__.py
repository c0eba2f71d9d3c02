"""Notifications — activity rendering and Telegram dispatch.

Provides:
- ``ActivityRecord`` — a tracked visit or wallet connection
- ``render`` — pure message formatting
- ``TelegramNotifier`` — sends one Bot API message per activity
"""

from __future__ import annotations

from activity_notifier.notifications.activity import ActivityKind, ActivityRecord, Location
from activity_notifier.notifications.render import format_timestamp, render
from activity_notifier.notifications.result import DispatchResult, DispatchStatus
from activity_notifier.notifications.telegram import TelegramNotifier, send_activity_notification

__all__ = [
    "ActivityKind",
    "ActivityRecord",
    "DispatchResult",
    "DispatchStatus",
    "Location",
    "TelegramNotifier",
    "format_timestamp",
    "render",
    "send_activity_notification",
]
