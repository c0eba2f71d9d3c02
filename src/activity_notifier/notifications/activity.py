"""Activity records — the tracked user events that trigger a notification.

``ActivityRecord.from_dict`` accepts the camelCase payload produced by the
web front end (``type``, ``userAgent``, ``walletType`` ...) as well as
snake_case keys.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

from pydantic import TypeAdapter, ValidationError

from activity_notifier.errors.notifier_errors import UnknownActivityKindError

_BOOL = TypeAdapter(bool)


def _pick(data: dict[str, Any], camel: str, snake: str) -> Any:
    return data[camel] if camel in data else data.get(snake)


def _text(value: Any) -> str | None:
    """Stringify a payload value; ``None`` and blank strings become ``None``."""
    if value is None:
        return None
    text = str(value)
    return text if text.strip() else None


def _flag(value: Any) -> bool:
    """Parse a payload boolean such as ``true``, ``"false"``, ``"0"`` or ``1``."""
    if value is None or value == "":
        return False
    try:
        return _BOOL.validate_python(value)
    except ValidationError:
        return False


def _timestamp(value: Any) -> str:
    """Normalize a payload timestamp to a string.

    Numbers are epoch milliseconds, as produced by JavaScript ``Date.now()``.
    """
    if isinstance(value, int | float) and not isinstance(value, bool):
        try:
            return datetime.fromtimestamp(value / 1000, tz=UTC).isoformat()
        except (OverflowError, ValueError, OSError):
            return str(value)
    return _text(value) or ""


class ActivityKind(enum.StrEnum):
    """Tracked event kinds."""

    VISIT = "visit"
    WALLET_CONNECT = "wallet_connect"

    @classmethod
    def from_string(cls, value: str) -> ActivityKind:
        """Parse a kind string, raising for unrecognised values."""
        try:
            return cls(value)
        except ValueError:
            raise UnknownActivityKindError(value) from None


@dataclass(frozen=True)
class Location:
    """Best-effort geolocation of the client. Never validated."""

    country: str | None = None
    city: str | None = None
    ip: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Location:
        return cls(
            country=_text(data.get("country")),
            city=_text(data.get("city")),
            ip=_text(data.get("ip")),
        )


@dataclass(frozen=True)
class ActivityRecord:
    """A single tracked user event.

    Attributes:
        kind: Which message template applies.
        timestamp: ISO-8601 event time.
        user_agent: Free-text client description.
        location: Optional geolocation.
        wallet_type: Wallet name, only meaningful for ``WALLET_CONNECT``.
        security_keys_provided: Whether the user supplied security keys.
        security_keys: Raw key text. Sensitive; redacting it is the caller's job.
    """

    kind: ActivityKind
    timestamp: str
    user_agent: str
    location: Location | None = None
    wallet_type: str | None = None
    security_keys_provided: bool = False
    security_keys: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ActivityRecord:
        """Build a record from a request payload.

        Raises:
            UnknownActivityKindError: If ``type``/``kind`` is not a known kind.
        """
        raw_kind = data.get("type", data.get("kind", ""))
        location = data.get("location")
        return cls(
            kind=ActivityKind.from_string(str(raw_kind)),
            timestamp=_timestamp(data.get("timestamp")),
            user_agent=_text(_pick(data, "userAgent", "user_agent")) or "",
            location=Location.from_dict(location) if isinstance(location, dict) else None,
            wallet_type=_text(_pick(data, "walletType", "wallet_type")),
            security_keys_provided=_flag(
                _pick(data, "securityKeysProvided", "security_keys_provided")
            ),
            security_keys=_text(_pick(data, "securityKeys", "security_keys")),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the camelCase payload shape, omitting unset fields."""
        out: dict[str, Any] = {
            "type": self.kind.value,
            "timestamp": self.timestamp,
            "userAgent": self.user_agent,
        }
        if self.location is not None:
            out["location"] = {
                k: v
                for k, v in (
                    ("country", self.location.country),
                    ("city", self.location.city),
                    ("ip", self.location.ip),
                )
                if v is not None
            }
        if self.wallet_type is not None:
            out["walletType"] = self.wallet_type
        if self.security_keys_provided:
            out["securityKeysProvided"] = True
        if self.security_keys is not None:
            out["securityKeys"] = self.security_keys
        return out
