"""Dispatch outcome returned to callers instead of raising."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any


class DispatchStatus(enum.StrEnum):
    """How a dispatch ended."""

    SENT = "sent"
    NOT_CONFIGURED = "not_configured"
    TRANSPORT_ERROR = "transport_error"
    API_ERROR = "api_error"
    INVALID_ACTIVITY = "invalid_activity"
    NOT_CONNECTED = "not_connected"


@dataclass(frozen=True)
class DispatchResult:
    """Result of one notification dispatch.

    Attributes:
        status: Outcome category.
        detail: Human-readable description of a failure.
        status_code: HTTP status, when a response was received.
        body: Raw response body for rejected requests.
        response: Decoded Telegram response on success.
    """

    status: DispatchStatus
    detail: str = ""
    status_code: int | None = None
    body: str = ""
    response: dict[str, Any] | None = None

    @property
    def ok(self) -> bool:
        return self.status is DispatchStatus.SENT
