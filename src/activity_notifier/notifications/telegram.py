"""Telegram Bot API client — send one message per tracked activity.

- POST /bot<token>/sendMessage with ``{"chat_id", "text", "parse_mode"}``

``TelegramNotifier.send_message`` raises on failure; ``dispatch`` folds every
failure into a ``DispatchResult`` and never raises.  Nothing is retried and
nothing is queued: one activity, one request.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Self

import httpx
from pydantic import ValidationError

from activity_notifier.config.settings import NotConfigured, TelegramConfig, TelegramCredentials
from activity_notifier.errors.notifier_errors import (
    NotConfiguredError,
    NotifierError,
    TelegramAPIError,
    TelegramTransportError,
    UnknownActivityKindError,
)
from activity_notifier.notifications.render import render
from activity_notifier.notifications.result import DispatchResult, DispatchStatus

if TYPE_CHECKING:
    from types import TracebackType

    from activity_notifier.notifications.activity import ActivityRecord

logger = logging.getLogger(__name__)


class TelegramNotifier:
    """Async HTTP client that posts activity notifications to a Telegram chat.

    Usage::

        async with TelegramNotifier(TelegramConfig()) as notifier:
            result = await notifier.dispatch(activity)
            if not result.ok:
                ...

    Concurrent ``dispatch`` calls share the connection pool and nothing
    else; their messages may arrive in any order.
    """

    def __init__(
        self,
        config: TelegramConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the notifier.

        Args:
            config: Credentials and delivery settings.
            transport: Optional httpx transport, mainly for tests.
        """
        self._config = config
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def connect(self) -> None:
        """Create the underlying HTTP client."""
        self._client = httpx.AsyncClient(
            base_url=self._config.api_url.rstrip("/"),
            headers={"Content-Type": "application/json"},
            timeout=self._config.timeout,
            transport=self._transport,
        )

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> Self:
        await self.connect()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    @property
    def is_connected(self) -> bool:
        """Check if the HTTP client is active."""
        return self._client is not None

    @property
    def config(self) -> TelegramConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def send_message(self, text: str) -> dict[str, Any]:
        """Send *text* to the configured chat.

        Returns:
            The decoded Telegram response.

        Raises:
            NotConfiguredError: If the bot token or chat id is missing.
            TelegramAPIError: On a non-2xx status or an unreadable body.
            TelegramTransportError: If no response was received.
        """
        creds = self._config.resolve()
        if isinstance(creds, NotConfigured):
            raise NotConfiguredError(creds.missing)
        _, data = await self._post(creds, text)
        return data

    async def dispatch(self, activity: ActivityRecord) -> DispatchResult:
        """Render and send one notification for *activity*.

        Never raises: every outcome, including missing configuration, is
        reported through the returned ``DispatchResult``.
        """
        creds = self._config.resolve()
        if isinstance(creds, NotConfigured):
            logger.warning(
                "Telegram credentials not configured (missing %s); notification skipped",
                ", ".join(creds.missing),
            )
            return DispatchResult(
                status=DispatchStatus.NOT_CONFIGURED,
                detail=f"missing {', '.join(creds.missing)}",
            )

        try:
            text = render(activity, self._config.tzinfo)
        except UnknownActivityKindError as exc:
            logger.error("Cannot render activity notification: %s", exc.message)
            return DispatchResult(status=DispatchStatus.INVALID_ACTIVITY, detail=exc.message)

        try:
            status, data = await self._post(creds, text)
        except TelegramAPIError as exc:
            logger.error("Telegram API error %d: %s", exc.status_code, exc.body)
            return DispatchResult(
                status=DispatchStatus.API_ERROR,
                detail=exc.message,
                status_code=exc.status_code,
                body=exc.body,
            )
        except TelegramTransportError as exc:
            logger.error("Failed to send Telegram notification: %s", exc.message)
            return DispatchResult(status=DispatchStatus.TRANSPORT_ERROR, detail=exc.message)
        except NotifierError as exc:
            logger.error("Telegram notifier unusable: %s", exc.message)
            return DispatchResult(status=DispatchStatus.NOT_CONNECTED, detail=exc.message)

        logger.info(
            "Telegram notification sent for %s activity: ok=%s",
            activity.kind,
            data.get("ok"),
        )
        return DispatchResult(status=DispatchStatus.SENT, status_code=status, response=data)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    async def _post(self, creds: TelegramCredentials, text: str) -> tuple[int, dict[str, Any]]:
        client = self._ensure_connected()
        payload = {
            "chat_id": creds.chat_id,
            "text": text,
            "parse_mode": self._config.parse_mode,
        }

        try:
            response = await client.post(f"/bot{creds.bot_token}/sendMessage", json=payload)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            detail = _redact(f"{type(exc).__name__}: {exc}", creds.bot_token)
            raise TelegramTransportError(f"Telegram request failed: {detail}") from exc

        status = response.status_code
        if not response.is_success:
            raise TelegramAPIError(
                f"Telegram API error: {status} {response.reason_phrase}",
                status_code=status,
                body=response.text,
            )

        try:
            data = response.json()
        except ValueError as exc:
            raise TelegramAPIError(
                "Telegram returned a malformed response",
                status_code=status,
                body=response.text,
            ) from exc

        if not isinstance(data, dict):
            raise TelegramAPIError(
                "Telegram returned a malformed response",
                status_code=status,
                body=response.text,
            )
        if data.get("ok") is False:
            raise TelegramAPIError(
                f"Telegram API error: {data.get('description', 'request not ok')}",
                status_code=status,
                body=response.text,
            )
        return status, data

    def _ensure_connected(self) -> httpx.AsyncClient:
        """Return the HTTP client, raising if not connected."""
        if self._client is None:
            msg = "Telegram notifier not connected. Call connect() first."
            raise NotifierError(msg)
        return self._client


def _redact(text: str, secret: str) -> str:
    return text.replace(secret, "***") if secret else text


async def send_activity_notification(
    activity: ActivityRecord,
    config: TelegramConfig | None = None,
) -> DispatchResult:
    """Send one notification using a short-lived notifier.

    Reads ``TelegramConfig`` from the environment when *config* is not
    given.  Never raises.
    """
    if config is None:
        try:
            config = TelegramConfig()
        except ValidationError as exc:
            logger.error("Invalid Telegram configuration: %s", exc)
            return DispatchResult(status=DispatchStatus.NOT_CONFIGURED, detail=str(exc))

    async with TelegramNotifier(config) as notifier:
        return await notifier.dispatch(activity)
