"""Notifier settings loaded from environment variables and config files.

Configuration is loaded from (highest priority first):
1. Environment variables (prefix: ``TELEGRAM_``)
2. YAML config file (``config_path`` argument or ``TELEGRAM_CONFIG_PATH``)
3. Defaults defined here

Settings are read once, when ``TelegramConfig`` is constructed, and then
handed to the notifier.  Missing credentials are not papered over with
placeholders: ``TelegramConfig.resolve()`` returns ``NotConfigured``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Self
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import yaml
from pydantic import Field, SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# ---------------------------------------------------------------------------
# Resolved credentials
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TelegramCredentials:
    """Bot token and destination chat, both present."""

    bot_token: str = field(repr=False)
    chat_id: str


@dataclass(frozen=True)
class NotConfigured:
    """Credentials are incomplete.

    ``missing`` lists the environment variable names that were absent.
    """

    missing: tuple[str, ...]


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


def _load_yaml(path: str | Path) -> dict[str, Any]:
    """Load a YAML configuration file and return its contents as a dict.

    Returns an empty dict if the file doesn't exist or is empty.

    Raises:
        ValueError: If the file cannot be read or is not valid YAML.
    """
    p = Path(path)
    if not p.exists():
        return {}
    try:
        text = p.read_text(encoding="utf-8")
        data = yaml.safe_load(text)
    except (OSError, yaml.YAMLError) as exc:
        msg = f"cannot load config file {p}: {exc}"
        raise ValueError(msg) from exc
    return data if isinstance(data, dict) else {}


class TelegramConfig(BaseSettings):
    """Telegram Bot API settings.

    Loads settings from environment variables (``TELEGRAM_`` prefix),
    an optional YAML file, and built-in defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="TELEGRAM_",
        case_sensitive=False,
    )

    bot_token: SecretStr | None = None
    chat_id: str | None = None
    api_url: str = "https://api.telegram.org"
    parse_mode: str = "HTML"
    timeout: float = Field(default=10.0, gt=0)
    display_timezone: str = Field(
        default="",
        description="IANA zone used to render timestamps; empty means host local time",
    )
    config_path: str = ""

    @field_validator("bot_token", "chat_id", mode="before")
    @classmethod
    def _blank_is_absent(cls, value: Any) -> Any:
        # YAML yields numeric chat ids as int
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("display_timezone")
    @classmethod
    def _check_timezone(cls, value: str) -> str:
        if value:
            try:
                ZoneInfo(value)
            except (ZoneInfoNotFoundError, ValueError) as exc:
                msg = f"unknown timezone: {value}"
                raise ValueError(msg) from exc
        return value

    @model_validator(mode="before")
    @classmethod
    def _merge_yaml(cls, values: dict[str, Any]) -> dict[str, Any]:
        """Merge YAML config file contents under the env var overrides."""
        config_path = values.get("config_path", "")
        if not config_path:
            return values
        yaml_data = _load_yaml(config_path)
        for key, val in yaml_data.items():
            if key not in values or values[key] is None:
                values[key] = val
        return values

    @classmethod
    def from_yaml(cls, path: str | Path) -> Self:
        """Construct ``TelegramConfig`` loading defaults from a YAML file.

        Environment variables still override YAML values.
        """
        return cls(config_path=str(path))

    @property
    def tzinfo(self) -> ZoneInfo | None:
        """Zone for rendered timestamps, ``None`` for host local time."""
        return ZoneInfo(self.display_timezone) if self.display_timezone else None

    def resolve(self) -> TelegramCredentials | NotConfigured:
        """Return the credentials, or which of them are missing."""
        token, chat_id = self.bot_token, self.chat_id
        if token is None or chat_id is None:
            checks = (("TELEGRAM_BOT_TOKEN", token), ("TELEGRAM_CHAT_ID", chat_id))
            return NotConfigured(missing=tuple(name for name, val in checks if val is None))
        return TelegramCredentials(bot_token=token.get_secret_value(), chat_id=chat_id)
