"""Configuration — Telegram credentials and delivery settings."""

from activity_notifier.config.settings import NotConfigured, TelegramConfig, TelegramCredentials

__all__ = ["NotConfigured", "TelegramConfig", "TelegramCredentials"]
