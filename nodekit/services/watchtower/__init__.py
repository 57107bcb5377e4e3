"""Solana watchtower monitoring sidecar"""

from .notifications import (
    DiscordConfig,
    NotificationConfig,
    PagerDutyConfig,
    SlackConfig,
    TelegramConfig,
    TwilioConfig,
)
from .watchtower import Flags, InstallCommand, Watchtower

__all__ = [
    "DiscordConfig",
    "NotificationConfig",
    "PagerDutyConfig",
    "SlackConfig",
    "TelegramConfig",
    "TwilioConfig",
    "Flags",
    "InstallCommand",
    "Watchtower",
]
