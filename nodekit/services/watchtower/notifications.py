"""
Watchtower notification channels

Each channel is optional and independent. Every configured channel adds its
own variables to the watchtower sub-environment; absent channels add nothing.
"""

from typing import Optional

from nodekit.models import ConfigModel
from nodekit.runner import EnvBuilder


class SlackConfig(ConfigModel):
    webhook_url: str


class DiscordConfig(ConfigModel):
    webhook_url: str


class TelegramConfig(ConfigModel):
    bot_token: str
    chat_id: str


class PagerDutyConfig(ConfigModel):
    integration_key: str


class TwilioConfig(ConfigModel):
    account_sid: str
    auth_token: str
    to_number: str
    from_number: str

    def __str__(self) -> str:
        """Composite ``ACCOUNT=..,TOKEN=..,TO=..,FROM=..`` value watchtower expects."""
        config_parts = [
            f"ACCOUNT={self.account_sid}",
            f"TOKEN={self.auth_token}",
            f"TO={self.to_number}",
            f"FROM={self.from_number}",
        ]
        return ",".join(config_parts)


class NotificationConfig(ConfigModel):
    """Up to five independently optional notification channels."""

    slack: Optional[SlackConfig] = None
    discord: Optional[DiscordConfig] = None
    telegram: Optional[TelegramConfig] = None
    pager_duty: Optional[PagerDutyConfig] = None
    twilio: Optional[TwilioConfig] = None

    def env(self) -> EnvBuilder:
        """Variables for every configured channel, in channel order."""
        e = EnvBuilder()

        if self.slack is not None:
            e.set("SLACK_WEBHOOK", self.slack.webhook_url)

        if self.discord is not None:
            e.set("DISCORD_WEBHOOK", self.discord.webhook_url)

        if self.telegram is not None:
            e.set("TELEGRAM_BOT_TOKEN", self.telegram.bot_token)
            e.set("TELEGRAM_CHAT_ID", self.telegram.chat_id)

        if self.pager_duty is not None:
            e.set("PAGERDUTY_INTEGRATION_KEY", self.pager_duty.integration_key)

        if self.twilio is not None:
            e.set("TWILIO_CONFIG", str(self.twilio))

        return e

    def configured_channels(self) -> list[str]:
        """Names of the channels that are set."""
        return [
            name
            for name in ("slack", "discord", "telegram", "pager_duty", "twilio")
            if getattr(self, name) is not None
        ]
