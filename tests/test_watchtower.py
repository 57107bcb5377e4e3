"""Tests for the watchtower install command."""

import pytest

from nodekit.runner import Payload, parse_env
from nodekit.services.watchtower import (
    Flags,
    InstallCommand,
    NotificationConfig,
    TwilioConfig,
    Watchtower,
)

ALL_CHANNELS = {
    "slack": {"webhookUrl": "https://hooks.slack.example/s"},
    "discord": {"webhookUrl": "https://discord.example/d"},
    "telegram": {"botToken": "123:abc", "chatId": "-100"},
    "pagerDuty": {"integrationKey": "pd-key"},
    "twilio": {
        "accountSid": "AC1",
        "authToken": "tok",
        "toNumber": "+15550001",
        "fromNumber": "+15550002",
    },
}

CHANNEL_VARIABLES = {
    "slack": {"SLACK_WEBHOOK": "https://hooks.slack.example/s"},
    "discord": {"DISCORD_WEBHOOK": "https://discord.example/d"},
    "telegram": {"TELEGRAM_BOT_TOKEN": "123:abc", "TELEGRAM_CHAT_ID": "-100"},
    "pagerDuty": {"PAGERDUTY_INTEGRATION_KEY": "pd-key"},
    "twilio": {"TWILIO_CONFIG": "ACCOUNT=AC1,TOKEN=tok,TO=+15550001,FROM=+15550002"},
}


def _watchtower_env(command: InstallCommand) -> dict:
    return parse_env(command.env().as_dict()["WATCHTOWER_ENV"])


def test_flags_without_rpc_url() -> None:
    flags = Flags(validator_identities=["A", "B"], interval_seconds=30)

    assert flags.to_args(None) == [
        "--validator-identity",
        "A",
        "--validator-identity",
        "B",
        "--interval",
        "30",
    ]


def test_full_flag_surface_order() -> None:
    flags = Flags.model_validate(
        {
            "validatorIdentities": ["A"],
            "intervalSeconds": 60,
            "rpcTimeoutSeconds": 10,
            "unhealthyThreshold": 3,
            "nameSuffix": "-mainnet",
            "monitorActiveStake": True,
            "activeStakeAlertThreshold": 80,
            "minimumValidatorIdentityBalance": 0,
            "ignoreHttpBadGateway": True,
        }
    )

    assert flags.to_args("http://rpc:8899") == [
        "--validator-identity", "A",
        "--url", "http://rpc:8899",
        "--interval", "60",
        "--rpc-timeout", "10",
        "--unhealthy-threshold", "3",
        "--name-suffix", "-mainnet",
        "--active-stake-alert-threshold", "80",
        "--minimum-validator-identity-balance", "0",
        "--monitor-active-stake",
        "--ignore-http-bad-gateway",
    ]  # fmt: skip


def test_false_switches_are_omitted() -> None:
    flags = Flags(monitor_active_stake=False, ignore_http_bad_gateway=False)

    assert flags.to_args() == []


def test_env_carries_flags_and_sub_environment(watchtower_data) -> None:
    command = Watchtower.model_validate(watchtower_data).install()
    env = command.env().as_dict()

    assert list(env) == ["WATCHTOWER_FLAGS", "WATCHTOWER_ENV"]
    assert env["WATCHTOWER_FLAGS"] == (
        "--validator-identity A --validator-identity B "
        "--url http://localhost:8899 --interval 30"
    )
    assert parse_env(env["WATCHTOWER_ENV"]) == {
        "SLACK_WEBHOOK": "https://hooks.slack.com/services/T/B/X"
    }


@pytest.mark.parametrize("channel", list(ALL_CHANNELS))
def test_single_channel_contributes_only_its_variables(channel) -> None:
    watchtower = Watchtower.model_validate(
        {"notifications": {channel: ALL_CHANNELS[channel]}}
    )

    assert _watchtower_env(watchtower.install()) == CHANNEL_VARIABLES[channel]


def test_all_channels_together() -> None:
    watchtower = Watchtower.model_validate({"notifications": ALL_CHANNELS})
    expected = {}
    for variables in CHANNEL_VARIABLES.values():
        expected.update(variables)

    assert _watchtower_env(watchtower.install()) == expected


def test_no_channels_gives_empty_sub_environment() -> None:
    command = Watchtower().install()
    env = command.env().as_dict()

    assert env == {"WATCHTOWER_FLAGS": "", "WATCHTOWER_ENV": ""}


def test_twilio_composite_string() -> None:
    twilio = TwilioConfig(
        account_sid="AC1", auth_token="tok", to_number="+1", from_number="+2"
    )

    assert str(twilio) == "ACCOUNT=AC1,TOKEN=tok,TO=+1,FROM=+2"


def test_configured_channels() -> None:
    notifications = NotificationConfig.model_validate(
        {"telegram": ALL_CHANNELS["telegram"], "twilio": ALL_CHANNELS["twilio"]}
    )

    assert notifications.configured_channels() == ["telegram", "twilio"]


def test_payload_has_rendered_steps_script(watchtower_data, fake_assets) -> None:
    command = Watchtower.model_validate(watchtower_data).install(assets=fake_assets)
    payload = Payload()
    command.check()
    command.add_to_payload(payload)

    assert payload.paths() == ["steps.sh"]
    assert payload.mode("steps.sh") == 0o755
    assert payload.read("steps.sh").decode() == (
        "#!/usr/bin/env bash\n# identities: A,B\n# channels: slack"
    )
    assert fake_assets.streams[0].closed


def test_bundled_template_renders(watchtower_data) -> None:
    watchtower = Watchtower.model_validate(
        {**watchtower_data, "flags": {"validatorIdentities": ["A"], "nameSuffix": "-t"}}
    )
    payload = Payload()
    watchtower.install().add_to_payload(payload)

    script = payload.read("steps.sh").decode()
    assert "Description=Solana watchtower (-t)" in script
    assert "# Notification channels: slack" in script
    assert "${WATCHTOWER_FLAGS}" in script
    # secrets travel through WATCHTOWER_ENV only
    assert "hooks.slack.com" not in script


def test_payload_is_deterministic(watchtower_data, fake_assets) -> None:
    command = Watchtower.model_validate(watchtower_data).install(assets=fake_assets)
    first, second = Payload(), Payload()
    command.add_to_payload(first)
    command.add_to_payload(second)

    assert list(first.items()) == list(second.items())


def test_missing_template_propagates(watchtower_data, fake_assets) -> None:
    del fake_assets.files["install.sh.j2"]
    command = Watchtower.model_validate(watchtower_data).install(assets=fake_assets)

    with pytest.raises(FileNotFoundError):
        command.add_to_payload(Payload())
