"""Solana watchtower monitoring sidecar installation"""

from pathlib import Path
from typing import List, Optional

from jinja2 import StrictUndefined, Template
from pydantic import Field

from nodekit.models import ConfigModel, Environment
from nodekit.runner import (
    AssetResolver,
    Command,
    EnvBuilder,
    FlagBuilder,
    Payload,
    package_assets,
)

from .notifications import NotificationConfig

ASSETS_DIR = Path(__file__).parent / "assets"
ASSET_INSTALL_TEMPLATE = "install.sh.j2"

STEPS_PATH = "steps.sh"
SCRIPT_MODE = 0o755


class Flags(ConfigModel):
    """Watchtower command-line flags. Unset fields defer to watchtower's defaults."""

    interval_seconds: Optional[int] = None
    rpc_timeout_seconds: Optional[int] = None
    unhealthy_threshold: Optional[int] = None
    validator_identities: List[str] = Field(default_factory=list)
    name_suffix: Optional[str] = None

    monitor_active_stake: Optional[bool] = None
    active_stake_alert_threshold: Optional[int] = None
    min_validator_identity_balance: Optional[int] = Field(
        default=None, alias="minimumValidatorIdentityBalance"
    )
    ignore_http_bad_gateway: Optional[bool] = None

    def to_args(self, rpc_url: Optional[str] = None) -> List[str]:
        """
        Render the flags as ``solana-watchtower`` arguments.

        Args:
            rpc_url: Cluster RPC endpoint, omitted when None

        Returns:
            Argument tokens in a fixed order
        """
        b = FlagBuilder()

        for identity in self.validator_identities:
            b.append("--validator-identity", identity)

        b.append_optional("url", rpc_url)

        b.append_optional_int("interval", self.interval_seconds)
        b.append_optional_int("rpc-timeout", self.rpc_timeout_seconds)
        b.append_optional_int("unhealthy-threshold", self.unhealthy_threshold)

        b.append_optional("name-suffix", self.name_suffix)
        b.append_optional_int(
            "active-stake-alert-threshold", self.active_stake_alert_threshold
        )
        b.append_optional_int(
            "minimum-validator-identity-balance", self.min_validator_identity_balance
        )

        b.append_optional_bool("--monitor-active-stake", self.monitor_active_stake)
        b.append_optional_bool("--ignore-http-bad-gateway", self.ignore_http_bad_gateway)

        return b.to_args()


class Watchtower(ConfigModel):
    """Watchtower service configuration."""

    environment: Environment = Field(default_factory=Environment)
    flags: Flags = Field(default_factory=Flags)
    notifications: NotificationConfig = Field(default_factory=NotificationConfig)

    def to_args(self) -> List[str]:
        return self.flags.to_args(self.environment.rpc_url)

    def install(self, assets: Optional[AssetResolver] = None) -> "InstallCommand":
        """
        Build the install command for this configuration.

        Args:
            assets: Bundled asset resolver (defaults to the packaged assets)
        """
        return InstallCommand(self, assets=assets)


class InstallCommand(Command):
    """
    Installs solana-watchtower as a systemd service.

    The remote script receives two variables: ``WATCHTOWER_FLAGS`` (the
    space-joined argument list) and ``WATCHTOWER_ENV`` (the rendered
    notification sub-environment, written verbatim to the unit's
    EnvironmentFile).
    """

    def __init__(self, watchtower: Watchtower, assets: Optional[AssetResolver] = None):
        self.watchtower = watchtower
        self.assets = assets or package_assets(ASSETS_DIR)

    def check(self) -> None:
        pass

    def env(self) -> EnvBuilder:
        watchtower_env = self.watchtower.notifications.env()

        b = EnvBuilder()
        b.set_map(
            {
                "WATCHTOWER_FLAGS": " ".join(self.watchtower.to_args()),
                "WATCHTOWER_ENV": watchtower_env.render(),
            }
        )
        return b

    def add_to_payload(self, payload: Payload) -> None:
        with self.assets(ASSET_INSTALL_TEMPLATE) as f:
            template = Template(f.read().decode("utf-8"), undefined=StrictUndefined)

        payload.add_template(
            STEPS_PATH,
            template,
            {
                "watchtower": self.watchtower,
                "channels": self.watchtower.notifications.configured_channels(),
            },
            mode=SCRIPT_MODE,
        )

    def __repr__(self) -> str:
        return (
            "WatchtowerInstallCommand("
            f"identities={len(self.watchtower.flags.validator_identities)})"
        )
