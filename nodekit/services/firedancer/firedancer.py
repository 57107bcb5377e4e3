"""Firedancer validator client installation"""

from pathlib import Path
from typing import Optional

from pydantic import SecretStr

from nodekit.models import ConfigModel
from nodekit.runner import (
    AssetResolver,
    Command,
    EnvBuilder,
    Payload,
    PayloadFile,
    package_assets,
)

from .config import Config

ASSETS_DIR = Path(__file__).parent / "assets"
ASSET_INSTALL = "install.sh"

CONFIG_PATH = "config.toml"
STEPS_PATH = "steps.sh"
IDENTITY_KEYPAIR_PATH = "validator-keypair.json"
VOTE_ACCOUNT_KEYPAIR_PATH = "vote-account-keypair.json"

SECRET_MODE = 0o600
SCRIPT_MODE = 0o755


class KeyPairs(ConfigModel):
    """Validator identity and vote-account keypairs (JSON byte arrays)."""

    identity: SecretStr
    vote_account: SecretStr


class Firedancer(ConfigModel):
    """Firedancer service configuration."""

    key_pairs: KeyPairs
    config: Config

    def install(self, assets: Optional[AssetResolver] = None) -> "InstallCommand":
        """
        Build the install command for this configuration.

        Args:
            assets: Bundled asset resolver (defaults to the packaged assets)
        """
        return InstallCommand(self, assets=assets)


class InstallCommand(Command):
    """Installs Firedancer: config.toml, install script and both keypairs."""

    def __init__(self, firedancer: Firedancer, assets: Optional[AssetResolver] = None):
        self.firedancer = firedancer
        self.assets = assets or package_assets(ASSETS_DIR)

    def check(self) -> None:
        pass

    def env(self) -> EnvBuilder:
        return EnvBuilder()

    def add_to_payload(self, payload: Payload) -> None:
        writer = payload.new_writer(PayloadFile(path=CONFIG_PATH))
        self.firedancer.config.encode(writer)

        payload.add_reader(STEPS_PATH, self.assets(ASSET_INSTALL), mode=SCRIPT_MODE)

        key_pairs = self.firedancer.key_pairs
        payload.add_string(
            IDENTITY_KEYPAIR_PATH,
            key_pairs.identity.get_secret_value(),
            mode=SECRET_MODE,
        )
        payload.add_string(
            VOTE_ACCOUNT_KEYPAIR_PATH,
            key_pairs.vote_account.get_secret_value(),
            mode=SECRET_MODE,
        )

    def __repr__(self) -> str:
        return f"FiredancerInstallCommand(user={self.firedancer.config.user})"
