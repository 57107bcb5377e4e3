"""
NodeKit Runner

Command contract, builders and payload assembly shared by every service.
"""

from .assets import AssetResolver, package_assets
from .command import Command
from .env_builder import EnvBuilder, parse_env
from .flag_builder import FlagBuilder
from .payload import DEFAULT_MODE, Payload, PayloadFile
from .pipeline import InstallPipeline, PreparedInstall, Stage

__all__ = [
    "AssetResolver",
    "package_assets",
    "Command",
    "EnvBuilder",
    "parse_env",
    "FlagBuilder",
    "DEFAULT_MODE",
    "Payload",
    "PayloadFile",
    "InstallPipeline",
    "PreparedInstall",
    "Stage",
]
