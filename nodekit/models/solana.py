"""Solana cluster environment descriptor"""

from typing import Optional

from pydantic import Field

from .base import ConfigModel


class Environment(ConfigModel):
    """Cluster endpoints a service talks to."""

    rpc_url: Optional[str] = Field(default=None, alias="rpcURL")
