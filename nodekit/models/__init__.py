"""
NodeKit Domain Models

Declarative records shared by several services.
"""

from .base import ConfigModel
from .solana import Environment

__all__ = [
    "ConfigModel",
    "Environment",
]
