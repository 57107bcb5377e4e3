"""Firedancer validator client"""

from .config import Config
from .firedancer import Firedancer, InstallCommand, KeyPairs

__all__ = [
    "Config",
    "Firedancer",
    "InstallCommand",
    "KeyPairs",
]
