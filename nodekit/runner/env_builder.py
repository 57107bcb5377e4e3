"""
EnvBuilder - environment variable accumulator for remote execution

Renders an ordered mapping into ``KEY="VALUE"`` lines readable both by
python-dotenv and by a systemd ``EnvironmentFile``. A rendered builder can be
embedded as a single value in an outer builder (a sub-environment), which is
how commands pass a variable number of settings through one variable.
"""

import io
import re
from typing import Dict, Mapping, Optional

from dotenv import dotenv_values
from pydantic import SecretStr

from nodekit.exceptions import SecretLeakError

_KEY_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")

# Escapes understood inside double quotes by dotenv and systemd
_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\r": "\\r"}


def _quote(value: str) -> str:
    return '"' + "".join(_ESCAPES.get(ch, ch) for ch in value) + '"'


class EnvBuilder:
    """Ordered mapping from variable name to string value."""

    def __init__(self):
        self._values: Dict[str, str] = {}

    def set(self, key: str, value: str) -> None:
        """Insert or overwrite a variable. Overwriting keeps the original position."""
        if not key or not _KEY_PATTERN.fullmatch(key):
            raise ValueError(f"Invalid environment variable name: {key!r}")
        if isinstance(value, SecretStr):
            raise SecretLeakError(
                f"Refusing to place secret value in environment variable '{key}'",
                context="Secrets may only be written as payload files",
            )
        self._values[key] = str(value)

    def set_optional(self, key: str, value: Optional[str]) -> None:
        """Set a variable only when value is not None."""
        if value is not None:
            self.set(key, value)

    def set_map(self, values: Mapping[str, str]) -> None:
        """Bulk insert in the mapping's iteration order."""
        for key, value in values.items():
            self.set(key, value)

    def merge(self, other: "EnvBuilder") -> None:
        """Copy another builder's entries into this one."""
        self.set_map(other.as_dict())

    def as_dict(self) -> Dict[str, str]:
        """Return a copy of the raw mapping."""
        return dict(self._values)

    def render(self) -> str:
        """
        Render as ``KEY="VALUE"`` lines in insertion order.

        Backslashes, double quotes and line breaks are escaped, so every
        variable stays on one line.

        Returns:
            Rendered environment, one line per variable (empty string if none)
        """
        return "\n".join(f"{key}={_quote(value)}" for key, value in self._values.items())

    def __str__(self) -> str:
        return self.render()

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, key: str) -> bool:
        return key in self._values

    def __repr__(self) -> str:
        return f"EnvBuilder(keys={list(self._values)})"


def parse_env(text: str) -> Dict[str, str]:
    """
    Parse rendered environment text back into a mapping.

    Args:
        text: Output of ``EnvBuilder.render`` (or any dotenv text)

    Returns:
        Ordered mapping of variable names to values

    Raises:
        ValueError: If an entry has no ``=``
    """
    values = dotenv_values(stream=io.StringIO(text), interpolate=False)
    for key, value in values.items():
        if value is None:
            raise ValueError(f"Malformed environment entry: {key!r}")
    return dict(values)
