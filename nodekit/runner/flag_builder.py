"""FlagBuilder - accumulates CLI flag tokens from optional configuration values"""

from typing import Any, List, Optional

from pydantic import SecretStr

from nodekit.exceptions import SecretLeakError


def _flag(name: str) -> str:
    """Return the flag literal for a name, adding the leading dashes if missing."""
    if name.startswith("-"):
        return name
    return f"--{name}"


class FlagBuilder:
    """
    Ordered sequence of command-line tokens.

    Every ``append_optional*`` method is a no-op when its value is ``None``.
    A value that is set renders even when it is a zero value (``0``, ``""``),
    so "not specified" and "specified as zero" stay distinct.

    Example:
        b = FlagBuilder()
        b.append("validator-identity", "A")
        b.append_optional_int("interval", 30)
        b.append_optional_bool("--monitor-active-stake", None)
        b.to_args()  # ["--validator-identity", "A", "--interval", "30"]
    """

    def __init__(self):
        self._args: List[str] = []

    def append(self, name: str, value: str) -> None:
        """Emit ``--name value`` unconditionally."""
        self._args.extend([_flag(name), self._render(name, value)])

    def append_optional(self, name: str, value: Optional[str]) -> None:
        """Emit ``--name value`` only when value is set."""
        if value is None:
            return
        self.append(name, value)

    def append_optional_int(self, name: str, value: Optional[int]) -> None:
        """Emit ``--name <int>`` only when value is set."""
        if value is None:
            return
        self.append(name, str(value))

    def append_optional_bool(self, flag: str, value: Optional[bool]) -> None:
        """
        Emit the bare flag only when value is True.

        False and None emit nothing; there is no ``--flag=false`` form.
        """
        if value:
            self._args.append(_flag(flag))

    def to_args(self) -> List[str]:
        """Return the accumulated tokens in call order."""
        return list(self._args)

    def _render(self, name: str, value: Any) -> str:
        if isinstance(value, SecretStr):
            raise SecretLeakError(
                f"Refusing to render secret value for flag '{_flag(name)}'",
                context="Secrets may only be written as payload files",
            )
        return str(value)

    def __len__(self) -> int:
        return len(self._args)

    def __repr__(self) -> str:
        return f"FlagBuilder(tokens={len(self._args)})"
