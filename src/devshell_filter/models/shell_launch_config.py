"""Shell launch model."""

from dataclasses import dataclass


@dataclass
class ShellLaunchConfig:
    """How to replace the current process with an interactive shell."""

    kind: str
    executable: str
    argv: list[str]
    env: dict[str, str]
