"""Shell detection and launch configuration."""

import logging
import os
import shutil
from collections.abc import Mapping

from devshell_filter.errors import LaunchError
from devshell_filter.models import FinalEnv, ShellLaunchConfig
from devshell_filter.shell.environment import build_child_env

log = logging.getLogger(__name__)

SHELL_ENV_VAR = "DEVSHELL_FILTER_SHELL"
SUPPORTED_SHELLS = ("bash", "zsh", "fish", "nu", "sh")


def classify_shell(candidate: str) -> str | None:
    """Return the supported shell kind for a candidate executable/path."""
    name = os.path.basename(candidate).lower()
    if name.endswith(".exe"):
        name = name[: -len(".exe")]
    if name == "nushell":
        name = "nu"
    if name in SUPPORTED_SHELLS:
        return name
    return None


def _resolve_executable(candidate: str) -> str | None:
    """Resolve an executable name or path to a runnable command path."""
    has_sep = os.path.sep in candidate or (
        os.path.altsep is not None and os.path.altsep in candidate
    )
    if has_sep:
        if os.path.isfile(candidate) and os.access(candidate, os.X_OK):
            return candidate
        return None
    return shutil.which(candidate)


def _shell_candidates(requested: str | None) -> list[str]:
    """Return shell candidates in preference order."""
    if requested:
        return [requested]
    candidates: list[str] = []
    override = os.environ.get(SHELL_ENV_VAR, "").strip()
    if override:
        candidates.append(override)
    env_shell = os.environ.get("SHELL", "").strip()
    if env_shell:
        candidates.append(env_shell)
    return candidates


def detect_shell(requested: str | None = None) -> tuple[str, str]:
    """Detect the shell to start and return (kind, executable path).

    An explicit ``requested`` shell wins; otherwise DEVSHELL_FILTER_SHELL,
    then SHELL are tried in that order.
    """
    candidates = _shell_candidates(requested)
    for candidate in candidates:
        kind = classify_shell(candidate)
        if not kind:
            log.debug("skipping unsupported shell %s", candidate)
            continue
        executable = _resolve_executable(candidate)
        if executable:
            return kind, executable
        log.debug("shell %s not found", candidate)
    if not candidates:
        raise LaunchError(f"SHELL is not set; pass --shell or set {SHELL_ENV_VAR}")
    raise LaunchError(
        f"no usable shell among {', '.join(candidates)}; "
        f"supported shells are {', '.join(SUPPORTED_SHELLS)}"
    )


def build_shell_launch_config(
    final_env: FinalEnv,
    requested: str | None = None,
    base_env: Mapping[str, str] | None = None,
) -> ShellLaunchConfig:
    """Build the launch configuration for the detected shell."""
    kind, executable = detect_shell(requested)
    return ShellLaunchConfig(
        kind=kind,
        executable=executable,
        argv=[executable],
        env=build_child_env(final_env, base_env),
    )
