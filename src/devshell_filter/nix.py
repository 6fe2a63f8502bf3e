"""Capture the development environment from ``nix print-dev-env``."""

import logging
import subprocess

from devshell_filter.errors import SourceUnavailable
from devshell_filter.loader import load_env_str
from devshell_filter.models import SCALAR_TYPES, Env, Var

log = logging.getLogger(__name__)

SOURCE = "nix print-dev-env"


def _with_gcroot(env: Env) -> Env:
    """Add NIX_GCROOT pointing at the ``out`` store path, if there is one."""
    out = env.variables.get("out")
    if not isinstance(out, SCALAR_TYPES):
        return env
    variables = {**env.variables, "NIX_GCROOT": Var(value=out.value)}
    return env.model_copy(update={"variables": variables})


def get_dev_env(path: str | None = None) -> Env:
    """Run ``nix print-dev-env --json [path]`` and decode its output."""
    command = ["nix", "print-dev-env", "--json"]
    if path is not None:
        command.append(path)
    log.debug("running %s", " ".join(command))

    try:
        result = subprocess.run(command, capture_output=True, text=True)
    except OSError as e:
        raise SourceUnavailable(SOURCE, str(e)) from e

    if result.returncode != 0:
        detail = result.stderr.strip() or f"exited with status {result.returncode}"
        raise SourceUnavailable(SOURCE, detail)

    env = load_env_str(result.stdout, source=SOURCE)
    log.debug(
        "captured %d variables, %d functions",
        len(env.variables),
        len(env.bash_functions),
    )
    # Keeps the store path alive while inside the shell.
    return _with_gcroot(env)
