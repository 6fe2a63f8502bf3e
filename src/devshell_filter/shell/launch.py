"""Print the final environment or replace this process with the shell."""

import logging
import os
import sys
from typing import TextIO

from devshell_filter.errors import LaunchError
from devshell_filter.models import FinalEnv, ShellLaunchConfig

log = logging.getLogger(__name__)


def render_final_env(final_env: FinalEnv) -> str:
    """Return a human readable listing of the final environment."""
    lines = ["paths:"]
    lines.extend(f'  {name} = "{value}"' for name, value in sorted(final_env.paths.items()))
    lines.append("variables:")
    lines.extend(
        f'  {name} = "{value}"' for name, value in sorted(final_env.variables.items())
    )
    return "\n".join(lines) + "\n"


def print_final_env(final_env: FinalEnv, stream: TextIO | None = None) -> None:
    out = sys.stdout if stream is None else stream
    out.write(render_final_env(final_env))
    out.flush()


def exec_shell(launch: ShellLaunchConfig) -> None:
    """Replace the current process with the shell. Never returns on success."""
    print(f"starting shell: {launch.executable}", file=sys.stderr)
    log.debug("exec %s", launch.argv)
    sys.stdout.flush()
    sys.stderr.flush()
    try:
        os.execvpe(launch.executable, launch.argv, launch.env)
    except OSError as e:
        raise LaunchError(f"failed to start {launch.executable}: {e}") from e
