"""Assembly of the child process environment."""

import os
from collections.abc import Mapping

from devshell_filter.models import FinalEnv
from devshell_filter.paths import combine


def build_child_env(
    final_env: FinalEnv,
    base_env: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Merge ``final_env`` into the inherited environment.

    Plain variables replace inherited values. Path variables are appended to
    the inherited value when the current process already has one.
    """
    if base_env is None:
        base_env = os.environ
    env = dict(base_env)
    env.update(final_env.variables)
    for name, value in final_env.paths.items():
        current = base_env.get(name)
        if current is not None:
            env[name] = combine(current, value, ":")
        else:
            env[name] = value
    return env
