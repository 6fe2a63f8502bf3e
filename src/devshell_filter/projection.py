"""Project a filtered snapshot through allow-list configs into a FinalEnv."""

import logging
from collections.abc import Sequence

from devshell_filter import paths
from devshell_filter.models import SCALAR_TYPES, Config, Env, FinalEnv

log = logging.getLogger(__name__)


def path_var_names(configs: Sequence[Config]) -> list[str]:
    """Return the baseline path variables plus every config's ``path_vars``."""
    names = list(paths.BASELINE_PATH_VARS)
    for config in configs:
        for name in config.path_vars:
            if name not in names:
                names.append(name)
    return names


def _drop_segments(value: str, excluded: list[str]) -> str:
    joined = ""
    for segment in paths.split(value):
        if segment in excluded:
            continue
        joined = paths.combine(joined, segment, ":")
    return joined


def filter_config(
    env: Env,
    config: Config,
    path_vars: Sequence[str],
    out_paths: dict[str, str],
    out_variables: dict[str, str],
) -> None:
    """Run one config pass over ``env``, writing into the output dicts.

    Only scalar variables are considered. A key written by an earlier pass is
    overwritten when this pass writes it again.
    """
    for name, value in env.variables.items():
        if name in config.variables:
            continue
        if not isinstance(value, SCALAR_TYPES):
            continue

        if name in path_vars:
            excluded = config.paths.get(name)
            if excluded is None:
                out_paths[name] = value.value
            else:
                out_paths[name] = _drop_segments(value.value, excluded)
        else:
            out_variables[name] = value.value


def project(env: Env, configs: Sequence[Config] = ()) -> FinalEnv:
    """Build the FinalEnv from ``env`` by running one pass per config in order.

    Only what a config pass writes reaches the result, so no configs at all
    gives an empty FinalEnv.
    """
    path_vars = path_var_names(configs)

    out_paths: dict[str, str] = {}
    out_variables: dict[str, str] = {}
    for config in configs:
        filter_config(env, config, path_vars, out_paths, out_variables)

    log.debug("final env: %d paths, %d variables", len(out_paths), len(out_variables))
    return FinalEnv(paths=out_paths, variables=out_variables)
