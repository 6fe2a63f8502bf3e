"""Core logic for devshell_filter."""

import logging
from collections.abc import Sequence

from devshell_filter.exclusion import filter_raw
from devshell_filter.models import Config, Env, FinalEnv
from devshell_filter.projection import path_var_names, project

log = logging.getLogger(__name__)


def filter_env(
    env: Env,
    filters: Sequence[Env] = (),
    configs: Sequence[Config] = (),
) -> FinalEnv:
    """Run the pipeline: exclusion filters first, then the allow-list configs.

    Filters and configs are applied in the order given (file-sourced before
    string-sourced when called from the CLI). The path variable names are
    computed once from every config and shared by both stages.
    """
    log.debug(
        "snapshot: %d variables, %d functions; %d filters, %d configs",
        len(env.variables),
        len(env.bash_functions),
        len(filters),
        len(configs),
    )
    path_vars = path_var_names(configs)
    filtered = filter_raw(env, filters, path_vars)
    return project(filtered, configs)
