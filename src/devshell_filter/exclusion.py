"""Remove unwanted entries from an environment snapshot.

A filter has the same shape as the snapshot. Every variable or function it
names is considered for removal; the filter's value decides how much goes:

* arrays and associative arrays lose the listed elements or keys, or the
  whole entry when the filter collection is empty,
* scalars of a path variable lose the listed path segments and are kept,
* any other named entry is dropped.

Entries left empty once every filter has run are pruned.
"""

import logging
from collections.abc import Iterable, Sequence

from devshell_filter import paths
from devshell_filter.errors import EncodeError
from devshell_filter.models import Array, Associative, Env, Exported, Var, VariableValue

log = logging.getLogger(__name__)


def _subtract_paths(value: str, removed: str) -> str:
    """Remove the segments of ``removed`` from ``value``, keeping order."""
    drop = set(paths.split(removed))
    survivors = [segment for segment in paths.split(value) if segment not in drop]
    try:
        return paths.join(survivors)
    except EncodeError as e:
        log.debug("keeping %r unchanged: %s", value, e)
        return value


def _filter_variable(
    name: str,
    value: VariableValue,
    spec: VariableValue,
    path_vars: Sequence[str],
) -> VariableValue | None:
    """Return the narrowed value, or None when the entry is dropped."""
    if isinstance(spec, Array) and isinstance(value, Array):
        if spec.is_empty():
            return None
        drop = set(spec.value)
        return Array(value=[item for item in value.value if item not in drop])
    if isinstance(spec, Associative) and isinstance(value, Associative):
        if spec.is_empty():
            return None
        return Associative(value={k: v for k, v in value.value.items() if k not in spec.value})
    scalar_match = (isinstance(spec, Var) and isinstance(value, Var)) or (
        isinstance(spec, Exported) and isinstance(value, Exported)
    )
    if scalar_match and name in path_vars:
        return value.model_copy(update={"value": _subtract_paths(value.value, spec.value)})
    return None


def _apply_filter(env: Env, spec: Env, path_vars: Sequence[str]) -> Env:
    variables: dict[str, VariableValue] = {}
    for name, value in env.variables.items():
        spec_value = spec.variables.get(name)
        if spec_value is None:
            variables[name] = value
            continue
        narrowed = _filter_variable(name, value, spec_value, path_vars)
        if narrowed is None:
            log.debug("dropping variable %s", name)
        else:
            variables[name] = narrowed

    functions = {
        name: body for name, body in env.bash_functions.items() if name not in spec.bash_functions
    }
    return Env(bash_functions=functions, variables=variables)


def _drop_empty(env: Env) -> Env:
    variables = {name: value for name, value in env.variables.items() if not value.is_empty()}
    functions = {name: body for name, body in env.bash_functions.items() if body}
    return Env(bash_functions=functions, variables=variables)


def filter_raw(
    env: Env,
    filters: Iterable[Env] = (),
    path_vars: Sequence[str] = paths.BASELINE_PATH_VARS,
) -> Env:
    """Apply each filter in order, then prune empty variables and functions.

    Returns a new Env; ``env`` and the filters are left untouched.
    """
    for spec in filters:
        env = _apply_filter(env, spec, path_vars)
    env = _drop_empty(env)
    log.debug(
        "filtered env: %d variables, %d functions",
        len(env.variables),
        len(env.bash_functions),
    )
    return env
