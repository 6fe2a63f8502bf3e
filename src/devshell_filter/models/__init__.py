"""Model package for devshell_filter."""

from devshell_filter.models.env import Env, FinalEnv
from devshell_filter.models.filter_config import Config
from devshell_filter.models.shell_launch_config import ShellLaunchConfig
from devshell_filter.models.variables import (
    SCALAR_TYPES,
    Array,
    Associative,
    Exported,
    Var,
    VariableValue,
)

__all__ = [
    "Array",
    "Associative",
    "Config",
    "Env",
    "Exported",
    "FinalEnv",
    "SCALAR_TYPES",
    "ShellLaunchConfig",
    "Var",
    "VariableValue",
]
