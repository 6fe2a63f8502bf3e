"""Start an interactive shell with the filtered environment injected."""

from devshell_filter.shell.detection import (
    build_shell_launch_config,
    classify_shell,
    detect_shell,
)
from devshell_filter.shell.environment import build_child_env
from devshell_filter.shell.launch import exec_shell, print_final_env, render_final_env

__all__ = [
    "build_child_env",
    "build_shell_launch_config",
    "classify_shell",
    "detect_shell",
    "exec_shell",
    "print_final_env",
    "render_final_env",
]
