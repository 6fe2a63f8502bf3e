"""Command-line interface for devshell-filter."""

import argparse
import logging
import sys
from pathlib import Path

from devshell_filter import __version__
from devshell_filter.errors import DevshellFilterError
from devshell_filter.loader import (
    default_config_path,
    load_config_file,
    load_config_str,
    load_env_file,
    load_env_str,
)
from devshell_filter.models import Config, Env
from devshell_filter.nix import get_dev_env
from devshell_filter.pipeline import filter_env
from devshell_filter.shell import build_shell_launch_config, exec_shell, print_final_env
from devshell_filter.shell.detection import SUPPORTED_SHELLS

log = logging.getLogger("devshell_filter")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="devshell-filter",
        description=(
            "Enter a nix development shell with a filtered environment. "
            "Functions, arrays and associative arrays are never exported to the shell."
        ),
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("path", nargs="?", help="Path to the dev shell (flake or directory)")
    parser.add_argument(
        "-s",
        "--shell",
        choices=SUPPORTED_SHELLS,
        help="Which shell to start (default: $DEVSHELL_FILTER_SHELL, then $SHELL)",
    )
    parser.add_argument(
        "-c",
        "--config-file",
        type=Path,
        help="Path to the JSON config file (default: the user config file, if present)",
    )
    parser.add_argument(
        "--config-str",
        help="Config in JSON format, applied after --config-file",
    )
    parser.add_argument(
        "--filter-file-raw",
        type=Path,
        help=(
            "Path to a JSON file of things to filter out, in the format of "
            "`nix print-dev-env --json`. Path variables lose only the listed "
            "segments; arrays and associative arrays lose only the listed items "
            "unless the value is empty."
        ),
    )
    parser.add_argument(
        "--filter-str-raw",
        help="Filter in JSON format, applied after --filter-file-raw",
    )
    parser.add_argument(
        "-p",
        "--print",
        action="store_true",
        help="Print the final environment instead of starting the shell",
    )
    return parser


def _load_filters(args: argparse.Namespace) -> list[Env]:
    filters: list[Env] = []
    if args.filter_file_raw is not None:
        filters.append(load_env_file(args.filter_file_raw))
    if args.filter_str_raw is not None:
        filters.append(load_env_str(args.filter_str_raw, source="--filter-str-raw"))
    return filters


def _load_configs(args: argparse.Namespace) -> list[Config]:
    configs: list[Config] = []
    if args.config_file is not None:
        configs.append(load_config_file(args.config_file))
    else:
        default = default_config_path()
        if default.is_file():
            log.debug("using default config %s", default)
            configs.append(load_config_file(default))
    if args.config_str is not None:
        configs.append(load_config_str(args.config_str, source="--config-str"))
    return configs


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )

    try:
        filters = _load_filters(args)
        configs = _load_configs(args)
        env = get_dev_env(args.path)
        final_env = filter_env(env, filters, configs)

        if args.print:
            print_final_env(final_env)
            return 0

        launch = build_shell_launch_config(final_env, requested=args.shell)
        exec_shell(launch)
    except DevshellFilterError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


def entrypoint() -> None:
    raise SystemExit(main())
