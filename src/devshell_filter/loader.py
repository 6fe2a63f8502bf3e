"""Load snapshots, filters and configs from JSON strings and files."""

import logging
import os
from pathlib import Path

from pydantic import ValidationError

from devshell_filter.errors import DecodeError, SourceUnavailable
from devshell_filter.models import Config, Env

log = logging.getLogger(__name__)

CONFIG_ENV_VAR = "DEVSHELL_FILTER_CONFIG"
CONFIG_FILE_NAME = "config.json"


def _read_file(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise SourceUnavailable(str(path), e.strerror or str(e)) from e


def load_env_str(text: str, source: str = "env") -> Env:
    """Decode an Env (or filter) from JSON text."""
    try:
        return Env.model_validate_json(text)
    except ValidationError as e:
        raise DecodeError(source, str(e)) from e


def load_env_file(path: Path) -> Env:
    """Read and decode an Env (or filter) from a JSON file."""
    log.debug("loading env from %s", path)
    return load_env_str(_read_file(path), source=str(path))


def load_config_str(text: str, source: str = "config") -> Config:
    """Decode a Config from JSON text."""
    try:
        return Config.model_validate_json(text)
    except ValidationError as e:
        raise DecodeError(source, str(e)) from e


def load_config_file(path: Path) -> Config:
    """Read and decode a Config from a JSON file."""
    log.debug("loading config from %s", path)
    return load_config_str(_read_file(path), source=str(path))


def default_config_path() -> Path:
    """Return where the config file is looked up when none is given."""
    override = os.environ.get(CONFIG_ENV_VAR, "").strip()
    if override:
        return Path(override).expanduser()
    config_home = os.environ.get("XDG_CONFIG_HOME", "").strip()
    base = Path(config_home) if config_home else Path.home() / ".config"
    return base / "devshell-filter" / CONFIG_FILE_NAME
