"""Unit tests for devshell_filter.loader."""

from pathlib import Path
from unittest.mock import patch

import pytest

from devshell_filter.errors import DecodeError, SourceUnavailable
from devshell_filter.loader import (
    default_config_path,
    load_config_file,
    load_config_str,
    load_env_file,
    load_env_str,
)
from devshell_filter.models import Config, Exported


class TestLoadEnv:
    def test_decodes_string(self):
        env = load_env_str('{"variables": {"PATH": {"type": "exported", "value": "/a"}}}')
        assert env.variables == {"PATH": Exported(value="/a")}

    def test_malformed_json_raises_decode_error(self):
        with pytest.raises(DecodeError) as exc_info:
            load_env_str("{not json", source="--filter-str-raw")
        assert exc_info.value.source == "--filter-str-raw"
        assert "--filter-str-raw" in str(exc_info.value)

    def test_unknown_type_raises_decode_error(self):
        with pytest.raises(DecodeError):
            load_env_str('{"variables": {"x": {"type": "integer", "value": 1}}}')

    def test_reads_file(self, tmp_path: Path):
        path = tmp_path / "filter.json"
        path.write_text('{"bashFunctions": {"f": ""}}', encoding="utf-8")
        env = load_env_file(path)
        assert env.bash_functions == {"f": ""}

    def test_decode_error_names_file(self, tmp_path: Path):
        path = tmp_path / "filter.json"
        path.write_text("[]", encoding="utf-8")
        with pytest.raises(DecodeError) as exc_info:
            load_env_file(path)
        assert exc_info.value.source == str(path)

    def test_missing_file_raises_source_unavailable(self, tmp_path: Path):
        with pytest.raises(SourceUnavailable) as exc_info:
            load_env_file(tmp_path / "missing.json")
        assert "missing.json" in str(exc_info.value)


class TestLoadConfig:
    def test_decodes_string(self):
        config = load_config_str('{"path_vars": ["A"], "variables": ["B"]}')
        assert config == Config(path_vars=["A"], variables=["B"])

    def test_wrong_shape_raises_decode_error(self):
        with pytest.raises(DecodeError):
            load_config_str('{"paths": ["PATH"]}')

    def test_reads_file(self, tmp_path: Path):
        path = tmp_path / "config.json"
        path.write_text('{"paths": {"PATH": ["/a"]}}', encoding="utf-8")
        assert load_config_file(path).paths == {"PATH": ["/a"]}

    def test_missing_file_raises_source_unavailable(self, tmp_path: Path):
        with pytest.raises(SourceUnavailable):
            load_config_file(tmp_path / "nope.json")


class TestDefaultConfigPath:
    @patch.dict("os.environ", {"DEVSHELL_FILTER_CONFIG": "/etc/dsf.json"}, clear=True)
    def test_env_override_wins(self):
        assert default_config_path() == Path("/etc/dsf.json")

    @patch.dict("os.environ", {"XDG_CONFIG_HOME": "/cfg"}, clear=True)
    def test_uses_xdg_config_home(self):
        assert default_config_path() == Path("/cfg/devshell-filter/config.json")

    @patch.dict("os.environ", {}, clear=True)
    def test_falls_back_to_home_config(self):
        with patch("devshell_filter.loader.Path.home", return_value=Path("/home/u")):
            assert default_config_path() == Path("/home/u/.config/devshell-filter/config.json")
