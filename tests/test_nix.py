"""Unit tests for devshell_filter.nix."""

from unittest.mock import MagicMock, patch

import pytest

from devshell_filter.errors import DecodeError, SourceUnavailable
from devshell_filter.models import Array, Exported, Var
from devshell_filter.nix import get_dev_env


def make_result(stdout="", stderr="", returncode=0):
    """Return a mock CompletedProcess-like object."""
    result = MagicMock()
    result.stdout = stdout
    result.stderr = stderr
    result.returncode = returncode
    return result


SNAPSHOT = """
{
    "bashFunctions": {"genericBuild": "body"},
    "variables": {
        "out": {"type": "exported", "value": "/nix/store/abc-shell"},
        "PATH": {"type": "exported", "value": "/nix/store/gcc/bin"}
    }
}
"""


class TestGetDevEnv:
    @patch("devshell_filter.nix.subprocess.run")
    def test_runs_print_dev_env(self, mock_run):
        mock_run.return_value = make_result(stdout=SNAPSHOT)
        get_dev_env()
        mock_run.assert_called_once_with(
            ["nix", "print-dev-env", "--json"],
            capture_output=True,
            text=True,
        )

    @patch("devshell_filter.nix.subprocess.run")
    def test_passes_path(self, mock_run):
        mock_run.return_value = make_result(stdout=SNAPSHOT)
        get_dev_env(".#dev")
        assert mock_run.call_args[0][0] == ["nix", "print-dev-env", "--json", ".#dev"]

    @patch("devshell_filter.nix.subprocess.run")
    def test_decodes_snapshot(self, mock_run):
        mock_run.return_value = make_result(stdout=SNAPSHOT)
        env = get_dev_env()
        assert env.bash_functions == {"genericBuild": "body"}
        assert env.variables["PATH"] == Exported(value="/nix/store/gcc/bin")

    @patch("devshell_filter.nix.subprocess.run")
    def test_adds_gcroot_for_out(self, mock_run):
        mock_run.return_value = make_result(stdout=SNAPSHOT)
        env = get_dev_env()
        assert env.variables["NIX_GCROOT"] == Var(value="/nix/store/abc-shell")

    @patch("devshell_filter.nix.subprocess.run")
    def test_no_gcroot_without_scalar_out(self, mock_run):
        mock_run.return_value = make_result(
            stdout='{"variables": {"out": {"type": "array", "value": ["/nix/store/x"]}}}'
        )
        env = get_dev_env()
        assert "NIX_GCROOT" not in env.variables
        assert env.variables["out"] == Array(value=["/nix/store/x"])

    @patch("devshell_filter.nix.subprocess.run")
    def test_nonzero_exit_raises_with_stderr(self, mock_run):
        mock_run.return_value = make_result(stderr="error: flake not found\n", returncode=1)
        with pytest.raises(SourceUnavailable) as exc_info:
            get_dev_env()
        assert "flake not found" in str(exc_info.value)

    @patch("devshell_filter.nix.subprocess.run")
    def test_nonzero_exit_without_stderr_reports_status(self, mock_run):
        mock_run.return_value = make_result(returncode=3)
        with pytest.raises(SourceUnavailable) as exc_info:
            get_dev_env()
        assert "status 3" in str(exc_info.value)

    @patch("devshell_filter.nix.subprocess.run")
    def test_missing_nix_raises_source_unavailable(self, mock_run):
        mock_run.side_effect = FileNotFoundError("nix")
        with pytest.raises(SourceUnavailable):
            get_dev_env()

    @patch("devshell_filter.nix.subprocess.run")
    def test_bad_output_raises_decode_error(self, mock_run):
        mock_run.return_value = make_result(stdout="warning: not json")
        with pytest.raises(DecodeError) as exc_info:
            get_dev_env()
        assert exc_info.value.source == "nix print-dev-env"
