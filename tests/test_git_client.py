"""Tests for gitsu/clients/git.py"""

import subprocess
from unittest.mock import MagicMock, call, patch

import pytest

from gitsu.clients.git import (
    EMAIL_KEY,
    NAME_KEY,
    GitConfigApplier,
    build_config_command,
)
from gitsu.errors import ExternalToolInvocationFailed


def _completed(returncode: int = 0) -> MagicMock:
    result = MagicMock()
    result.returncode = returncode
    return result


class TestBuildConfigCommand:
    """Tests for build_config_command."""

    def test_builds_local_config_write(self):
        """Should produce a non-global git config write."""
        assert build_config_command("git", "user.name", "Alice") == [
            "git",
            "config",
            "user.name",
            "Alice",
        ]

    def test_value_passed_verbatim(self):
        """Values are a single argv element, never shell-split."""
        cmd = build_config_command("git", "user.name", "Alice  B; rm -rf /")
        assert cmd[-1] == "Alice  B; rm -rf /"
        assert "--global" not in cmd


class TestGitConfigApplier:
    """Tests for GitConfigApplier.apply_identity."""

    def test_runs_git_twice_with_exact_values(self):
        """Should call git config once per field, name first."""
        applier = GitConfigApplier()

        with patch("gitsu.clients.git.subprocess.run", return_value=_completed()) as mock_run:
            applier.apply_identity("Alice Smith", "alice@example.com")

        assert mock_run.call_args_list == [
            call(["git", "config", NAME_KEY, "Alice Smith"], cwd=None),
            call(["git", "config", EMAIL_KEY, "alice@example.com"], cwd=None),
        ]

    def test_uses_configured_binary_and_cwd(self):
        """Should honor git_binary and cwd."""
        applier = GitConfigApplier(git_binary="/opt/git/bin/git", cwd="/repo")

        with patch("gitsu.clients.git.subprocess.run", return_value=_completed()) as mock_run:
            applier.apply_identity("a", "b")

        for c in mock_run.call_args_list:
            assert c.args[0][0] == "/opt/git/bin/git"
            assert c.kwargs["cwd"] == "/repo"

    def test_nonzero_exit_does_not_abort(self, caplog):
        """A failing git exit code should not stop the email write."""
        applier = GitConfigApplier()

        with patch(
            "gitsu.clients.git.subprocess.run",
            side_effect=[_completed(128), _completed(0)],
        ) as mock_run:
            applier.apply_identity("a", "b@c.d")

        assert mock_run.call_count == 2
        assert "exited with code 128" in caplog.text

    def test_launch_failure_on_name_aborts(self):
        """If git cannot be launched, the email write is never attempted."""
        applier = GitConfigApplier(git_binary="no-such-git")

        with patch(
            "gitsu.clients.git.subprocess.run",
            side_effect=FileNotFoundError(2, "No such file or directory"),
        ) as mock_run:
            with pytest.raises(ExternalToolInvocationFailed) as exc_info:
                applier.apply_identity("a", "b@c.d")

        assert mock_run.call_count == 1
        assert exc_info.value.key == NAME_KEY
        assert isinstance(exc_info.value.cause, FileNotFoundError)

    def test_launch_failure_on_email_reports_email_key(self):
        """The error should say which of the two writes failed."""
        applier = GitConfigApplier()

        with patch(
            "gitsu.clients.git.subprocess.run",
            side_effect=[_completed(0), PermissionError(13, "Permission denied")],
        ):
            with pytest.raises(ExternalToolInvocationFailed) as exc_info:
                applier.apply_identity("a", "b@c.d")

        assert exc_info.value.key == EMAIL_KEY
        assert "user.email" in str(exc_info.value)

    def test_missing_binary_real_launch(self, temp_dir):
        """A binary that does not exist fails with ExternalToolInvocationFailed."""
        applier = GitConfigApplier(git_binary=str(temp_dir / "missing-git"))

        with pytest.raises(ExternalToolInvocationFailed):
            applier.apply_identity("a", "b@c.d")

    def test_subprocess_timeout_is_not_caught(self):
        """Only launch failures are translated; other errors propagate."""
        applier = GitConfigApplier()

        with patch(
            "gitsu.clients.git.subprocess.run",
            side_effect=subprocess.SubprocessError("boom"),
        ):
            with pytest.raises(subprocess.SubprocessError):
                applier.apply_identity("a", "b")
