"""Git client for writing the repository-local identity.

Runs ``git config user.name`` and ``git config user.email`` as separate
processes in the target directory. All configuration is passed as parameters
to avoid import-time side effects.
"""

import logging
import subprocess
from typing import Protocol

from gitsu.errors import ExternalToolInvocationFailed

logger = logging.getLogger(__name__)

NAME_KEY = "user.name"
EMAIL_KEY = "user.email"


class IdentityApplier(Protocol):
    """Anything that can apply a (name, email) identity to a repository."""

    def apply_identity(self, name: str, email: str) -> None:
        ...


def build_config_command(git_binary: str, key: str, value: str) -> list[str]:
    """Build the argv for a local ``git config <key> <value>`` write."""
    return [git_binary, "config", key, value]


class GitConfigApplier:
    """Applies identities with the git executable."""

    def __init__(self, git_binary: str = "git", cwd: str | None = None):
        """Initialize the applier.

        Args:
            git_binary: Executable name or path for git.
            cwd: Working directory for git; None means the process cwd.
        """
        self.git_binary = git_binary
        self.cwd = cwd

    def _set(self, key: str, value: str) -> int:
        """Run one ``git config`` write and return its exit code.

        Raises:
            ExternalToolInvocationFailed: If the process cannot be launched.
        """
        cmd = build_config_command(self.git_binary, key, value)
        try:
            result = subprocess.run(cmd, cwd=self.cwd)
        except OSError as e:
            raise ExternalToolInvocationFailed(key, e) from e

        if result.returncode != 0:
            logger.warning("git config %s exited with code %d", key, result.returncode)
        return result.returncode

    def apply_identity(self, name: str, email: str) -> None:
        """Write user.name then user.email to the local git config.

        A non-zero exit code from git does not stop the second write; only a
        launch failure does.

        Raises:
            ExternalToolInvocationFailed: If git cannot be launched.
        """
        self._set(NAME_KEY, name)
        self._set(EMAIL_KEY, email)
