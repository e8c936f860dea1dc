"""Domain exceptions for gitsu."""

from pathlib import Path


class GitsuError(RuntimeError):
    """Base error for gitsu operations."""


class StorageUnavailable(GitsuError):
    """Raised when the profile database cannot be created or opened."""

    def __init__(self, path: Path, cause: BaseException):
        self.path = path
        self.cause = cause
        super().__init__(f"cannot open profile store at {path}: {cause}")


class DuplicateName(GitsuError):
    """Raised when creating a profile whose name already exists."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"user already exists: {name}")


class NotFound(GitsuError):
    """Raised when a profile lookup by name finds nothing."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"user not found: {name}")


class InvalidProfile(GitsuError):
    """Raised when a profile has an empty name or email."""


class ExternalToolInvocationFailed(GitsuError):
    """Raised when the git executable cannot be launched at all."""

    def __init__(self, key: str, cause: OSError):
        self.key = key
        self.cause = cause
        super().__init__(f"failed to run git config {key}: {cause}")
