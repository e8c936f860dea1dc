"""Shared test fixtures and configuration."""

import tempfile
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from gitsu.store import ProfileStore


@dataclass(frozen=True)
class TestConfig:
    """Test configuration matching the real Config interface."""

    data_dir: Path = Path("/tmp/test_gitsu")
    db_path: Path = Path("/tmp/test_gitsu/db.sqlite")
    git_binary: str = "git"
    log_level: str = "WARNING"


@dataclass
class RecordingApplier:
    """Fake IdentityApplier that records calls instead of running git."""

    calls: list[tuple[str, str]] = field(default_factory=list)
    error: Exception | None = None

    def apply_identity(self, name: str, email: str) -> None:
        if self.error is not None:
            raise self.error
        self.calls.append((name, email))


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def test_config(temp_dir: Path) -> TestConfig:
    """Create a test configuration with temporary paths."""
    return TestConfig(
        data_dir=temp_dir / "gitsu",
        db_path=temp_dir / "gitsu" / "db.sqlite",
    )


@pytest.fixture
def store(test_config: TestConfig):
    """Open a profile store in the temporary directory."""
    with ProfileStore.open(test_config.db_path) as s:
        yield s


@pytest.fixture
def applier() -> RecordingApplier:
    """Create a recording applier."""
    return RecordingApplier()
