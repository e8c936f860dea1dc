"""Git identity profile model."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Profile:
    """A named git identity: the display name doubles as the profile key."""

    name: str
    email: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for display or serialization."""
        return {"name": self.name, "email": self.email}

    @classmethod
    def from_row(cls, row: Any) -> "Profile":
        """Create a Profile from a database row (sqlite3.Row or tuple)."""
        return cls(name=row[0], email=row[1])

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"
