"""gitsu - switch between named git identities per repository."""

__version__ = "0.1.0"
