"""Shared data models for gitsu."""

from gitsu.models.profile import Profile

__all__ = ["Profile"]
