"""Command-line interface for gitsu."""
