"""Clients for external tools."""
