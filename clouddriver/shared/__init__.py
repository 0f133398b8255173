"""Shared helpers used across layers (logging setup)."""
