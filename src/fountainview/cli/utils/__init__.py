"""Shared helpers for fountainview CLI commands."""
