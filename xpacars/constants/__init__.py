"""Shared constants for xpacars."""
