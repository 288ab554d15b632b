"""Textual terminal UI for the lanesync board."""
