"""Prompt-to-website generation with per-project version history."""
