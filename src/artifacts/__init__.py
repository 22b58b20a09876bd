"""Persistence for generated puzzles."""
