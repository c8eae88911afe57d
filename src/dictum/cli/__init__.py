"""Command-line interface for Dictum."""
