"""Command-line interface for the Authify backend."""
