"""Authify application layer."""
