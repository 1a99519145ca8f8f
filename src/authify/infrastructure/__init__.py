"""Authify infrastructure layer."""
