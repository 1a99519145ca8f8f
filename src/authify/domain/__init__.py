"""Authify domain layer."""
