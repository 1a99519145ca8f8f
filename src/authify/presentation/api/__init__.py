"""Authify REST API."""
