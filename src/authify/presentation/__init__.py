"""Authify presentation layer (REST API and CLI)."""
