"""Persistence implementations of the domain repositories."""
