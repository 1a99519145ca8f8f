"""Authify - user management backend.

Registration, login, profile management and password change over a
relational user table, exposed as a FastAPI REST API.
"""

__version__ = "1.0.0"
