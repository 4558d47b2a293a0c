"""Contacts CRUD service: FastAPI over MongoDB."""

__version__ = "0.1.0"
