# src/cleaning_platform/db/__init__.py
"""Database configuration and utilities."""

from .session import SessionLocal, commit_or_raise, get_db

__all__ = ["get_db", "commit_or_raise", "SessionLocal"]
