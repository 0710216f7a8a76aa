# account_service/models/__init__.py
"""
Database models module initialization.
Exports the Tortoise ORM models used by the database-backed user store.

Models exported:
- User: User account and credential model
"""
from .user import User
