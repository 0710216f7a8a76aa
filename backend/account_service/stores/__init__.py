# account_service/stores/__init__.py
"""
User store backends.
- memory: InMemoryUserStore, process-local
- tortoise: TortoiseUserStore, backed by the database configured in core.db
"""
from .base import (
    EmailAlreadyRegisteredError,
    UserFields,
    UserNotFoundError,
    UserRecord,
    UserStore,
    UserStoreError,
)
from .memory import InMemoryUserStore
from .tortoise_store import TortoiseUserStore


def build_user_store(backend: str) -> UserStore:
    """
    Create the user store selected by configuration.

    Raises:
        ValueError: If backend is not "memory" or "tortoise"
    """
    if backend == "memory":
        return InMemoryUserStore()
    if backend == "tortoise":
        return TortoiseUserStore()
    raise ValueError(f"Unknown user store backend: {backend!r}")
