# account_service/stores/base.py
"""
User store contract shared by every backend.

A store is the sole owner of user records. Lookups return None for "no
match"; anything the caller could not have foreseen is raised.
"""
from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import Protocol


class UserStoreError(Exception):
    """Base class for expected store outcomes that are not plain lookups."""


class UserNotFoundError(UserStoreError):
    def __init__(self, user_id: str):
        super().__init__(f"No user with id {user_id}")
        self.user_id = user_id


class EmailAlreadyRegisteredError(UserStoreError):
    def __init__(self, email: str):
        super().__init__(f"Email already registered: {email}")
        self.email = email


@dataclass(frozen=True)
class UserFields:
    """The mutable part of a user, as supplied by register/update."""
    username: str
    email: str
    password: str  # Plain text; stores hash it before keeping it


@dataclass(frozen=True)
class UserRecord:
    id: str
    username: str
    email: str
    password_hash: str
    created_at: dt.datetime
    updated_at: dt.datetime


class UserStore(Protocol):
    async def find_all(self) -> list[UserRecord]:
        ...

    async def find_one(self, user_id: str) -> UserRecord | None:
        ...

    async def find_by_email(self, email: str) -> UserRecord | None:
        ...

    async def create(self, fields: UserFields) -> UserRecord:
        """Raises EmailAlreadyRegisteredError if the email is taken."""
        ...

    async def update(self, user_id: str, fields: UserFields) -> UserRecord:
        """
        Replace username, email and password of an existing user.

        Raises UserNotFoundError or EmailAlreadyRegisteredError.
        """
        ...

    async def remove(self, user_id: str) -> None:
        """Raises UserNotFoundError if nothing was deleted."""
        ...

    async def compare_password(self, email: str, candidate: str) -> bool:
        ...
