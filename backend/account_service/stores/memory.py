# account_service/stores/memory.py
"""
Process-local user store.
Keeps records in a dict; useful for development and tests. Data is lost on restart.
"""
from __future__ import annotations

import asyncio
import datetime as dt
import uuid
from dataclasses import replace

from account_service.core.security import hash_password, verify_password
from account_service.stores.base import (
    EmailAlreadyRegisteredError,
    UserFields,
    UserNotFoundError,
    UserRecord,
)


def utc_now() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)


class InMemoryUserStore:
    """
    Dict-backed implementation of the UserStore protocol.

    Mutations run under a single asyncio.Lock so the email uniqueness check
    and the insert happen atomically, and concurrent update/remove calls on
    the same id apply one after another (last writer wins).
    """

    def __init__(self):
        self._users: dict[str, UserRecord] = {}  # id -> record
        self._lock = asyncio.Lock()

    async def find_all(self) -> list[UserRecord]:
        return list(self._users.values())

    async def find_one(self, user_id: str) -> UserRecord | None:
        return self._users.get(user_id)

    async def find_by_email(self, email: str) -> UserRecord | None:
        return self._find_by_email(email)

    async def create(self, fields: UserFields) -> UserRecord:
        async with self._lock:
            if self._find_by_email(fields.email):
                raise EmailAlreadyRegisteredError(fields.email)
            user_id = str(uuid.uuid4())
            while user_id in self._users:
                user_id = str(uuid.uuid4())
            now = utc_now()
            record = UserRecord(
                id=user_id,
                username=fields.username,
                email=fields.email,
                password_hash=hash_password(fields.password),
                created_at=now,
                updated_at=now,
            )
            self._users[user_id] = record
            return record

    async def update(self, user_id: str, fields: UserFields) -> UserRecord:
        async with self._lock:
            current = self._users.get(user_id)
            if current is None:
                raise UserNotFoundError(user_id)
            owner = self._find_by_email(fields.email)
            if owner and owner.id != user_id:
                raise EmailAlreadyRegisteredError(fields.email)
            record = replace(
                current,
                username=fields.username,
                email=fields.email,
                password_hash=hash_password(fields.password),
                updated_at=utc_now(),
            )
            self._users[user_id] = record
            return record

    async def remove(self, user_id: str) -> None:
        async with self._lock:
            if self._users.pop(user_id, None) is None:
                raise UserNotFoundError(user_id)

    async def compare_password(self, email: str, candidate: str) -> bool:
        record = self._find_by_email(email)
        if record is None:
            return False
        return verify_password(candidate, record.password_hash)

    def _find_by_email(self, email: str) -> UserRecord | None:
        for record in self._users.values():
            if record.email == email:
                return record
        return None
