# account_service/stores/tortoise_store.py
"""
Database-backed user store built on the Tortoise ORM User model.
Requires Tortoise to be initialized (see core.db.init_db).
"""
from __future__ import annotations

import uuid

from tortoise.exceptions import IntegrityError

from account_service.core.security import hash_password, verify_password
from account_service.models.user import User
from account_service.stores.base import (
    EmailAlreadyRegisteredError,
    UserFields,
    UserNotFoundError,
    UserRecord,
)


def _parse_id(user_id: str) -> uuid.UUID | None:
    """
    Return the UUID for user_id, or None if it cannot be a stored id.

    Only the canonical spelling (lower-case, dashed, as issued) is accepted;
    ids are opaque, so "ABC..." or "{abc...}" do not name the same user.
    """
    try:
        uid = uuid.UUID(str(user_id))
    except ValueError:
        return None
    return uid if str(uid) == user_id else None


def _to_record(u: User) -> UserRecord:
    return UserRecord(
        id=str(u.id),
        username=u.username,
        email=u.email,
        password_hash=u.password_hash,
        created_at=u.created_at,
        updated_at=u.updated_at,
    )


class TortoiseUserStore:
    """
    UserStore implementation over the "users" table.

    Email uniqueness is enforced by the unique index on User.email; an
    IntegrityError from an insert or update surfaces as
    EmailAlreadyRegisteredError.
    """

    async def find_all(self) -> list[UserRecord]:
        rows = await User.all().order_by("created_at")
        return [_to_record(u) for u in rows]

    async def find_one(self, user_id: str) -> UserRecord | None:
        uid = _parse_id(user_id)
        if uid is None:
            return None
        u = await User.get_or_none(id=uid)
        return _to_record(u) if u else None

    async def find_by_email(self, email: str) -> UserRecord | None:
        u = await User.get_or_none(email=email)
        return _to_record(u) if u else None

    async def create(self, fields: UserFields) -> UserRecord:
        try:
            u = await User.create(
                username=fields.username,
                email=fields.email,
                password_hash=hash_password(fields.password),  # Hash password before storing
            )
        except IntegrityError as exc:
            raise EmailAlreadyRegisteredError(fields.email) from exc
        return _to_record(u)

    async def update(self, user_id: str, fields: UserFields) -> UserRecord:
        uid = _parse_id(user_id)
        u = await User.get_or_none(id=uid) if uid else None
        if not u:
            raise UserNotFoundError(user_id)

        u.username = fields.username
        u.email = fields.email
        u.password_hash = hash_password(fields.password)
        try:
            await u.save()
        except IntegrityError as exc:
            raise EmailAlreadyRegisteredError(fields.email) from exc
        return _to_record(u)

    async def remove(self, user_id: str) -> None:
        uid = _parse_id(user_id)
        deleted = await User.filter(id=uid).delete() if uid else 0
        if not deleted:
            raise UserNotFoundError(user_id)

    async def compare_password(self, email: str, candidate: str) -> bool:
        u = await User.get_or_none(email=email)
        if not u:
            return False
        return verify_password(candidate, u.password_hash)
