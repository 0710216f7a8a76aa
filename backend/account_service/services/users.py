# account_service/services/users.py
"""
Request handlers for user accounts.

Each handler maps (payload, store) to a HandlerResult holding the HTTP status
and JSON body. Handlers keep no state between calls; the store is injected
when the handler set is constructed.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Type, TypeVar

from pydantic import BaseModel, ValidationError

from account_service.schemas.user import LoginIn, RegisterIn, UpdateUserIn, UserOut
from account_service.stores.base import (
    EmailAlreadyRegisteredError,
    UserNotFoundError,
    UserRecord,
    UserStore,
)

logger = logging.getLogger("uvicorn.error")

MISSING_PARAMS = "Please provide all required parameters."
EMAIL_TAKEN = "This email has already been registered."
INTERNAL_ERROR = "Internal server error"

SchemaT = TypeVar("SchemaT", bound=BaseModel)


@dataclass(frozen=True)
class HandlerResult:
    status: int
    body: dict


def _error(status: int, message: str) -> HandlerResult:
    return HandlerResult(status, {"error": message})


def _user_to_dict(record: UserRecord) -> dict:
    return UserOut.from_record(record).model_dump()


def _parse(schema: Type[SchemaT], payload: Any) -> SchemaT | None:
    """Validate a raw JSON payload; None means a required field is missing or empty."""
    try:
        return schema.model_validate(payload if payload is not None else {})
    except ValidationError:
        return None


class UserHandlers:
    """
    One coroutine per user route.

    Foreseeable outcomes (missing field, not found, duplicate email, wrong
    password) produce specific 4xx results. Any other exception is logged and
    turned into a generic 500.
    """

    def __init__(self, store: UserStore):
        self.store = store

    async def list_users(self) -> HandlerResult:
        try:
            all_users = await self.store.find_all()
            if not all_users:
                return HandlerResult(404, {"msg": "No users at this time."})
            return HandlerResult(200, {
                "total_users": len(all_users),
                "allUsers": [_user_to_dict(u) for u in all_users],
            })
        except Exception:
            return self._internal_error("list_users")

    async def get_user(self, user_id: str) -> HandlerResult:
        try:
            user = await self.store.find_one(user_id)
            if not user:
                return _error(404, "User not found!")
            return HandlerResult(200, {"user": _user_to_dict(user)})
        except Exception:
            return self._internal_error("get_user")

    async def register(self, payload: Any) -> HandlerResult:
        """
        Create an account from {username, email, password}.

        Returns 201 with the created user, 400 when a field is missing or the
        email is already registered.
        """
        try:
            body = _parse(RegisterIn, payload)
            if body is None:
                return _error(400, MISSING_PARAMS)

            if await self.store.find_by_email(body.email):
                return _error(400, EMAIL_TAKEN)

            try:
                new_user = await self.store.create(body.to_fields())
            except EmailAlreadyRegisteredError:
                # Lost a race against a concurrent registration
                return _error(400, EMAIL_TAKEN)

            logger.info("[users] registered id=%s", new_user.id)
            return HandlerResult(201, _user_to_dict(new_user))
        except Exception:
            return self._internal_error("register")

    async def login(self, payload: Any) -> HandlerResult:
        """
        Verify an {email, password} pair.

        Unknown email is 404, wrong password is 401. No session or token is
        issued; the user record is returned on success.
        """
        try:
            body = _parse(LoginIn, payload)
            if body is None:
                return _error(400, MISSING_PARAMS)

            user = await self.store.find_by_email(body.email)
            if not user:
                return _error(404, "No user exists with the provided email.")

            if not await self.store.compare_password(body.email, body.password):
                logger.info("[users] login rejected for id=%s: incorrect password", user.id)
                return _error(401, "Incorrect password!")

            return HandlerResult(200, {"msg": "Login successful", "user": _user_to_dict(user)})
        except Exception:
            return self._internal_error("login")

    async def update_user(self, user_id: str, payload: Any) -> HandlerResult:
        """
        Replace username, email and password of an existing user.

        Existence is checked before the body, so a malformed request against
        an unknown id is a 404, not a 400.
        """
        not_found = _error(404, f"No user found with ID {user_id}")
        try:
            user = await self.store.find_one(user_id)
            if not user:
                return not_found

            body = _parse(UpdateUserIn, payload)
            if body is None:
                return _error(400, MISSING_PARAMS)

            try:
                updated_user = await self.store.update(user_id, body.to_fields())
            except UserNotFoundError:
                return not_found
            except EmailAlreadyRegisteredError:
                return _error(400, EMAIL_TAKEN)

            logger.info("[users] updated id=%s", updated_user.id)
            return HandlerResult(200, {
                "msg": "User updated successfully",
                "updatedUser": _user_to_dict(updated_user),
            })
        except Exception:
            return self._internal_error("update_user")

    async def delete_user(self, user_id: str) -> HandlerResult:
        not_found = _error(404, "User does not exist")
        try:
            user = await self.store.find_one(user_id)
            if not user:
                return not_found

            try:
                await self.store.remove(user_id)
            except UserNotFoundError:
                return not_found

            logger.info("[users] deleted id=%s", user_id)
            return HandlerResult(200, {"msg": "User deleted successfully"})
        except Exception:
            return self._internal_error("delete_user")

    @staticmethod
    def _internal_error(operation: str) -> HandlerResult:
        logger.exception("[users] %s failed", operation)
        return _error(500, INTERNAL_ERROR)
