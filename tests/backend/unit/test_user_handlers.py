"""
Unit tests for services.users module.
Tests handler status/body mapping against the in-memory store and store doubles.
"""
import logging
from unittest.mock import AsyncMock, MagicMock

import pytest

from account_service.services.users import HandlerResult, UserHandlers
from account_service.stores import (
    EmailAlreadyRegisteredError,
    InMemoryUserStore,
    UserNotFoundError,
)


ALICE = {"username": "alice", "email": "a@x.com", "password": "secret"}


def failing_store() -> MagicMock:
    """Store double whose every operation blows up unexpectedly."""
    store = MagicMock()
    for name in ("find_all", "find_one", "find_by_email", "create", "update", "remove", "compare_password"):
        setattr(store, name, AsyncMock(side_effect=RuntimeError("database is down")))
    return store


class TestRegisterAndLogin:

    @pytest.mark.asyncio
    async def test_register_returns_created_user_without_password(self):
        handlers = UserHandlers(InMemoryUserStore())
        result = await handlers.register(ALICE)
        assert result.status == 201
        assert set(result.body) == {"id", "username", "email"}

    @pytest.mark.asyncio
    async def test_register_keeps_email_as_submitted(self):
        store = InMemoryUserStore()
        handlers = UserHandlers(store)
        result = await handlers.register({**ALICE, "email": "Alice@X.com"})
        assert result.body["email"] == "Alice@X.com"
        assert (await store.find_by_email("Alice@X.com")).id == result.body["id"]

    @pytest.mark.asyncio
    async def test_register_rejects_non_object_payload(self):
        handlers = UserHandlers(InMemoryUserStore())
        for payload in (None, [], "alice", {"username": 1, "email": "a@x.com", "password": "p"}):
            result = await handlers.register(payload)
            assert result == HandlerResult(400, {"error": "Please provide all required parameters."})

    @pytest.mark.asyncio
    async def test_register_race_lost_in_store_is_conflict(self):
        # Pre-check sees no user, but the store refuses the insert
        store = MagicMock()
        store.find_by_email = AsyncMock(return_value=None)
        store.create = AsyncMock(side_effect=EmailAlreadyRegisteredError("a@x.com"))
        result = await UserHandlers(store).register(ALICE)
        assert result == HandlerResult(400, {"error": "This email has already been registered."})

    @pytest.mark.asyncio
    async def test_login_outcomes(self):
        handlers = UserHandlers(InMemoryUserStore())
        created = await handlers.register(ALICE)

        ok = await handlers.login({"email": "a@x.com", "password": "secret"})
        assert ok.status == 200
        assert ok.body == {"msg": "Login successful", "user": created.body}

        wrong = await handlers.login({"email": "a@x.com", "password": "nope"})
        assert wrong == HandlerResult(401, {"error": "Incorrect password!"})

        unknown = await handlers.login({"email": "z@x.com", "password": "secret"})
        assert unknown.status == 404

        missing = await handlers.login({"password": "secret"})
        assert missing.status == 400

    @pytest.mark.asyncio
    async def test_login_does_not_compare_when_email_unknown(self):
        store = MagicMock()
        store.find_by_email = AsyncMock(return_value=None)
        store.compare_password = AsyncMock(return_value=True)
        result = await UserHandlers(store).login({"email": "a@x.com", "password": "secret"})
        assert result.status == 404
        store.compare_password.assert_not_called()


class TestUpdateAndDelete:

    @pytest.mark.asyncio
    async def test_update_checks_existence_before_fields(self):
        store = MagicMock()
        store.find_one = AsyncMock(return_value=None)
        store.update = AsyncMock()
        result = await UserHandlers(store).update_user("missing", {"username": "only"})
        assert result == HandlerResult(404, {"error": "No user found with ID missing"})
        store.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_update_user_deleted_meanwhile_is_not_found(self):
        store = InMemoryUserStore()
        handlers = UserHandlers(store)
        user_id = (await handlers.register(ALICE)).body["id"]
        store.update = AsyncMock(side_effect=UserNotFoundError(user_id))

        result = await handlers.update_user(user_id, ALICE)
        assert result.status == 404

    @pytest.mark.asyncio
    async def test_delete_then_get(self):
        handlers = UserHandlers(InMemoryUserStore())
        user_id = (await handlers.register(ALICE)).body["id"]

        deleted = await handlers.delete_user(user_id)
        assert deleted == HandlerResult(200, {"msg": "User deleted successfully"})
        assert await handlers.get_user(user_id) == HandlerResult(404, {"error": "User not found!"})
        assert (await handlers.delete_user(user_id)).status == 404


class TestUnexpectedFailures:
    """Any store failure outside the expected outcomes becomes a logged 500."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "call",
        [
            lambda h: h.list_users(),
            lambda h: h.get_user("some-id"),
            lambda h: h.register(ALICE),
            lambda h: h.login({"email": "a@x.com", "password": "secret"}),
            lambda h: h.update_user("some-id", ALICE),
            lambda h: h.delete_user("some-id"),
        ],
    )
    async def test_store_failure_maps_to_500(self, call, caplog):
        handlers = UserHandlers(failing_store())
        with caplog.at_level(logging.ERROR, logger="uvicorn.error"):
            result = await call(handlers)

        assert result == HandlerResult(500, {"error": "Internal server error"})
        assert "database is down" not in str(result.body)
        assert any(r.exc_info and isinstance(r.exc_info[1], RuntimeError) for r in caplog.records)

    @pytest.mark.asyncio
    async def test_validation_errors_are_not_logged_as_faults(self, caplog):
        handlers = UserHandlers(failing_store())
        with caplog.at_level(logging.ERROR, logger="uvicorn.error"):
            result = await handlers.register({"username": "alice"})
        assert result.status == 400
        assert not caplog.records
