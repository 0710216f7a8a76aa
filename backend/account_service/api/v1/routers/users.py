# account_service/api/v1/routers/users.py
from typing import Any

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from account_service.api.v1.deps import get_user_handlers
from account_service.services.users import HandlerResult, UserHandlers

router = APIRouter(tags=["users"])

def _respond(result: HandlerResult) -> JSONResponse:
    return JSONResponse(status_code=result.status, content=result.body)

@router.get("/users")
async def list_users(handlers: UserHandlers = Depends(get_user_handlers)):
    """
    List all users.

    Returns:
        200 {total_users, allUsers}, or 404 {msg} when there are no users
    """
    return _respond(await handlers.list_users())

@router.get("/user/{user_id}")
async def get_user(user_id: str, handlers: UserHandlers = Depends(get_user_handlers)):
    """Get a single user by id: 200 {user} or 404."""
    return _respond(await handlers.get_user(user_id))

@router.post("/register")
async def register(
    payload: Any = Body(default=None),
    handlers: UserHandlers = Depends(get_user_handlers),
):
    """
    Register a new user account.

    Body: {username, email, password}, all required. The password is hashed
    before storage and never returned.

    Returns:
        201 with the created user, 400 on missing fields or duplicate email
    """
    return _respond(await handlers.register(payload))

@router.post("/login")
async def login(
    payload: Any = Body(default=None),
    handlers: UserHandlers = Depends(get_user_handlers),
):
    """
    Check an email/password pair.

    Returns:
        200 {msg, user}; 400 missing fields; 404 unknown email; 401 wrong password
    """
    return _respond(await handlers.login(payload))

@router.put("/user/{user_id}")
async def update_user(
    user_id: str,
    payload: Any = Body(default=None),
    handlers: UserHandlers = Depends(get_user_handlers),
):
    """
    Replace username, email and password of a user.

    Returns:
        200 {msg, updatedUser}; 404 unknown id (checked first); 400 missing fields
    """
    return _respond(await handlers.update_user(user_id, payload))

@router.delete("/user/{user_id}")
async def delete_user(user_id: str, handlers: UserHandlers = Depends(get_user_handlers)):
    """Delete a user: 200 {msg} or 404."""
    return _respond(await handlers.delete_user(user_id))
