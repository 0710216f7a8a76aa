# account_service/api/v1/deps.py
from fastapi import Depends, Request
from account_service.services.users import UserHandlers
from account_service.stores.base import UserStore

def get_user_store(request: Request) -> UserStore:
    """
    FastAPI dependency returning the user store the application was built with.

    The store lives on app.state (set by create_app), so tests can build an
    app around any store implementation without touching module globals.
    """
    return request.app.state.user_store

def get_user_handlers(store: UserStore = Depends(get_user_store)) -> UserHandlers:
    """
    FastAPI dependency building the handler set for the current request.

    Usage:
        @router.get("/users")
        async def list_users(handlers: UserHandlers = Depends(get_user_handlers)):
            ...
    """
    return UserHandlers(store)
