"""
Services Module

Request handling for the user routes:
- UserHandlers: one coroutine per route, built around an injected user store
- HandlerResult: status + JSON body produced by each handler
"""

from .users import (
    HandlerResult,
    UserHandlers,
)

__all__ = [
    "HandlerResult",
    "UserHandlers",
]
