# account_service/main.py
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Your configuration and DB
from account_service.config import settings
from account_service.core.db import init_db, close_db

from account_service.api.v1.routers import users
from account_service.services.users import MISSING_PARAMS
from account_service.stores import TortoiseUserStore, UserStore, build_user_store

logger = logging.getLogger("uvicorn.error")

def create_app(store: UserStore | None = None) -> FastAPI:
    """
    Build the FastAPI application around a user store.

    Args:
        store: Store to serve requests from. Defaults to the backend named by
            settings.user_store. The database is only opened on startup when
            the store is the Tortoise one.
    """
    user_store = store if store is not None else build_user_store(settings.user_store)
    uses_db = isinstance(user_store, TortoiseUserStore)

    app = FastAPI(title=settings.APP_NAME)
    app.state.user_store = user_store

    # CORS for browser frontends
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.on_event("startup")
    async def on_startup():
        if uses_db:
            await init_db(generate_schemas=settings.generate_schemas)
        logger.info("[startup] user store: %s", type(user_store).__name__)

    @app.on_event("shutdown")
    async def on_shutdown():
        if uses_db:
            await close_db()

    # Unparseable bodies are reported like missing fields instead of FastAPI's 422
    @app.exception_handler(RequestValidationError)
    async def on_validation_error(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"error": MISSING_PARAMS})

    # REST
    app.include_router(users.router, prefix=settings.api_prefix)

    @app.get("/healthz")
    def healthz():
        return {"ok": True}

    return app

app = create_app()
