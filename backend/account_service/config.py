# account_service/config.py
import os
from pydantic import BaseModel
from dotenv import load_dotenv

load_dotenv()  # Load environment variables from .env file

class Settings(BaseModel):
    # General app settings
    APP_NAME: str = "Account Service API"
    env: str = os.getenv("ENV", "dev")

    # Host & Port settings
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))

    # CORS origins for frontend
    CORS_ORIGINS: list[str] = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    # Routes are served verbatim by default (/users, /register, ...); set e.g. "/api/v1" to nest them
    api_prefix: str = os.getenv("API_PREFIX", "")

    # User store backend: "tortoise" (database) or "memory" (process-local, lost on restart)
    user_store: str = os.getenv("USER_STORE", "tortoise").lower()

    # Database settings (Tortoise ORM URL, e.g. sqlite://db.sqlite3 or postgres://user:pw@host:5432/db)
    database_url: str = os.getenv("DATABASE_URL", "sqlite://db.sqlite3")
    # Create tables on startup; use Aerich migrations instead outside development
    generate_schemas: bool = os.getenv(
        "DB_GENERATE_SCHEMAS", "true" if os.getenv("ENV", "dev") == "dev" else "false"
    ).lower() in ("true", "1", "yes")

settings = Settings()  # Instantiate configuration
