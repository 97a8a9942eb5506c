# Configuration from environment variables (.env or deployment variables).

import os
from dotenv import load_dotenv

load_dotenv()


def _env(key: str, default: str = "") -> str:
    return os.environ.get(key, default).strip()


def _env_bool(key: str, default: str = "false") -> bool:
    return _env(key, default).lower() in ("1", "true", "yes")


def _env_list(key: str, default: list = None) -> list:
    s = _env(key)
    if not s:
        return default or []
    result = [x.strip() for x in s.strip("[]").split(",") if x.strip()]
    return result if result else (default or [])


def resolve_database_url(raw_url: str, fallback: str) -> str:
    """Normalise a postgres URL for asyncpg, or use the sqlite fallback."""
    if not raw_url:
        return fallback
    # Hosting platforms give postgres:// but asyncpg needs postgresql+asyncpg://
    if raw_url.startswith("postgres://"):
        return raw_url.replace("postgres://", "postgresql+asyncpg://", 1)
    if raw_url.startswith("postgresql://"):
        return raw_url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return raw_url


# ============================================================================
# Database
# ============================================================================
DATABASE_URL = resolve_database_url(
    _env("DATABASE_URL"),
    _env("DATABASE_URL_FALLBACK", "sqlite+aiosqlite:///./companies.db"),
)
DATABASE_ECHO = _env_bool("DATABASE_ECHO")

# ============================================================================
# HTTP
# ============================================================================
API_HOST = _env("API_HOST", "0.0.0.0")
API_PORT = int(_env("API_PORT", _env("PORT", "8000")))
CORS_ORIGINS = _env_list("CORS_ORIGINS", ["*"])

# Base URL used by the async client (company_api.client)
COMPANY_API_URL = _env("COMPANY_API_URL", "http://localhost:8000")

# ============================================================================
# Logging
# ============================================================================
LOG_LEVEL = _env("LOG_LEVEL", "INFO").upper()
